from toolkicker.core.exceptions.toolkicker_error import ToolkickerError


class StorageError(ToolkickerError):
    """Raised by key-value storage adapters on I/O or format failures."""


class StorageReadError(StorageError):
    """The stored blob could not be read back."""


class StorageWriteError(StorageError):
    """The blob could not be written durably."""
