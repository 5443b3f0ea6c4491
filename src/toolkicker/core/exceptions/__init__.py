from toolkicker.core.exceptions.storage_error import StorageError, StorageReadError, StorageWriteError
from toolkicker.core.exceptions.toolkicker_error import ToolkickerError

__all__ = [
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "ToolkickerError",
]
