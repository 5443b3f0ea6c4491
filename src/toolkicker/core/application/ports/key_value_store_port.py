from abc import ABC, abstractmethod


class KeyValueStorePort(ABC):
    """Port for durable string-keyed blob storage.

    Implementations MUST raise:
        - StorageReadError: when a stored value exists but cannot be read.
        - StorageWriteError: when a value cannot be written durably.

    Both live in ``core.exceptions``.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the blob stored under *key*, or None when nothing is stored."""

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Replace the blob stored under *key* with *value*."""
