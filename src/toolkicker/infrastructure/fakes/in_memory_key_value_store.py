from toolkicker.core.application.ports import KeyValueStorePort
from toolkicker.core.exceptions import StorageWriteError


class InMemoryKeyValueStore(KeyValueStorePort):
    """
    Fake implementation for testing/local development.
    Satisfies the KeyValueStorePort interface without touching disk.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})
        self.fail_writes = False
        self.write_count = 0

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageWriteError(f"Simulated write failure for '{key}'", context={"storage_key": key})
        self.write_count += 1
        self.data[key] = value
