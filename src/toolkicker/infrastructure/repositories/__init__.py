from .key_value_store_file_adapter import KeyValueStoreFileAdapter

__all__ = [
    "KeyValueStoreFileAdapter",
]
