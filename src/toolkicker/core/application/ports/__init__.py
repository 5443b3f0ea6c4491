from toolkicker.core.application.ports.key_value_store_port import KeyValueStorePort

__all__ = ["KeyValueStorePort"]
