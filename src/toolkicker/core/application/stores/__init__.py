from toolkicker.core.application.stores.bookings_store import BookingsStore
from toolkicker.core.application.stores.cart_store import CartStore
from toolkicker.core.application.stores.catalog_store import CatalogState, CatalogStore
from toolkicker.core.application.stores.observable import Observable
from toolkicker.core.application.stores.persisted_slot import PersistedSlot
from toolkicker.core.application.stores.storage_keys import DEFAULT_STORAGE_KEYS, StorageKeys

__all__ = [
    "DEFAULT_STORAGE_KEYS",
    "BookingsStore",
    "CartStore",
    "CatalogState",
    "CatalogStore",
    "Observable",
    "PersistedSlot",
    "StorageKeys",
]
