"""Cart store: pending rental-day selections keyed by listing id.

The cart never caches prices. Totals are always resolved against a catalog
snapshot supplied by the caller, so price edits and deletions show up
immediately without the cart observing the catalog.
"""

import logging
from collections.abc import Iterable

from toolkicker.core.application.contracts.storage_records import CART_BLOB, CartLineRecord
from toolkicker.core.application.ports import KeyValueStorePort
from toolkicker.core.application.stores.persisted_slot import PersistedSlot
from toolkicker.core.application.stores.persistent_store import PersistentStore
from toolkicker.core.application.stores.storage_keys import DEFAULT_STORAGE_KEYS, StorageKeys
from toolkicker.core.domain.cart import CartLine
from toolkicker.core.domain.catalog import Listing, index_by_id

logger = logging.getLogger(__name__)


class CartStore(PersistentStore[tuple[CartLine, ...]]):
    def __init__(self, storage: KeyValueStorePort, keys: StorageKeys = DEFAULT_STORAGE_KEYS) -> None:
        self._slot = PersistedSlot(storage, keys.cart, CART_BLOB)
        super().__init__((), [self._slot])

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return self._state

    @property
    def is_empty(self) -> bool:
        return not self._state

    async def load(self) -> None:
        records = await self._slot.load()
        if records is None:
            return
        logger.info("[CartStore] Loaded %d cart lines", len(records))
        self._restore(tuple(record.to_domain() for record in records))

    def add(self, tool_id: str, days: int = 1) -> None:
        """Add *days* to the line for *tool_id*, creating the line if needed.

        The resulting day-count never drops below 1.
        """
        if any(line.tool_id == tool_id for line in self.lines):
            self._commit(
                tuple(line.extended_by(days) if line.tool_id == tool_id else line for line in self.lines)
            )
        else:
            self._commit((*self.lines, CartLine(tool_id=tool_id, days=days)))

    def update_days(self, tool_id: str, days: int) -> None:
        self._commit(tuple(line.with_days(days) if line.tool_id == tool_id else line for line in self.lines))

    def remove(self, tool_id: str) -> None:
        self._commit(tuple(line for line in self.lines if line.tool_id != tool_id))

    def clear(self) -> None:
        self._commit(())

    def resolve(self, catalog: Iterable[Listing]) -> tuple[tuple[CartLine, Listing], ...]:
        """Pair each line with its listing, skipping lines whose listing is gone."""
        listings_by_id = index_by_id(catalog)
        return tuple(
            (line, listings_by_id[line.tool_id]) for line in self.lines if line.tool_id in listings_by_id
        )

    def total(self, catalog: Iterable[Listing]) -> float:
        return sum((line.days * listing.price_per_day for line, listing in self.resolve(catalog)), 0)

    def _persist(self, previous: tuple[CartLine, ...], current: tuple[CartLine, ...]) -> None:
        self._slot.save([CartLineRecord.from_domain(line) for line in current])
