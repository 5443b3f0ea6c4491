"""Bookings store: the history of submitted orders, most recent first."""

import logging
from collections.abc import Callable, Iterable

from toolkicker.core.application.contracts.storage_records import BOOKINGS_BLOB, BookingRecord
from toolkicker.core.application.ports import KeyValueStorePort
from toolkicker.core.application.stores.persisted_slot import PersistedSlot
from toolkicker.core.application.stores.persistent_store import PersistentStore
from toolkicker.core.application.stores.storage_keys import DEFAULT_STORAGE_KEYS, StorageKeys
from toolkicker.core.domain.booking import Booking, BookingStatus, freeze_lines, sum_line_totals
from toolkicker.core.domain.cart import CartLine
from toolkicker.core.domain.catalog import Listing, index_by_id
from toolkicker.core.domain.shared import new_id, now_millis

logger = logging.getLogger(__name__)


class BookingsStore(PersistentStore[tuple[Booking, ...]]):
    def __init__(
        self,
        storage: KeyValueStorePort,
        keys: StorageKeys = DEFAULT_STORAGE_KEYS,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], int] = now_millis,
    ) -> None:
        self._slot = PersistedSlot(storage, keys.bookings, BOOKINGS_BLOB)
        self._id_factory = id_factory
        self._clock = clock
        super().__init__((), [self._slot])

    @property
    def bookings(self) -> tuple[Booking, ...]:
        return self._state

    async def load(self) -> None:
        records = await self._slot.load()
        if records is None:
            return
        logger.info("[BookingsStore] Loaded %d bookings", len(records))
        self._restore(tuple(record.to_domain() for record in records))

    def get(self, booking_id: str) -> Booking | None:
        return next((booking for booking in self.bookings if booking.id == booking_id), None)

    def add_booking(self, cart_lines: Iterable[CartLine], catalog: Iterable[Listing]) -> str:
        """Freeze the cart against *catalog* into a new requested booking.

        Lines whose listing is missing from *catalog* are dropped, so an empty
        or stale cart still yields a booking, just an empty one. The cart is
        left untouched; clearing it is up to the caller.
        """
        lines = freeze_lines(cart_lines, index_by_id(catalog))
        booking = Booking(
            id=self._id_factory(),
            created_at=self._clock(),
            lines=lines,
            total=sum_line_totals(lines),
            status=BookingStatus.REQUESTED,
        )
        self._commit((booking, *self.bookings))
        logger.info("[BookingsStore] Booking %s created with %d lines", booking.id, len(lines))
        return booking.id

    def set_status(self, booking_id: str, status: BookingStatus) -> None:
        self._commit(
            tuple(
                booking.with_status(status) if booking.id == booking_id else booking
                for booking in self.bookings
            )
        )

    def clear_all(self) -> None:
        self._commit(())

    def _persist(self, previous: tuple[Booking, ...], current: tuple[Booking, ...]) -> None:
        self._slot.save([BookingRecord.from_domain(booking) for booking in current])
