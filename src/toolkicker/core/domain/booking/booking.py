"""Booking aggregate.

A booking freezes the listing data it was created from: later edits or
deletions in the catalog never reach an existing booking.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

from toolkicker.core.domain.booking.booking_status import BookingStatus
from toolkicker.core.domain.cart.cart_line import CartLine
from toolkicker.core.domain.catalog.listing import Listing


@dataclass(frozen=True, kw_only=True)
class BookingLine:
    tool_id: str
    name: str
    price_per_day: float
    days: int

    @property
    def line_total(self) -> float:
        return self.price_per_day * self.days

    @classmethod
    def from_listing(cls, listing: Listing, days: int) -> "BookingLine":
        return cls(
            tool_id=listing.id,
            name=listing.name,
            price_per_day=listing.price_per_day,
            days=days,
        )


@dataclass(frozen=True, kw_only=True)
class Booking:
    id: str
    created_at: int
    lines: tuple[BookingLine, ...] = ()
    total: float = 0
    status: BookingStatus = BookingStatus.REQUESTED

    def with_status(self, status: BookingStatus) -> "Booking":
        return replace(self, status=BookingStatus(status))


def freeze_lines(
    cart_lines: Iterable[CartLine], listings_by_id: Mapping[str, Listing]
) -> tuple[BookingLine, ...]:
    """Snapshot every cart line that still resolves to a listing; drop the rest."""
    return tuple(
        BookingLine.from_listing(listings_by_id[line.tool_id], line.days)
        for line in cart_lines
        if line.tool_id in listings_by_id
    )


def sum_line_totals(lines: Iterable[BookingLine]) -> float:
    return sum((line.line_total for line in lines), 0)
