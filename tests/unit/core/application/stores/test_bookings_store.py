"""Unit tests for BookingsStore."""

import json

import pytest

from toolkicker.core.application.stores import BookingsStore
from toolkicker.core.domain.booking import BookingLine, BookingStatus
from toolkicker.core.domain.cart import CartLine
from toolkicker.core.domain.catalog import Listing


@pytest.fixture
def listings() -> list[Listing]:
    return [
        Listing(id="drill", name="Drill", price_per_day=20),
        Listing(id="saw", name="Saw", price_per_day=12.5),
    ]


def test_add_booking_freezes_lines_and_total(bookings: BookingsStore, listings):
    booking_id = bookings.add_booking([CartLine("drill", 2), CartLine("saw", 2)], listings)

    booking = bookings.get(booking_id)
    assert booking_id == "bk-1"
    assert booking.created_at == 1_700_000_000_000
    assert booking.status is BookingStatus.REQUESTED
    assert booking.lines == (
        BookingLine(tool_id="drill", name="Drill", price_per_day=20, days=2),
        BookingLine(tool_id="saw", name="Saw", price_per_day=12.5, days=2),
    )
    assert booking.total == 65


def test_total_is_independent_of_later_price_edits(catalog, cart, bookings: BookingsStore, drill):
    listing = catalog.add(drill)
    cart.add(listing.id, 3)
    booking_id = bookings.add_booking(cart.lines, catalog.listings)

    catalog.update(listing.id, price_per_day=99, name="Renamed")
    catalog.delete(listing.id)

    booking = bookings.get(booking_id)
    assert booking.total == sum(line.line_total for line in booking.lines) == 60
    assert booking.lines[0].name == "Drill"


def test_unresolvable_cart_yields_empty_booking(bookings: BookingsStore, listings):
    booking_id = bookings.add_booking([CartLine("ghost", 2)], listings)

    booking = bookings.get(booking_id)
    assert booking.lines == ()
    assert booking.total == 0


def test_empty_cart_still_books(bookings: BookingsStore):
    booking_id = bookings.add_booking([], [])
    assert bookings.get(booking_id).total == 0


def test_history_is_most_recent_first(bookings: BookingsStore, listings):
    first = bookings.add_booking([CartLine("drill")], listings)
    second = bookings.add_booking([CartLine("saw")], listings)

    assert [b.id for b in bookings.bookings] == [second, first]


def test_add_booking_does_not_clear_cart(cart, bookings: BookingsStore, listings):
    cart.add("drill", 2)
    bookings.add_booking(cart.lines, listings)
    assert cart.lines == (CartLine("drill", 2),)


def test_set_status(bookings: BookingsStore, listings):
    booking_id = bookings.add_booking([CartLine("drill")], listings)

    bookings.set_status(booking_id, BookingStatus.CONFIRMED)
    bookings.set_status("missing", BookingStatus.COMPLETED)

    assert bookings.get(booking_id).status is BookingStatus.CONFIRMED


def test_clear_all(bookings: BookingsStore, listings):
    bookings.add_booking([CartLine("drill")], listings)
    bookings.clear_all()
    assert bookings.bookings == ()


def test_persisted_blob_shape(bookings: BookingsStore, listings, storage):
    bookings.add_booking([CartLine("drill", 1)], listings)

    blob = json.loads(storage.data["toolkicker.bookings.v1"])
    assert blob == [
        {
            "id": "bk-1",
            "createdAt": 1_700_000_000_000,
            "items": [{"toolId": "drill", "name": "Drill", "pricePerDay": 20.0, "days": 1}],
            "total": 20.0,
            "status": "requested",
        }
    ]


@pytest.mark.asyncio
async def test_round_trip(storage, listings):
    first = BookingsStore(storage)
    first.add_booking([CartLine("drill", 2)], listings)
    first.add_booking([CartLine("saw", 1), CartLine("gone", 1)], listings)
    await first.flush()

    second = BookingsStore(storage)
    await second.load()

    assert second.bookings == first.bookings
