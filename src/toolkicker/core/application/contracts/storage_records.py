"""STORAGE CONTRACT: the JSON shape written under each storage key.

Field names are camelCase on disk (``pricePerDay``, ``toolId``, ``createdAt``)
so blobs stay readable by earlier builds of the app. Non-finite prices are
written as ``Infinity``/``NaN`` literals, which the decoder reads back.
"""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

from toolkicker.core.domain.booking import Booking, BookingLine, BookingStatus
from toolkicker.core.domain.cart import CartLine
from toolkicker.core.domain.catalog import Category, Listing


class StorageRecord(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        ser_json_inf_nan="constants",
    )


class ListingRecord(StorageRecord):
    id: str
    name: str
    price_per_day: float
    category: Category = Field(default=Category.OTHER)
    description: str | None = None
    photo_uri: str | None = None
    archived: bool = False

    @field_validator("category", mode="before")
    @classmethod
    def _parse_category(cls, value: object) -> Category:
        return Category.parse(value)

    @classmethod
    def from_domain(cls, listing: Listing) -> "ListingRecord":
        return cls(
            id=listing.id,
            name=listing.name,
            price_per_day=listing.price_per_day,
            category=listing.category,
            description=listing.description,
            photo_uri=listing.photo_uri,
            archived=listing.archived,
        )

    def to_domain(self) -> Listing:
        return Listing(
            id=self.id,
            name=self.name,
            price_per_day=self.price_per_day,
            category=self.category,
            description=self.description,
            photo_uri=self.photo_uri,
            archived=self.archived,
        )


class CartLineRecord(StorageRecord):
    tool_id: str
    days: int

    @classmethod
    def from_domain(cls, line: CartLine) -> "CartLineRecord":
        return cls(tool_id=line.tool_id, days=line.days)

    def to_domain(self) -> CartLine:
        return CartLine(tool_id=self.tool_id, days=self.days)


class BookingLineRecord(StorageRecord):
    tool_id: str
    name: str
    price_per_day: float
    days: int


class BookingRecord(StorageRecord):
    id: str
    created_at: int
    items: list[BookingLineRecord] = Field(default_factory=list)
    total: float
    status: BookingStatus = BookingStatus.REQUESTED

    @classmethod
    def from_domain(cls, booking: Booking) -> "BookingRecord":
        return cls(
            id=booking.id,
            created_at=booking.created_at,
            items=[
                BookingLineRecord(
                    tool_id=line.tool_id,
                    name=line.name,
                    price_per_day=line.price_per_day,
                    days=line.days,
                )
                for line in booking.lines
            ],
            total=booking.total,
            status=booking.status,
        )

    def to_domain(self) -> Booking:
        return Booking(
            id=self.id,
            created_at=self.created_at,
            lines=tuple(
                BookingLine(
                    tool_id=item.tool_id,
                    name=item.name,
                    price_per_day=item.price_per_day,
                    days=item.days,
                )
                for item in self.items
            ),
            total=self.total,
            status=self.status,
        )


LISTINGS_BLOB = TypeAdapter(list[ListingRecord])
FAVORITES_BLOB = TypeAdapter(list[str])
CART_BLOB = TypeAdapter(list[CartLineRecord])
BOOKINGS_BLOB = TypeAdapter(list[BookingRecord])
