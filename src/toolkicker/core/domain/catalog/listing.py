"""Catalog entities: a tool listing and the input used to create one."""

from collections.abc import Iterable
from dataclasses import dataclass, fields, replace
from typing import Any

from toolkicker.core.domain.catalog.category import Category


@dataclass(frozen=True, kw_only=True)
class NewListing:
    """A listing as entered by the owner, before the catalog assigns an id."""

    name: str
    price_per_day: float
    category: Category | str = Category.OTHER
    description: str | None = None
    photo_uri: str | None = None


@dataclass(frozen=True, kw_only=True)
class Listing:
    id: str
    name: str
    price_per_day: float
    category: Category = Category.OTHER
    description: str | None = None
    photo_uri: str | None = None
    archived: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", Category.parse(self.category))

    @classmethod
    def from_new(cls, new_listing: NewListing, listing_id: str) -> "Listing":
        return cls(
            id=listing_id,
            name=new_listing.name,
            price_per_day=new_listing.price_per_day,
            category=new_listing.category,
            description=new_listing.description,
            photo_uri=new_listing.photo_uri,
            archived=False,
        )

    def merge(self, changes: dict[str, Any]) -> "Listing":
        """Return a copy with *changes* applied. The id is never overwritten."""
        check_patch(changes)
        return replace(self, **changes)


PATCHABLE_FIELDS = frozenset(f.name for f in fields(Listing)) - {"id"}


def check_patch(changes: dict[str, Any]) -> None:
    unknown = set(changes) - PATCHABLE_FIELDS
    if unknown:
        raise TypeError(f"Unknown listing fields: {', '.join(sorted(unknown))}")


def index_by_id(listings: Iterable[Listing]) -> dict[str, Listing]:
    """Map id -> listing. When an id repeats, the first occurrence wins."""
    index: dict[str, Listing] = {}
    for listing in listings:
        index.setdefault(listing.id, listing)
    return index
