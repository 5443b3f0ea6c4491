from dataclasses import dataclass

DEFAULT_KEY_PREFIX = "toolkicker"
SCHEMA_VERSION = "v1"


@dataclass(frozen=True)
class StorageKeys:
    """Stable storage keys, one per persisted namespace."""

    catalog_listings: str
    catalog_favorites: str
    cart: str
    bookings: str

    @classmethod
    def with_prefix(cls, prefix: str = DEFAULT_KEY_PREFIX) -> "StorageKeys":
        return cls(
            catalog_listings=f"{prefix}.tools.{SCHEMA_VERSION}",
            catalog_favorites=f"{prefix}.favs.{SCHEMA_VERSION}",
            cart=f"{prefix}.cart.{SCHEMA_VERSION}",
            bookings=f"{prefix}.bookings.{SCHEMA_VERSION}",
        )


DEFAULT_STORAGE_KEYS = StorageKeys.with_prefix()
