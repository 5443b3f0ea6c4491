"""Wires settings, storage and the three stores into one container."""

import asyncio
from dataclasses import dataclass

from toolkicker.core.application.ports import KeyValueStorePort
from toolkicker.core.application.search import ListingQuery, ListingSearchView
from toolkicker.core.application.stores import BookingsStore, CartStore, CatalogStore
from toolkicker.infrastructure.configuration.app_settings import AppSettings
from toolkicker.infrastructure.observability import configure_logging, get_logger
from toolkicker.infrastructure.repositories import KeyValueStoreFileAdapter

logger = get_logger(__name__)


@dataclass
class ToolkickerContainer:
    settings: AppSettings
    storage: KeyValueStorePort
    catalog: CatalogStore
    cart: CartStore
    bookings: BookingsStore

    @classmethod
    def build(
        cls,
        settings: AppSettings | None = None,
        storage: KeyValueStorePort | None = None,
    ) -> "ToolkickerContainer":
        """Assemble the stores. Defaults to settings from the environment and on-disk storage."""
        settings = settings or AppSettings()
        configure_logging(settings.log_level, settings.log_format)
        storage = storage or KeyValueStoreFileAdapter(settings)
        keys = settings.storage_keys
        return cls(
            settings=settings,
            storage=storage,
            catalog=CatalogStore(storage, keys),
            cart=CartStore(storage, keys),
            bookings=BookingsStore(storage, keys),
        )

    async def load(self) -> None:
        """Load every store concurrently. Never raises for missing or corrupt data."""
        await asyncio.gather(self.catalog.load(), self.cart.load(), self.bookings.load())
        logger.info(
            "Stores loaded",
            listings=len(self.catalog.listings),
            cart_lines=len(self.cart.lines),
            bookings=len(self.bookings.bookings),
        )

    async def flush(self) -> None:
        """Wait for every pending write. Writes that failed stay failed."""
        await asyncio.gather(self.catalog.flush(), self.cart.flush(), self.bookings.flush())

    def search_view(self, query: ListingQuery | None = None) -> ListingSearchView:
        return ListingSearchView(self.catalog, query)
