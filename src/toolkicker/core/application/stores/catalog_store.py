"""Catalog store: tool listings plus the set of favorited listing ids."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from toolkicker.core.application.contracts.storage_records import (
    FAVORITES_BLOB,
    LISTINGS_BLOB,
    ListingRecord,
)
from toolkicker.core.application.ports import KeyValueStorePort
from toolkicker.core.application.stores.persisted_slot import PersistedSlot
from toolkicker.core.application.stores.persistent_store import PersistentStore
from toolkicker.core.application.stores.storage_keys import DEFAULT_STORAGE_KEYS, StorageKeys
from toolkicker.core.domain.catalog import Listing, NewListing, check_patch
from toolkicker.core.domain.shared import new_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogState:
    listings: tuple[Listing, ...] = ()
    favorites: tuple[str, ...] = ()


class CatalogStore(PersistentStore[CatalogState]):
    """Owns listings and favorites.

    Deleting a listing also drops it from favorites in the same state
    transition; that cascade is the only thing keeping favorites consistent
    with the catalog. Operations on unknown ids are silent no-ops.
    """

    def __init__(
        self,
        storage: KeyValueStorePort,
        keys: StorageKeys = DEFAULT_STORAGE_KEYS,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._listings_slot = PersistedSlot(storage, keys.catalog_listings, LISTINGS_BLOB)
        self._favorites_slot = PersistedSlot(storage, keys.catalog_favorites, FAVORITES_BLOB)
        self._id_factory = id_factory
        super().__init__(CatalogState(), [self._listings_slot, self._favorites_slot])

    @property
    def listings(self) -> tuple[Listing, ...]:
        return self._state.listings

    @property
    def favorites(self) -> tuple[str, ...]:
        return self._state.favorites

    async def load(self) -> None:
        records, favorites = await asyncio.gather(
            self._listings_slot.load(),
            self._favorites_slot.load(),
        )
        listings = tuple(record.to_domain() for record in records) if records is not None else self.listings
        favorite_ids = tuple(favorites) if favorites is not None else self.favorites
        logger.info("[CatalogStore] Loaded %d listings, %d favorites", len(listings), len(favorite_ids))
        self._restore(CatalogState(listings=listings, favorites=favorite_ids))

    def get(self, listing_id: str) -> Listing | None:
        return next((listing for listing in self.listings if listing.id == listing_id), None)

    def add(self, new_listing: NewListing) -> Listing:
        listing = Listing.from_new(new_listing, self._id_factory())
        self._commit(CatalogState(listings=(*self.listings, listing), favorites=self.favorites))
        return listing

    def update(self, listing_id: str, **changes: Any) -> None:
        check_patch(changes)
        self._commit(
            CatalogState(
                listings=tuple(
                    listing.merge(changes) if listing.id == listing_id else listing
                    for listing in self.listings
                ),
                favorites=self.favorites,
            )
        )

    def set_archived(self, listing_id: str, archived: bool) -> None:
        self.update(listing_id, archived=archived)

    def delete(self, listing_id: str) -> None:
        self._commit(
            CatalogState(
                listings=tuple(listing for listing in self.listings if listing.id != listing_id),
                favorites=tuple(fav for fav in self.favorites if fav != listing_id),
            )
        )

    def toggle_favorite(self, listing_id: str) -> None:
        if listing_id in self.favorites:
            favorites = tuple(fav for fav in self.favorites if fav != listing_id)
        else:
            favorites = (*self.favorites, listing_id)
        self._commit(CatalogState(listings=self.listings, favorites=favorites))

    def is_favorite(self, listing_id: str) -> bool:
        return listing_id in self.favorites

    def favorite_listings(self) -> tuple[Listing, ...]:
        favorite_ids = set(self.favorites)
        return tuple(listing for listing in self.listings if listing.id in favorite_ids)

    def active_listings(self) -> tuple[Listing, ...]:
        return tuple(listing for listing in self.listings if not listing.archived)

    def _persist(self, previous: CatalogState, current: CatalogState) -> None:
        if previous.listings != current.listings:
            self._listings_slot.save([ListingRecord.from_domain(listing) for listing in current.listings])
        if previous.favorites != current.favorites:
            self._favorites_slot.save(list(current.favorites))
