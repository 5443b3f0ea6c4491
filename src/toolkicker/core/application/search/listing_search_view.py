from dataclasses import replace

from toolkicker.core.application.search.listing_query import ListingQuery
from toolkicker.core.application.search.listing_search import search_listings
from toolkicker.core.application.stores.catalog_store import CatalogState, CatalogStore
from toolkicker.core.application.stores.observable import Observable
from toolkicker.core.domain.catalog import Listing


class ListingSearchView(Observable[tuple[Listing, ...]]):
    """Browse results kept in sync with the catalog and the current filters.

    Recomputes whenever the catalog publishes a new snapshot or the query
    changes; subscribers are only notified when the result actually differs.
    """

    def __init__(self, catalog: CatalogStore, query: ListingQuery | None = None) -> None:
        self._query = query or ListingQuery()
        super().__init__(search_listings(catalog.listings, self._query))
        self._listings = catalog.listings
        self._unsubscribe = catalog.subscribe(self._on_catalog_changed)

    @property
    def query(self) -> ListingQuery:
        return self._query

    @property
    def results(self) -> tuple[Listing, ...]:
        return self._state

    def set_query(self, **changes: str) -> None:
        self._query = replace(self._query, **changes)
        self._refresh()

    def reset(self) -> None:
        self._query = ListingQuery()
        self._refresh()

    def close(self) -> None:
        self._unsubscribe()

    def _on_catalog_changed(self, state: CatalogState) -> None:
        self._listings = state.listings
        self._refresh()

    def _refresh(self) -> None:
        if self._replace_state(search_listings(self._listings, self._query)):
            self._publish()
