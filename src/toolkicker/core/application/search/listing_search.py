"""Search/filter/sort over a catalog snapshot. Pure; never mutates its input."""

import unicodedata
from collections.abc import Iterable

from toolkicker.core.application.search.listing_query import ListingQuery
from toolkicker.core.domain.catalog import Listing


def search_listings(listings: Iterable[Listing], query: ListingQuery) -> tuple[Listing, ...]:
    """Return the listings matching *query*, sorted by name.

    Stages, each narrowing the previous one: drop archived, match name text,
    match category, keep the price window, sort.
    """
    text = query.normalized_text
    lower, upper = query.lower_bound, query.upper_bound

    matches = (listing for listing in listings if not listing.archived)
    if text:
        matches = (listing for listing in matches if text in listing.name.casefold())
    if query.category:
        matches = (listing for listing in matches if listing.category == query.category)
    matches = (listing for listing in matches if lower <= listing.price_per_day <= upper)

    return tuple(sorted(matches, key=name_sort_key))


def name_sort_key(listing: Listing) -> tuple[str, str, str]:
    # Accent- and case-insensitive first, raw name and id break ties.
    return collation_key(listing.name), listing.name, listing.id


def collation_key(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()
