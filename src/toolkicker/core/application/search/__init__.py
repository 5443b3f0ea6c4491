from toolkicker.core.application.search.listing_query import ListingQuery, parse_bound
from toolkicker.core.application.search.listing_search import search_listings
from toolkicker.core.application.search.listing_search_view import ListingSearchView

__all__ = ["ListingQuery", "ListingSearchView", "parse_bound", "search_listings"]
