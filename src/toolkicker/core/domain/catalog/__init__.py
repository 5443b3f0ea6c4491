from toolkicker.core.domain.catalog.category import CATEGORY_LABELS, Category, category_label
from toolkicker.core.domain.catalog.listing import Listing, NewListing, check_patch, index_by_id

__all__ = [
    "CATEGORY_LABELS",
    "Category",
    "Listing",
    "NewListing",
    "category_label",
    "check_patch",
    "index_by_id",
]
