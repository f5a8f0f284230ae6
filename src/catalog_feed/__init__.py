"""Paginated marketplace listing feed.

Fetches listing pages from the remote catalog endpoint and merges them into a
stable, duplicate-free collection for an infinite-scrolling screen.
"""

from .catalog_config import CatalogConfig, load_catalog_config
from .data_models import FilterParams, Listing, Page
from .listing_api import FetchError, ListingFetcher, NetworkError, ServerError
from .pagination import FeedSnapshot, PaginationController, PaginationPhase

__all__ = [
    "CatalogConfig",
    "FeedSnapshot",
    "FetchError",
    "FilterParams",
    "Listing",
    "ListingFetcher",
    "NetworkError",
    "Page",
    "PaginationController",
    "PaginationPhase",
    "ServerError",
    "load_catalog_config",
]
