"""Value types shared by the fetcher and the pagination controller."""

from .filters import FilterParams
from .listing import Listing, Page

__all__ = ["FilterParams", "Listing", "Page"]
