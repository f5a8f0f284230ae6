"""Protocol for the fetcher the controller drives."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..data_models import FilterParams, Page


class IListingFetcher(Protocol):
    """Anything that can fetch one page of listings.

    Implementations raise FetchError on failure.
    """

    async def fetch(self, cursor: str, filters: FilterParams) -> Page:
        """Fetch the page that follows ``cursor``."""
        ...
