"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import asyncio
from decimal import Decimal
from typing import Any, List, Sequence, Tuple, Union

import pytest

from catalog_feed.catalog_config import CatalogConfig
from catalog_feed.config import environment
from catalog_feed.data_models import FilterParams, Listing, Page

Outcome = Union[Page, BaseException, "asyncio.Future[Page]"]


def make_listing(listing_id: int, **overrides: Any) -> Listing:
    """Build a Listing with plausible presentation attributes."""
    values = {
        "display_name": f"Model {listing_id}",
        "brand": "Apple",
        "currency": "AED",
        "price": Decimal("100.00"),
        "image_url": f"https://img.example.com/{listing_id}.jpg",
    }
    values.update(overrides)
    return Listing(id=listing_id, **values)


def make_page(*listing_ids: int) -> Page:
    return Page.of([make_listing(listing_id) for listing_id in listing_ids])


class FakeFetcher:
    """In-memory fetcher that replays scripted outcomes in order.

    Outcomes are Pages, exceptions to raise, or futures that resolve later
    so tests control when a fetch completes.
    """

    def __init__(self) -> None:
        self.calls: List[Tuple[str, FilterParams]] = []
        self._outcomes: List[Outcome] = []

    def queue(self, *outcomes: Outcome) -> None:
        self._outcomes.extend(outcomes)

    def queue_ids(self, *pages: Sequence[int]) -> None:
        for listing_ids in pages:
            self._outcomes.append(make_page(*listing_ids))

    def deferred(self) -> "asyncio.Future[Page]":
        future: asyncio.Future[Page] = asyncio.get_running_loop().create_future()
        self._outcomes.append(future)
        return future

    @property
    def cursors(self) -> List[str]:
        return [cursor for cursor, _ in self.calls]

    async def fetch(self, cursor: str, filters: FilterParams) -> Page:
        self.calls.append((cursor, filters))
        if not self._outcomes:
            raise AssertionError(f"Unexpected fetch with cursor={cursor!r}")
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, asyncio.Future):
            outcome = await outcome
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture(autouse=True)
def no_defaults_files(monkeypatch):
    monkeypatch.setattr(environment, "DEFAULTS_FILES", ())


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def catalog_config() -> CatalogConfig:
    return CatalogConfig(
        endpoint_url="https://catalog.example.com/xdeal/Xchange",
        access_token="test-token",
    )


@pytest.fixture
def listing_factory():
    return make_listing


@pytest.fixture
def page_factory():
    return make_page
