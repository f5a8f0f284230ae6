"""Listing fetcher: one search request per call."""

from __future__ import annotations

import logging
from typing import Optional

from ..catalog_config import CatalogConfig
from ..data_models import FilterParams, Page
from .request_builder import RequestBuilder
from .request_executor import RequestExecutor
from .response_parser import ResponseParser
from .session_manager import SessionManager

logger = logging.getLogger(__name__)


class ListingFetcher:
    """Fetches one page of listings from the catalog endpoint."""

    def __init__(
        self,
        config: CatalogConfig,
        *,
        session_manager: Optional[SessionManager] = None,
        executor: Optional[RequestExecutor] = None,
    ) -> None:
        self._config = config
        self._session_manager = session_manager if session_manager else SessionManager(config)
        self._executor = executor if executor else RequestExecutor(self._session_manager)
        self._request_builder = RequestBuilder(config)
        self._response_parser = ResponseParser(config.listings_field)

    async def initialize(self) -> None:
        await self._session_manager.initialize()

    async def close(self) -> None:
        await self._session_manager.close()

    async def __aenter__(self) -> "ListingFetcher":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def fetch(self, cursor: str, filters: FilterParams) -> Page:
        """Fetch the page of listings that follows ``cursor``.

        Args:
            cursor: Listing id to page from, or "" for the first page
            filters: Search constraints sent verbatim

        Returns:
            Listings in service order; empty when the response carries none

        Raises:
            FetchError: NetworkError or ServerError when the request fails
        """
        body = self._request_builder.build_body(cursor, filters)
        logger.info("Requesting catalog listings with last_listing_id=%r", body["last_listing_id"])
        payload = await self._executor.post_json(self._config.endpoint_url, body)
        page = self._response_parser.parse_page(payload)
        logger.info("Received %d listings (%d raw records)", len(page), page.raw_count)
        return page
