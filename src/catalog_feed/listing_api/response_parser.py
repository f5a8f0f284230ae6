"""Listing extraction from search responses."""

from __future__ import annotations

import logging
from typing import Any, List

from ..data_models import Listing, Page
from ..exceptions import ListingValidationError

logger = logging.getLogger(__name__)


class ResponseParser:
    """Turns a decoded response body into a Page.

    A missing or malformed listings field is treated as an empty page, and
    records that fail validation are skipped.
    """

    def __init__(self, listings_field: str) -> None:
        self._listings_field = listings_field

    def parse_page(self, payload: Any) -> Page:
        if not isinstance(payload, dict):
            logger.warning("Catalog response was not a JSON object (%s); treating as empty page", type(payload).__name__)
            return Page()

        records = payload.get(self._listings_field)
        if records is None:
            logger.info("Catalog response has no '%s' field; treating as empty page", self._listings_field)
            return Page()
        if not isinstance(records, list):
            logger.warning(
                "Catalog response field '%s' was %s, not a list; treating as empty page",
                self._listings_field,
                type(records).__name__,
            )
            return Page()

        listings: List[Listing] = []
        for record in records:
            try:
                listings.append(Listing.from_payload(record))
            except ListingValidationError as exc:
                logger.warning("Skipping malformed listing record: %s", exc)
        return Page(listings=tuple(listings), raw_count=len(records))
