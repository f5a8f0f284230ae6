"""Request body construction for the listing search endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from ..catalog_config import CatalogConfig
    from ..data_models import FilterParams

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class RequestBuilder:
    """Builds search request bodies from a cursor and filters."""

    def __init__(self, config: CatalogConfig) -> None:
        self._config = config

    def resolve_cursor(self, cursor: str) -> str:
        """Return the listing id to send, seeding the first request when configured."""
        if cursor:
            return cursor
        return self._config.initial_cursor

    def build_body(self, cursor: str, filters: FilterParams) -> Dict[str, Any]:
        body: Dict[str, Any] = filters.to_request_fields()
        body["last_listing_id"] = self.resolve_cursor(cursor)
        body["token"] = self._config.access_token
        body["user_type"] = self._config.user_type
        body["version_number"] = self._config.version_number
        return body
