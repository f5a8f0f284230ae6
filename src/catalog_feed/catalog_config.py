"""Configuration for the remote catalog endpoint.

Endpoint, credential, page size and the first-request seed cursor are
supplied at construction instead of being compiled into the client. Values
are resolved from ``CATALOG_*`` environment variables, then from the
defaults files ``CatalogEnvironment`` reads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .config import CatalogEnvironment, ConfigurationError
from .http_utils import ensure_http_url

DEFAULT_USER_TYPE = "Xpert"
DEFAULT_VERSION_NUMBER = "2.2.6"
DEFAULT_PAGE_SIZE = 20
DEFAULT_LISTINGS_FIELD = "xchange"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30
DEFAULT_CONNECT_TIMEOUT_SECONDS = 10


@dataclass(frozen=True)
class CatalogConfig:
    """Configuration for the listing search endpoint."""

    endpoint_url: str
    access_token: str = field(repr=False)
    user_type: str = DEFAULT_USER_TYPE
    version_number: str = DEFAULT_VERSION_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE
    initial_cursor: str = ""
    listings_field: str = DEFAULT_LISTINGS_FIELD
    request_timeout_seconds: int = DEFAULT_REQUEST_TIMEOUT_SECONDS
    connect_timeout_seconds: int = DEFAULT_CONNECT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not self.endpoint_url:
            raise ConfigurationError.missing("endpoint_url")
        try:
            ensure_http_url(self.endpoint_url)
        except ValueError as exc:
            raise ConfigurationError.invalid("endpoint_url", self.endpoint_url, str(exc)) from exc
        if not self.access_token:
            raise ConfigurationError.missing("access_token")
        if self.page_size <= 0:
            raise ConfigurationError.invalid("page_size", self.page_size, "Must be positive")
        if self.initial_cursor and not (self.initial_cursor.isascii() and self.initial_cursor.isdecimal()):
            raise ConfigurationError.invalid("initial_cursor", self.initial_cursor, "Must be a numeric listing id")
        if not self.listings_field:
            raise ConfigurationError.missing("listings_field")
        if self.request_timeout_seconds <= 0:
            raise ConfigurationError.invalid("request_timeout_seconds", self.request_timeout_seconds, "Must be positive")
        if self.connect_timeout_seconds <= 0:
            raise ConfigurationError.invalid("connect_timeout_seconds", self.connect_timeout_seconds, "Must be positive")


def load_catalog_config(environment: Optional[CatalogEnvironment] = None) -> CatalogConfig:
    """Build a CatalogConfig from ``CATALOG_*`` settings."""
    env = environment if environment is not None else CatalogEnvironment()
    return CatalogConfig(
        endpoint_url=env.text("ENDPOINT_URL", required=True),
        access_token=env.text("ACCESS_TOKEN", required=True),
        user_type=env.text("USER_TYPE", DEFAULT_USER_TYPE),
        version_number=env.text("VERSION_NUMBER", DEFAULT_VERSION_NUMBER),
        page_size=env.integer("PAGE_SIZE", DEFAULT_PAGE_SIZE),
        initial_cursor=env.text("INITIAL_CURSOR", ""),
        listings_field=env.text("LISTINGS_FIELD", DEFAULT_LISTINGS_FIELD),
        request_timeout_seconds=env.integer("REQUEST_TIMEOUT_SECONDS", DEFAULT_REQUEST_TIMEOUT_SECONDS, minimum=0),
        connect_timeout_seconds=env.integer("CONNECT_TIMEOUT_SECONDS", DEFAULT_CONNECT_TIMEOUT_SECONDS, minimum=0),
    )


__all__ = ["CatalogConfig", "load_catalog_config"]
