"""Client for the remote listing search endpoint.

Internal modules:
- errors: FetchError hierarchy
- request_builder: JSON body construction
- request_executor: single POST with failure classification
- response_parser: listings extraction with graceful degradation
- session_manager: HTTP session lifecycle
"""

from .errors import FetchError, NetworkError, ServerError
from .fetcher import ListingFetcher

__all__ = [
    "FetchError",
    "ListingFetcher",
    "NetworkError",
    "ServerError",
]
