"""Errors raised by the listing fetcher."""

from typing import Any, Optional

from ..exceptions import ApplicationError


class FetchError(ApplicationError):
    """Listing page could not be fetched."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Listing page could not be fetched"
        super().__init__(message, **kwargs)


class NetworkError(FetchError):
    """Catalog endpoint could not be reached."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Catalog endpoint could not be reached"
        super().__init__(message, **kwargs)


class ServerError(FetchError):
    """Catalog endpoint returned an unusable response."""

    def __init__(self, message: str = "", *, status: Optional[int] = None, **kwargs: Any) -> None:
        if not message:
            message = "Catalog endpoint returned an unusable response"
        super().__init__(message, **kwargs)
        self.status = status


__all__ = ["FetchError", "NetworkError", "ServerError"]
