"""Common exception classes for the listing feed.

All custom exceptions should inherit from these base classes to maintain
a consistent exception hierarchy across the package.

Exception classes support two patterns:
1. No-argument raise: raise DataError()
2. Contextual attributes: err = DataError(field="x", value=123); raise err
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class DataError(ApplicationError):
    """Data processing or parsing error."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Data processing or parsing error"
        super().__init__(message, **kwargs)


class ListingValidationError(DataError):
    """Listing record failed validation."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Listing record failed validation"
        super().__init__(message, **kwargs)


__all__ = [
    "ApplicationError",
    "DataError",
    "ListingValidationError",
]
