"""Listing and page types for the marketplace catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional, Sequence, Tuple

from ..exceptions import ListingValidationError


def _coerce_listing_id(value: Any) -> int:
    """Accept an int, an integral float such as ``1017.0``, or an ASCII digit string."""
    if isinstance(value, bool):
        raise ListingValidationError(f"listing_id must be numeric, got {value!r}", value=value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if text.isascii() and text.isdecimal():
            return int(text)
    raise ListingValidationError(f"listing_id must be numeric, got {value!r}", value=value)


def _coerce_price(value: Any) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    try:
        price = Decimal(str(value))
    except InvalidOperation:
        return None
    if not price.is_finite():
        return None
    return price


def _optional_str(payload: Dict[str, Any], key: str) -> Optional[str]:
    value = payload.get(key)
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class Listing:
    """A single catalog entry."""

    id: int
    display_name: Optional[str]
    brand: Optional[str]
    currency: Optional[str]
    price: Optional[Decimal]
    image_url: Optional[str]
    raw_data: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_payload(cls, payload: Any) -> "Listing":
        """Parse a listing record from the search response.

        Raises:
            ListingValidationError: If the record is not an object or its
                ``listing_id`` is not numeric
        """
        if not isinstance(payload, dict):
            raise ListingValidationError("Listing record must be a JSON object", value=payload)
        if "listing_id" not in payload:
            raise ListingValidationError("Listing record missing 'listing_id'", value=payload)
        return cls(
            id=_coerce_listing_id(payload["listing_id"]),
            display_name=_optional_str(payload, "model"),
            brand=_optional_str(payload, "brand"),
            currency=_optional_str(payload, "currency"),
            price=_coerce_price(payload.get("selling_price")),
            image_url=_optional_str(payload, "item_image"),
            raw_data=payload,
        )

    @property
    def formatted_price(self) -> str:
        if self.price is None:
            return "N/A"
        return f"{self.price:.2f}"


@dataclass(frozen=True)
class Page:
    """Listings returned by one fetch, in service order."""

    listings: Tuple[Listing, ...] = ()
    raw_count: int = 0

    @classmethod
    def of(cls, listings: Sequence[Listing]) -> "Page":
        items = tuple(listings)
        return cls(listings=items, raw_count=len(items))

    def __len__(self) -> int:
        return len(self.listings)

    def __iter__(self):
        return iter(self.listings)

    @property
    def is_empty(self) -> bool:
        return not self.listings

    def min_listing_id(self) -> Optional[int]:
        """Smallest listing id in the page, or None when empty."""
        if not self.listings:
            return None
        return min(listing.id for listing in self.listings)


__all__ = ["Listing", "Page"]
