"""Search filter parameters passed through to the catalog endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class FilterParams:
    """Category, price, search and sort constraints for a listing search.

    Values are opaque to the feed and are sent verbatim.
    """

    categories: Tuple[str, ...] = ()
    last_row_value: str = ""
    max_price: str = ""
    min_price: str = ""
    search: str = ""
    sort: str = ""

    def to_request_fields(self) -> Dict[str, object]:
        categories: List[str] = list(self.categories)
        return {
            "categories": categories,
            "last_row_value": self.last_row_value,
            "max": self.max_price,
            "min": self.min_price,
            "search": self.search,
            "sort": self.sort,
        }


__all__ = ["FilterParams"]
