"""Merge a fetched page into the accumulated listings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, List, Optional, Tuple

from ..data_models import Listing, Page


@dataclass(frozen=True)
class MergeResult:
    """Outcome of merging one page.

    Attributes:
        added: Previously unseen listings, in page order
        exhausted: True when the page contributed nothing new
        next_cursor: Smallest listing id in the page, or None for an empty page
    """

    added: Tuple[Listing, ...]
    exhausted: bool
    next_cursor: Optional[str]


def merge_page(page: Page, seen_ids: AbstractSet[int]) -> MergeResult:
    """Filter ``page`` down to listings whose ids are not in ``seen_ids``.

    Repeats inside the page collapse to their first occurrence. The cursor
    comes from the whole page, repeats included, so it tracks the service's
    paging position even when every record was already known.
    """
    added: List[Listing] = []
    page_ids = set()
    for listing in page:
        if listing.id in seen_ids or listing.id in page_ids:
            continue
        page_ids.add(listing.id)
        added.append(listing)

    min_id = page.min_listing_id()
    return MergeResult(
        added=tuple(added),
        exhausted=not added,
        next_cursor=str(min_id) if min_id is not None else None,
    )
