"""Pagination state owned by the controller and its read-only projection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from ..data_models import FilterParams, Listing
from ..listing_api import FetchError
from .merge import MergeResult
from .phase import PaginationPhase, RequestKind

USER_FACING_ERROR_MESSAGE = "Failed to load products. Please try again."


@dataclass(frozen=True)
class FailedRequest:
    """Arguments of the last fetch that failed, replayed by retry()."""

    kind: RequestKind
    cursor: str
    filters: FilterParams


@dataclass
class PaginationState:
    """Mutable feed state. Only the controller touches it."""

    collection: List[Listing] = field(default_factory=list)
    seen_ids: Set[int] = field(default_factory=set)
    cursor: str = ""
    exhausted: bool = False
    phase: PaginationPhase = PaginationPhase.IDLE
    last_error: Optional[FetchError] = None
    failed_request: Optional[FailedRequest] = None
    generation: int = 0

    def reset(self) -> None:
        """Drop accumulated listings and paging position; bump the generation."""
        self.collection = []
        self.seen_ids = set()
        self.cursor = ""
        self.exhausted = False
        self.last_error = None
        self.failed_request = None
        self.generation += 1

    def apply_merge(self, result: MergeResult) -> None:
        self.collection.extend(result.added)
        self.seen_ids.update(listing.id for listing in result.added)
        if result.exhausted:
            self.exhausted = True
        if result.next_cursor is not None:
            self.cursor = result.next_cursor


@dataclass(frozen=True)
class FeedSnapshot:
    """What the presentation layer renders."""

    listings: Tuple[Listing, ...]
    phase: PaginationPhase
    is_exhausted: bool
    error: Optional[str]

    @classmethod
    def from_state(cls, state: PaginationState) -> "FeedSnapshot":
        return cls(
            listings=tuple(state.collection),
            phase=state.phase,
            is_exhausted=state.exhausted,
            error=USER_FACING_ERROR_MESSAGE if state.last_error is not None else None,
        )

    @property
    def is_loading_initial(self) -> bool:
        return self.phase is PaginationPhase.LOADING_INITIAL

    @property
    def is_loading_more(self) -> bool:
        return self.phase is PaginationPhase.LOADING_MORE

    @property
    def is_refreshing(self) -> bool:
        return self.phase is PaginationPhase.REFRESHING
