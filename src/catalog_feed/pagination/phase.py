"""Pagination phases and request kinds."""

from enum import Enum


class PaginationPhase(Enum):
    """
    Single source of truth for what the feed is doing.

    Every phase other than IDLE and ERROR means exactly one fetch is in
    flight.
    """

    IDLE = "idle"
    LOADING_INITIAL = "loading_initial"
    LOADING_MORE = "loading_more"
    REFRESHING = "refreshing"
    ERROR = "error"

    @property
    def is_fetching(self) -> bool:
        return self in _FETCHING_PHASES


_FETCHING_PHASES = frozenset(
    {
        PaginationPhase.LOADING_INITIAL,
        PaginationPhase.LOADING_MORE,
        PaginationPhase.REFRESHING,
    }
)


class RequestKind(Enum):
    """Which lifecycle operation issued a fetch."""

    INITIAL = "initial"
    MORE = "more"
    REFRESH = "refresh"

    @property
    def phase(self) -> PaginationPhase:
        return _PHASE_BY_KIND[self]


_PHASE_BY_KIND = {
    RequestKind.INITIAL: PaginationPhase.LOADING_INITIAL,
    RequestKind.MORE: PaginationPhase.LOADING_MORE,
    RequestKind.REFRESH: PaginationPhase.REFRESHING,
}
