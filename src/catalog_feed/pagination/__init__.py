"""Pagination controller for the listing feed."""

from .controller import PaginationController
from .merge import MergeResult, merge_page
from .phase import PaginationPhase, RequestKind
from .state import USER_FACING_ERROR_MESSAGE, FailedRequest, FeedSnapshot, PaginationState

__all__ = [
    "FailedRequest",
    "FeedSnapshot",
    "MergeResult",
    "PaginationController",
    "PaginationPhase",
    "PaginationState",
    "RequestKind",
    "USER_FACING_ERROR_MESSAGE",
    "merge_page",
]
