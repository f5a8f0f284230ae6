"""Pagination controller: drives the fetcher and owns the feed state."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from ..data_models import FilterParams, Listing, Page
from ..listing_api import FetchError
from .merge import merge_page
from .phase import PaginationPhase, RequestKind
from .protocols import IListingFetcher
from .state import FailedRequest, FeedSnapshot, PaginationState

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[FeedSnapshot], None]


class PaginationController:
    """Accumulates listing pages into a duplicate-free, growing collection.

    All four lifecycle operations are coroutines meant to run on the
    presentation layer's event loop. At most one fetch is ever in flight:
    ``load_more`` only starts from IDLE, and ``refresh`` supersedes whatever
    is outstanding by bumping the generation, so late completions from the
    superseded fetch are dropped.
    """

    def __init__(
        self,
        fetcher: IListingFetcher,
        filters: Optional[FilterParams] = None,
        *,
        page_size: Optional[int] = None,
    ) -> None:
        self._fetcher = fetcher
        self._filters = filters if filters else FilterParams()
        self._page_size = page_size
        self._state = PaginationState()
        self._listeners: List[SnapshotListener] = []

    @property
    def phase(self) -> PaginationPhase:
        return self._state.phase

    @property
    def cursor(self) -> str:
        return self._state.cursor

    @property
    def exhausted(self) -> bool:
        return self._state.exhausted

    @property
    def last_error(self) -> Optional[FetchError]:
        return self._state.last_error

    @property
    def generation(self) -> int:
        return self._state.generation

    @property
    def filters(self) -> FilterParams:
        return self._filters

    @property
    def listings(self) -> Tuple[Listing, ...]:
        return tuple(self._state.collection)

    def snapshot(self) -> FeedSnapshot:
        return FeedSnapshot.from_state(self._state)

    def add_listener(self, listener: SnapshotListener) -> None:
        """Call ``listener`` with a fresh snapshot after every state change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: SnapshotListener) -> None:
        self._listeners.remove(listener)

    async def load_initial(self) -> None:
        """Fetch the first page. Ignored unless the feed is fresh and idle."""
        state = self._state
        if state.phase is not PaginationPhase.IDLE or state.collection or state.cursor or state.exhausted:
            logger.debug("load_initial ignored in phase %s", state.phase.value)
            return
        await self._run(RequestKind.INITIAL, "", self._filters)

    async def load_more(self) -> None:
        """Fetch the next page when idle, not exhausted, and a cursor exists."""
        state = self._state
        if state.phase is not PaginationPhase.IDLE:
            logger.debug("load_more ignored in phase %s", state.phase.value)
            return
        if state.exhausted or not state.cursor:
            return
        await self._run(RequestKind.MORE, state.cursor, self._filters)

    async def refresh(self) -> None:
        """Discard everything and fetch the first page again.

        Accepted from any phase except while a refresh is already running.
        """
        if self._state.phase is PaginationPhase.REFRESHING:
            logger.debug("refresh ignored; a refresh is already in flight")
            return
        superseded = self._state.phase.is_fetching
        self._state.reset()
        if superseded:
            logger.info("Refresh supersedes in-flight fetch (generation now %d)", self._state.generation)
        await self._run(RequestKind.REFRESH, "", self._filters)

    async def retry(self) -> None:
        """Re-issue the request that last failed, with its cursor and filters.

        Only acts in ERROR. A failed initial load or refresh is retried in
        LOADING_INITIAL. A failed ``load_more`` is retried in LOADING_MORE so
        the listings already shown stay in place.
        """
        state = self._state
        failed = state.failed_request
        if state.phase is not PaginationPhase.ERROR or failed is None:
            logger.debug("retry ignored in phase %s", state.phase.value)
            return
        kind = RequestKind.MORE if failed.kind is RequestKind.MORE else RequestKind.INITIAL
        logger.info("Retrying %s request with cursor=%r", failed.kind.value, failed.cursor)
        await self._run(kind, failed.cursor, failed.filters)

    async def _run(self, kind: RequestKind, cursor: str, filters: FilterParams) -> None:
        state = self._state
        state.phase = kind.phase
        state.last_error = None
        state.failed_request = None
        generation = state.generation

        try:
            self._notify()
            page = await self._fetcher.fetch(cursor, filters)
        except FetchError as exc:
            if generation != state.generation:
                logger.debug("Discarding stale %s failure from generation %d", kind.value, generation)
                return
            logger.warning("Listing %s fetch failed (cursor=%r): %s", kind.value, cursor, exc)
            self._record_failure(kind, cursor, filters, exc)
            self._notify()
            return
        except BaseException as exc:
            # Leave the feed retryable, then let the caller see the original error.
            if generation == state.generation:
                logger.exception("Listing %s fetch aborted (cursor=%r)", kind.value, cursor)
                failure = FetchError(f"Listing {kind.value} fetch aborted: {exc!r}")
                failure.__cause__ = exc
                self._record_failure(kind, cursor, filters, failure)
            raise

        if generation != state.generation:
            logger.debug(
                "Discarding stale %s page of %d listings from generation %d (current %d)",
                kind.value,
                len(page),
                generation,
                state.generation,
            )
            return

        self._apply_page(kind, page)
        state.phase = PaginationPhase.IDLE
        self._notify()

    def _record_failure(self, kind: RequestKind, cursor: str, filters: FilterParams, error: FetchError) -> None:
        state = self._state
        state.phase = PaginationPhase.ERROR
        state.last_error = error
        state.failed_request = FailedRequest(kind=kind, cursor=cursor, filters=filters)

    def _apply_page(self, kind: RequestKind, page: Page) -> None:
        state = self._state
        result = merge_page(page, state.seen_ids)
        state.apply_merge(result)

        if self._page_size and 0 < page.raw_count < self._page_size:
            logger.debug("Short page (%d of %d); not treated as end of catalog", page.raw_count, self._page_size)

        if page.is_empty:
            logger.info("Catalog returned no listings for %s request; feed exhausted", kind.value)
        elif result.exhausted:
            logger.info("All %d listings in page were already shown; feed exhausted", len(page))
        else:
            logger.info(
                "Added %d listings (page=%d, accumulated=%d, next cursor=%s)",
                len(result.added),
                len(page),
                len(state.collection),
                state.cursor,
            )

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
