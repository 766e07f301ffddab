"""Session-scoped "load more" store for paginated posts.

One store belongs to one browsing session and is passed explicitly to
whatever renders it; there is no module-level instance. State only changes
through ``seed``, ``append_next_page`` and ``reset``, and every change is
published to subscribers as a single immutable ``PaginationState`` snapshot.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, replace

from blogfront.models.post import PageResult, Post
from blogfront.services.errors import UpstreamError, UpstreamUnavailable

logger = logging.getLogger(__name__)

FetchPage = Callable[[int, str | None], Awaitable[PageResult]]
Listener = Callable[["PaginationState"], None]


@dataclass(frozen=True)
class PaginationState:
    """Snapshot of the store. ``items`` is in page arrival order."""

    items: tuple[Post, ...] = ()
    end_cursor: str | None = None
    has_next_page: bool = True
    is_loading: bool = False


class PaginationStore:
    """Accumulates pages of posts fetched one at a time.

    Usage::

        store = PaginationStore(wordpress.fetch_page, page_size=6)
        store.seed(await wordpress.fetch_page(6, None))
        await store.append_next_page()
    """

    def __init__(
        self,
        fetch_page: FetchPage,
        page_size: int,
        *,
        timeout: float | None = None,
    ) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be a positive integer, got {page_size!r}")
        self._fetch_page = fetch_page
        self._page_size = page_size
        self._timeout = timeout
        self._state = PaginationState()
        self._listeners: list[Listener] = []
        # Bumped by seed/reset so a page requested before them is dropped
        self._epoch = 0
        self.last_error: UpstreamError | None = None

    @property
    def state(self) -> PaginationState:
        return self._state

    @property
    def items(self) -> tuple[Post, ...]:
        return self._state.items

    @property
    def end_cursor(self) -> str | None:
        return self._state.end_cursor

    @property
    def has_next_page(self) -> bool:
        return self._state.has_next_page

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* for every state change; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _transition(self, state: PaginationState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Pagination listener %r failed", listener)

    def seed(self, page: PageResult) -> None:
        """Replace the whole state with a first page (not an append)."""
        self._epoch += 1
        self.last_error = None
        self._transition(
            PaginationState(
                items=tuple(page.items),
                end_cursor=page.end_cursor,
                has_next_page=page.has_next_page,
                is_loading=False,
            )
        )

    def reset(self) -> None:
        """Return to the empty starting state."""
        self._epoch += 1
        self.last_error = None
        self._transition(PaginationState())

    async def _fetch(self, cursor: str | None) -> PageResult:
        if self._timeout is None:
            return await self._fetch_page(self._page_size, cursor)
        try:
            return await asyncio.wait_for(
                self._fetch_page(self._page_size, cursor), self._timeout
            )
        except asyncio.TimeoutError as exc:
            raise UpstreamUnavailable(
                f"Page fetch timed out after {self._timeout}s"
            ) from exc

    async def append_next_page(self) -> bool:
        """Fetch the page after ``end_cursor`` and append its items.

        Ignored (returns False) when no next page exists or a fetch is
        already in flight. An upstream failure is logged, recorded in
        ``last_error`` and leaves items/cursor/has_next_page untouched.

        Returns:
            True if a page was appended.
        """
        if self._state.is_loading or not self._state.has_next_page:
            return False

        # Mark loading before the first await so a concurrent caller backs off
        epoch = self._epoch
        cursor = self._state.end_cursor
        self._transition(replace(self._state, is_loading=True))

        page: PageResult | None = None
        try:
            page = await self._fetch(cursor)
        except UpstreamError as exc:
            logger.warning("Error fetching next page after %s: %s", cursor, exc)
            if epoch == self._epoch:
                self.last_error = exc
            return False
        finally:
            if page is None and epoch == self._epoch:
                self._transition(replace(self._state, is_loading=False))

        if epoch != self._epoch:
            logger.info("Dropping page fetched after %s: store was reset", cursor)
            return False

        self.last_error = None
        self._transition(
            PaginationState(
                items=self._state.items + tuple(page.items),
                end_cursor=page.end_cursor,
                has_next_page=page.has_next_page,
                is_loading=False,
            )
        )
        return True
