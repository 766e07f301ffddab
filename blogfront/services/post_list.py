"""Post list view — renders a pagination store and drives "load more"."""

import logging

from blogfront.config import get_settings
from blogfront.models.post import Post
from blogfront.services import wordpress
from blogfront.services.pagination_store import (
    FetchPage,
    PaginationState,
    PaginationStore,
)

logger = logging.getLogger(__name__)


def render_post(post: Post) -> str:
    """One line per post: date, author, title and its page path."""
    author = post.author.name if post.author else "Unknown"
    return f"{post.date:%Y-%m-%d}  {post.title} by {author}  /blog/{post.slug}"


class PostListView:
    """Keeps a rendered copy of the store's items in sync with the store."""

    def __init__(self, store: PaginationStore) -> None:
        self.store = store
        self.lines: list[str] = []
        self._unsubscribe = store.subscribe(self._on_change)
        self._on_change(store.state)

    def _on_change(self, state: PaginationState) -> None:
        self.lines = [render_post(post) for post in state.items]

    @property
    def show_load_more(self) -> bool:
        state = self.store.state
        return state.has_next_page and not state.is_loading

    async def load_more(self) -> bool:
        """Append the next page if there is one. Returns True if items were added."""
        if not self.store.has_next_page:
            return False
        return await self.store.append_next_page()

    def render(self) -> str:
        if not self.lines:
            return "No posts yet."
        return "\n".join(self.lines)

    def close(self) -> None:
        self._unsubscribe()


async def open_post_list(
    fetch_page: FetchPage | None = None,
    page_size: int | None = None,
    *,
    timeout: float | None = None,
) -> PostListView:
    """Bootstrap a session: fetch the first page, seed a new store, bind a view.

    Seeding happens exactly once here; a failure of this first fetch
    propagates to the caller.
    """
    fetch_page = fetch_page or wordpress.fetch_page
    if page_size is None:
        page_size = get_settings().posts_page_size

    # Rejects a non-positive page size before any fetch
    store = PaginationStore(fetch_page, page_size, timeout=timeout)
    first_page = await fetch_page(page_size, None)
    store.seed(first_page)
    logger.info(
        "Post list opened with %d posts (has_next=%s)",
        len(first_page.items),
        first_page.has_next_page,
    )
    return PostListView(store)
