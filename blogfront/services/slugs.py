"""Enumerate every post slug for static path generation.

Drives the GraphQL fetch client page by page with a slug-only projection.
The result is all-or-nothing: the first failing page aborts the walk and no
partial list is returned.
"""

import logging

from blogfront.config import get_settings
from blogfront.services.errors import MalformedResponse, PaginationProtocolViolation
from blogfront.services.queries import POST_SLUGS_QUERY
from blogfront.services.wordpress import fetch_connection

logger = logging.getLogger(__name__)


async def enumerate_all_slugs(
    batch_size: int | None = None,
    max_pages: int | None = None,
) -> list[str]:
    """Return the slugs of all posts in upstream order.

    Args:
        batch_size: Posts requested per page (defaults to ``slug_batch_size``).
        max_pages: Abort after this many pages (defaults to ``slug_max_pages``).

    Raises:
        PaginationProtocolViolation: the upstream claims more pages but the
            cursor does not advance, or *max_pages* is exceeded.
        UpstreamUnavailable, GraphQLReportedError, MalformedResponse: the
            first failing page, unchanged.
    """
    settings = get_settings()
    if batch_size is None:
        batch_size = settings.slug_batch_size
    if max_pages is None:
        max_pages = settings.slug_max_pages
    if max_pages < 1:
        raise ValueError(f"max_pages must be a positive integer, got {max_pages!r}")

    slugs: list[str] = []
    cursor: str | None = None
    has_next_page = True
    pages = 0

    while has_next_page:
        if pages >= max_pages:
            raise PaginationProtocolViolation(
                f"Slug enumeration exceeded {max_pages} pages"
            )
        connection = await fetch_connection(POST_SLUGS_QUERY, batch_size, cursor)
        pages += 1

        for node in connection.nodes:
            slug = node.get("slug")
            if not isinstance(slug, str):
                raise MalformedResponse(f"Post node without a slug: {node!r}")
            slugs.append(slug)

        if connection.has_next_page and (
            connection.end_cursor is None or connection.end_cursor == cursor
        ):
            raise PaginationProtocolViolation(
                f"Cursor did not advance after page {pages} (cursor={cursor!r})"
            )

        cursor = connection.end_cursor
        has_next_page = connection.has_next_page

    logger.info("Enumerated %d post slugs in %d pages", len(slugs), pages)
    return slugs
