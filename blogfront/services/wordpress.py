"""Post fetch client for the upstream WordPress GraphQL source.

Every call is one request for one page; callers own any looping, caching or
retrying.
"""

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from blogfront.models.post import PageResult, Post
from blogfront.services.errors import MalformedResponse
from blogfront.services.http_client import graphql_request
from blogfront.services.queries import POSTS_QUERY

logger = logging.getLogger(__name__)


@dataclass
class Connection:
    """Raw nodes of one ``posts`` connection page, before projection."""

    nodes: list[dict[str, Any]]
    end_cursor: str | None
    has_next_page: bool


def _check_page_size(page_size: int) -> None:
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        raise ValueError(f"page_size must be a positive integer, got {page_size!r}")


def _parse_connection(data: dict[str, Any]) -> Connection:
    posts = data.get("posts")
    if not isinstance(posts, dict):
        raise MalformedResponse("Response is missing data.posts")

    nodes = posts.get("nodes")
    page_info = posts.get("pageInfo")
    if not isinstance(nodes, list) or not isinstance(page_info, dict):
        raise MalformedResponse("Response is missing posts.nodes or posts.pageInfo")

    has_next_page = page_info.get("hasNextPage")
    if not isinstance(has_next_page, bool):
        raise MalformedResponse("pageInfo.hasNextPage is missing or not a boolean")

    end_cursor = page_info.get("endCursor")
    if end_cursor is not None and not isinstance(end_cursor, str):
        raise MalformedResponse("pageInfo.endCursor is not a string")

    if not all(isinstance(node, dict) for node in nodes):
        raise MalformedResponse("posts.nodes contains a non-object entry")

    return Connection(nodes=nodes, end_cursor=end_cursor, has_next_page=has_next_page)


async def fetch_connection(
    query: str, page_size: int, cursor: str | None = None
) -> Connection:
    """Fetch one page of the ``posts`` connection using *query*'s projection."""
    _check_page_size(page_size)
    data = await graphql_request(
        query,
        {"first": page_size, "after": cursor},
        context=f"posts first={page_size} after={cursor}",
    )
    return _parse_connection(data)


async def fetch_page(page_size: int, cursor: str | None = None) -> PageResult:
    """Fetch one page of posts.

    Args:
        page_size: Requested number of posts. The upstream may cap it.
        cursor: ``endCursor`` of the previous page, or None for the first page.

    Raises:
        ValueError: *page_size* is not a positive integer.
        UpstreamUnavailable, GraphQLReportedError, MalformedResponse: see
            ``graphql_request``. Nodes that do not validate as ``Post`` are
            reported as ``MalformedResponse``.
    """
    connection = await fetch_connection(POSTS_QUERY, page_size, cursor)
    try:
        items = [Post.model_validate(node) for node in connection.nodes]
    except ValidationError as exc:
        raise MalformedResponse(f"Post node failed validation: {exc}") from exc

    logger.debug(
        "Fetched %d posts (after=%s, has_next=%s)",
        len(items),
        cursor,
        connection.has_next_page,
    )
    return PageResult(
        items=items,
        end_cursor=connection.end_cursor,
        has_next_page=connection.has_next_page,
    )
