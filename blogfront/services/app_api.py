"""Client for this app's own ``/api`` endpoints.

Same contracts as the GraphQL fetch client and resolver, but routed through
the intermediary HTTP surface (``routers/posts.py``) on ``settings.app_url``.
Used by session-side code that should not talk to WordPress directly.
"""

import logging

from pydantic import ValidationError

from blogfront.models.post import PageResult, Post
from blogfront.services.errors import MalformedResponse, UpstreamUnavailable
from blogfront.services.http_client import app_api_get

logger = logging.getLogger(__name__)


def _json(resp, context: str):
    try:
        return resp.json()
    except ValueError as exc:
        raise MalformedResponse(f"{context}: response is not valid JSON") from exc


async def fetch_page(page_size: int, cursor: str | None = None) -> PageResult:
    """Fetch one page of posts from ``GET /api/get-all-posts``."""
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        raise ValueError(f"page_size must be a positive integer, got {page_size!r}")

    params = {"first": str(page_size)}
    if cursor:
        params["after"] = cursor

    resp = await app_api_get("/api/get-all-posts", params, context="get-all-posts")
    if not resp.is_success:
        raise UpstreamUnavailable(
            f"get-all-posts returned {resp.status_code}", status_code=resp.status_code
        )
    try:
        return PageResult.model_validate(_json(resp, "get-all-posts"))
    except ValidationError as exc:
        raise MalformedResponse(f"get-all-posts: unexpected shape: {exc}") from exc


async def fetch_post_by_slug(slug: str) -> Post | None:
    """Fetch one post from ``GET /api/get-post-by-slug``; None when not found."""
    if not slug or not slug.strip():
        raise ValueError("slug must be a non-empty string")

    resp = await app_api_get(
        "/api/get-post-by-slug", {"slug": slug}, context="get-post-by-slug"
    )
    if resp.status_code == 404:
        logger.info("No post found for slug %s", slug)
        return None
    if not resp.is_success:
        raise UpstreamUnavailable(
            f"get-post-by-slug returned {resp.status_code}",
            status_code=resp.status_code,
        )

    data = _json(resp, "get-post-by-slug")
    if not isinstance(data, dict) or not data.get("id"):
        logger.info("No post found for slug %s", slug)
        return None
    try:
        return Post.model_validate(data)
    except ValidationError as exc:
        raise MalformedResponse(f"get-post-by-slug: unexpected shape: {exc}") from exc


async def fetch_all_slugs() -> list[str]:
    """Fetch every post slug from ``GET /api/get-all-post-slugs``."""
    resp = await app_api_get("/api/get-all-post-slugs", context="get-all-post-slugs")
    if not resp.is_success:
        logger.error("Error fetching post slugs: %d", resp.status_code)
        raise UpstreamUnavailable(
            f"get-all-post-slugs returned {resp.status_code}",
            status_code=resp.status_code,
        )

    data = _json(resp, "get-all-post-slugs")
    if not isinstance(data, list) or not all(isinstance(s, str) for s in data):
        raise MalformedResponse("get-all-post-slugs: expected a JSON array of strings")
    return data
