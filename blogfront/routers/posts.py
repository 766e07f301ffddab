"""Intermediary post endpoints consumed by the front-end."""

import logging

from fastapi import APIRouter, HTTPException, Query

from blogfront.models.post import PageResult, Post
from blogfront.services import wordpress
from blogfront.services.errors import ConfigurationError, UpstreamError
from blogfront.services.resolver import resolve_by_slug
from blogfront.services.slugs import enumerate_all_slugs

logger = logging.getLogger(__name__)

router = APIRouter(tags=["posts"])


def _failure(exc: Exception, detail: str) -> HTTPException:
    if isinstance(exc, ConfigurationError):
        logger.error("%s: %s", detail, exc)
        return HTTPException(status_code=500, detail="Upstream source is not configured")
    logger.warning("%s: %s", detail, exc)
    return HTTPException(status_code=502, detail=detail)


@router.get("/get-all-posts", response_model=PageResult)
async def get_all_posts(
    first: int = Query(
        default=6,
        ge=1,
        le=100,
        description="Maximum number of posts to return",
    ),
    after: str | None = Query(
        default=None,
        description="endCursor of the previous page",
    ),
):
    """Get one page of posts as ``{items, endCursor, hasNextPage}``."""
    try:
        return await wordpress.fetch_page(first, after)
    except (UpstreamError, ConfigurationError) as exc:
        raise _failure(exc, "Failed to fetch posts") from exc


@router.get("/get-post-by-slug", response_model=Post)
async def get_post_by_slug(
    slug: str = Query(..., min_length=1, max_length=200),
):
    """Get a single post with full content by its slug."""
    try:
        post = await resolve_by_slug(slug)
    except (UpstreamError, ConfigurationError) as exc:
        raise _failure(exc, "Failed to fetch post") from exc
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


@router.get("/get-all-post-slugs", response_model=list[str])
async def get_all_post_slugs():
    """Get every post slug, for static path generation."""
    try:
        return await enumerate_all_slugs()
    except (UpstreamError, ConfigurationError) as exc:
        raise _failure(exc, "Failed to fetch post slugs") from exc
