"""Single post lookup by slug — a cursor-free point query."""

import logging

from pydantic import ValidationError

from blogfront.models.post import Post
from blogfront.services.errors import MalformedResponse
from blogfront.services.http_client import graphql_request
from blogfront.services.queries import POST_BY_SLUG_QUERY

logger = logging.getLogger(__name__)


async def resolve_by_slug(slug: str) -> Post | None:
    """Resolve one post's full detail, or return None if no post has *slug*.

    Not-found is a normal outcome; upstream failures propagate unchanged.
    """
    if not slug or not slug.strip():
        raise ValueError("slug must be a non-empty string")

    data = await graphql_request(
        POST_BY_SLUG_QUERY, {"slug": slug}, context=f"post slug={slug}"
    )
    if "post" not in data:
        raise MalformedResponse("Response is missing data.post")

    node = data["post"]
    if node is None:
        logger.info("No post found for slug %s", slug)
        return None
    try:
        return Post.model_validate(node)
    except ValidationError as exc:
        raise MalformedResponse(f"Post {slug} failed validation: {exc}") from exc
