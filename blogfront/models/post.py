"""Post data models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Author(BaseModel):
    """Post author."""

    name: str
    description: str | None = None


class Post(BaseModel):
    """A blog post as exposed by the upstream source.

    ``excerpt`` is present on listing pages, ``content`` only on point lookups.
    """

    id: str
    database_id: int | None = None
    slug: str
    title: str
    date: datetime
    excerpt: str | None = None
    content: str | None = None
    featured_image_url: str | None = None
    categories: list[str] = []
    author: Author | None = None

    @model_validator(mode="before")
    @classmethod
    def _flatten_graphql_node(cls, data: Any) -> Any:
        """Accept the raw WPGraphQL node shape as well as flat data."""
        if not isinstance(data, dict):
            return data
        data = dict(data)

        if "databaseId" in data and "database_id" not in data:
            data["database_id"] = data.pop("databaseId")

        # featuredImage: {node: {sourceUrl}}
        if "featuredImage" in data and "featured_image_url" not in data:
            image = data.pop("featuredImage") or {}
            if not isinstance(image, dict):
                raise ValueError("featuredImage must be an object")
            node = image.get("node") or {}
            if not isinstance(node, dict):
                raise ValueError("featuredImage.node must be an object")
            data["featured_image_url"] = node.get("sourceUrl")

        # categories: {nodes: [{name}]}
        categories = data.get("categories")
        if isinstance(categories, dict):
            nodes = categories.get("nodes") or []
            if not isinstance(nodes, list) or not all(
                isinstance(c, dict) for c in nodes
            ):
                raise ValueError("categories.nodes must be a list of objects")
            data["categories"] = [c["name"] for c in nodes if c.get("name")]

        # author: {node: {name, description}}
        author = data.get("author")
        if isinstance(author, dict) and "node" in author:
            data["author"] = author["node"]

        return data


class PageResult(BaseModel):
    """One page of posts plus the cursor needed to continue.

    Serialized as ``{items, endCursor, hasNextPage}``. When ``has_next_page``
    is false, ``end_cursor`` must not be replayed.
    """

    model_config = ConfigDict(populate_by_name=True)

    items: list[Post]
    end_cursor: str | None = Field(default=None, alias="endCursor")
    has_next_page: bool = Field(alias="hasNextPage")
