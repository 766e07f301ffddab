"""Shared fixtures for blogfront tests."""

from datetime import datetime

import httpx
import pytest


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset module-level singletons between tests."""
    yield

    # 1. Settings LRU cache
    from blogfront.config import get_settings

    get_settings.cache_clear()

    # 2. HTTP client singleton
    import blogfront.services.http_client as http_mod

    http_mod._client = None


@pytest.fixture
def mock_settings(monkeypatch):
    """Provide a Settings object with safe test defaults."""
    from blogfront.config import Settings, get_settings

    test_settings = Settings(
        wordpress_api_url="https://cms.test/graphql",
        app_url="https://app.test",
        posts_page_size=6,
        slug_batch_size=100,
        slug_max_pages=50,
        upstream_timeout=5.0,
    )

    get_settings.cache_clear()
    monkeypatch.setattr("blogfront.config.get_settings", lambda: test_settings)

    # Patch get_settings in all modules that import it directly
    for mod_path in [
        "blogfront.services.http_client",
        "blogfront.services.slugs",
        "blogfront.services.post_list",
        "blogfront.main",
    ]:
        monkeypatch.setattr(f"{mod_path}.get_settings", lambda: test_settings)

    return test_settings


def make_node(n: int, **overrides) -> dict:
    """A WPGraphQL post node as returned by POSTS_QUERY."""
    node = {
        "id": f"cG9zdDo{n}",
        "databaseId": n,
        "title": f"Post {n}",
        "slug": f"post-{n}",
        "date": datetime(2024, 1, n % 28 + 1, 9, 0).isoformat(),
        "excerpt": f"<p>Excerpt {n}</p>",
        "featuredImage": {"node": {"sourceUrl": f"https://cms.test/img/{n}.jpg"}},
        "categories": {"nodes": [{"name": "News"}]},
        "author": {"node": {"name": "Jane Writer"}},
    }
    node.update(overrides)
    return node


def posts_body(nodes: list[dict], end_cursor: str | None, has_next: bool) -> dict:
    """A GraphQL response body for the ``posts`` connection."""
    return {
        "data": {
            "posts": {
                "nodes": nodes,
                "pageInfo": {"hasNextPage": has_next, "endCursor": end_cursor},
            }
        }
    }


@pytest.fixture
def graphql_pages(monkeypatch):
    """Serve a fixed list of posts as a cursor-paginated GraphQL connection.

    Cursors are "c<offset>". Returns the list of request payloads so tests
    can assert on what was sent.
    """
    requests: list[dict] = []

    def install(nodes: list[dict]):
        async def mock_post(self, url, **kwargs):
            payload = kwargs["json"]
            requests.append(payload)
            first = payload["variables"]["first"]
            after = payload["variables"]["after"]
            start = int(after[1:]) if after else 0
            chunk = nodes[start : start + first]
            end = start + len(chunk)
            return httpx.Response(
                200,
                json=posts_body(chunk, f"c{end}" if chunk else after, end < len(nodes)),
            )

        monkeypatch.setattr(httpx.AsyncClient, "post", mock_post)
        return requests

    return install
