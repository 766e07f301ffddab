"""Shared HTTP client utilities — reusable httpx client and the GraphQL envelope."""

import logging
from typing import Any

import httpx

from blogfront.config import get_settings
from blogfront.services.errors import (
    ConfigurationError,
    GraphQLReportedError,
    MalformedResponse,
    UpstreamUnavailable,
)

logger = logging.getLogger(__name__)

# Module-level shared client (created lazily, lives for the process lifetime)
_client: httpx.AsyncClient | None = None


def get_shared_client() -> httpx.AsyncClient:
    """Return a shared httpx.AsyncClient, creating it on first call."""
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(timeout=get_settings().upstream_timeout)
    return _client


async def close_shared_client() -> None:
    """Close the shared client if one was created."""
    global _client
    if _client is not None and not _client.is_closed:
        await _client.aclose()
    _client = None


def _suffix(context: str) -> str:
    return f" ({context})" if context else ""


async def graphql_request(
    query: str,
    variables: dict[str, Any],
    *,
    context: str = "",
) -> dict[str, Any]:
    """POST a GraphQL document to the WordPress endpoint and return ``data``.

    Exactly one network call per invocation; no retries.

    Raises:
        ConfigurationError: ``wordpress_api_url`` is not set.
        UpstreamUnavailable: transport failure or non-2xx status.
        GraphQLReportedError: the body carries a non-empty ``errors`` array.
        MalformedResponse: the body is not JSON or has no ``data`` object.
    """
    url = get_settings().wordpress_api_url
    if not url:
        raise ConfigurationError("wordpress_api_url is not configured")

    client = get_shared_client()
    try:
        resp = await client.post(
            url,
            json={"query": query, "variables": variables},
            headers={"Content-Type": "application/json"},
        )
    except httpx.HTTPError as exc:
        logger.warning("GraphQL transport error for %s%s: %s", url, _suffix(context), exc)
        raise UpstreamUnavailable(f"GraphQL request failed: {exc}") from exc

    if not resp.is_success:
        logger.warning("GraphQL %d for %s%s", resp.status_code, url, _suffix(context))
        raise UpstreamUnavailable(
            f"GraphQL endpoint returned {resp.status_code}",
            status_code=resp.status_code,
        )

    try:
        body = resp.json()
    except ValueError as exc:
        raise MalformedResponse("GraphQL response is not valid JSON") from exc
    if not isinstance(body, dict):
        raise MalformedResponse("GraphQL response is not a JSON object")

    errors = body.get("errors")
    if errors:
        logger.warning("GraphQL errors for %s%s: %s", url, _suffix(context), errors)
        raise GraphQLReportedError(errors if isinstance(errors, list) else [errors])

    data = body.get("data")
    if not isinstance(data, dict):
        raise MalformedResponse("GraphQL response has no data object")
    return data


async def app_api_get(
    path: str,
    params: dict[str, str] | None = None,
    *,
    context: str = "",
) -> httpx.Response:
    """GET one of this app's own ``/api`` endpoints.

    Status handling is left to the caller (a 404 is a valid outcome for
    point lookups); only transport failures are raised here.
    """
    base_url = get_settings().app_url
    if not base_url:
        raise ConfigurationError("app_url is not configured")

    url = f"{base_url.rstrip('/')}{path}"
    client = get_shared_client()
    try:
        return await client.get(url, params=params)
    except httpx.HTTPError as exc:
        logger.warning("App API transport error for %s%s: %s", url, _suffix(context), exc)
        raise UpstreamUnavailable(f"App API request failed: {exc}") from exc
