"""Failure taxonomy for talking to the upstream post source.

Not-found is never an exception here: point lookups return ``None``.
"""

from typing import Any


class UpstreamError(Exception):
    """Base class for every failure caused by the upstream post source."""


class UpstreamUnavailable(UpstreamError):
    """The transport call did not complete or returned a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponse(UpstreamError):
    """The response could not be parsed into the expected shape."""


class GraphQLReportedError(UpstreamError):
    """The upstream answered with a success status but a non-empty ``errors`` array."""

    def __init__(self, errors: list[Any]) -> None:
        messages = [
            e.get("message", str(e)) if isinstance(e, dict) else str(e)
            for e in errors
        ]
        super().__init__("GraphQL errors: " + "; ".join(messages))
        self.errors = errors


class PaginationProtocolViolation(UpstreamError):
    """The upstream broke the cursor contract (stalled cursor or endless pages)."""


class ConfigurationError(Exception):
    """A required setting was missing when it was first needed."""
