"""Custom exceptions for amp_timeline."""

from __future__ import annotations

from typing import Any


class AmpTimelineError(Exception):
    """Base exception for amp_timeline operations."""


class SchemaViolation(AmpTimelineError):
    """Timeline markup does not match the expected structure.

    Attributes:
        message: Human-readable description of the violated rule.
        node: The offending node (the parent when a required child is missing).
        rule: Short identifier of the rule that failed.
        item_index: 1-based index of the timeline item, when applicable.
    """

    def __init__(
        self,
        message: str,
        node: Any = None,
        *,
        rule: str | None = None,
        item_index: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.node = node
        self.rule = rule
        self.item_index = item_index


class ParseError(AmpTimelineError):
    """Error during HTML parsing."""


class FetchError(AmpTimelineError):
    """Error during document loading."""


class DocumentNotFoundError(FetchError):
    """Document does not exist at the given URL or path."""


class RateLimitError(FetchError):
    """Remote server kept rate limiting the request."""
