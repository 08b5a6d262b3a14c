"""amp_timeline: structural checks for amp-timeline markup."""

from amp_timeline.component import AmpTimeline
from amp_timeline.exceptions import (
    AmpTimelineError,
    DocumentNotFoundError,
    FetchError,
    ParseError,
    RateLimitError,
    SchemaViolation,
)
from amp_timeline.html_parser import check_html, find_timelines, parse_html
from amp_timeline.layout import Layout, is_layout_size_defined, parse_layout
from amp_timeline.nodes import SoupNode, TreeNode
from amp_timeline.schemas import ElementExpectation, ElementNode, TimelineReport
from amp_timeline.validator import (
    ValidationResult,
    assert_valid,
    iter_violations,
    validate,
)

__all__ = [
    "AmpTimeline",
    "AmpTimelineError",
    "DocumentNotFoundError",
    "ElementExpectation",
    "ElementNode",
    "FetchError",
    "Layout",
    "ParseError",
    "RateLimitError",
    "SchemaViolation",
    "SoupNode",
    "TimelineReport",
    "TreeNode",
    "ValidationResult",
    "assert_valid",
    "check_html",
    "find_timelines",
    "is_layout_size_defined",
    "iter_violations",
    "parse_html",
    "parse_layout",
    "validate",
]
