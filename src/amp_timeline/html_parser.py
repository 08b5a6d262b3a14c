"""Locate and check ``<amp-timeline>`` elements in HTML documents."""

from __future__ import annotations

import logging
from typing import Iterable

from amp_timeline.component import TAG_NAME
from amp_timeline.config import AMP_TIMELINE_HTML_PARSER
from amp_timeline.exceptions import ParseError
from amp_timeline.layout import is_layout_size_defined
from amp_timeline.nodes import SoupNode
from amp_timeline.schemas import TimelineReport
from amp_timeline.validator import validate

try:
    from bs4 import BeautifulSoup, FeatureNotFound
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)


def parse_html(html: str) -> BeautifulSoup:
    """Parse an HTML document with the configured parser."""
    try:
        return BeautifulSoup(html, AMP_TIMELINE_HTML_PARSER)
    except FeatureNotFound as exc:
        raise ParseError(
            f"HTML parser {AMP_TIMELINE_HTML_PARSER!r} is not installed."
        ) from exc


def find_timelines(soup: BeautifulSoup) -> list[Tag]:
    """All ``<amp-timeline>`` elements, in document order."""
    return soup.find_all(TAG_NAME)


def check_timeline(
    element: Tag,
    *,
    index: int = 1,
    media_tags: Iterable[str] | None = None,
) -> TimelineReport:
    """Check one timeline element's layout and structure."""
    layout = element.get("layout")
    result = validate(SoupNode(element).real_children(), media_tags=media_tags)
    violation = result.violation

    return TimelineReport(
        index=index,
        layout=layout,
        layout_supported=is_layout_size_defined(layout),
        violation=violation.message if violation else None,
        rule=violation.rule if violation else None,
        item_index=violation.item_index if violation else None,
    )


def check_html(
    html: str,
    *,
    media_tags: Iterable[str] | None = None,
) -> list[TimelineReport]:
    """Check every timeline in an HTML document.

    Args:
        html: The document markup.
        media_tags: Tags accepted as a section image. Defaults to ``amp-img``.

    Returns:
        One report per timeline; empty when the document has none.
    """
    soup = parse_html(html)
    timelines = find_timelines(soup)
    logger.debug("Found %d timeline(s)", len(timelines))

    tags = tuple(media_tags) if media_tags is not None else None
    return [
        check_timeline(element, index=index, media_tags=tags)
        for index, element in enumerate(timelines, start=1)
    ]
