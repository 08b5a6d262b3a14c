"""Command-line entry point: check timelines in files or URLs."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Sequence

from amp_timeline.config import AMP_TIMELINE_LOG_LEVEL
from amp_timeline.exceptions import AmpTimelineError
from amp_timeline.fetch import load_document
from amp_timeline.html_parser import check_html
from amp_timeline.output_formatter import format_reports

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_LOAD_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="amp-timeline-check",
        description="Check the structure of <amp-timeline> elements in HTML documents.",
    )
    parser.add_argument("sources", nargs="+", metavar="SOURCE", help="HTML file path or http(s) URL")
    parser.add_argument(
        "--media-tag",
        action="append",
        dest="media_tags",
        metavar="TAG",
        help="Tag accepted as a section image (repeatable, default: amp-img)",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print failing sources")
    parser.add_argument("--log-level", default=AMP_TIMELINE_LOG_LEVEL, help="Logging level")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(_run(args.sources, media_tags=args.media_tags, quiet=args.quiet))


async def _run(
    sources: Sequence[str],
    *,
    media_tags: Sequence[str] | None,
    quiet: bool,
) -> int:
    exit_code = EXIT_OK
    for source in sources:
        try:
            html = await load_document(source)
            reports = check_html(html, media_tags=media_tags)
        except AmpTimelineError as exc:
            logger.debug("Could not check %s", source, exc_info=True)
            print(f"{source}: error: {exc}", file=sys.stderr)
            exit_code = EXIT_LOAD_ERROR
            continue

        passed = bool(reports) and all(report.ok for report in reports)
        if not passed and exit_code == EXIT_OK:
            exit_code = EXIT_INVALID
        if passed and quiet:
            continue
        print(format_reports(source, reports))
    return exit_code
