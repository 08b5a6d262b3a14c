"""Format timeline check reports as text."""

from __future__ import annotations

from typing import Iterable

from amp_timeline.schemas import TimelineReport


def format_reports(source: str, reports: Iterable[TimelineReport]) -> str:
    """Render one line per timeline followed by a summary line."""
    reports = list(reports)
    if not reports:
        return f"{source}: no <amp-timeline> elements found"

    lines = [f"{source}:"]
    for report in reports:
        lines.extend(_format_report(report))

    failed = sum(1 for report in reports if not report.ok)
    lines.append(f"{len(reports)} timeline(s) checked, {failed} failed")
    return "\n".join(lines)


def _format_report(report: TimelineReport) -> list[str]:
    status = "OK" if report.ok else "FAIL"
    lines = [f"  timeline #{report.index}: {status}"]
    if not report.layout_supported:
        layout = report.layout or "(none)"
        lines.append(
            f"    layout {layout!r} is not supported; use a size-defined layout"
        )
    if report.violation:
        lines.append(f"    {report.violation}")
    return lines
