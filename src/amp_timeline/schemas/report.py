"""Per-timeline check report model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TimelineReport(BaseModel):
    """Outcome of checking one ``<amp-timeline>`` element in a document."""

    index: int = Field(..., ge=1)
    layout: str | None = None
    layout_supported: bool
    violation: str | None = None
    rule: str | None = None
    item_index: int | None = None

    @property
    def ok(self) -> bool:
        return self.layout_supported and self.violation is None
