"""Shared schemas for amp_timeline."""

from amp_timeline.schemas.expectation import ElementExpectation
from amp_timeline.schemas.report import TimelineReport
from amp_timeline.schemas.tree import ElementNode

__all__ = ["ElementExpectation", "ElementNode", "TimelineReport"]
