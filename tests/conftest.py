"""Test setup for amp_timeline."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from amp_timeline.schemas import ElementNode  # noqa: E402

VALID_TIMELINE_HTML = """<!doctype html>
<html>
<body>
<amp-timeline layout="responsive" width="400" height="300">
  <section>
    <h1 class="heading">2016</h1>
    <amp-img src="cover.jpg" width="400" height="200"></amp-img>
    <ul class="timeline">
      <li class="item left">
        <div class="card">
          <div class="content"><h2>January</h2></div>
          <div class="media"><amp-img src="jan.jpg" width="40" height="40"></amp-img></div>
          <div class="content"><span>Launch</span></div>
        </div>
      </li>
    </ul>
  </section>
</amp-timeline>
</body>
</html>
"""


def element(tag: str, *classes: str, children: list[ElementNode] | None = None) -> ElementNode:
    return ElementNode(tag_name=tag, classes=list(classes), children=children or [])


def card(*parts: ElementNode) -> ElementNode:
    if not parts:
        parts = (
            element("div", "content"),
            element("div", "media"),
            element("div", "content"),
        )
    return element("div", "card", children=list(parts))


def item(*classes: str, children: list[ElementNode] | None = None) -> ElementNode:
    return element("li", *(classes or ("item", "left")), children=[card()] if children is None else children)


def section(*items: ElementNode) -> ElementNode:
    return element(
        "section",
        children=[
            element("h1", "heading"),
            element("amp-img"),
            element("ul", "timeline", children=list(items) or [item()]),
        ],
    )


@pytest.fixture
def make_element() -> Callable[..., ElementNode]:
    return element


@pytest.fixture
def make_card() -> Callable[..., ElementNode]:
    return card


@pytest.fixture
def make_item() -> Callable[..., ElementNode]:
    return item


@pytest.fixture
def make_section() -> Callable[..., ElementNode]:
    return section


@pytest.fixture
def valid_sections() -> list[ElementNode]:
    """Minimal valid timeline: one section holding one left item."""
    return [section()]


@pytest.fixture
def valid_html() -> str:
    return VALID_TIMELINE_HTML
