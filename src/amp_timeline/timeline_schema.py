"""Expected structure of an ``<amp-timeline>`` element."""

from __future__ import annotations

from typing import Final

from amp_timeline.schemas import ElementExpectation

DEFAULT_MEDIA_TAGS: Final[tuple[str, ...]] = ("amp-img",)
SIDE_CLASSES: Final[tuple[str, ...]] = ("left", "right")
CARD_SIZE: Final[int] = 3

SECTION = ElementExpectation(
    role="section",
    tags=("section",),
    message="The first element in a timeline should be a <section> tag",
)

# Section children
HEADING = ElementExpectation(
    role="heading",
    tags=("h1",),
    css_class="heading",
    position=0,
    message="The first element in a timeline section should be a <h1> tag with class heading",
)
IMAGE = ElementExpectation(
    role="image",
    tags=DEFAULT_MEDIA_TAGS,
    position=1,
    message="The second element in a timeline section should be an image",
)
LIST = ElementExpectation(
    role="list",
    tags=("ul",),
    css_class="timeline",
    position=2,
    message="The third element in a timeline section should be a <ul> list container with class timeline",
)

# List items
ITEM = ElementExpectation(
    role="item",
    tags=("li",),
    css_class="item",
    message="Each item in the timeline must be a <li> tag with class item. Item number: {item}",
)
CARD = ElementExpectation(
    role="card",
    tags=("div",),
    css_class="card",
    position=0,
    message="Each item in the timeline must contain a <div> tag with class card. Item number: {item}",
)

# Card children, in order
CARD_HEADER = ElementExpectation(
    role="card-header",
    tags=("div",),
    css_class="content",
    position=0,
    message="Each card header must be defined by a <div> tag with class content. Item number: {item}",
)
CARD_MEDIA = ElementExpectation(
    role="card-media",
    tags=("div",),
    css_class="media",
    position=1,
    message="Each card media must be defined by a <div> tag with class media. Item number: {item}",
)
CARD_DESCRIPTION = ElementExpectation(
    role="card-description",
    tags=("div",),
    css_class="content",
    position=2,
    message=(
        "Each card description container must be defined by a <div> tag "
        "with class content. Item number: {item}"
    ),
)
CARD_PARTS: Final[tuple[ElementExpectation, ...]] = (CARD_HEADER, CARD_MEDIA, CARD_DESCRIPTION)

# Rules that are not about a single element's tag and class
NO_SECTIONS_MESSAGE = SECTION.message
NO_ITEMS_MESSAGE = "The timeline must contain at least one item"
SIDE_MESSAGE = "Each item in the timeline must have either a left or right class. Item number: {item}"
SINGLE_CARD_MESSAGE = (
    "Each item in the timeline must contain only one child card element. Item number: {item}"
)
CARD_SIZE_MESSAGE = (
    "Each card must contain exactly three elements: header, media and "
    "description container. Item number: {item}"
)
