"""Structural validation of timeline markup."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from amp_timeline.config import AMP_TIMELINE_DOCS_URL
from amp_timeline.exceptions import SchemaViolation
from amp_timeline.nodes import TreeNode, describe_node
from amp_timeline.schemas import ElementExpectation
from amp_timeline.timeline_schema import (
    CARD,
    CARD_PARTS,
    CARD_SIZE,
    CARD_SIZE_MESSAGE,
    HEADING,
    IMAGE,
    ITEM,
    LIST,
    NO_ITEMS_MESSAGE,
    NO_SECTIONS_MESSAGE,
    SECTION,
    SIDE_CLASSES,
    SIDE_MESSAGE,
    SINGLE_CARD_MESSAGE,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation pass: ok, or the first violation found."""

    violation: SchemaViolation | None = None

    @property
    def ok(self) -> bool:
        return self.violation is None

    def raise_for_violation(self) -> None:
        """Raise the stored violation, if any."""
        if self.violation is not None:
            raise self.violation


def validate(
    root_children: Sequence[TreeNode],
    *,
    media_tags: Iterable[str] | None = None,
) -> ValidationResult:
    """Check the children of a timeline against the expected structure.

    The walk is depth-first, left to right, and stops at the first violation.

    Args:
        root_children: Direct children of the timeline element (its sections).
        media_tags: Tags accepted as the section image. Defaults to ``amp-img``.

    Returns:
        A result that is ok, or carries the first ``SchemaViolation``.
    """
    violation = next(iter_violations(root_children, media_tags=media_tags), None)
    if violation is not None:
        logger.debug("Timeline validation failed: %s", violation.message)
    return ValidationResult(violation=violation)


def assert_valid(
    root_children: Sequence[TreeNode],
    *,
    media_tags: Iterable[str] | None = None,
) -> None:
    """Like ``validate`` but raises ``SchemaViolation`` on the first mismatch."""
    validate(root_children, media_tags=media_tags).raise_for_violation()


def iter_violations(
    root_children: Sequence[TreeNode],
    *,
    media_tags: Iterable[str] | None = None,
) -> Iterator[SchemaViolation]:
    """Lazily yield every violation, in the order ``validate`` would find them.

    A node that fails its own rule is not descended into.
    """
    image = IMAGE if media_tags is None else IMAGE.with_tags(tuple(media_tags))
    if not root_children:
        yield _violation(NO_SECTIONS_MESSAGE, None, rule=SECTION.role)
        return
    for section in root_children:
        yield from _check_section(section, image)


def _check_section(section: TreeNode, image: ElementExpectation) -> Iterator[SchemaViolation]:
    if not SECTION.matches(section):
        yield _mismatch(SECTION, section)
        return

    parts = section.children
    for expectation in (HEADING, image):
        node = _child_at(parts, expectation.position)
        if node is None:
            # A missing child ends the section.
            yield _mismatch(expectation, None, parent=section)
            return
        if not expectation.matches(node):
            yield _mismatch(expectation, node)

    timeline = _child_at(parts, LIST.position)
    if timeline is None or not LIST.matches(timeline):
        yield _mismatch(LIST, timeline, parent=section)
        return

    items = timeline.children
    if not items:
        yield _violation(NO_ITEMS_MESSAGE, timeline, rule="items")
        return
    for index, item in enumerate(items, start=1):
        yield from _check_item(item, index)


def _check_item(item: TreeNode, index: int) -> Iterator[SchemaViolation]:
    if not ITEM.matches(item):
        yield _mismatch(ITEM, item, item_index=index)
        return

    # Both sides present is accepted.
    if not any(item.has_class(side) for side in SIDE_CLASSES):
        yield _violation(SIDE_MESSAGE, item, rule="side", item_index=index)

    children = item.children
    if len(children) != 1:
        yield _violation(SINGLE_CARD_MESSAGE, item, rule="single-card", item_index=index)

    card = _child_at(children, CARD.position)
    if card is None or not CARD.matches(card):
        yield _mismatch(CARD, card, parent=item, item_index=index)
        return
    yield from _check_card(card, index)


def _check_card(card: TreeNode, index: int) -> Iterator[SchemaViolation]:
    parts = card.children
    for expectation in CARD_PARTS:
        node = _child_at(parts, expectation.position)
        if node is None:
            yield _mismatch(expectation, None, parent=card, item_index=index)
            return
        if not expectation.matches(node):
            yield _mismatch(expectation, node, item_index=index)
    if len(parts) > CARD_SIZE:
        yield _violation(CARD_SIZE_MESSAGE, card, rule="card-size", item_index=index)


def _child_at(children: Sequence[TreeNode], position: int | None) -> TreeNode | None:
    if position is None or position >= len(children):
        return None
    return children[position]


def _mismatch(
    expectation: ElementExpectation,
    node: TreeNode | None,
    *,
    parent: TreeNode | None = None,
    item_index: int | None = None,
) -> SchemaViolation:
    # A missing child is reported against its parent.
    offending = node if node is not None else parent
    return _violation(
        expectation.message,
        offending,
        rule=expectation.role,
        item_index=item_index,
    )


def _violation(
    template: str,
    node: TreeNode | None,
    *,
    rule: str,
    item_index: int | None = None,
) -> SchemaViolation:
    text = template.format(item=item_index) if item_index is not None else template
    message = f"{text}, See {AMP_TIMELINE_DOCS_URL}. Found in: {describe_node(node)}"
    return SchemaViolation(message, node, rule=rule, item_index=item_index)
