"""Tree-node interface and adapters over parsed HTML."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, runtime_checkable

from amp_timeline.exceptions import ParseError

try:
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


# Attributes that mark AMP placeholder/fallback/overflow service elements.
_SERVICE_ATTRIBUTES = ("placeholder", "fallback", "overflow")
_INTERNAL_TAG_PREFIX = "i-"


@runtime_checkable
class TreeNode(Protocol):
    """Minimal read-only view of an element the validator needs."""

    @property
    def tag_name(self) -> str: ...

    @property
    def children(self) -> Sequence[TreeNode]: ...

    def has_class(self, name: str) -> bool: ...


@dataclass(frozen=True)
class SoupNode:
    """Adapts a BeautifulSoup ``Tag`` to the ``TreeNode`` interface.

    ``children`` are all element children; text is skipped. Service nodes are
    only dropped from a timeline's own children, via ``real_children()``, so a
    placeholder inside an item or card still counts toward its children.
    """

    tag: Tag

    @property
    def tag_name(self) -> str:
        return self.tag.name

    @property
    def classes(self) -> list[str]:
        return list(self.tag.get("class") or [])

    @property
    def children(self) -> list[SoupNode]:
        return [SoupNode(child) for child in self.tag.children if isinstance(child, Tag)]

    def real_children(self) -> list[SoupNode]:
        return [SoupNode(child) for child in real_children(self.tag)]

    def has_class(self, name: str) -> bool:
        return name in self.classes


def is_service_node(tag: Tag) -> bool:
    """Return True for AMP-internal elements that are not authored content."""
    if tag.name.lower().startswith(_INTERNAL_TAG_PREFIX):
        return True
    return any(tag.has_attr(attr) for attr in _SERVICE_ATTRIBUTES)


def real_children(tag: Tag) -> list[Tag]:
    """Element children of ``tag``, excluding text and service nodes."""
    return [
        child
        for child in tag.children
        if isinstance(child, Tag) and not is_service_node(child)
    ]


def describe_node(node: TreeNode | None) -> str:
    """Render a short opening-tag description such as ``<li class="item">``."""
    if node is None:
        return "nothing"
    name = node.tag_name.lower()
    classes = getattr(node, "classes", None)
    if classes:
        return f'<{name} class="{" ".join(classes)}">'
    return f"<{name}>"
