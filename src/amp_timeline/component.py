"""The ``amp-timeline`` component as seen by its host."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from amp_timeline.layout import Layout, is_layout_size_defined
from amp_timeline.nodes import SoupNode, Tag, TreeNode
from amp_timeline.validator import validate

logger = logging.getLogger(__name__)

TAG_NAME = "amp-timeline"


class AmpTimeline:
    """Timeline component driven by host callbacks.

    The host calls ``supports_layout`` while negotiating layout and
    ``on_attached`` once the element's children are in place. A failed
    structure check raises ``SchemaViolation``; the host decides what to do
    with the element afterwards.
    """

    def __init__(
        self,
        element: Tag | TreeNode | None = None,
        *,
        media_tags: Iterable[str] | None = None,
    ) -> None:
        self.element = SoupNode(element) if isinstance(element, Tag) else element
        self.media_tags = tuple(media_tags) if media_tags is not None else None
        self.sections: list[TreeNode] = []
        self._attached = False

    def supports_layout(self, layout: Layout | str | None) -> bool:
        return is_layout_size_defined(layout)

    def on_attached(self, children: Sequence[TreeNode] | None = None) -> None:
        """Validate the attached children and keep them as the sections.

        Args:
            children: Direct children supplied by the host. Defaults to the
                real children of the element the component was built with.

        Raises:
            SchemaViolation: If the children do not form a valid timeline.
            RuntimeError: If called more than once, or without children and
                without an element.
        """
        if self._attached:
            raise RuntimeError("on_attached() was already called for this timeline")
        if children is None:
            if self.element is None:
                raise RuntimeError("No children given and no element to read them from")
            if isinstance(self.element, SoupNode):
                children = self.element.real_children()
            else:
                children = self.element.children
        self._attached = True

        validate(children, media_tags=self.media_tags).raise_for_violation()
        self.sections = list(children)
        logger.debug("Timeline attached with %d section(s)", len(self.sections))
