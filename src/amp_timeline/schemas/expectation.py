"""Schema expectation model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from amp_timeline.nodes import TreeNode


class ElementExpectation(BaseModel):
    """Required shape of one position in the timeline tree.

    Attributes:
        role: Short rule identifier, also used as the violation rule name.
        tags: Accepted tag names (lowercase).
        css_class: Class the element must carry, if any.
        position: Index among the parent's children, if fixed.
        message: Violation message template; may reference ``{item}``.
    """

    model_config = ConfigDict(frozen=True)

    role: str
    tags: tuple[str, ...] = Field(..., min_length=1)
    css_class: str | None = None
    position: int | None = Field(default=None, ge=0)
    message: str

    def matches(self, node: TreeNode) -> bool:
        """Return True if ``node`` has an accepted tag and the required class."""
        if node.tag_name.lower() not in self.tags:
            return False
        return self.css_class is None or node.has_class(self.css_class)

    def with_tags(self, tags: tuple[str, ...]) -> ElementExpectation:
        """Copy of this expectation accepting a different set of tags."""
        return self.model_copy(update={"tags": tuple(tag.lower() for tag in tags)})
