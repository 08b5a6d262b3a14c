"""In-memory element tree model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ElementNode(BaseModel):
    """A plain element node: tag name, classes and element children."""

    tag_name: str
    classes: list[str] = Field(default_factory=list)
    children: list["ElementNode"] = Field(default_factory=list)

    def has_class(self, name: str) -> bool:
        return name in self.classes
