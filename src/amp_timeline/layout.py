"""AMP layout values accepted by the ``layout`` attribute."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Layout(str, Enum):
    NODISPLAY = "nodisplay"
    FIXED = "fixed"
    FIXED_HEIGHT = "fixed-height"
    RESPONSIVE = "responsive"
    CONTAINER = "container"
    FILL = "fill"
    FLEX_ITEM = "flex-item"
    INTRINSIC = "intrinsic"


# Layouts where the element's size is known before its content loads.
SIZE_DEFINED_LAYOUTS: Final[frozenset[Layout]] = frozenset(
    {
        Layout.FIXED,
        Layout.FIXED_HEIGHT,
        Layout.RESPONSIVE,
        Layout.FILL,
        Layout.FLEX_ITEM,
        Layout.INTRINSIC,
    }
)


def parse_layout(value: str | None) -> Layout | None:
    """Parse a ``layout`` attribute value.

    Args:
        value: Raw attribute value; matching is case-insensitive.

    Returns:
        The layout, or None when the value is missing or blank.

    Raises:
        ValueError: If the value is not a known layout.
    """
    if value is None or not value.strip():
        return None
    normalized = value.strip().lower()
    try:
        return Layout(normalized)
    except ValueError:
        raise ValueError(f"Unknown layout: {value!r}") from None


def is_layout_size_defined(layout: Layout | str | None) -> bool:
    """Return True if ``layout`` gives the element a defined size."""
    if layout is None:
        return False
    if isinstance(layout, str) and not isinstance(layout, Layout):
        try:
            layout = parse_layout(layout)
        except ValueError:
            return False
    return layout in SIZE_DEFINED_LAYOUTS
