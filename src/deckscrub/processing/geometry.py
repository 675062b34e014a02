"""Bounding-box geometry shared by the cleanup procedures."""

from __future__ import annotations

from dataclasses import dataclass

from pptx.shapes.base import BaseShape


# region Bounds
@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box of a page element, in the same unit as the page size (EMU for pptx)."""

    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height


# endregion


# region bounds_of
def bounds_of(shape: BaseShape) -> Bounds | None:
    """
    Read a shape's bounding box, or None when python-pptx can't resolve its position.

    Placeholders inherit their position from the layout; a placeholder whose layout
    counterpart has no position comes back with None coordinates.
    """
    left, top, width, height = shape.left, shape.top, shape.width, shape.height
    if left is None or top is None or width is None or height is None:
        return None
    return Bounds(int(left), int(top), int(width), int(height))


# endregion


# region is_completely_outside
def is_completely_outside(bounds: Bounds, page_width: int, page_height: int) -> bool:
    """
    True when the box has no overlap with the visible canvas [0, page_width] x [0, page_height].

    Comparisons are inclusive, so a box flush against a canvas edge (zero overlapping
    area) counts as outside. Being outside on either axis is enough.
    """
    return (
        bounds.right <= 0
        or bounds.left >= page_width
        or bounds.bottom <= 0
        or bounds.top >= page_height
    )


# endregion
