"""Remove page elements that sit entirely outside the visible slide canvas."""

# mypy: disable-error-code="import-untyped"
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pptx.shapes.base import BaseShape
from pptx.slide import Slide

from deckscrub.processing.geometry import bounds_of, is_completely_outside

if TYPE_CHECKING:
    from deckscrub.document import PresentationDocument

log = logging.getLogger("deckscrub")


# region remove_off_canvas_elements
def remove_off_canvas_elements(document: PresentationDocument) -> int:
    """Delete every shape with no overlap with the slide canvas; return how many were removed."""
    page_width, page_height = document.page_width, document.page_height

    removed = 0
    for slide_number, slide in enumerate(document.slides, start=1):
        count = _remove_from_slide(slide, page_width, page_height)
        if count:
            log.debug(f"Removed {count} off-canvas element(s) from slide {slide_number}")
        removed += count

    log.info(f"Removed {removed} off-canvas element(s) from {document.id}")
    return removed


# endregion


# region _remove_from_slide
def _remove_from_slide(slide: Slide, page_width: int, page_height: int) -> int:
    """
    Walk the slide's live shape collection from the last index to the first, removing as we go.

    Removing shape i only shifts shapes after i, and those have already been visited.
    """
    shapes = slide.shapes
    removed = 0
    for index in range(len(shapes) - 1, -1, -1):
        shape = shapes[index]
        bounds = bounds_of(shape)
        if bounds is None:
            log.debug(
                f"Skipping shape {shape.shape_id} ({shape.name!r}): position is not resolvable."
            )
            continue

        if is_completely_outside(bounds, page_width, page_height):
            log.debug(f"Removing off-canvas shape {shape.shape_id} ({shape.name!r}) at {bounds}")
            _delete_shape(shape)
            removed += 1

    return removed


# endregion


# region _delete_shape
def _delete_shape(shape: BaseShape) -> None:
    """Detach the shape's element from its shape tree. python-pptx has no public delete."""
    element = shape._element
    element.getparent().remove(element)


# endregion
