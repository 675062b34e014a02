"""Clear the speaker notes on every slide of a deck."""

# mypy: disable-error-code="import-untyped"
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pptx.slide import Slide
from pptx.text.text import TextFrame

if TYPE_CHECKING:
    from deckscrub.document import PresentationDocument

log = logging.getLogger("deckscrub")


# region notes_text_frame_of
def notes_text_frame_of(slide: Slide) -> TextFrame | None:
    """
    The slide's speaker notes text frame, or None if it has none.

    Checks has_notes_slide first: reading slide.notes_slide creates a notes slide
    when there isn't one.
    """
    if not slide.has_notes_slide:
        return None
    return slide.notes_slide.notes_text_frame


# endregion


# region clear_speaker_notes
def clear_speaker_notes(document: PresentationDocument) -> int:
    """Empty every slide's notes that have visible text; return how many slides were cleared."""
    cleared = 0
    for slide_number, slide in enumerate(document.slides, start=1):
        text_frame = notes_text_frame_of(slide)
        if text_frame is None or not text_frame.text.strip():
            continue

        # Empties the text but keeps the notes placeholder itself.
        text_frame.text = ""
        cleared += 1
        log.debug(f"Cleared speaker notes on slide {slide_number}")

    log.info(f"Cleared speaker notes on {cleared} slide(s) in {document.id}")
    return cleared


# endregion
