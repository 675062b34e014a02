"""Document handles and the source that opens them.

A PresentationDocument is the handle every cleanup procedure receives. The
PptxDocumentSource owns the open documents, tracks which one is active, and lets
collaborators (like the comment store) resolve a handle from its id.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pptx import presentation
from pptx.slide import Slide

from deckscrub import io
from deckscrub.internals.paths import resolve_path

log = logging.getLogger("deckscrub")


# region PresentationDocument
class PresentationDocument:
    """An open pptx deck, addressed by the resolved path it was loaded from."""

    def __init__(self, prs: presentation.Presentation, path: Path) -> None:
        self.prs = prs
        self.path = path

    @property
    def id(self) -> str:
        return str(self.path)

    @property
    def page_width(self) -> int:
        """Slide canvas width in EMU."""
        return int(self.prs.slide_width)

    @property
    def page_height(self) -> int:
        """Slide canvas height in EMU."""
        return int(self.prs.slide_height)

    @property
    def slides(self) -> list[Slide]:
        return list(self.prs.slides)

    def __repr__(self) -> str:
        return f"PresentationDocument(id={self.id!r}, slides={len(self.prs.slides)})"


# endregion


# region PptxDocumentSource
class PptxDocumentSource:
    """Opens pptx files and hands out the active document."""

    def __init__(self) -> None:
        self._documents: dict[str, PresentationDocument] = {}
        self._active_id: str | None = None

    def open(self, path: Path | str) -> PresentationDocument:
        """Load a pptx file, register it, and make it the active document."""
        resolved = resolve_path(path)
        prs = io.load_and_validate_pptx(resolved)
        document = self._activate(PresentationDocument(prs, resolved))
        log.info(f"Opened {document.id} as the active document.")
        return document

    def add(self, document: PresentationDocument) -> PresentationDocument:
        """Register an already-loaded document and make it active."""
        return self._activate(document)

    def _activate(self, document: PresentationDocument) -> PresentationDocument:
        """Only the active document stays open; the one it replaces is released."""
        if self._active_id is not None and self._active_id != document.id:
            released = self._documents.pop(self._active_id, None)
            log.debug(f"Released {released!r}")
        self._documents[document.id] = document
        self._active_id = document.id
        return document

    def get_active_document(self) -> PresentationDocument:
        if self._active_id is None:
            log.error("A cleanup was requested but no document is open.")
            raise RuntimeError("No active document. Open a .pptx file first.")
        return self._documents[self._active_id]

    def get(self, document_id: str) -> PresentationDocument:
        try:
            return self._documents[document_id]
        except KeyError as e:
            log.error(f"No open document with id {document_id!r}")
            raise LookupError(f"No open document with id {document_id!r}") from e

    def save(
        self, document: PresentationDocument, path: Path | str | None = None
    ) -> Path:
        """Save the document back to its own path, or to `path` when given."""
        target = Path(path) if path is not None else document.path
        return io.save_output(document.prs, target)


# endregion
