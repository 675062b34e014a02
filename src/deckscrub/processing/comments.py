"""Delete every review comment attached to a deck.

Comments don't live in the slide tree. They sit in separate comments parts related
to each slide, and we only reach them through a CommentStore: a paginated
list/delete service keyed by document id. PptxCommentStore is the store for
python-pptx decks; purge_comments() works against any store.
"""

# mypy: disable-error-code="import-untyped"
# region imports
from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Protocol

from lxml import etree
from pptx.opc.package import Part
from pptx.slide import Slide

from deckscrub.internals.constants import (
    DEFAULT_COMMENT_PAGE_SIZE,
    NS_PML,
    NS_PML_MODERN_COMMENTS,
    RT_LEGACY_COMMENTS,
    RT_MODERN_COMMENTS,
)

if TYPE_CHECKING:
    from deckscrub.document import PptxDocumentSource

# endregion

log = logging.getLogger("deckscrub")

_COMMENT_TAGS = {
    f"{{{NS_PML}}}cm",
    f"{{{NS_PML_MODERN_COMMENTS}}}cm",
}


# region CommentRef / CommentPage
@dataclass(frozen=True)
class CommentRef:
    """One listed comment. Only the id is needed to delete it."""

    id: str


@dataclass(frozen=True)
class CommentPage:
    """One page of a comment listing."""

    items: list[CommentRef] = field(default_factory=list)
    next_page_token: Optional[str] = None


# endregion


# region CommentStore protocol
class CommentStore(Protocol):
    """Paginated comment service for a document."""

    def list(
        self, document_id: str, page_token: Optional[str], page_size: int
    ) -> CommentPage: ...

    def delete(self, document_id: str, comment_id: str) -> None: ...


# endregion


# region iter_comment_ids
def iter_comment_ids(
    store: CommentStore,
    document_id: str,
    page_size: int = DEFAULT_COMMENT_PAGE_SIZE,
) -> Iterator[str]:
    """
    Yield comment ids page by page until the store stops handing out page tokens.

    Pages are fetched lazily, so a caller can delete each id as it arrives. Calling
    this again starts a fresh listing from the first page.
    """
    page_token: Optional[str] = None
    while True:
        page = store.list(document_id, page_token, page_size)
        log.debug(
            f"Listed {len(page.items)} comment(s) for {document_id} "
            f"(more pages: {page.next_page_token is not None})"
        )
        for item in page.items:
            yield item.id

        if not page.next_page_token:
            return
        page_token = page.next_page_token


# endregion


# region purge_comments
def purge_comments(
    store: CommentStore,
    document_id: str,
    page_size: int = DEFAULT_COMMENT_PAGE_SIZE,
) -> int:
    """
    Delete every comment on the document and return how many were deleted.

    The first failing list or delete call aborts the purge. Comments deleted before
    the failure stay deleted.
    """
    deleted = 0
    for comment_id in iter_comment_ids(store, document_id, page_size):
        store.delete(document_id, comment_id)
        deleted += 1
        log.debug(f"Deleted comment {comment_id}")

    log.info(f"Deleted {deleted} comment(s) from {document_id}")
    return deleted


# endregion


# region PptxCommentStore
class PptxCommentStore:
    """
    CommentStore over the comments parts of decks opened by a PptxDocumentSource.

    Comments are listed in (slide position, comment id) order. The page token is the
    sort key of the last comment handed out, so comments deleted between pages never
    shift what the next page contains.
    """

    def __init__(self, source: PptxDocumentSource) -> None:
        self.source = source

    # region list
    def list(
        self, document_id: str, page_token: Optional[str], page_size: int
    ) -> CommentPage:
        if page_size < 1:
            log.error(f"Invalid comment page size: {page_size}")
            raise ValueError(f"page_size must be at least 1, got {page_size}")

        document = self.source.get(document_id)

        keys = sorted(
            (slide_position, comment_id)
            for slide_position, slide in enumerate(document.slides)
            for comment_id in _comment_ids_on_slide(slide)
        )

        if page_token:
            after = _decode_page_token(page_token)
            keys = [key for key in keys if key > after]

        page_keys = keys[:page_size]
        next_page_token = (
            _encode_page_token(page_keys[-1]) if len(keys) > page_size else None
        )
        return CommentPage(
            items=[CommentRef(comment_id) for _, comment_id in page_keys],
            next_page_token=next_page_token,
        )

    # endregion

    # region delete
    def delete(self, document_id: str, comment_id: str) -> None:
        document = self.source.get(document_id)

        slide_id = _slide_id_of(comment_id)
        slide = document.prs.slides.get(slide_id) if slide_id is not None else None
        if slide is not None:
            for part in _comment_parts_of(slide):
                root = etree.fromstring(part.blob)
                for cm in root:
                    if _comment_id_of(slide, cm) == comment_id:
                        root.remove(cm)
                        _write_comment_part(part, root)
                        return

        log.error(f"Comment {comment_id!r} not found in {document_id}")
        raise KeyError(f"Comment {comment_id!r} not found in {document_id}")

    # endregion


# endregion


# region comment part helpers
def _comment_parts_of(slide: Slide) -> list[Part]:
    """Comments parts (legacy and modern) related to a slide."""
    return [
        rel.target_part
        for rel in slide.part.rels.values()
        if not rel.is_external
        and rel.reltype in (RT_LEGACY_COMMENTS, RT_MODERN_COMMENTS)
    ]


def _comment_ids_on_slide(slide: Slide) -> list[str]:
    ids = []
    for part in _comment_parts_of(slide):
        root = etree.fromstring(part.blob)
        for cm in root:
            comment_id = _comment_id_of(slide, cm)
            if comment_id is not None:
                ids.append(comment_id)
    return ids


def _comment_id_of(slide: Slide, cm: etree._Element) -> str | None:
    """
    Build the opaque id of a comment element, or None for anything that isn't one.

    Legacy comments are numbered per author (authorId + idx); modern comments carry a GUID.
    """
    if cm.tag not in _COMMENT_TAGS:
        return None
    if cm.tag == f"{{{NS_PML_MODERN_COMMENTS}}}cm":
        return f"{slide.slide_id}:{cm.get('id')}"
    return f"{slide.slide_id}:{cm.get('authorId')}:{cm.get('idx')}"


def _slide_id_of(comment_id: str) -> int | None:
    head, _, _ = comment_id.partition(":")
    try:
        return int(head)
    except ValueError:
        return None


def _write_comment_part(part: Part, root: etree._Element) -> None:
    """Replace the part's XML. An emptied comment list stays in place; it's still valid XML."""
    # python-pptx loads comments parts as plain blob parts with no public setter.
    part._blob = etree.tostring(
        root, xml_declaration=True, encoding="UTF-8", standalone=True
    )


# endregion


# region page tokens
def _encode_page_token(key: tuple[int, str]) -> str:
    slide_position, comment_id = key
    return f"{slide_position}/{comment_id}"


def _decode_page_token(token: str) -> tuple[int, str]:
    head, sep, comment_id = token.partition("/")
    try:
        if not sep:
            raise ValueError(token)
        return int(head), comment_id
    except ValueError as e:
        log.error(f"Malformed comment page token: {token!r}")
        raise ValueError(f"Malformed comment page token: {token!r}") from e


# endregion
