"""Shared test helper functions for building decks in memory."""

# mypy: disable-error-code="import-untyped"
# pyright: reportArgumentType=false

import uuid

import pptx
from lxml import etree
from pptx import presentation
from pptx.opc.package import Part
from pptx.slide import Slide
from pptx.util import Length, Pt

from deckscrub.internals.constants import (
    NS_PML,
    NS_PML_MODERN_COMMENTS,
    RT_LEGACY_COMMENTS,
    RT_MODERN_COMMENTS,
)

# Content types of the comments parts built below
CT_LEGACY_COMMENTS = (
    "application/vnd.openxmlformats-officedocument.presentationml.comments+xml"
)
CT_MODERN_COMMENTS = "application/vnd.ms-powerpoint.comments+xml"

# Index of the "Blank" layout in python-pptx's default template
BLANK_LAYOUT = 6


def make_presentation(
    page_width: Length = Pt(800), page_height: Length = Pt(600)
) -> presentation.Presentation:
    """A new deck with the given canvas size and no slides."""
    prs = pptx.Presentation()
    prs.slide_width = page_width
    prs.slide_height = page_height
    return prs


def add_blank_slide(prs: presentation.Presentation) -> Slide:
    return prs.slides.add_slide(prs.slide_layouts[BLANK_LAYOUT])


def add_box(
    slide: Slide, left: float, top: float, width: float, height: float, name: str = ""
) -> None:
    """Add a text box positioned in points."""
    box = slide.shapes.add_textbox(Pt(left), Pt(top), Pt(width), Pt(height))
    if name:
        box.name = name


def shape_names(slide: Slide) -> list[str]:
    return [shape.name for shape in slide.shapes]


def set_notes(slide: Slide, text: str) -> None:
    slide.notes_slide.notes_text_frame.text = text


def add_legacy_comments(slide: Slide, count: int, author_id: int = 0) -> None:
    """Relate a legacy (p:cmLst) comments part holding `count` comments to the slide."""
    root = etree.Element(f"{{{NS_PML}}}cmLst", nsmap={"p": NS_PML})
    for idx in range(1, count + 1):
        cm = etree.SubElement(
            root,
            f"{{{NS_PML}}}cm",
            authorId=str(author_id),
            dt="2024-05-01T09:30:00.000",
            idx=str(idx),
        )
        etree.SubElement(cm, f"{{{NS_PML}}}pos", x="10", y="10")
        etree.SubElement(cm, f"{{{NS_PML}}}text").text = f"Legacy comment {idx}"

    _relate_comment_part(
        slide, root, "/ppt/comments/comment%d.xml", CT_LEGACY_COMMENTS, RT_LEGACY_COMMENTS
    )


def add_modern_comments(slide: Slide, count: int, with_replies: bool = False) -> None:
    """Relate a modern threaded (p188:cmLst) comments part holding `count` comments to the slide."""
    root = etree.Element(
        f"{{{NS_PML_MODERN_COMMENTS}}}cmLst", nsmap={"p188": NS_PML_MODERN_COMMENTS}
    )
    for _ in range(count):
        cm = etree.SubElement(
            root,
            f"{{{NS_PML_MODERN_COMMENTS}}}cm",
            id="{" + str(uuid.uuid4()).upper() + "}",
            authorId="{00000000-0000-0000-0000-000000000001}",
            created="2024-05-01T09:30:00.000",
        )
        if with_replies:
            reply_list = etree.SubElement(cm, f"{{{NS_PML_MODERN_COMMENTS}}}replyLst")
            etree.SubElement(
                reply_list,
                f"{{{NS_PML_MODERN_COMMENTS}}}reply",
                id="{" + str(uuid.uuid4()).upper() + "}",
            )

    _relate_comment_part(
        slide,
        root,
        "/ppt/comments/modernComment%d.xml",
        CT_MODERN_COMMENTS,
        RT_MODERN_COMMENTS,
    )


def _relate_comment_part(
    slide: Slide,
    root: etree._Element,
    partname_template: str,
    content_type: str,
    reltype: str,
) -> None:
    package = slide.part.package
    blob = etree.tostring(root, xml_declaration=True, encoding="UTF-8", standalone=True)
    part = Part(
        partname=package.next_partname(partname_template),
        content_type=content_type,
        package=package,
        blob=blob,
    )
    slide.part.relate_to(part, reltype)
