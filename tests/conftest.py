"""Shared fixtures"""

# tests/conftest.py
from pathlib import Path

import pytest
from pptx import presentation

from deckscrub.document import PptxDocumentSource, PresentationDocument
from deckscrub.internals.config.define_config import CommandId, UserConfig
from tests.helpers import (
    add_blank_slide,
    add_box,
    add_legacy_comments,
    add_modern_comments,
    make_presentation,
    set_notes,
)


@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Path:
    """Temporary directory for test output files"""
    output = tmp_path / "output"
    output.mkdir()
    return output


@pytest.fixture
def messy_prs() -> presentation.Presentation:
    """
    An 800x600pt deck with something for every cleanup command:

    slide 1: 2 legacy comments, notes "Talk about revenue", one on-canvas and one off-canvas box
    slide 2: 3 modern comments, whitespace-only notes, one box flush with the right edge
    slide 3: no comments, no notes slide at all, one box straddling the bottom edge
    """
    prs = make_presentation()

    slide1 = add_blank_slide(prs)
    add_box(slide1, 100, 100, 200, 100, name="Title")
    add_box(slide1, -300, 50, 200, 100, name="Parked left")
    add_legacy_comments(slide1, 2)
    set_notes(slide1, "Talk about revenue")

    slide2 = add_blank_slide(prs)
    add_box(slide2, 800, 0, 10, 10, name="Flush right")
    add_modern_comments(slide2, 3)
    set_notes(slide2, "   \n  ")

    slide3 = add_blank_slide(prs)
    add_box(slide3, 0, 590, 100, 40, name="Straddles bottom")

    return prs


@pytest.fixture
def messy_pptx(messy_prs: presentation.Presentation, tmp_path: Path) -> Path:
    """messy_prs saved to disk."""
    path = tmp_path / "messy.pptx"
    messy_prs.save(str(path))
    return path


@pytest.fixture
def source() -> PptxDocumentSource:
    return PptxDocumentSource()


@pytest.fixture
def messy_document(
    source: PptxDocumentSource, messy_pptx: Path
) -> PresentationDocument:
    """messy_pptx opened through a document source, as the active document."""
    return source.open(messy_pptx)


@pytest.fixture
def sample_cfg(messy_pptx: Path, temp_output_dir: Path) -> UserConfig:
    """Sample config running every command against messy_pptx"""
    return UserConfig(
        input_pptx=messy_pptx,
        output_folder=temp_output_dir,
        commands=list(CommandId),
    )


@pytest.fixture
def clean_debug_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Ensure debug env var is not set before test."""
    monkeypatch.delenv("DECKSCRUB_DEBUG", raising=False)
    return monkeypatch
