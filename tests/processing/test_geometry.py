"""Tests for the off-canvas geometry predicate."""

from unittest.mock import MagicMock

import pytest

from deckscrub.processing.geometry import Bounds, bounds_of, is_completely_outside

PAGE_WIDTH = 800
PAGE_HEIGHT = 600


# region is_completely_outside
@pytest.mark.parametrize(
    argnames="bounds,expected",
    argvalues=[
        # right = -10 <= 0
        (Bounds(left=-50, top=0, width=40, height=40), True),
        # flush with the right edge: zero overlapping area, still outside
        (Bounds(left=800, top=0, width=10, height=10), True),
        # sticks out past the right edge but overlaps
        (Bounds(left=790, top=0, width=20, height=20), False),
        # exactly fills the canvas
        (Bounds(left=0, top=0, width=800, height=600), False),
        # outside on both axes
        (Bounds(left=-10, top=-10, width=5, height=5), True),
    ],
)
def test_boundary_cases(bounds: Bounds, expected: bool) -> None:
    """The documented boundary cases for an 800x600 canvas."""
    assert is_completely_outside(bounds, PAGE_WIDTH, PAGE_HEIGHT) is expected


@pytest.mark.parametrize(
    argnames="bounds",
    argvalues=[
        Bounds(left=-40, top=100, width=40, height=40),  # right == 0
        Bounds(left=100, top=-40, width=40, height=40),  # bottom == 0
        Bounds(left=100, top=600, width=40, height=40),  # top == page height
    ],
)
def test_touching_an_edge_counts_as_outside(bounds: Bounds) -> None:
    """Every edge uses inclusive comparisons."""
    assert is_completely_outside(bounds, PAGE_WIDTH, PAGE_HEIGHT) is True


def test_outside_on_one_axis_is_enough() -> None:
    """Vertically inside but horizontally beyond the canvas -> outside (OR, not AND)."""
    bounds = Bounds(left=900, top=100, width=50, height=50)
    assert is_completely_outside(bounds, PAGE_WIDTH, PAGE_HEIGHT) is True


def test_box_larger_than_canvas_is_kept() -> None:
    """A background bleeding past every edge overlaps the whole canvas."""
    bounds = Bounds(left=-100, top=-100, width=1000, height=800)
    assert is_completely_outside(bounds, PAGE_WIDTH, PAGE_HEIGHT) is False


def test_zero_size_box_inside_canvas_is_kept() -> None:
    """A zero-area element inside the canvas isn't separated on either axis."""
    bounds = Bounds(left=400, top=300, width=0, height=0)
    assert is_completely_outside(bounds, PAGE_WIDTH, PAGE_HEIGHT) is False


# endregion


# region Bounds / bounds_of
def test_bounds_right_and_bottom() -> None:
    bounds = Bounds(left=-50, top=20, width=40, height=30)
    assert bounds.right == -10
    assert bounds.bottom == 50


def test_bounds_of_reads_shape_position() -> None:
    shape = MagicMock(left=10, top=20, width=30, height=40)
    assert bounds_of(shape) == Bounds(10, 20, 30, 40)


@pytest.mark.parametrize("missing", ["left", "top", "width", "height"])
def test_bounds_of_returns_none_for_unresolved_position(missing: str) -> None:
    """python-pptx reports None for placeholders with no inherited position."""
    shape = MagicMock(left=10, top=20, width=30, height=40)
    setattr(shape, missing, None)
    assert bounds_of(shape) is None


# endregion
