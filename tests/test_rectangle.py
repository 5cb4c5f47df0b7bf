"""
Unit tests for Rectangle.

This module tests the intersection primitive and the derived geometry helpers.
"""

import itertools
from dataclasses import FrozenInstanceError

import pytest

from slicey.rectangle import Rectangle

CLAIM_1 = Rectangle(left=1, top=3, width=4, height=4)
CLAIM_2 = Rectangle(left=3, top=1, width=4, height=4)
CLAIM_3 = Rectangle(left=5, top=5, width=2, height=2)


class TestOverlaps:
    """Test cases for Rectangle.overlaps"""

    def test_example_overlaps(self):
        assert CLAIM_1.overlaps(CLAIM_2) == Rectangle(left=3, top=3, width=2, height=2)
        assert CLAIM_1.overlaps(CLAIM_3) is None
        assert CLAIM_2.overlaps(CLAIM_3) is None

    def test_contained_rectangle(self):
        outer = Rectangle(left=0, top=0, width=10, height=10)
        inner = Rectangle(left=2, top=3, width=4, height=5)
        assert outer.overlaps(inner) == inner

    def test_overlaps_itself(self):
        assert CLAIM_1.overlaps(CLAIM_1) == CLAIM_1

    @pytest.mark.parametrize(
        "other",
        [
            Rectangle(left=5, top=3, width=2, height=4),  # shares the right edge
            Rectangle(left=1, top=7, width=4, height=2),  # shares the bottom edge
            Rectangle(left=5, top=7, width=1, height=1),  # shares the bottom right corner
            Rectangle(left=0, top=2, width=1, height=1),  # shares the top left corner
        ],
    )
    def test_touching_does_not_overlap(self, other):
        assert CLAIM_1.overlaps(other) is None
        assert other.overlaps(CLAIM_1) is None

    def test_disjoint(self):
        far = Rectangle(left=100, top=100, width=1, height=1)
        assert CLAIM_1.overlaps(far) is None

    def test_empty_rectangle_overlaps_nothing(self):
        empty = Rectangle(left=2, top=4, width=0, height=3)
        assert CLAIM_1.overlaps(empty) is None
        assert Rectangle(left=2, top=4, width=3, height=0).overlaps(CLAIM_1) is None

    def test_symmetry(self):
        """Test that overlaps is commutative over a grid of rectangles"""
        rects = [
            Rectangle(left, top, width, height)
            for left, top, width, height in itertools.product(
                [0, 1, 3], [0, 2], [0, 1, 3], [1, 4]
            )
        ]
        for a, b in itertools.product(rects, repeat=2):
            assert a.overlaps(b) == b.overlaps(a)


class TestGeometry:
    """Test cases for derived properties"""

    def test_edges_and_area(self):
        assert CLAIM_2.right == 7
        assert CLAIM_2.bottom == 5
        assert CLAIM_2.area == 16

    def test_cells(self):
        rect = Rectangle(left=3, top=3, width=2, height=2)
        assert list(rect.cells()) == [(3, 3), (3, 4), (4, 3), (4, 4)]

    def test_cells_empty(self):
        assert list(Rectangle(left=1, top=1, width=0, height=5).cells()) == []

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            CLAIM_1.left = 2
