"""Unit tests for the lattice width evaluator."""

from __future__ import annotations

from fractions import Fraction

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from latsize.core import EmptyInputError, lattice_width, support_range
from latsize.geometry import Direction, Polygon, as_polygon, translate_all


class TestLatticeWidth:
    """Tests for lattice_width."""

    def test_axis_widths(self, quadrilateral: Polygon) -> None:
        assert lattice_width(quadrilateral, Direction(a=1, b=0)) == 8
        assert lattice_width(quadrilateral, Direction(a=0, b=1)) == 12

    def test_diagonal_width(self, quadrilateral: Polygon) -> None:
        # -x + y over (0,0), (3,5), (7,9), (8,12) takes values 0, 2, 2, 4
        assert lattice_width(quadrilateral, Direction(a=-1, b=1)) == 4

    def test_single_point_has_zero_width(self) -> None:
        assert lattice_width(as_polygon([(4, 7)]), Direction(a=3, b=-2)) == 0

    def test_rational_coordinates(self) -> None:
        polygon = as_polygon([(0, 0), (Fraction(1, 2), 0), (0, Fraction(1, 3))])
        assert lattice_width(polygon, Direction(a=1, b=1)) == Fraction(1, 2)

    def test_empty_raises(self) -> None:
        with pytest.raises(EmptyInputError):
            lattice_width((), Direction(a=1, b=0))

    def test_zero_direction_raises(self, unit_triangle: Polygon) -> None:
        with pytest.raises(ValueError, match="zero direction"):
            lattice_width(unit_triangle, Direction(a=0, b=0))

    def test_support_range(self, quadrilateral: Polygon) -> None:
        assert support_range(quadrilateral, Direction(a=-2, b=1)) == (-5, 0)


class TestWidthProperties:
    """Sign of the width over a grid of directions."""

    def test_non_negative(self, sheared_quadrilateral: Polygon) -> None:
        for a in range(-3, 4):
            for b in range(-3, 4):
                h = Direction(a=a, b=b)
                if not h.is_zero:
                    assert lattice_width(sheared_quadrilateral, h) >= 0


coordinates = st.integers(min_value=-100, max_value=100)
point_lists = st.lists(st.tuples(coordinates, coordinates), min_size=1, max_size=20)
directions = st.tuples(
    st.integers(min_value=-9, max_value=9), st.integers(min_value=-9, max_value=9)
).filter(lambda v: v != (0, 0))


class TestWidthHypothesis:
    """Property-based width tests."""

    @given(points=point_lists, vector=directions)
    @settings(max_examples=100, deadline=None)
    def test_symmetric_in_direction(
        self, points: list[tuple[int, int]], vector: tuple[int, int]
    ) -> None:
        polygon = as_polygon(points)
        h = Direction.from_tuple(vector)
        assert lattice_width(polygon, h) == lattice_width(polygon, -h)

    @given(points=point_lists, vector=directions, dx=coordinates, dy=coordinates)
    @settings(max_examples=100, deadline=None)
    def test_translation_invariant(
        self,
        points: list[tuple[int, int]],
        vector: tuple[int, int],
        dx: int,
        dy: int,
    ) -> None:
        polygon = as_polygon(points)
        h = Direction.from_tuple(vector)
        assert lattice_width(polygon, h) == lattice_width(
            translate_all(polygon, dx, dy), h
        )
