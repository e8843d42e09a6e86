"""Unit tests for polygon validation."""

from __future__ import annotations

from fractions import Fraction

import pytest

from latsize.core import DegenerateInputError, EmptyInputError
from latsize.geometry import Point, PolygonValidator


class TestPolygonValidator:
    """Tests for PolygonValidator."""

    def test_valid_triangle(self) -> None:
        assert PolygonValidator().validate([(0, 0), (1, 0), (0, 1)])

    def test_empty_raises(self) -> None:
        with pytest.raises(EmptyInputError):
            PolygonValidator().validate([])

    def test_empty_non_strict(self) -> None:
        assert not PolygonValidator().validate([], strict=False)

    @pytest.mark.parametrize(
        "points",
        [
            [(3, 3)],
            [(1, 1), (1, 1), (1, 1)],
            [(0, 0), (1, 1), (2, 2)],
            [(0, 5), (0, -5), (0, 2)],
            [(0, 0), (Fraction(1, 2), 1), (1, 2)],
        ],
    )
    def test_collinear_raises(self, points: list[tuple[object, object]]) -> None:
        with pytest.raises(DegenerateInputError, match="collinear"):
            PolygonValidator().validate(points)

    def test_repeated_first_point_then_spread(self) -> None:
        assert PolygonValidator().is_polygon([(0, 0), (0, 0), (1, 0), (0, 1)])

    def test_is_polygon_does_not_raise(self) -> None:
        assert not PolygonValidator().is_polygon([(0, 0), (2, 2)])

    def test_normalize_returns_points(self) -> None:
        polygon = PolygonValidator().normalize([(0, 0), (2, 0), ("0", "1/2")])
        assert polygon[2] == Point(x=0, y=Fraction(1, 2))
