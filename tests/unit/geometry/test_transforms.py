"""Unit tests for integer transforms."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from latsize.geometry import Matrix, Point, apply_affine, as_polygon, translate_all


class TestMatrix:
    """Tests for the 2x2 integer Matrix."""

    def test_identity(self) -> None:
        assert Matrix.identity().to_tuple() == ((1, 0), (0, 1))

    def test_from_rows_wrong_shape(self) -> None:
        with pytest.raises(ValueError, match="exactly 2 rows"):
            Matrix.from_rows([(1, 0)])

    def test_rejects_non_integer_entries(self) -> None:
        with pytest.raises(ValidationError):
            Matrix.from_rows(((1, "1/2"), (0, 1)))

    @pytest.mark.parametrize(
        ("rows", "det"),
        [
            (((1, 0), (0, 1)), 1),
            (((0, 1), (1, 0)), -1),
            (((2, 1), (1, 1)), 1),
            (((2, 0), (0, 1)), 2),
            (((1, 2), (2, 4)), 0),
        ],
    )
    def test_determinant(self, rows: tuple[tuple[int, int], ...], det: int) -> None:
        matrix = Matrix.from_rows(rows)
        assert matrix.determinant == det
        assert matrix.is_unimodular == (abs(det) == 1)

    def test_apply(self) -> None:
        shear = Matrix.from_rows(((1, 0), (-2, 1)))
        assert shear.apply(Point(x=2, y=3)) == Point(x=2, y=-1)

    def test_apply_all_preserves_order(self) -> None:
        swap = Matrix.from_rows(((0, 1), (1, 0)))
        image = swap.apply_all(as_polygon([(1, 2), (3, 4)]))
        assert [p.to_tuple() for p in image] == [(2, 1), (4, 3)]

    def test_compose_applies_right_operand_first(self) -> None:
        first = Matrix.from_rows(((-1, 1), (1, 0)))
        second = Matrix.from_rows(((1, 0), (-2, 1)))
        composed = second @ first
        assert composed.to_tuple() == ((-1, 1), (3, -2))

        point = Point(x=7, y=9)
        assert composed.apply(point) == second.apply(first.apply(point))

    def test_compose_keeps_unimodularity(self) -> None:
        a = Matrix.from_rows(((2, 1), (1, 1)))
        b = Matrix.from_rows(((0, -1), (1, 3)))
        assert (a @ b).is_unimodular
        assert (a @ b).determinant == a.determinant * b.determinant

    def test_columns_and_transpose(self) -> None:
        matrix = Matrix.from_rows(((1, 0), (-2, 1)))
        assert matrix.columns == ((1, -2), (0, 1))
        assert matrix.transpose().to_tuple() == ((1, -2), (0, 1))

    def test_negate_rows(self) -> None:
        matrix = Matrix.from_rows(((1, 2), (3, 4)))
        assert matrix.negate_rows(first=True).to_tuple() == ((-1, -2), (3, 4))
        assert matrix.negate_rows(second=True).to_tuple() == ((1, 2), (-3, -4))
        assert matrix.negate_rows(first=True, second=True).to_tuple() == (
            (-1, -2),
            (-3, -4),
        )
        assert matrix.negate_rows() == matrix


class TestAffineHelpers:
    """Tests for translate_all and apply_affine."""

    def test_translate_all(self) -> None:
        shifted = translate_all(as_polygon([(0, 0), (1, 2)]), 3, -1)
        assert [p.to_tuple() for p in shifted] == [(3, -1), (4, 1)]

    def test_apply_affine(self) -> None:
        shear = Matrix.from_rows(((1, 1), (0, 1)))
        image = apply_affine(as_polygon([(1, 2)]), shear, (10, 20))
        assert image == (Point(x=13, y=22),)


entries = st.integers(min_value=-20, max_value=20)
matrices = st.tuples(st.tuples(entries, entries), st.tuples(entries, entries))


class TestMatrixProperties:
    """Property-based tests for matrix composition."""

    @given(left=matrices, right=matrices, x=entries, y=entries)
    @settings(max_examples=100, deadline=None)
    def test_compose_matches_sequential_apply(
        self,
        left: tuple[tuple[int, int], tuple[int, int]],
        right: tuple[tuple[int, int], tuple[int, int]],
        x: int,
        y: int,
    ) -> None:
        a, b = Matrix.from_rows(left), Matrix.from_rows(right)
        point = Point(x=x, y=y)
        assert (a @ b).apply(point) == a.apply(b.apply(point))
        assert (a @ b).determinant == a.determinant * b.determinant
