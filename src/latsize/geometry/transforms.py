"""Integer linear transforms of the plane.

A ``Matrix`` is a 2x2 integer matrix stored as two row directions. The same
type transforms polygons (matrix-vector product applied to every point) and
accumulates the change of basis across reduction steps (matrix-matrix
product). Unimodular matrices (determinant +1 or -1) map the integer lattice
onto itself, so they preserve the lattice size of a polygon.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Self

from pydantic import BaseModel

from latsize.geometry.primitives import E1, E2, Direction, Point, Polygon, Scalar


class Matrix(BaseModel, frozen=True):
    """A 2x2 integer matrix with rows ``row1`` and ``row2``.

    Attributes:
        row1: First row, the functional giving the new x coordinate.
        row2: Second row, the functional giving the new y coordinate.
    """

    row1: Direction
    row2: Direction

    @classmethod
    def identity(cls) -> Self:
        return cls(row1=E1, row2=E2)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Self:
        """Create a Matrix from ((a, b), (c, d))."""
        if len(rows) != 2:  # noqa: PLR2004
            raise ValueError(f"Matrix needs exactly 2 rows, got {len(rows)}")
        return cls(row1=Direction.from_tuple(rows[0]), row2=Direction.from_tuple(rows[1]))

    @property
    def determinant(self) -> int:
        return self.row1.a * self.row2.b - self.row1.b * self.row2.a

    @property
    def is_unimodular(self) -> bool:
        """True when the determinant is +1 or -1."""
        return abs(self.determinant) == 1

    @property
    def columns(self) -> tuple[tuple[int, int], tuple[int, int]]:
        return ((self.row1.a, self.row2.a), (self.row1.b, self.row2.b))

    def transpose(self) -> Matrix:
        return Matrix.from_rows(self.columns)

    def apply(self, point: Point) -> Point:
        """Matrix-vector product with ``point`` as a column vector."""
        return Point(x=self.row1.dot(point), y=self.row2.dot(point))

    def apply_all(self, points: Iterable[Point]) -> Polygon:
        """Apply the matrix to every point, preserving order."""
        return tuple(self.apply(p) for p in points)

    def compose(self, other: Matrix) -> Matrix:
        """Return ``self @ other``, i.e. apply ``other`` first, then ``self``."""
        (a, b), (c, d) = self.to_tuple()
        (e, f), (g, h) = other.to_tuple()
        return Matrix.from_rows(
            ((a * e + b * g, a * f + b * h), (c * e + d * g, c * f + d * h))
        )

    def __matmul__(self, other: Matrix) -> Matrix:
        return self.compose(other)

    def negate_rows(self, *, first: bool = False, second: bool = False) -> Matrix:
        """Return a copy with the selected rows negated."""
        return Matrix(
            row1=-self.row1 if first else self.row1,
            row2=-self.row2 if second else self.row2,
        )

    def to_tuple(self) -> tuple[tuple[int, int], tuple[int, int]]:
        """Convert to ((a, b), (c, d)) row tuple."""
        return (self.row1.to_tuple(), self.row2.to_tuple())


def translate_all(points: Iterable[Point], dx: Scalar, dy: Scalar) -> Polygon:
    """Shift every point by (dx, dy)."""
    return tuple(p.translate(dx, dy) for p in points)


def apply_affine(
    points: Iterable[Point],
    matrix: Matrix,
    offset: tuple[Scalar, Scalar] = (0, 0),
) -> Polygon:
    """Return ``matrix * p + offset`` for every point ``p``."""
    dx, dy = offset
    return translate_all(matrix.apply_all(points), dx, dy)
