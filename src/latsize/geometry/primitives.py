"""Geometry primitives for lattice size computations.

This module provides immutable Pydantic models for points with exact
coordinates and integer direction vectors. Coordinates are kept as ``int``
whenever they are integral and as ``fractions.Fraction`` otherwise; floating
point values are rejected because every comparison downstream is an exact
equality or inequality test.
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Sequence
from fractions import Fraction
from typing import Annotated, Self, TypeAlias

from pydantic import BaseModel, BeforeValidator, ConfigDict

Scalar: TypeAlias = int | Fraction


def as_exact(value: object) -> Scalar:
    """Convert a coordinate to an exact scalar.

    Accepts Python and numpy integers, ``Fraction`` (or any ``numbers.Rational``)
    and strings such as ``"3/2"``. Rationals with denominator 1 collapse to
    ``int``.

    Raises:
        ValueError: For booleans, floats and other inexact inputs.
    """
    if isinstance(value, bool):
        raise ValueError("Boolean is not a valid coordinate")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Rational):
        fraction = Fraction(value.numerator, value.denominator)
        return fraction.numerator if fraction.denominator == 1 else fraction
    if isinstance(value, str):
        try:
            fraction = Fraction(value.strip())
        except (ValueError, ZeroDivisionError) as e:
            raise ValueError(f"Cannot parse {value!r} as an exact rational") from e
        return fraction.numerator if fraction.denominator == 1 else fraction
    raise ValueError(
        f"Coordinate must be an exact integer or rational, got {type(value).__name__}"
    )


def _as_integer(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(
            f"Direction components must be integers, got {type(value).__name__}"
        )
    return int(value)


ExactCoordinate = Annotated[Scalar, BeforeValidator(as_exact)]
IntegerComponent = Annotated[int, BeforeValidator(_as_integer)]


class Point(BaseModel):
    """A point of the plane with exact coordinates.

    Attributes:
        x: First coordinate.
        y: Second coordinate.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    x: ExactCoordinate
    y: ExactCoordinate

    def to_tuple(self) -> tuple[Scalar, Scalar]:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, coord: Sequence[object]) -> Self:
        """Create Point from an (x, y) pair."""
        if len(coord) != 2:  # noqa: PLR2004
            raise ValueError(f"Point needs exactly 2 coordinates, got {len(coord)}")
        return cls(x=coord[0], y=coord[1])

    def translate(self, dx: Scalar, dy: Scalar) -> Point:
        """Return this point shifted by (dx, dy)."""
        return Point(x=self.x + dx, y=self.y + dy)


class Direction(BaseModel, frozen=True):
    """An integer direction vector (a, b).

    Used both as the linear functional ``v -> a*v.x + b*v.y`` and as a row
    of a transform matrix.
    """

    a: IntegerComponent
    b: IntegerComponent

    @property
    def is_zero(self) -> bool:
        return self.a == 0 and self.b == 0

    def dot(self, point: Point) -> Scalar:
        """Evaluate the functional at ``point``."""
        return self.a * point.x + self.b * point.y

    def scale(self, k: int) -> Direction:
        return Direction(a=k * self.a, b=k * self.b)

    def __add__(self, other: Direction) -> Direction:
        return Direction(a=self.a + other.a, b=self.b + other.b)

    def __sub__(self, other: Direction) -> Direction:
        return Direction(a=self.a - other.a, b=self.b - other.b)

    def __neg__(self) -> Direction:
        return Direction(a=-self.a, b=-self.b)

    def to_tuple(self) -> tuple[int, int]:
        """Convert to (a, b) tuple."""
        return (self.a, self.b)

    @classmethod
    def from_tuple(cls, vector: Sequence[object]) -> Self:
        """Create Direction from an (a, b) pair."""
        if len(vector) != 2:  # noqa: PLR2004
            raise ValueError(f"Direction needs exactly 2 components, got {len(vector)}")
        return cls(a=vector[0], b=vector[1])


# Coordinate axes, the starting pair of every reduction step
E1 = Direction(a=1, b=0)
E2 = Direction(a=0, b=1)

Polygon: TypeAlias = tuple[Point, ...]


def as_polygon(points: Iterable[Point | Sequence[object]]) -> Polygon:
    """Normalize a point sequence into a tuple of Points.

    Order is preserved and no hull is taken; any point set containing the
    extreme points of the polygon is an equally valid input.
    """
    return tuple(p if isinstance(p, Point) else Point.from_tuple(p) for p in points)
