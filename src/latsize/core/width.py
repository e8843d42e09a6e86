"""Lattice width of a point set along an integer direction."""

from __future__ import annotations

from collections.abc import Sequence

from latsize.core.exceptions import EmptyInputError
from latsize.geometry.primitives import Direction, Point, Scalar


def support_range(points: Sequence[Point], h: Direction) -> tuple[Scalar, Scalar]:
    """Return (min, max) of the functional ``v -> v.h`` over ``points``.

    Raises:
        EmptyInputError: If ``points`` is empty.
    """
    if not points:
        raise EmptyInputError()
    values = [h.dot(p) for p in points]
    return min(values), max(values)


def lattice_width(points: Sequence[Point], h: Direction) -> Scalar:
    """Width of ``points`` in the direction ``h``.

    Computes ``max(v.h) - min(v.h)`` over the point set. The result is
    invariant under ``h -> -h`` and under translating the point set.

    Args:
        points: Non-empty point set; order and convexity are irrelevant.
        h: Non-zero integer direction.

    Returns:
        Non-negative exact width.

    Raises:
        EmptyInputError: If ``points`` is empty.
        ValueError: If ``h`` is the zero vector.
    """
    if h.is_zero:
        raise ValueError("Width is undefined for the zero direction")
    low, high = support_range(points, h)
    return high - low
