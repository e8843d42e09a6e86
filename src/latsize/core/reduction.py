"""Generalized basis reduction step for plane lattice polygons.

One step starts from the coordinate axes of the current frame and either
finds a strictly shorter direction pair (the driver then changes coordinates
and repeats) or certifies a reduced pair and stops.

Reference:
    A. Harrison, J. Soprunova, "Lattice Size and Generalized Basis Reduction
    in Dimension 3", Discrete Comput. Geom. (2021), Proposition 2.7 and
    Theorem 2.8.

Widths are compared exactly: ratios are ``fractions.Fraction`` values and the
2/3 threshold is tested as ``3 * min_w < 2 * w2``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import TypeVar

from latsize.core.exceptions import DegenerateInputError, InvariantViolation
from latsize.core.width import lattice_width
from latsize.geometry.primitives import E1, E2, Direction, Point, Scalar
from latsize.geometry.transforms import Matrix

T = TypeVar("T", int, Fraction)


class ReductionBranch(str, Enum):
    """Which case of the step produced the result."""

    shortcut = "shortcut"  # min width below 2/3 of w2, keep reducing
    five_vectors = "five_vectors"  # two shortest of h1, h1+-h2, 2h1+-h2
    range_scan = "range_scan"  # h1 already shortest, scan |i| <= 2*w2/w1


@dataclass(frozen=True)
class ReductionStepResult:
    """Outcome of a single reduction step.

    Attributes:
        h1: First direction, the first row of the step transform.
        h2: Second direction, the second row of the step transform.
        terminate: True when (h1, h2) is the final reduced pair.
        branch: Case of the step that produced the pair.
    """

    h1: Direction
    h2: Direction
    terminate: bool
    branch: ReductionBranch

    @property
    def transform(self) -> Matrix:
        """Matrix with rows h1 and h2."""
        return Matrix(row1=self.h1, row2=self.h2)

    def __iter__(self) -> Iterator[Direction | bool]:
        return iter((self.h1, self.h2, self.terminate))


def first_minimum(values: Iterable[T]) -> tuple[T, int]:
    """Return (minimum, index) of the first minimal value.

    The best entry is replaced only on strict improvement, so ties resolve to
    the earliest position.

    Raises:
        ValueError: If ``values`` is empty.
    """
    best: T | None = None
    best_index = -1
    for index, value in enumerate(values):
        if best is None or value < best:
            best, best_index = value, index
    if best is None:
        raise ValueError("first_minimum() arg is an empty sequence")
    return best, best_index


def _combination(i: int, h1: Direction, h2: Direction) -> Direction:
    return h1.scale(i) + h2


def _checked(
    h1: Direction, h2: Direction, terminate: bool, branch: ReductionBranch
) -> ReductionStepResult:
    result = ReductionStepResult(h1=h1, h2=h2, terminate=terminate, branch=branch)
    if not result.transform.is_unimodular:
        raise InvariantViolation(
            "Reduction produced a non-unimodular direction pair",
            pair=(h1.to_tuple(), h2.to_tuple()),
        )
    return result


def reduction_step(points: Sequence[Point]) -> ReductionStepResult:
    """Run one reduction step on the polygon in its current frame.

    Args:
        points: Non-empty point set, already expressed in the frame produced
            by the previous step (the coordinate axes are the current pair).

    Returns:
        ReductionStepResult with the next direction pair.

    Raises:
        EmptyInputError: If ``points`` is empty.
        DegenerateInputError: If the smaller axis width is zero.
        InvariantViolation: If the produced pair is not unimodular.
    """
    h1, h2 = E1, E2
    w1 = lattice_width(points, h1)
    w2 = lattice_width(points, h2)
    if w2 < w1:
        h1, h2 = h2, h1
        w1, w2 = w2, w1

    if w1 == 0:
        raise DegenerateInputError(
            "Polygon is not 2-dimensional in the current frame",
            widths=(w1, w2),
        )

    def width_of(i: int) -> Scalar:
        return lattice_width(points, _combination(i, h1, h2))

    ratio = Fraction(w2) / w1
    low, high = math.floor(ratio), math.ceil(ratio)
    multipliers = (low, high, -low, -high)
    min_w, j = first_minimum(width_of(i) for i in multipliers)

    if min_w < w1:
        if 3 * min_w < 2 * w2:
            shorter = _combination(multipliers[j], h1, h2)
            return _checked(shorter, h1, False, ReductionBranch.shortcut)

        candidates = [h1, h1 + h2, h1 - h2, h1.scale(2) + h2, h1.scale(2) - h2]
        widths = [lattice_width(points, f) for f in candidates]
        _, j = first_minimum(widths)
        f_j = candidates.pop(j)
        widths.pop(j)
        _, k = first_minimum(widths)
        return _checked(f_j, candidates[k], True, ReductionBranch.five_vectors)

    # Theorem 2.8: min over all i of |i*h1 + h2| is attained with |i| <= 2*w2/w1
    m = math.floor(2 * ratio)
    _, index = first_minimum(width_of(i) for i in range(-m, m + 1))
    best = _combination(index - m, h1, h2)
    return _checked(h1, best, True, ReductionBranch.range_scan)
