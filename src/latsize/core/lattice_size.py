"""Lattice size driver.

Repeats the reduction step, moving the polygon into each new frame and
accumulating the change of basis, until the step certifies a reduced pair.
On the reduced polygon the lattice size with respect to the standard
triangle is the smallest of four extremal formulas (Harrison, Soprunova,
Tierney, "Lattice Size of Plane Convex Bodies", Definition 2.1):

    L1 = max(x+y) - min(x) - min(y)
    L2 = -min(x+y) + max(x) + max(y)
    L3 = max(x-y) - min(x) + max(y)
    L4 = max(-x+y) + max(x) - min(y)

Each formula measures the polygon against one of the four reflections of the
standard triangle. Negating rows of the accumulated transform maps the
attaining reflection back onto the standard triangle, so the returned
transform always realizes the size through L1.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from latsize.config import settings
from latsize.core.exceptions import InvariantViolation
from latsize.core.reduction import first_minimum, reduction_step
from latsize.core.width import support_range
from latsize.geometry.primitives import (
    E1,
    E2,
    Direction,
    Point,
    Polygon,
    Scalar,
    as_exact,
    as_polygon,
)
from latsize.geometry.transforms import Matrix, translate_all
from latsize.geometry.validators import PolygonValidator
from latsize.utils.logging import get_logger

_SUM = Direction(a=1, b=1)
_DIFF = Direction(a=1, b=-1)
_ANTIDIFF = Direction(a=-1, b=1)


@dataclass(frozen=True)
class LatticeSizeResult:
    """Result of a lattice size computation.

    Iterating yields ``(size, transform, iterations)``.

    Attributes:
        size: Lattice size of the polygon with respect to the standard triangle.
        transform: Unimodular matrix A such that A * P fits, after translation,
            in the standard triangle of side ``size``.
        iterations: Number of reduction steps performed.
        candidates: (L1, L2, L3, L4) evaluated on the reduced polygon.
        orientation: 1-based index of the first formula attaining ``size``.
        reduced: The polygon in the final reduced frame (before sign changes).
    """

    size: Scalar
    transform: Matrix
    iterations: int
    candidates: tuple[Scalar, Scalar, Scalar, Scalar]
    orientation: int
    reduced: Polygon

    def __iter__(self) -> Iterator[Any]:
        return iter((self.size, self.transform, self.iterations))

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly summary; rational values are rendered as strings."""
        return {
            "size": _jsonable(self.size),
            "transform": [list(row) for row in self.transform.to_tuple()],
            "iterations": self.iterations,
            "candidates": [_jsonable(c) for c in self.candidates],
            "orientation": self.orientation,
        }


def _jsonable(value: Scalar) -> int | str:
    return value if isinstance(value, int) else str(value)


def triangle_candidates(
    points: Sequence[Point],
) -> tuple[Scalar, Scalar, Scalar, Scalar]:
    """Evaluate the four extremal formulas (L1, L2, L3, L4) on ``points``.

    Raises:
        EmptyInputError: If ``points`` is empty.
    """
    min_x, max_x = support_range(points, E1)
    min_y, max_y = support_range(points, E2)
    min_sum, max_sum = support_range(points, _SUM)
    _, max_diff = support_range(points, _DIFF)
    _, max_antidiff = support_range(points, _ANTIDIFF)
    return (
        as_exact(max_sum - min_x - min_y),
        as_exact(-min_sum + max_x + max_y),
        as_exact(max_diff - min_x + max_y),
        as_exact(max_antidiff + max_x - min_y),
    )


def _orient(basis: Matrix, orientation: int) -> Matrix:
    # 1: as is, 2: point reflection, 3: flip y, 4: flip x
    if orientation == 2:  # noqa: PLR2004
        return basis.negate_rows(first=True, second=True)
    if orientation == 3:  # noqa: PLR2004
        return basis.negate_rows(second=True)
    if orientation == 4:  # noqa: PLR2004
        return basis.negate_rows(first=True)
    return basis


def lattice_size(
    points: Iterable[Point | Sequence[object]],
    *,
    max_steps: int | None = None,
) -> LatticeSizeResult:
    """Compute the lattice size of a plane lattice polygon.

    Args:
        points: Vertices of the polygon (or any finite point set containing
            them) as Points or exact (x, y) pairs.
        max_steps: Defensive bound on the number of reduction steps.
            Defaults to settings.MAX_REDUCTION_STEPS.

    Returns:
        LatticeSizeResult; unpacks as (size, transform, iterations).

    Raises:
        EmptyInputError: If there are no points.
        DegenerateInputError: If the points do not span the plane.
        InvariantViolation: If the reduction exceeds ``max_steps``.
    """
    logger = get_logger(__name__)
    bound = settings.MAX_REDUCTION_STEPS if max_steps is None else max_steps

    polygon = PolygonValidator().normalize(points)
    current = polygon
    basis = Matrix.identity()
    count = 0

    while True:
        if count >= bound:
            raise InvariantViolation(
                "Reduction did not terminate within the step bound",
                iterations=count,
            )
        step = reduction_step(current)
        current = step.transform.apply_all(current)
        basis = step.transform @ basis
        count += 1
        logger.debug(
            "Reduction step",
            iteration=count,
            branch=step.branch.value,
            h1=step.h1.to_tuple(),
            h2=step.h2.to_tuple(),
            terminate=step.terminate,
        )
        if step.terminate:
            break

    candidates = triangle_candidates(current)
    size, index = first_minimum(candidates)
    orientation = index + 1
    transform = _orient(basis, orientation)

    logger.debug(
        "Lattice size computed",
        size=str(size),
        orientation=orientation,
        iterations=count,
        transform=transform.to_tuple(),
    )
    return LatticeSizeResult(
        size=size,
        transform=transform,
        iterations=count,
        candidates=candidates,
        orientation=orientation,
        reduced=current,
    )


def verify_certificate(
    points: Iterable[Point | Sequence[object]],
    result: LatticeSizeResult,
) -> bool:
    """Check that ``result.transform`` realizes ``result.size`` on ``points``.

    Applies the transform to the original points and re-evaluates the four
    extremal formulas: the first must equal the size and none may be smaller.
    """
    if not result.transform.is_unimodular:
        return False
    image = result.transform.apply_all(as_polygon(points))
    candidates = triangle_candidates(image)
    return candidates[0] == result.size and min(candidates) == result.size


def embed_in_standard_triangle(
    points: Iterable[Point | Sequence[object]],
    result: LatticeSizeResult,
) -> Polygon:
    """Map ``points`` into the standard triangle of side ``result.size``.

    Returns ``A * p + t`` for every point, with ``t`` chosen so that the
    smallest x and y coordinates become 0. Every returned point satisfies
    ``x >= 0``, ``y >= 0`` and ``x + y <= result.size``.
    """
    image = result.transform.apply_all(as_polygon(points))
    min_x, _ = support_range(image, E1)
    min_y, _ = support_range(image, E2)
    return translate_all(image, -min_x, -min_y)
