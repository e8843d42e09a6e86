"""Random lattice polygons for experiments.

Reproduces the experiment harness of Harrison and Soprunova: polygons with a
random number of vertices in [5, 20] and coordinates bounded by 100. Points
are drawn uniformly from the integer box ``[-bound, bound]^2``; no convex
hull is extracted because every lattice size formula is a min/max over the
point set, which only depends on its extreme points.
"""

from __future__ import annotations

import numpy as np

from latsize.config import settings
from latsize.geometry.primitives import Point, Polygon
from latsize.geometry.validators import PolygonValidator

_MAX_DRAWS = 100


def random_lattice_polygon(
    n_points: int,
    bound: int,
    rng: np.random.Generator,
) -> Polygon:
    """Draw ``n_points`` integer points spanning the plane.

    Args:
        n_points: Number of points (>= 3).
        bound: Coordinates lie in [-bound, bound].
        rng: Numpy random generator.

    Returns:
        Polygon with Python ``int`` coordinates.

    Raises:
        ValueError: If arguments are out of range or no full-dimensional
            sample is found after repeated draws.
    """
    if n_points < 3:  # noqa: PLR2004
        raise ValueError(f"n_points must be >= 3, got {n_points}")
    if bound < 1:
        raise ValueError(f"bound must be >= 1, got {bound}")

    validator = PolygonValidator()
    for _ in range(_MAX_DRAWS):
        coords = rng.integers(-bound, bound, size=(n_points, 2), endpoint=True)
        polygon = tuple(Point(x=int(x), y=int(y)) for x, y in coords)
        if validator.is_polygon(polygon):
            return polygon

    raise ValueError(
        f"Unable to draw a 2-dimensional polygon with {n_points} points "
        f"after {_MAX_DRAWS} attempts"
    )


def sample_polygons(
    count: int | None = None,
    min_vertices: int | None = None,
    max_vertices: int | None = None,
    bound: int | None = None,
    seed: int | None = None,
) -> list[Polygon]:
    """Sample ``count`` random polygons with a random vertex count each.

    Unset arguments fall back to the SAMPLE_* settings.

    Raises:
        ValueError: If count is negative or the vertex range is empty.
    """
    count = settings.SAMPLE_COUNT if count is None else count
    min_vertices = settings.SAMPLE_MIN_VERTICES if min_vertices is None else min_vertices
    max_vertices = settings.SAMPLE_MAX_VERTICES if max_vertices is None else max_vertices
    bound = settings.SAMPLE_COORD_BOUND if bound is None else bound
    seed = settings.SAMPLE_SEED if seed is None else seed

    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if min_vertices > max_vertices:
        raise ValueError(
            f"min_vertices ({min_vertices}) exceeds max_vertices ({max_vertices})"
        )

    rng = np.random.default_rng(seed)
    polygons: list[Polygon] = []
    for _ in range(count):
        n_points = int(rng.integers(min_vertices, max_vertices, endpoint=True))
        polygons.append(random_lattice_polygon(n_points, bound, rng))
    return polygons
