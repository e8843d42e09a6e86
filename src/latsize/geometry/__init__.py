"""Geometry module for lattice size computations.

This package provides exact point and direction primitives, 2x2 integer
transforms and polygon validation.

Key Components:
    - Primitives: Point, Direction models with exact arithmetic
    - Transforms: Matrix (2x2 integer) and affine helpers
    - Validators: Non-empty and full-dimensional checks

Example:
    from latsize.geometry import Matrix, PolygonValidator, as_polygon

    polygon = PolygonValidator().normalize([(0, 0), (2, 3), (2, 7)])
    shear = Matrix.from_rows(((1, 0), (-2, 1)))
    sheared = shear.apply_all(polygon)
"""

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
from latsize.geometry.transforms import Matrix, apply_affine, translate_all
from latsize.geometry.validators import PolygonValidator

__all__ = [
    "E1",
    "E2",
    "Direction",
    "Matrix",
    "Point",
    "Polygon",
    "PolygonValidator",
    "Scalar",
    "apply_affine",
    "as_exact",
    "as_polygon",
    "translate_all",
]
