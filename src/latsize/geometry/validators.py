"""Polygon validation utilities.

This module checks that a point set is a usable input for the lattice size
reduction: it must be non-empty and span the plane.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from latsize.core.exceptions import DegenerateInputError, EmptyInputError
from latsize.geometry.primitives import Point, Polygon, as_polygon


class PolygonValidator:
    """Validator for polygon inputs.

    The validator is stateless and operates purely on the inputs provided
    to each method.
    """

    def validate(
        self,
        points: Iterable[Point | Sequence[object]],
        *,
        strict: bool = True,
    ) -> bool:
        """Validate that a point set is a 2-dimensional polygon.

        Checks that:
        1. there is at least one point
        2. the points are not all collinear

        Args:
            points: Points as Point instances or (x, y) pairs.
            strict: If True, raise on failure. If False, return False instead.

        Returns:
            True if the points span the plane.

        Raises:
            EmptyInputError: If strict=True and there are no points.
            DegenerateInputError: If strict=True and all points are collinear.
        """
        polygon = as_polygon(points)
        if not polygon:
            if strict:
                raise EmptyInputError()
            return False

        if self._spans_plane(polygon):
            return True
        if strict:
            raise DegenerateInputError(
                f"Polygon is not 2-dimensional: all {len(polygon)} points are collinear"
            )
        return False

    def normalize(self, points: Iterable[Point | Sequence[object]]) -> Polygon:
        """Convert to a Polygon and validate it, raising on failure."""
        polygon = as_polygon(points)
        self.validate(polygon)
        return polygon

    def is_polygon(self, points: Iterable[Point | Sequence[object]]) -> bool:
        """Check if the points span the plane without raising."""
        return self.validate(points, strict=False)

    @staticmethod
    def _spans_plane(polygon: Polygon) -> bool:
        origin = polygon[0]
        # First point distinct from the origin fixes the candidate line
        anchor = next((p for p in polygon if p != origin), None)
        if anchor is None:
            return False
        dx, dy = anchor.x - origin.x, anchor.y - origin.y
        return any(
            dx * (p.y - origin.y) - dy * (p.x - origin.x) != 0 for p in polygon
        )
