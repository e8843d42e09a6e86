"""Custom exceptions for lattice size computations.

These exceptions carry the context needed to understand a failure (the
offending widths, direction pair or iteration count) and fold it into the
error message.
"""

from __future__ import annotations

from typing import Any


class LatticeSizeError(Exception):
    """Base exception for all lattice size errors."""

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize with a message and optional context values.

        Args:
            message: Human-readable error description.
            **context: Named values describing the failing state. Entries
                that are None are left out of the formatted message.
        """
        self.message = message
        self.context = {k: v for k, v in context.items() if v is not None}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if not self.context:
            return self.message
        parts = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({parts})"


class EmptyInputError(LatticeSizeError):
    """Raised when a polygon has no vertices, so no width is defined."""

    def __init__(self, message: str = "Polygon has no vertices") -> None:
        super().__init__(message)


class DegenerateInputError(LatticeSizeError):
    """Raised when the polygon is not 2-dimensional.

    This error is raised when:
    - every input point lies on one line (including a single point)
    - the smaller axis width of the current frame is zero during reduction
    """

    def __init__(
        self,
        message: str,
        *,
        widths: tuple[object, object] | None = None,
    ) -> None:
        self.widths = widths
        super().__init__(message, widths=widths)


class InvariantViolation(LatticeSizeError):
    """Raised when the reduction breaks one of its own guarantees.

    Signals a logic bug rather than a user error:
    - a produced direction pair is not unimodular
    - the driver exceeded its iteration bound without terminating
    """

    def __init__(
        self,
        message: str,
        *,
        pair: tuple[tuple[int, int], tuple[int, int]] | None = None,
        iterations: int | None = None,
    ) -> None:
        self.pair = pair
        self.iterations = iterations
        super().__init__(message, pair=pair, iterations=iterations)
