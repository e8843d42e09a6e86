"""Core algorithms for lattice size computation.

This package contains the width evaluator, the reduction step and the
reduction driver.

Public API:
    - lattice_width: Width of a point set along an integer direction.
    - reduction_step: One generalized basis reduction step.
    - lattice_size: Driver returning size, certifying transform and step count.
    - triangle_candidates: The four extremal formulas on a point set.
    - verify_certificate / embed_in_standard_triangle: Certificate checks.
"""

from latsize.core.exceptions import (
    DegenerateInputError,
    EmptyInputError,
    InvariantViolation,
    LatticeSizeError,
)
from latsize.core.lattice_size import (
    LatticeSizeResult,
    embed_in_standard_triangle,
    lattice_size,
    triangle_candidates,
    verify_certificate,
)
from latsize.core.reduction import (
    ReductionBranch,
    ReductionStepResult,
    first_minimum,
    reduction_step,
)
from latsize.core.width import lattice_width, support_range

__all__ = [
    "DegenerateInputError",
    "EmptyInputError",
    "InvariantViolation",
    "LatticeSizeError",
    "LatticeSizeResult",
    "ReductionBranch",
    "ReductionStepResult",
    "embed_in_standard_triangle",
    "first_minimum",
    "lattice_size",
    "lattice_width",
    "reduction_step",
    "support_range",
    "triangle_candidates",
    "verify_certificate",
]
