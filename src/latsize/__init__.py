"""latsize: exact lattice size of plane lattice polygons.

Computes the smallest n such that a unimodular integer transform maps a
lattice polygon into the right triangle with legs n along the axes, using
generalized basis reduction in dimension 2.

Example:
    from latsize import lattice_size

    size, transform, iterations = lattice_size([(0, 0), (3, 5), (7, 9), (8, 12)])
"""

from latsize.core import (
    DegenerateInputError,
    EmptyInputError,
    InvariantViolation,
    LatticeSizeError,
    LatticeSizeResult,
    ReductionStepResult,
    lattice_size,
    lattice_width,
    reduction_step,
)

__version__ = "0.1.0"

__all__ = [
    "DegenerateInputError",
    "EmptyInputError",
    "InvariantViolation",
    "LatticeSizeError",
    "LatticeSizeResult",
    "ReductionStepResult",
    "__version__",
    "lattice_size",
    "lattice_width",
    "reduction_step",
]
