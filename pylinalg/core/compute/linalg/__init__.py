"""
Linear algebra kernels for PyLinalg.

All functions follow these conventions:
    - Inputs are numpy arrays in any field storage (float or object)
    - Inputs are never mutated; kernels work on private copies
    - Each elimination returns a structured result dataclass
    - Kernels never validate shapes; callers do that first

Submodules:
    elimination: Gauss-Jordan reduction, forward elimination,
                 determinant and inverse kernels
"""

from pylinalg.core.compute.linalg.elimination import (
    EliminationResult,
    TriangularResult,
    select_pivot,
    gauss_jordan,
    forward_eliminate,
    determinant_kernel,
    inverse_kernel,
)

__all__ = [
    "EliminationResult",
    "TriangularResult",
    "select_pivot",
    "gauss_jordan",
    "forward_eliminate",
    "determinant_kernel",
    "inverse_kernel",
]
