"""
Reduction engine.

Public API:
    row_echelon(matrix) - Reduced row-echelon form (Gauss-Jordan)
    determinant(matrix) - Determinant by pivoted forward elimination
    inverse(matrix)     - Inverse via [A | I] reduction
    rank(matrix)        - Number of pivots
"""

from pylinalg.reduction.solvers import (
    row_echelon,
    determinant,
    inverse,
    rank,
)

__all__ = [
    "row_echelon",
    "determinant",
    "inverse",
    "rank",
]
