"""
PyLinalg: generic linear algebra over an abstract numeric field.

Vectors and matrices over any scalar type with field arithmetic
(float32, float64, fractions.Fraction, decimal.Decimal), with
arithmetic, geometric and reduction operations.

Submodules:
    core: Field protocol, exceptions, validation, elimination kernels
    vector: Vector and free vector functions
    matrix: Matrix and the projection builder
    reduction: Row-echelon form, determinant, inverse, rank
"""

__version__ = "0.1.0"

from pylinalg.core.exceptions import (
    LinalgError,
    ValidationError,
    DimensionError,
    DivisionByZeroError,
    NumericalError,
    SingularMatrixError,
)
from pylinalg.vector import Vector, cross_product, linear_combination, lerp, angle_cos
from pylinalg.matrix import Matrix, projection
from pylinalg.reduction import row_echelon, determinant, inverse, rank

__all__ = [
    "__version__",
    # Types
    "Vector",
    "Matrix",
    # Vector functions
    "cross_product",
    "linear_combination",
    "lerp",
    "angle_cos",
    # Matrix functions
    "projection",
    "row_echelon",
    "determinant",
    "inverse",
    "rank",
    # Exceptions
    "LinalgError",
    "ValidationError",
    "DimensionError",
    "DivisionByZeroError",
    "NumericalError",
    "SingularMatrixError",
]
