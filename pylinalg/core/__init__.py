"""
Core infrastructure for PyLinalg.

This module provides shared abstractions and utilities used by the
vector, matrix and reduction subpackages.

Key components:
    protocols: Field capability protocol
    field: Field identities derived from storage
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Machine epsilon and display formatting
    tolerances: Comparison tolerance tiers
    compute: Elimination kernels
"""

from pylinalg.core.protocols import Field
from pylinalg.core.exceptions import (
    LinalgError,
    ValidationError,
    DimensionError,
    DivisionByZeroError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Field",
    # Exceptions
    "LinalgError",
    "ValidationError",
    "DimensionError",
    "DivisionByZeroError",
    "NumericalError",
    "SingularMatrixError",
]
