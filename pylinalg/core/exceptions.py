"""
Exception hierarchy for PyLinalg.

All exceptions inherit from LinalgError to allow catching any
library-specific error. Two classes of failure exist:

    - ValidationError and subclasses: caller contract violations
      (mismatched dimensions, zero divisors). Raised immediately.
    - NumericalError and subclasses: data-dependent conditions the caller
      may legitimately want to test for (e.g. a singular matrix).

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class LinalgError(Exception):
    """Base exception for all PyLinalg errors."""
    pass


class ValidationError(LinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand dimensions are incorrect or inconsistent.

    Raised when vector sizes or matrix shapes don't match what an
    operation requires, or when paired sequences have different lengths.

    Attributes:
        expected: The dimension the operation required, if known
        actual: The dimension that was supplied, if known
    """

    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class DivisionByZeroError(ValidationError, ZeroDivisionError):
    """
    Division by the field's additive identity was requested.

    Also a ZeroDivisionError so that generic numeric code catching the
    builtin keeps working.
    """
    pass


class NumericalError(LinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from the data itself rather than from
    how the operation was called.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when a matrix operation requires invertibility but elimination
    could not produce a full set of pivots.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Number of pivots found during elimination, if computed
        expected_rank: Rank required for invertibility (the matrix order)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank
