"""
Solver dispatch for the reduction engine.

Provides row_echelon(), determinant(), inverse() and rank(). Every
function accepts a Matrix or any 2D array-like, never mutates its input,
and returns a complete result or raises.
"""

from __future__ import annotations

import warnings
from typing import Any

from numpy.typing import ArrayLike

from pylinalg.core.compute.linalg.elimination import (
    gauss_jordan,
    determinant_kernel,
    inverse_kernel,
)
from pylinalg.core.exceptions import SingularMatrixError
from pylinalg.core.precision import machine_epsilon
from pylinalg.core.validation import check_square
from pylinalg.matrix.matrix import Matrix


def _ensure_matrix(data: ArrayLike | Matrix) -> Matrix:
    """Convert raw array to Matrix if needed."""
    if isinstance(data, Matrix):
        return data
    return Matrix(data)


def row_echelon(matrix: ArrayLike | Matrix) -> Matrix:
    """
    Reduced row-echelon form by Gauss-Jordan elimination.

    Partial pivoting picks the largest absolute value in each column
    (lowest row on ties). Columns without a nonzero entry are skipped,
    so rank-deficient and non-square matrices are supported.

    Parameters
    ----------
    matrix : Matrix or array-like
        Matrix to reduce; left unchanged.

    Returns
    -------
    Matrix
        A new matrix in reduced row-echelon form.
    """
    m = _ensure_matrix(matrix)
    return Matrix._wrap(gauss_jordan(m.data).reduced)


def rank(matrix: ArrayLike | Matrix) -> int:
    """Number of pivots found when reducing the matrix."""
    m = _ensure_matrix(matrix)
    return gauss_jordan(m.data).rank


def determinant(matrix: ArrayLike | Matrix) -> Any:
    """
    Determinant of a square matrix.

    Computed by forward elimination with partial pivoting; the result is
    the product of the un-normalized pivots, negated once per row swap.
    A singular matrix yields exactly the field's zero.

    Raises
    ------
    DimensionError
        If the matrix is not square.
    """
    m = _ensure_matrix(matrix)
    check_square(m.shape, 'matrix')
    return determinant_kernel(m.data)


def inverse(matrix: ArrayLike | Matrix) -> Matrix:
    """
    Inverse of a square matrix via reduction of [A | I].

    Returns
    -------
    Matrix
        A^-1 in the storage of A.

    Raises
    ------
    DimensionError
        If the matrix is not square.
    SingularMatrixError
        If elimination cannot produce a pivot in every column of A.

    Warns
    -----
    RuntimeWarning
        If the pivots span more orders of magnitude than the storage
        precision can resolve (floating storage only). Pivots are tested
        for exact zero, so a singular floating matrix whose elimination
        leaves round-off residue, e.g. [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
        inverts to huge entries with this warning rather than raising.
        Use exact storage (Fraction) when singularity must be detected
        reliably.
    """
    m = _ensure_matrix(matrix)
    check_square(m.shape, 'matrix')
    n = m.rows

    inv, elimination = inverse_kernel(m.data)
    if inv is None:
        left_rank = sum(1 for col in elimination.pivot_columns if col < n)
        raise SingularMatrixError(
            f"Matrix is singular: rank={left_rank}, expected={n}. "
            f"It has no inverse.",
            matrix_name='matrix',
            rank=left_rank,
            expected_rank=n,
        )

    eps = machine_epsilon(m.dtype)
    if eps > 0.0:
        magnitudes = [abs(float(p)) for p in elimination.pivot_values]
        if min(magnitudes) < n * eps * max(magnitudes):
            warnings.warn(
                f"Matrix is ill-conditioned: smallest pivot {min(magnitudes):.3e} "
                f"vs largest {max(magnitudes):.3e}. The inverse may be inaccurate.",
                RuntimeWarning,
                stacklevel=2,
            )

    return Matrix._wrap(inv)
