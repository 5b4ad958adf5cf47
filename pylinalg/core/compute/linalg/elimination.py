"""
Gaussian elimination kernels.

Operates on raw numpy arrays of any field storage (float32, float64, or
object arrays holding exact scalars). Inputs are never modified; every
kernel works on a private copy and returns a structured result dataclass.

Pivoting policy (shared by all kernels):
    Among the candidate rows, the entry with the largest absolute value
    in the pivot column wins; on exact ties the lowest row index wins.
    A column whose best candidate equals zero has no pivot.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.field import zero, one, identity_like


@dataclass(frozen=True)
class EliminationResult:
    """
    Result of Gauss-Jordan elimination.

    Attributes:
        reduced: Reduced row-echelon form of the input (same shape and storage)
        pivot_columns: Column index of each pivot, in row order
        pivot_values: Pivot entries before normalization, in row order
        n_swaps: Number of row exchanges performed
    """
    reduced: NDArray[Any]
    pivot_columns: tuple[int, ...]
    pivot_values: tuple[Any, ...]
    n_swaps: int

    @property
    def rank(self) -> int:
        """Number of pivots found."""
        return len(self.pivot_columns)


@dataclass(frozen=True)
class TriangularResult:
    """
    Result of forward elimination to upper-triangular form.

    Attributes:
        upper: Upper-triangular factor, rows not normalized. When
            ``singular_column`` is set, elimination stopped early and the
            trailing block is left as found.
        n_swaps: Number of row exchanges performed
        singular_column: First column without a nonzero candidate, or None
    """
    upper: NDArray[Any]
    n_swaps: int
    singular_column: int | None


def select_pivot(work: NDArray[Any], start_row: int, col: int) -> int:
    """
    Row index of the largest-magnitude entry in ``work[start_row:, col]``.

    np.argmax returns the first occurrence of the maximum, which gives the
    lowest-index tie-break.
    """
    magnitudes = np.abs(work[start_row:, col])
    return start_row + int(np.argmax(magnitudes))


def _swap_rows(work: NDArray[Any], i: int, j: int) -> None:
    work[[i, j]] = work[[j, i]]


def gauss_jordan(A: NDArray[Any]) -> EliminationResult:
    """
    Reduced row-echelon form by Gauss-Jordan elimination with partial pivoting.

    For each column, the pivot row is normalized to a leading one and the
    column is cleared from every other row. Columns without a nonzero
    candidate are skipped without consuming a row, so rank-deficient and
    non-square inputs are fully supported.

    Args:
        A: Matrix to reduce (m x n)

    Returns:
        EliminationResult with the reduced copy and pivot bookkeeping
    """
    work = A.copy()
    m, n = work.shape
    field_zero = zero(work)
    field_one = one(work)

    pivot_row = 0
    pivot_columns: list[int] = []
    pivot_values: list[Any] = []
    n_swaps = 0

    for col in range(n):
        if pivot_row >= m:
            break

        best = select_pivot(work, pivot_row, col)
        if work[best, col] == field_zero:
            continue

        if best != pivot_row:
            _swap_rows(work, pivot_row, best)
            n_swaps += 1

        pivot = work[pivot_row, col]
        work[pivot_row] = work[pivot_row] / pivot
        # Division can leave 1 - ulp in floating storage
        work[pivot_row, col] = field_one

        for row in range(m):
            if row == pivot_row:
                continue
            factor = work[row, col]
            if factor == field_zero:
                continue
            work[row, col:] = work[row, col:] - factor * work[pivot_row, col:]
            work[row, col] = field_zero

        pivot_columns.append(col)
        pivot_values.append(pivot)
        pivot_row += 1

    return EliminationResult(
        reduced=work,
        pivot_columns=tuple(pivot_columns),
        pivot_values=tuple(pivot_values),
        n_swaps=n_swaps,
    )


def forward_eliminate(A: NDArray[Any]) -> TriangularResult:
    """
    Forward elimination of a square matrix to upper-triangular form.

    Rows are never normalized, so the diagonal of the result holds the
    raw pivot values. Stops at the first column with no nonzero candidate.

    Args:
        A: Square matrix (n x n)

    Returns:
        TriangularResult with the triangular copy and swap count
    """
    work = A.copy()
    n = work.shape[0]
    field_zero = zero(work)
    n_swaps = 0

    for col in range(n):
        best = select_pivot(work, col, col)
        if work[best, col] == field_zero:
            return TriangularResult(upper=work, n_swaps=n_swaps, singular_column=col)

        if best != col:
            _swap_rows(work, col, best)
            n_swaps += 1

        pivot = work[col, col]
        for row in range(col + 1, n):
            factor = work[row, col] / pivot
            if factor == field_zero:
                continue
            work[row, col:] = work[row, col:] - factor * work[col, col:]
            work[row, col] = field_zero

    return TriangularResult(upper=work, n_swaps=n_swaps, singular_column=None)


def determinant_kernel(A: NDArray[Any]) -> Any:
    """
    Determinant of a square matrix via forward elimination.

    det(A) = (-1)^swaps * prod(diag(U)), with the product accumulated in
    column order. A singular matrix yields the field's zero exactly.

    Args:
        A: Square matrix (n x n)

    Returns:
        Determinant as a scalar of A's field
    """
    tri = forward_eliminate(A)
    if tri.singular_column is not None:
        return zero(A)

    det = one(A)
    for i in range(tri.upper.shape[0]):
        det = det * tri.upper[i, i]
    if tri.n_swaps % 2 == 1:
        det = -det
    return det


def inverse_kernel(A: NDArray[Any]) -> tuple[NDArray[Any] | None, EliminationResult]:
    """
    Inverse of a square matrix by reducing the augmented matrix [A | I].

    Args:
        A: Square matrix (n x n)

    Returns:
        (inverse, elimination) where inverse is None when A is singular,
        i.e. when the pivots of [A | I] are not exactly columns 0..n-1.
    """
    n = A.shape[0]
    augmented = np.concatenate([A, identity_like(n, A)], axis=1)
    elimination = gauss_jordan(augmented)

    if elimination.pivot_columns != tuple(range(n)):
        return None, elimination
    return elimination.reduced[:, n:].copy(), elimination
