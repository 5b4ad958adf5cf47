"""
Matrix: fixed-shape 2D container of field scalars.

Shape (rows x cols) is fixed at construction. Named methods (add, sub,
scl, inv_scl) mutate the receiver in place; products, transpose and the
reduction operations return new matrices. Operators delegate to the
named methods.
"""

from __future__ import annotations

import operator
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.field import zeros_like_field
from pylinalg.core.precision import format_scalar, is_close
from pylinalg.core.tolerances import select_tolerance
from pylinalg.core.validation import (
    check_array,
    check_ndim,
    check_not_empty,
    check_size,
    check_same_shape,
    check_square,
    coerce_scalar,
    check_nonzero_divisor,
    is_field_scalar,
)
from pylinalg.core.exceptions import ValidationError
from pylinalg.vector.vector import Vector


def _is_operand(value: Any) -> bool:
    return isinstance(value, (Matrix, Vector)) or is_field_scalar(value)


class Matrix:
    """
    Fixed-shape matrix over a field.

    Construction:
        Matrix([[1.0, 2.0], [3.0, 4.0]])
        Matrix.from_buffer(buffer, rows=2, cols=2)
        Matrix.identity(3)

    Every row has exactly ``cols`` elements; ragged input is rejected.
    """

    __slots__ = ('_data',)
    __hash__ = None  # mutable value type
    # Make numpy scalars defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, data: ArrayLike):
        array = check_array(data, 'data')
        check_ndim(array, 2, 'data')
        check_not_empty(array, 'data')
        self._data = array

    @classmethod
    def from_buffer(cls, buffer: ArrayLike, rows: int, cols: int) -> Matrix:
        """
        Build a Matrix from a flat row-major buffer.

        Parameters
        ----------
        buffer : array-like
            1D sequence of rows * cols scalars.
        rows, cols : int
            Declared shape; rows * cols must equal len(buffer).
        """
        if rows < 1 or cols < 1:
            raise ValidationError(
                f"rows, cols: must both be at least 1, got rows={rows}, cols={cols}"
            )
        array = check_array(buffer, 'buffer')
        check_ndim(array, 1, 'buffer')
        check_size(array.shape[0], rows * cols, 'buffer')
        array = array.reshape(rows, cols)
        check_not_empty(array, 'buffer')
        return cls._wrap(array)

    @classmethod
    def identity(cls, n: int, dtype: np.dtype | type = np.float64) -> Matrix:
        """n x n identity matrix. Object dtype yields Fraction entries."""
        if n < 1:
            raise ValidationError(f"n: identity order must be at least 1, got {n}")
        return cls(np.eye(n, dtype=dtype))

    @classmethod
    def _wrap(cls, array: NDArray[Any]) -> Matrix:
        """Adopt an already validated 2D array without copying."""
        matrix = cls.__new__(cls)
        matrix._data = array
        return matrix

    # --- Accessors ---

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return self._data.shape

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    @property
    def dtype(self) -> np.dtype:
        """Storage dtype."""
        return self._data.dtype

    @property
    def data(self) -> NDArray[Any]:
        """Read-only view of the elements."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return self.rows

    def __getitem__(self, index: int | tuple[int, int]) -> Any:
        """m[i] returns a copy of row i as a Vector; m[i, j] returns a scalar."""
        if isinstance(index, tuple):
            i, j = index
            return self._data[operator.index(i), operator.index(j)]
        return Vector._wrap(self._data[operator.index(index)].copy())

    def __iter__(self) -> Iterator[Vector]:
        return (self[i] for i in range(self.rows))

    def __array__(self, dtype=None, copy=None) -> NDArray[Any]:
        return np.array(self._data, dtype=dtype)

    def tolist(self) -> list[list[Any]]:
        return self._data.tolist()

    def copy(self) -> Matrix:
        return Matrix._wrap(self._data.copy())

    # --- In-place named operations ---

    def _check_compatible(self, other: Matrix) -> None:
        if not isinstance(other, Matrix):
            raise TypeError(f"expected Matrix, got {type(other).__name__}")
        check_same_shape(self.shape, other.shape, ('self', 'other'))

    def _row_operand(self, vector: Vector) -> NDArray[Any]:
        check_size(vector.size, self.cols, 'vector')
        return vector.data

    def add(self, other: Matrix) -> None:
        """Element-wise addition in place."""
        self._check_compatible(other)
        self._data[...] = self._data + other._data

    def sub(self, other: Matrix) -> None:
        """Element-wise subtraction in place."""
        self._check_compatible(other)
        self._data[...] = self._data - other._data

    def scl(self, scalar: Any) -> None:
        """Multiply every element by a scalar, in place."""
        scalar = coerce_scalar(scalar, self._data, 'scalar')
        self._data[...] = self._data * scalar

    def inv_scl(self, scalar: Any) -> None:
        """Divide every element by a nonzero scalar, in place."""
        scalar = coerce_scalar(scalar, self._data, 'scalar')
        check_nonzero_divisor(scalar, 'scalar')
        self._data[...] = self._data / scalar

    # --- Products ---

    def mul_vec(self, rhs: Vector) -> Vector:
        """
        Matrix-vector product.

        Parameters
        ----------
        rhs : Vector
            Vector of dimension self.cols.

        Returns
        -------
        Vector of dimension self.rows.
        """
        if not isinstance(rhs, Vector):
            raise TypeError(f"expected Vector, got {type(rhs).__name__}")
        v = self._row_operand(rhs)
        acc = zeros_like_field((self.rows,), self._data)
        for k in range(self.cols):
            acc = acc + self._data[:, k] * v[k]
        return Vector._wrap(acc)

    def mul_mat(self, rhs: Matrix) -> Matrix:
        """
        Matrix-matrix product.

        Entry (i, j) is sum_k self[i, k] * rhs[k, j], accumulated over k
        in increasing order.

        Parameters
        ----------
        rhs : Matrix
            Matrix with rhs.rows == self.cols.

        Returns
        -------
        Matrix of shape (self.rows, rhs.cols).
        """
        if not isinstance(rhs, Matrix):
            raise TypeError(f"expected Matrix, got {type(rhs).__name__}")
        check_size(rhs.rows, self.cols, 'rhs rows')
        acc = zeros_like_field((self.rows, rhs.cols), self._data)
        for k in range(self.cols):
            acc = acc + np.outer(self._data[:, k], rhs._data[k, :])
        return Matrix._wrap(acc)

    def transpose(self) -> Matrix:
        """Swap rows and columns."""
        return Matrix._wrap(self._data.T.copy())

    def trace(self) -> Any:
        """Sum of the diagonal of a square matrix."""
        check_square(self.shape, 'matrix')
        return self._data.diagonal().sum()

    # --- Reduction engine ---

    def row_echelon(self) -> Matrix:
        """Reduced row-echelon form (see pylinalg.reduction.row_echelon)."""
        from pylinalg.reduction.solvers import row_echelon
        return row_echelon(self)

    def determinant(self) -> Any:
        """Determinant (see pylinalg.reduction.determinant)."""
        from pylinalg.reduction.solvers import determinant
        return determinant(self)

    def inverse(self) -> Matrix:
        """Inverse (see pylinalg.reduction.inverse)."""
        from pylinalg.reduction.solvers import inverse
        return inverse(self)

    def rank(self) -> int:
        """Number of pivots in the row-echelon form."""
        from pylinalg.reduction.solvers import rank
        return rank(self)

    def allclose(
        self,
        other: Matrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Element-wise closeness against another matrix.

        Tolerances default to the tier matching this matrix's storage.
        """
        self._check_compatible(other)
        tier = select_tolerance(self.dtype)
        return is_close(
            self._data,
            other._data,
            rtol=tier.rtol if rtol is None else rtol,
            atol=tier.atol if atol is None else atol,
        )

    # --- Comparison and display ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.all(self._data == other._data))

    def __str__(self) -> str:
        rows = [
            "[" + ", ".join(format_scalar(x) for x in row) + "]"
            for row in self._data
        ]
        return "[" + "\n ".join(rows) + "]"

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"

    # --- Operator sugar ---

    def __neg__(self) -> Matrix:
        return Matrix._wrap(-self._data)

    def __add__(self, other: Any) -> Matrix:
        if not _is_operand(other):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __radd__(self, other: Any) -> Matrix:
        if not _is_operand(other):
            return NotImplemented
        return self + other

    def __sub__(self, other: Any) -> Matrix:
        if not _is_operand(other):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __rsub__(self, other: Any) -> Matrix:
        if not _is_operand(other):
            return NotImplemented
        return -self + other

    def __mul__(self, other: Any) -> Matrix:
        # Matrix * Matrix is deliberately undefined; use @
        if isinstance(other, Matrix) or not _is_operand(other):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __rmul__(self, other: Any) -> Matrix:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Matrix:
        if not is_field_scalar(other):
            return NotImplemented
        result = self.copy()
        result /= other
        return result

    def __matmul__(self, other: Any) -> Matrix | Vector:
        if isinstance(other, Matrix):
            return self.mul_mat(other)
        if isinstance(other, Vector):
            return self.mul_vec(other)
        return NotImplemented

    def __iadd__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            self.add(other)
        elif isinstance(other, Vector):
            self._data[...] = self._data + self._row_operand(other)
        elif is_field_scalar(other):
            self._data[...] = self._data + coerce_scalar(other, self._data, 'other')
        else:
            raise TypeError(f"cannot add {type(other).__name__} to Matrix")
        return self

    def __isub__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            self.sub(other)
        elif isinstance(other, Vector):
            self._data[...] = self._data - self._row_operand(other)
        elif is_field_scalar(other):
            self._data[...] = self._data - coerce_scalar(other, self._data, 'other')
        else:
            raise TypeError(f"cannot subtract {type(other).__name__} from Matrix")
        return self

    def __imul__(self, other: Any) -> Matrix:
        if isinstance(other, Vector):
            self._data[...] = self._data * self._row_operand(other)
        elif is_field_scalar(other):
            self.scl(other)
        else:
            raise TypeError(f"cannot multiply Matrix by {type(other).__name__} in place; use @")
        return self

    def __itruediv__(self, other: Any) -> Matrix:
        if not is_field_scalar(other):
            raise TypeError(f"cannot divide Matrix by {type(other).__name__}")
        self.inv_scl(other)
        return self
