"""
Vector: fixed-dimension ordered container of field scalars.

The dimension is fixed at construction and never changes afterwards.
Named methods (add, sub, scl, inv_scl) mutate the receiver in place;
operators return new vectors and delegate to the named methods.
"""

from __future__ import annotations

import math
import operator
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.field import widen, zero
from pylinalg.core.precision import format_scalar, is_close
from pylinalg.core.tolerances import select_tolerance
from pylinalg.core.validation import (
    check_array,
    check_ndim,
    check_not_empty,
    check_size,
    check_same_shape,
    coerce_scalar,
    check_nonzero_divisor,
    is_field_scalar,
)
from pylinalg.core.exceptions import DivisionByZeroError


def _is_operand(value: Any) -> bool:
    return isinstance(value, Vector) or is_field_scalar(value)


class Vector:
    """
    Fixed-dimension vector over a field.

    Construction:
        Vector([1.0, 2.0, 3.0])
        Vector.from_buffer(buffer, size=3)

    Storage is a private numpy array; integer input is promoted to
    float64, float32 is preserved and exact scalars (Fraction, Decimal)
    are kept in object storage.
    """

    __slots__ = ('_data',)
    __hash__ = None  # mutable value type
    # Make numpy scalars defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, data: ArrayLike):
        array = check_array(data, 'data')
        check_ndim(array, 1, 'data')
        check_not_empty(array, 'data')
        self._data = array

    @classmethod
    def from_buffer(cls, buffer: ArrayLike, size: int) -> Vector:
        """
        Build a Vector from a flat buffer with an explicit size.

        Parameters
        ----------
        buffer : array-like
            1D sequence of scalars.
        size : int
            Declared dimension; must equal len(buffer).
        """
        array = check_array(buffer, 'buffer')
        check_ndim(array, 1, 'buffer')
        check_size(array.shape[0], size, 'buffer')
        check_not_empty(array, 'buffer')
        return cls._wrap(array)

    @classmethod
    def _wrap(cls, array: NDArray[Any]) -> Vector:
        """Adopt an already validated 1D array without copying."""
        vector = cls.__new__(cls)
        vector._data = array
        return vector

    # --- Accessors ---

    @property
    def size(self) -> int:
        """Dimension N."""
        return self._data.shape[0]

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
        return self.size

    def __getitem__(self, index: int) -> Any:
        return self._data[operator.index(index)]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data.tolist())

    def __array__(self, dtype=None, copy=None) -> NDArray[Any]:
        return np.array(self._data, dtype=dtype)

    def tolist(self) -> list[Any]:
        return self._data.tolist()

    def copy(self) -> Vector:
        return Vector._wrap(self._data.copy())

    # --- In-place named operations ---

    def _check_compatible(self, other: Vector) -> None:
        if not isinstance(other, Vector):
            raise TypeError(f"expected Vector, got {type(other).__name__}")
        check_same_shape(self._data.shape, other._data.shape, ('self', 'other'))

    def add(self, other: Vector) -> None:
        """Element-wise addition in place."""
        self._check_compatible(other)
        self._data[...] = self._data + other._data

    def sub(self, other: Vector) -> None:
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

    # --- Products and norms ---

    def dot(self, other: Vector) -> Any:
        """Sum of element-wise products, in the field of the operands."""
        self._check_compatible(other)
        acc = zero(self._data)
        for a, b in zip(self._data, other._data):
            acc = acc + a * b
        return acc

    def _widened(self) -> NDArray[np.float64]:
        return self._data.astype(np.float64)

    def norm(self) -> float:
        """Euclidean norm, sqrt(dot(self, self)), in double precision."""
        return math.sqrt(widen(self.dot(self)))

    def norm_1(self) -> float:
        """Taxicab norm: sum of absolute values."""
        return float(np.sum(np.abs(self._widened())))

    def norm_inf(self) -> float:
        """Supremum norm: largest absolute value."""
        return float(np.max(np.abs(self._widened())))

    def allclose(
        self,
        other: Vector,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Element-wise closeness against another vector.

        Tolerances default to the tier matching this vector's storage
        (see pylinalg.core.tolerances).
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
        if not isinstance(other, Vector):
            return NotImplemented
        if self._data.shape != other._data.shape:
            return False
        return bool(np.all(self._data == other._data))

    def __str__(self) -> str:
        return "[" + ", ".join(format_scalar(x) for x in self._data) + "]"

    def __repr__(self) -> str:
        return f"Vector({self._data.tolist()!r})"

    # --- Operator sugar ---

    def __neg__(self) -> Vector:
        return Vector._wrap(-self._data)

    def __add__(self, other: Any) -> Vector:
        if not _is_operand(other):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __radd__(self, other: Any) -> Vector:
        if not is_field_scalar(other):
            return NotImplemented
        return self + other

    def __sub__(self, other: Any) -> Vector:
        if not _is_operand(other):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __rsub__(self, other: Any) -> Vector:
        if not is_field_scalar(other):
            return NotImplemented
        return -self + other

    def __mul__(self, other: Any) -> Vector:
        if not _is_operand(other):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __rmul__(self, other: Any) -> Vector:
        if not is_field_scalar(other):
            return NotImplemented
        return self * other

    def __truediv__(self, other: Any) -> Vector:
        if not _is_operand(other):
            return NotImplemented
        result = self.copy()
        result /= other
        return result

    def __matmul__(self, other: Any) -> Any:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    def __iadd__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            self.add(other)
        elif is_field_scalar(other):
            self._data[...] = self._data + coerce_scalar(other, self._data, 'other')
        else:
            raise TypeError(f"cannot add {type(other).__name__} to Vector")
        return self

    def __isub__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            self.sub(other)
        elif is_field_scalar(other):
            self._data[...] = self._data - coerce_scalar(other, self._data, 'other')
        else:
            raise TypeError(f"cannot subtract {type(other).__name__} from Vector")
        return self

    def __imul__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            self._check_compatible(other)
            self._data[...] = self._data * other._data
        elif is_field_scalar(other):
            self.scl(other)
        else:
            raise TypeError(f"cannot multiply Vector by {type(other).__name__}")
        return self

    def __itruediv__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            self._check_compatible(other)
            if np.any(other._data == 0):
                raise DivisionByZeroError("other: element-wise division by zero")
            self._data[...] = self._data / other._data
        elif is_field_scalar(other):
            self.inv_scl(other)
        else:
            raise TypeError(f"cannot divide Vector by {type(other).__name__}")
        return self
