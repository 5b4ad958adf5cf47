"""
Input validation utilities for PyLinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently truncating,
padding or otherwise guessing at caller intent.

Design principles:
    - No silent type coercion (except integer -> float64 promotion, and
      builtin numbers -> the exact type of object storage)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sized
from decimal import Decimal
from fractions import Fraction
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import (
    ValidationError,
    DimensionError,
    DivisionByZeroError,
)
from pylinalg.core.field import zero
from pylinalg.core.protocols import Field

# Scalar types that object storage normalizes to a single exact type
_NATIVE_SCALARS = (int, float, np.integer, np.floating, Fraction, Decimal)


def is_field_scalar(value: Any) -> bool:
    """Whether a single object is a real scalar with field arithmetic."""
    if isinstance(value, (bool, np.bool_, complex, np.complexfloating, np.ndarray)):
        return False
    return isinstance(value, Field)


def check_scalar(value: Any, name: str) -> None:
    """
    Verify a value is a single field scalar.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is not a real scalar with field arithmetic
    """
    if not is_field_scalar(value):
        raise ValidationError(
            f"{name}: expected a real scalar, got {type(value).__name__}"
        )


def _promote_exact(result: NDArray[Any], name: str) -> NDArray[Any]:
    """
    Convert builtin/NumPy ints and floats in object storage to the array's
    exact type, so that every element shares one field.

    The exact type is Decimal if any element is a Decimal, else Fraction.
    Arrays holding other user-defined field types are left untouched.
    """
    kinds = {type(v) for v in result.flat}
    if any(not issubclass(t, _NATIVE_SCALARS) for t in kinds):
        return result

    has_decimal = any(issubclass(t, Decimal) for t in kinds)
    has_fraction = any(issubclass(t, Fraction) for t in kinds)
    if has_decimal and has_fraction:
        raise ValidationError(
            f"{name}: cannot mix Decimal and Fraction elements in one array"
        )
    exact = Decimal if has_decimal else Fraction

    for idx, v in np.ndenumerate(result):
        if isinstance(v, (int, np.integer)):
            result[idx] = exact(int(v))
        elif isinstance(v, (float, np.floating)):
            try:
                result[idx] = exact(float(v))
            except (ValueError, OverflowError) as e:
                raise ValidationError(
                    f"{name}: element {v!r} has no exact {exact.__name__} value"
                ) from e
    return result


def coerce_scalar(value: Any, array: NDArray[Any], name: str) -> Any:
    """
    Validate a scalar operand and convert it to the storage's field.

    Floating storage takes the scalar as its own dtype. Exact storage
    (Fraction, Decimal) converts ints and floats exactly; any other scalar
    must combine with the storage's elements.

    Args:
        value: Scalar operand
        array: Storage the scalar will be combined with
        name: Parameter name for error messages

    Returns:
        The scalar in the storage's field

    Raises:
        ValidationError: If value is not a real scalar or cannot combine
            with the storage's scalar type
    """
    check_scalar(value, name)
    if array.dtype != object:
        return array.dtype.type(float(value))

    field_zero = zero(array)
    exact = type(field_zero)
    try:
        if exact in (Fraction, Decimal):
            if isinstance(value, (int, np.integer)):
                value = exact(int(value))
            elif isinstance(value, (float, np.floating)):
                value = exact(float(value))
        field_zero * value
    except (TypeError, ValueError, OverflowError) as e:
        raise ValidationError(
            f"{name}: {type(value).__name__} does not combine with "
            f"{exact.__name__} storage"
        ) from e
    return value


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[Any]:
    """
    Validate and copy input into a numpy array of field scalars.

    Accepts any array-like (objects exposing a ``.values`` array, such as
    pandas containers, are unwrapped first). The result never aliases the
    caller's buffer.

    Storage rules:
        - floating dtypes are preserved (float32 stays float32)
        - integer dtypes are promoted to float64 so division is closed
        - object dtype is kept only if every element satisfies Field
          (fractions.Fraction, decimal.Decimal, ...)
        - complex, boolean, string and other dtypes are rejected

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray owned by the caller

    Raises:
        ValidationError: If input cannot be converted to field storage
    """
    values = getattr(array, 'values', None)
    if values is not None and not callable(values):
        array = values

    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        bad = [v for v in result.flat if not is_field_scalar(v)]
        if bad:
            raise ValidationError(
                f"{name}: element {bad[0]!r} of type {type(bad[0]).__name__} "
                f"does not support field arithmetic"
            )
        return _promote_exact(result, name)

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real scalars"
        )

    # Reject non-numeric dtypes (strings, bytes, booleans, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    # Division must be closed over the storage type
    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_not_empty(array: NDArray[Any], name: str) -> None:
    """
    Verify every axis of the array has at least one element.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If any axis has length 0
    """
    if array.size == 0:
        raise ValidationError(
            f"{name}: requires at least one element per axis, got shape {array.shape}"
        )


def check_size(actual: int, expected: int, name: str) -> None:
    """
    Verify an explicitly declared size matches the real one.

    Args:
        actual: Size observed in the data
        expected: Size the caller declared or the operation requires
        name: Parameter name for error messages

    Raises:
        DimensionError: If sizes differ
    """
    if actual != expected:
        raise DimensionError(
            f"{name}: size mismatch, expected {expected}, got {actual}",
            expected=expected,
            actual=actual,
        )


def check_same_shape(
    left: tuple[int, ...],
    right: tuple[int, ...],
    names: tuple[str, str],
) -> None:
    """
    Verify two operands have identical shapes.

    Args:
        left: Shape of the receiver
        right: Shape of the other operand
        names: Operand names for error messages

    Raises:
        DimensionError: If shapes differ
    """
    if tuple(left) != tuple(right):
        raise DimensionError(
            f"Shape mismatch: {names[0]}={tuple(left)}, {names[1]}={tuple(right)}",
            expected=tuple(left),
            actual=tuple(right),
        )


def check_square(shape: tuple[int, ...], name: str) -> None:
    """
    Verify a matrix shape is square.

    Args:
        shape: (rows, cols)
        name: Parameter name for error messages

    Raises:
        DimensionError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise DimensionError(
            f"{name}: expected a square matrix, got shape {rows}x{cols}",
            expected=(rows, rows),
            actual=(rows, cols),
        )


def check_consistent_length(
    *sequences: Sized,
    names: tuple[str, ...]
) -> None:
    """
    Verify all sequences have the same length.

    Args:
        *sequences: Sequences to check
        names: Parameter names for error messages (must match number of sequences)

    Raises:
        ValueError: If number of names doesn't match number of sequences
        DimensionError: If sequences have inconsistent lengths
    """
    if len(sequences) != len(names):
        raise ValueError(
            f"Number of sequences ({len(sequences)}) must match number of names ({len(names)})"
        )

    if len(sequences) < 2:
        return

    lengths = [len(seq) for seq in sequences]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_nonzero_divisor(value: Any, name: str) -> None:
    """
    Verify a divisor is not the field's additive identity.

    Args:
        value: Scalar divisor
        name: Parameter name for error messages

    Raises:
        DivisionByZeroError: If value == 0
    """
    if value == 0:
        raise DivisionByZeroError(f"{name}: division by zero")
