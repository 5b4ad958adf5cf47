"""
Field identities and conversions derived from array storage.

Scalars are stored in numpy arrays, so the additive and multiplicative
identities come from the storage: the dtype itself for floating arrays,
or the type of the stored elements for object arrays holding exact
scalars (fractions.Fraction, decimal.Decimal).
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray


def _scalar_type(array: NDArray[Any]) -> type:
    if array.dtype != object:
        return array.dtype.type
    if array.size == 0:
        return int
    return type(array.flat[0])


def zero(array: NDArray[Any]) -> Any:
    """Additive identity of the array's scalar type."""
    return _scalar_type(array)(0)


def one(array: NDArray[Any]) -> Any:
    """Multiplicative identity of the array's scalar type."""
    return _scalar_type(array)(1)


def widen(value: Any) -> float:
    """Convert a field scalar to double precision."""
    return float(value)


def identity_like(n: int, array: NDArray[Any]) -> NDArray[Any]:
    """
    n x n identity in the same storage as ``array``.

    Args:
        n: Matrix order
        array: Array whose dtype / scalar type is reused

    Returns:
        Identity matrix of shape (n, n)
    """
    if array.dtype != object:
        return np.eye(n, dtype=array.dtype)
    result = np.full((n, n), zero(array), dtype=object)
    for i in range(n):
        result[i, i] = one(array)
    return result


def zeros_like_field(shape: tuple[int, ...], array: NDArray[Any]) -> NDArray[Any]:
    """Array of the field's zero with the given shape and ``array``'s storage."""
    if array.dtype != object:
        return np.zeros(shape, dtype=array.dtype)
    return np.full(shape, zero(array), dtype=object)
