"""
Free functions over vectors.

Provides cross_product(), linear_combination(), lerp() and angle_cos().
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

import numpy as np

from pylinalg.core.exceptions import DimensionError, DivisionByZeroError, ValidationError
from pylinalg.core.field import widen, zeros_like_field
from pylinalg.core.validation import (
    check_consistent_length,
    coerce_scalar,
    check_size,
)
from pylinalg.vector.vector import Vector

T = TypeVar('T')


def _ensure_vector(value: Any) -> Vector:
    """Convert raw array-like to Vector if needed."""
    if isinstance(value, Vector):
        return value
    return Vector(value)


def cross_product(u: Any, v: Any) -> Vector:
    """
    Cross product of two 3-dimensional vectors.

    Parameters
    ----------
    u, v : Vector or array-like
        Operands of dimension exactly 3.

    Returns
    -------
    Vector
        u x v, orthogonal to both operands.

    Raises
    ------
    DimensionError
        If either operand's dimension is not 3.
    """
    u = _ensure_vector(u)
    v = _ensure_vector(v)
    check_size(u.size, 3, 'u')
    check_size(v.size, 3, 'v')

    a, b = u.data, v.data
    return Vector([
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    ])


def linear_combination(vectors: Sequence[Any], coefficients: Sequence[Any]) -> Vector:
    """
    Weighted sum of vectors.

    Element i of the result is sum_k coefficients[k] * vectors[k][i],
    accumulated in list order starting from the field's zero.

    Parameters
    ----------
    vectors : sequence of Vector or array-like
        Non-empty; all of the same dimension.
    coefficients : sequence of scalars
        One coefficient per vector.

    Raises
    ------
    DimensionError
        If the counts differ or the vectors have different dimensions.
    ValidationError
        If no vectors are given or a coefficient is not a scalar.
    """
    check_consistent_length(vectors, coefficients, names=('vectors', 'coefficients'))
    if len(vectors) == 0:
        raise ValidationError("vectors: requires at least one vector, got 0")

    vectors = [_ensure_vector(v) for v in vectors]
    size = vectors[0].size
    for k, vec in enumerate(vectors):
        if vec.size != size:
            raise DimensionError(
                f"vectors[{k}]: dimension {vec.size} differs from vectors[0] dimension {size}",
                expected=size,
                actual=vec.size,
            )
    storage = vectors[0].data
    coefficients = [
        coerce_scalar(coef, storage, f'coefficients[{k}]')
        for k, coef in enumerate(coefficients)
    ]

    acc = zeros_like_field((size,), storage)
    for vec, coef in zip(vectors, coefficients):
        acc = acc + coef * vec.data
    return Vector(acc)


def lerp(u: T, v: T, t: Any) -> T:
    """
    Linear interpolation u + (v - u) * t.

    Works for any type supporting +, - and multiplication by a scalar:
    Vector, Matrix and plain scalars alike. t is not clamped, so values
    outside [0, 1] extrapolate.
    """
    return u + (v - u) * t


def angle_cos(u: Any, v: Any) -> float:
    """
    Cosine of the angle between two vectors.

    Returns
    -------
    float
        dot(u, v) / (norm(u) * norm(v)), in double precision.

    Raises
    ------
    DimensionError
        If the vectors have different dimensions.
    DivisionByZeroError
        If either vector is the zero vector.
    """
    u = _ensure_vector(u)
    v = _ensure_vector(v)
    check_size(v.size, u.size, 'v')

    norm_u = u.norm()
    norm_v = v.norm()
    if norm_u == 0.0 or norm_v == 0.0:
        raise DivisionByZeroError("angle_cos: undefined for a zero vector")

    cos = widen(u.dot(v)) / (norm_u * norm_v)
    # Round-off can push |cos| slightly past 1 for parallel vectors
    return float(np.clip(cos, -1.0, 1.0))
