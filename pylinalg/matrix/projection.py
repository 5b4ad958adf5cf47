"""
Perspective projection matrix builder.
"""

from __future__ import annotations

import math

import numpy as np

from pylinalg.core.exceptions import ValidationError
from pylinalg.matrix.matrix import Matrix


def projection(
    fov: float,
    ratio: float,
    near: float,
    far: float,
    *,
    dtype: np.dtype | type = np.float64,
) -> Matrix:
    """
    Build a 4x4 perspective projection matrix.

    Layout (s = 1 / tan(fov / 2))::

        [[s / ratio, 0, 0,                          0],
         [0,         s, 0,                          0],
         [0,         0, (far + near) / (near - far), -1],
         [0,         0, 2 * far * near / (near - far), 0]]

    Parameters
    ----------
    fov : float
        Vertical field of view in radians, in (0, pi).
    ratio : float
        Aspect ratio width / height, > 0.
    near, far : float
        Clipping plane distances; near > 0 and near != far.
    dtype : dtype
        Storage dtype of the result.
    """
    if not 0.0 < fov < math.pi:
        raise ValidationError(f"fov: must be in (0, pi) radians, got {fov}")
    if ratio <= 0:
        raise ValidationError(f"ratio: must be positive, got {ratio}")
    if near <= 0:
        raise ValidationError(f"near: must be positive, got {near}")
    if near == far:
        raise ValidationError(f"near and far must differ, got near=far={near}")

    scale = 1.0 / math.tan(fov / 2.0)
    depth = near - far

    return Matrix(np.array([
        [scale / ratio, 0.0, 0.0, 0.0],
        [0.0, scale, 0.0, 0.0],
        [0.0, 0.0, (far + near) / depth, -1.0],
        [0.0, 0.0, (2.0 * far * near) / depth, 0.0],
    ], dtype=dtype))
