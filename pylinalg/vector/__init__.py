"""
Vector module.

Public API:
    Vector                  - Fixed-dimension vector over a field
    cross_product(u, v)     - 3D cross product
    linear_combination(...) - Weighted sum of vectors
    lerp(u, v, t)           - Linear interpolation (any +, -, * type)
    angle_cos(u, v)         - Cosine of the angle between two vectors
"""

from pylinalg.vector.vector import Vector
from pylinalg.vector.solvers import (
    cross_product,
    linear_combination,
    lerp,
    angle_cos,
)

__all__ = [
    "Vector",
    "cross_product",
    "linear_combination",
    "lerp",
    "angle_cos",
]
