"""
Matrix module.

Public API:
    Matrix                          - Fixed-shape matrix over a field
    projection(fov, ratio, near, far) - 4x4 perspective projection matrix
"""

from pylinalg.matrix.matrix import Matrix
from pylinalg.matrix.projection import projection

__all__ = [
    "Matrix",
    "projection",
]
