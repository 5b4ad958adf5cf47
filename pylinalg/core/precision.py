"""
Numerical precision constants and utilities.

Provides machine epsilon, display precision and closeness checks used
across Vector, Matrix and the elimination kernels.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Machine epsilon for float64
EPSILON_64: float = np.finfo(np.float64).eps  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = np.finfo(np.float32).eps  # ~1.19e-7

# Decimal places used when rendering vectors and matrices
DISPLAY_DECIMALS: int = 3


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Exact storage (object dtype holding Fraction or Decimal) has no
    rounding error, so its epsilon is 0.0.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.floating):
        return 0.0
    return float(np.finfo(dtype).eps)


def format_scalar(value: Any, decimals: int = DISPLAY_DECIMALS) -> str:
    """Render one scalar with a fixed number of decimal places."""
    return f"{float(value):.{decimals}f}"


def is_close(
    a: NDArray[Any],
    b: NDArray[Any],
    rtol: float,
    atol: float
) -> bool:
    """
    Check if two equally shaped arrays are element-wise close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    Both arrays are widened to float64 first so that exact storage
    can be compared against floating results.

    Args:
        a: First array
        b: Second array
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        True if every element pair is within tolerance
    """
    a64 = np.asarray(a, dtype=np.float64)
    b64 = np.asarray(b, dtype=np.float64)
    return bool(np.all(np.abs(a64 - b64) <= atol + rtol * np.abs(b64)))
