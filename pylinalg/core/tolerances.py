"""
Tolerance tiers for numerical comparison.

Defines precision expectations for each storage type:
- FP64: double precision, compared against NumPy/SciPy to 1e-10
- FP32: single precision, relaxed to 1e-6
- EXACT: object storage holding exact scalars (Fraction), no slack

Used by Vector.allclose / Matrix.allclose and by the test suite.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision: matches the reference oracle to 1e-10 absolute
FP64 = ToleranceTier(
    rtol=0.0,
    atol=1e-10,
    name='fp64',
    description='Double precision, matches NumPy reference to 1e-10',
)

# Single precision
FP32 = ToleranceTier(
    rtol=0.0,
    atol=1e-6,
    name='fp32',
    description='Single precision, matches NumPy reference to 1e-6',
)

# Exact scalars (fractions.Fraction in object storage)
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact arithmetic, results must be identical',
)


def select_tolerance(dtype: np.dtype | type) -> ToleranceTier:
    """Select appropriate tolerance tier for a given storage dtype."""
    dtype = np.dtype(dtype)
    if dtype == np.float32 or dtype == np.float16:
        return FP32
    if np.issubdtype(dtype, np.floating):
        return FP64
    return EXACT
