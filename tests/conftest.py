"""
pytest configuration and shared fixtures.
"""

from fractions import Fraction

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def exercise_matrix():
    """3x3 invertible matrix with a known inverse."""
    return np.array([[8.0, 5.0, -2.0], [4.0, 7.0, 20.0], [7.0, 6.0, 1.0]])


@pytest.fixture
def fraction_matrix():
    """3x3 matrix of exact rationals (det = -20)."""
    return [
        [Fraction(2), Fraction(5), Fraction(3)],
        [Fraction(1), Fraction(-2), Fraction(-1)],
        [Fraction(1), Fraction(3), Fraction(4)],
    ]


@pytest.fixture
def random_invertible(rng):
    """Random well-conditioned square matrices of several orders."""
    return [
        rng.standard_normal((n, n)) + n * np.eye(n)
        for n in (2, 3, 5, 8)
    ]
