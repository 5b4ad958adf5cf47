"""
Tests for inverse().

Validates:
    - Known inverses and agreement with scipy.linalg.inv
    - A @ inverse(A) recovers the identity
    - SingularMatrixError with rank diagnostics
    - Ill-conditioning RuntimeWarning
    - Exact inversion over fractions
"""

import warnings
from fractions import Fraction

import numpy as np
import pytest
from scipy import linalg as sp_linalg

from pylinalg import Matrix, inverse
from pylinalg.core.exceptions import DimensionError, LinalgError, SingularMatrixError


# ═══════════════════════════════════════════════════════════════════════
# Invertible matrices
# ═══════════════════════════════════════════════════════════════════════


class TestInvertible:

    def test_identity(self):
        assert inverse(Matrix.identity(3)) == Matrix.identity(3)

    def test_scaled_identity(self):
        assert inverse(Matrix.identity(3) * 2) == Matrix.identity(3) * 0.5

    def test_exercise_matrix(self, exercise_matrix):
        expected = Matrix([
            [0.649425287, 0.097701149, -0.655172414],
            [-0.781609195, -0.126436782, 0.965517241],
            [0.143678161, 0.074712644, -0.206896552],
        ])
        assert inverse(Matrix(exercise_matrix)).allclose(expected, atol=1e-8)

    def test_against_scipy(self, random_invertible):
        for A in random_invertible:
            np.testing.assert_allclose(
                np.asarray(inverse(Matrix(A))), sp_linalg.inv(A), atol=1e-10
            )

    def test_product_is_identity(self, random_invertible):
        for A in random_invertible:
            m = Matrix(A)
            n = m.rows
            assert (m @ inverse(m)).allclose(Matrix.identity(n))
            assert (inverse(m) @ m).allclose(Matrix.identity(n))

    def test_double_inverse(self, exercise_matrix):
        m = Matrix(exercise_matrix)
        assert inverse(inverse(m)).allclose(m)

    def test_input_not_mutated(self, exercise_matrix):
        m = Matrix(exercise_matrix)
        inverse(m)
        assert m == Matrix(exercise_matrix)

    def test_method_matches_function(self, exercise_matrix):
        m = Matrix(exercise_matrix)
        assert m.inverse() == inverse(m)

    def test_float32_storage(self):
        m = Matrix(np.array([[4.0, 7.0], [2.0, 6.0]], dtype=np.float32))
        result = inverse(m)
        assert result.dtype == np.float32
        assert result.allclose(Matrix([[0.6, -0.7], [-0.2, 0.4]]))

    def test_well_conditioned_does_not_warn(self, exercise_matrix):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            inverse(Matrix(exercise_matrix))


class TestExactInverse:

    def test_fractions(self, fraction_matrix):
        m = Matrix(fraction_matrix)
        inv = inverse(m)
        assert inv.dtype == object
        assert inv[0, 0] == Fraction(1, 4)
        assert inv[0, 1] == Fraction(11, 20)
        assert inv[2, 2] == Fraction(9, 20)
        assert m @ inv == Matrix.identity(3)

    def test_mixed_int_and_fraction_entries(self):
        inv = inverse(Matrix([[1, Fraction(1, 2)], [Fraction(1, 3), 1]]))
        assert inv == Matrix([
            [Fraction(6, 5), Fraction(-3, 5)],
            [Fraction(-2, 5), Fraction(6, 5)],
        ])
        assert all(type(x) is Fraction for x in inv.data.flat)

    def test_object_identity_stays_exact(self):
        inv = inverse(Matrix.identity(2, dtype=object))
        assert inv == Matrix.identity(2)
        assert all(type(x) is Fraction for x in inv.data.flat)


# ═══════════════════════════════════════════════════════════════════════
# Failure modes
# ═══════════════════════════════════════════════════════════════════════


class TestSingular:

    def test_raises_singular_matrix_error(self):
        with pytest.raises(SingularMatrixError, match="singular"):
            inverse(Matrix([[2.0, 4.0], [1.0, 2.0]]))

    def test_rank_diagnostics(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            inverse(Matrix([[2.0, 4.0], [1.0, 2.0]]))
        assert exc_info.value.rank == 1
        assert exc_info.value.expected_rank == 2
        assert exc_info.value.matrix_name == "matrix"

    def test_zero_matrix(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            inverse(Matrix(np.zeros((3, 3))))
        assert exc_info.value.rank == 0

    def test_recoverable(self):
        """The error is an ordinary exception; later calls are unaffected."""
        with pytest.raises(LinalgError):
            inverse(Matrix([[1.0, 1.0], [1.0, 1.0]]))
        assert inverse(Matrix([[1.0, 1.0], [0.0, 1.0]])) == Matrix([[1.0, -1.0], [0.0, 1.0]])

    def test_exact_singular(self):
        third = Fraction(1, 3)
        with pytest.raises(SingularMatrixError):
            inverse(Matrix([[third, Fraction(1)], [Fraction(1), Fraction(3)]]))

    def test_requires_square(self):
        with pytest.raises(DimensionError, match="square"):
            inverse(Matrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]))


class TestIllConditioned:

    def test_warns_on_tiny_pivot(self):
        with pytest.warns(RuntimeWarning, match="ill-conditioned"):
            result = inverse(Matrix([[1.0, 0.0], [0.0, 1e-17]]))
        assert result[1, 1] == pytest.approx(1e17)

    def test_exact_storage_never_warns(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            inverse(Matrix([[Fraction(1), Fraction(0)], [Fraction(0), Fraction(1, 10**20)]]))

    def test_float_residue_on_singular_matrix(self):
        with pytest.warns(RuntimeWarning, match="ill-conditioned"):
            inverse(Matrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]]))

    def test_same_matrix_is_singular_in_exact_storage(self):
        exact = np.array([[1, 2, 3], [4, 5, 6], [7, 8, 9]], dtype=object)
        with pytest.raises(SingularMatrixError) as exc_info:
            inverse(exact)
        assert exc_info.value.rank == 2
