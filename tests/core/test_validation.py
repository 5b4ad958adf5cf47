"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype promotion, object/field rejection
    - check_scalar / is_field_scalar: scalar acceptance
    - check_ndim / check_not_empty: dimensionality checks
    - check_size / check_same_shape / check_square: shape agreement
    - check_consistent_length: paired sequence lengths
    - check_nonzero_divisor: zero divisor detection
"""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pylinalg.core.exceptions import DimensionError, DivisionByZeroError, ValidationError
from pylinalg.core.validation import (
    check_array,
    check_consistent_length,
    check_ndim,
    check_nonzero_divisor,
    check_not_empty,
    check_same_shape,
    check_scalar,
    check_size,
    check_square,
    coerce_scalar,
    is_field_scalar,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array copies to ndarray and rejects non-field data."""

    def test_int_list_promoted_to_float64(self):
        result = check_array([1, 2, 3], "X")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_preserved(self):
        arr = np.array([1.0, 2.0], dtype=np.float32)
        result = check_array(arr, "X")
        assert result.dtype == np.float32

    def test_result_is_a_copy(self):
        arr = np.array([1.0, 2.0, 3.0])
        result = check_array(arr, "X")
        result[0] = 99.0
        assert arr[0] == 1.0

    def test_fractions_kept_as_object(self):
        result = check_array([Fraction(1, 2), Fraction(3, 4)], "X")
        assert result.dtype == object
        assert result[0] == Fraction(1, 2)

    def test_decimals_kept_as_object(self):
        result = check_array([Decimal("1.5"), Decimal("2")], "X")
        assert result.dtype == object

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "X")
        assert result.shape == (2, 2)

    def test_values_attribute_unwrapped(self):
        class Frame:
            values = np.array([[1.0, 2.0]])

        result = check_array(Frame(), "X")
        assert result.shape == (1, 2)

    def test_rejects_ragged_rows(self):
        with pytest.raises(ValidationError, match="cannot convert"):
            check_array([[1.0, 2.0], [3.0]], "X")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex dtype"):
            check_array([1 + 2j, 3.0], "X")

    def test_rejects_booleans(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([True, False], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "X")

    def test_rejects_non_field_objects(self):
        with pytest.raises(ValidationError, match="does not support field arithmetic"):
            check_array([Fraction(1), None], "X")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a", "b"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# Scalars
# ═══════════════════════════════════════════════════════════════════════


class TestScalars:
    """Only real scalars with field arithmetic are accepted."""

    @pytest.mark.parametrize("value", [2, 2.5, np.float32(1.0), np.float64(3.0),
                                       Fraction(1, 3), Decimal("0.1")])
    def test_accepts_real_scalars(self, value):
        assert is_field_scalar(value)
        check_scalar(value, "k")  # no exception

    @pytest.mark.parametrize("value", [True, 1 + 1j, "2", None, [1.0], np.array([1.0])])
    def test_rejects_non_scalars(self, value):
        assert not is_field_scalar(value)
        with pytest.raises(ValidationError, match="expected a real scalar"):
            check_scalar(value, "k")


# ═══════════════════════════════════════════════════════════════════════
# Dimensionality
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionality:
    """check_ndim and check_not_empty."""

    def test_ndim_passes(self):
        check_ndim(np.zeros((2, 3)), 2, "X")  # no exception

    def test_ndim_rejects(self):
        with pytest.raises(DimensionError, match="expected 1D array, got 2D"):
            check_ndim(np.zeros((2, 3)), 1, "X")

    def test_not_empty_rejects_zero_length(self):
        with pytest.raises(ValidationError, match="at least one element"):
            check_not_empty(np.zeros((0,)), "X")

    def test_not_empty_rejects_empty_rows(self):
        with pytest.raises(ValidationError, match="at least one element"):
            check_not_empty(np.zeros((2, 0)), "X")


# ═══════════════════════════════════════════════════════════════════════
# Shape agreement
# ═══════════════════════════════════════════════════════════════════════


class TestShapeAgreement:
    """check_size, check_same_shape, check_square."""

    def test_size_match(self):
        check_size(3, 3, "buffer")  # no exception

    def test_size_mismatch(self):
        with pytest.raises(DimensionError, match="expected 4, got 3") as exc_info:
            check_size(3, 4, "buffer")
        assert exc_info.value.expected == 4
        assert exc_info.value.actual == 3

    def test_same_shape_mismatch(self):
        with pytest.raises(DimensionError, match="Shape mismatch"):
            check_same_shape((2,), (3,), ("u", "v"))

    def test_square_passes(self):
        check_square((3, 3), "A")  # no exception

    def test_square_rejects(self):
        with pytest.raises(DimensionError, match="square"):
            check_square((2, 3), "A")


# ═══════════════════════════════════════════════════════════════════════
# check_consistent_length
# ═══════════════════════════════════════════════════════════════════════


class TestCheckConsistentLength:
    """check_consistent_length verifies paired sequences."""

    def test_same_length_passes(self):
        check_consistent_length([1, 2], [3, 4], names=("a", "b"))  # no exception

    def test_inconsistent_rejected(self):
        with pytest.raises(DimensionError, match="Inconsistent lengths"):
            check_consistent_length([1, 2], [3], names=("vectors", "coefficients"))

    def test_error_details_include_names(self):
        with pytest.raises(DimensionError, match="vectors=2, coefficients=1"):
            check_consistent_length([1, 2], [3], names=("vectors", "coefficients"))

    def test_names_count_mismatch_raises_value_error(self):
        with pytest.raises(ValueError, match="must match number of names"):
            check_consistent_length([1], [2], names=("only_one",))


# ═══════════════════════════════════════════════════════════════════════
# check_nonzero_divisor
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNonzeroDivisor:

    def test_nonzero_passes(self):
        check_nonzero_divisor(0.5, "scalar")  # no exception

    @pytest.mark.parametrize("zero", [0, 0.0, -0.0, Fraction(0), Decimal(0)])
    def test_zero_rejected(self, zero):
        with pytest.raises(DivisionByZeroError, match="scalar"):
            check_nonzero_divisor(zero, "scalar")


# ═══════════════════════════════════════════════════════════════════════
# Exact object storage
# ═══════════════════════════════════════════════════════════════════════


class TestExactPromotion:
    """Object storage is normalized to a single exact scalar type."""

    def test_ints_next_to_fractions_become_fractions(self):
        result = check_array([1, Fraction(1, 2), np.int64(3)], "X")
        assert all(type(v) is Fraction for v in result)
        assert result[2] == Fraction(3)

    def test_floats_next_to_fractions_convert_exactly(self):
        result = check_array([0.5, Fraction(1, 3)], "X")
        assert result[0] == Fraction(1, 2)
        assert type(result[0]) is Fraction

    def test_ints_next_to_decimals_become_decimals(self):
        result = check_array([Decimal("1.5"), 2], "X")
        assert all(type(v) is Decimal for v in result)

    def test_object_ints_become_fractions(self):
        result = check_array(np.eye(2, dtype=object), "X")
        assert all(type(v) is Fraction for v in result.flat)

    def test_mixed_exact_types_rejected(self):
        with pytest.raises(ValidationError, match="cannot mix Decimal and Fraction"):
            check_array([Decimal(1), Fraction(1, 2)], "X")

    def test_non_finite_float_rejected(self):
        with pytest.raises(ValidationError, match="no exact Fraction value"):
            check_array([Fraction(1), float("nan")], "X")


class TestCoerceScalar:
    """Scalar operands are converted to the storage's field."""

    def test_float_storage_takes_its_dtype(self):
        value = coerce_scalar(Fraction(1, 2), np.zeros(2, dtype=np.float32), "k")
        assert type(value) is np.float32
        assert value == 0.5

    def test_fraction_storage_converts_int_and_float(self):
        storage = np.array([Fraction(1)], dtype=object)
        assert type(coerce_scalar(2, storage, "k")) is Fraction
        assert coerce_scalar(0.25, storage, "k") == Fraction(1, 4)

    def test_decimal_storage_converts_float(self):
        storage = np.array([Decimal(1)], dtype=object)
        value = coerce_scalar(2.0, storage, "k")
        assert type(value) is Decimal
        assert value == Decimal(2)

    def test_incompatible_exact_scalar_rejected(self):
        storage = np.array([Decimal(1)], dtype=object)
        with pytest.raises(ValidationError, match="does not combine with Decimal storage"):
            coerce_scalar(Fraction(1, 3), storage, "k")

    def test_non_scalar_rejected(self):
        with pytest.raises(ValidationError, match="expected a real scalar"):
            coerce_scalar("2", np.zeros(1), "k")
