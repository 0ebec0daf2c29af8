"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_dimension / check_scalar / check_tolerance: scalar arguments
    - check_array: conversion, dtype coercion, rejection of non-real data
    - check_2d / check_rectangular / check_grid: grid shape checks
    - check_same_shape / check_inner_dimensions / check_square
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import ShapeError, ValidationError
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_dimension,
    check_grid,
    check_inner_dimensions,
    check_rectangular,
    check_same_shape,
    check_scalar,
    check_square,
    check_tolerance,
)


# ═══════════════════════════════════════════════════════════════════════
# Scalar arguments
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDimension:

    def test_int_passes(self):
        assert check_dimension(3, "rows") == 3

    def test_zero_passes(self):
        assert check_dimension(0, "rows") == 0

    def test_numpy_int_passes(self):
        result = check_dimension(np.int64(4), "rows")
        assert result == 4
        assert type(result) is int

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            check_dimension(-1, "rows")

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="rows"):
            check_dimension(2.0, "rows")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            check_dimension(True, "rows")


class TestCheckScalar:

    def test_int_becomes_float(self):
        result = check_scalar(2, "value")
        assert result == 2.0
        assert type(result) is float

    def test_numpy_float_passes(self):
        assert check_scalar(np.float64(1.5), "value") == 1.5

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="real number"):
            check_scalar("1", "value")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError):
            check_scalar(1 + 2j, "value")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            check_scalar(False, "value")


class TestCheckTolerance:

    def test_zero_passes(self):
        assert check_tolerance(0, "tolerance") == 0.0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            check_tolerance(-1e-3, "tolerance")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError):
            check_tolerance(float("nan"), "tolerance")


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-real data."""

    def test_int_list_promoted_to_float64(self):
        result = check_array([[1, 2], [3, 4]], "grid")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [[1.0, 2.0], [3.0, 4.0]])

    def test_float32_promoted_to_float64(self):
        result = check_array(np.ones((2, 2), dtype=np.float32), "grid")
        assert result.dtype == np.float64

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "grid")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([["a", "b"], ["c", "d"]], "grid")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([[1 + 1j]], "grid")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_grid"):
            check_array(["a"], "my_grid")


# ═══════════════════════════════════════════════════════════════════════
# Grid shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckGrid:
    """check_grid returns an owned, rectangular, non-empty float64 copy."""

    def test_valid_grid(self):
        result = check_grid([[1, 2, 3], [4, 5, 6]], "grid")
        assert result.shape == (2, 3)
        assert result.flags.c_contiguous

    def test_copies_ndarray_input(self):
        source = np.array([[1.0, 2.0], [3.0, 4.0]])
        result = check_grid(source, "grid")
        result[0, 0] = 99.0
        assert source[0, 0] == 1.0

    def test_ragged_rejected(self):
        with pytest.raises(ShapeError, match="ragged"):
            check_grid([[1, 2], [3]], "grid")

    def test_empty_rejected(self):
        with pytest.raises(ShapeError):
            check_grid([], "grid")

    def test_empty_rows_rejected(self):
        with pytest.raises(ShapeError, match="empty"):
            check_grid([[], []], "grid")

    def test_flat_list_rejected(self):
        with pytest.raises(ShapeError):
            check_grid([1, 2, 3], "grid")

    def test_3d_rejected(self):
        with pytest.raises(ShapeError, match="expected 2D"):
            check_grid(np.zeros((2, 2, 2)), "grid")

    def test_check_2d_passes(self):
        check_2d(np.zeros((1, 1)), "grid")

    def test_rectangular_ndarray_passes(self):
        check_rectangular(np.zeros((3, 1)), "grid")


class TestShapeChecks:

    def test_same_shape_passes(self):
        check_same_shape((2, 3), (2, 3), "add")

    def test_different_shape_rejected(self):
        with pytest.raises(ShapeError) as exc_info:
            check_same_shape((2, 3), (3, 2), "add")
        assert exc_info.value.expected == (2, 3)
        assert exc_info.value.actual == (3, 2)

    def test_inner_dimensions_pass(self):
        check_inner_dimensions((2, 3), (3, 5), "mul")

    def test_inner_dimensions_rejected(self):
        with pytest.raises(ShapeError, match="2x3 @ 2x3"):
            check_inner_dimensions((2, 3), (2, 3), "mul")

    def test_square_passes(self):
        check_square((4, 4), "inverse")

    def test_non_square_rejected(self):
        with pytest.raises(ShapeError, match="must be square"):
            check_square((2, 3), "inverse")
