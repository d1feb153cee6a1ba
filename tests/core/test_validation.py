"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_dimension / check_shape: positive integer dimensions
    - check_rectangular: flattening and ragged-row rejection
    - check_flat_length: data length vs shape
    - check_same_shape / check_inner_dimensions: operand compatibility
    - check_index: bounds checking
    - check_nonzero_scalar / check_nonzero_cells: zero divisors
    - check_numeric_array / check_2d: NumPy conversion
"""

from fractions import Fraction

import numpy as np
import pytest

from pymatx.core.exceptions import (
    DimensionMismatch,
    DivisionByZero,
    IndexOutOfBounds,
    ShapeError,
    ValidationError,
)
from pymatx.core.validation import (
    check_2d,
    check_dimension,
    check_flat_length,
    check_index,
    check_inner_dimensions,
    check_nonzero_cells,
    check_nonzero_scalar,
    check_numeric_array,
    check_rectangular,
    check_same_shape,
    check_shape,
)


# ═══════════════════════════════════════════════════════════════════════
# Dimensions
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDimension:
    """Dimensions must be integers >= 1."""

    def test_positive_int_passes(self):
        assert check_dimension(3, "n_rows") == 3

    def test_numpy_int_accepted(self):
        result = check_dimension(np.int64(4), "n_rows")
        assert result == 4
        assert type(result) is int

    def test_zero_rejected(self):
        with pytest.raises(ShapeError, match="zero-sized"):
            check_dimension(0, "n_rows")

    def test_negative_rejected(self):
        with pytest.raises(ShapeError):
            check_dimension(-2, "n_cols")

    def test_float_rejected(self):
        with pytest.raises(ShapeError, match="float"):
            check_dimension(2.0, "n_rows")

    def test_bool_rejected(self):
        with pytest.raises(ShapeError, match="bool"):
            check_dimension(True, "n_rows")

    def test_error_message_includes_name(self):
        with pytest.raises(ShapeError, match="my_dim"):
            check_dimension(0, "my_dim")

    def test_check_shape_returns_pair(self):
        assert check_shape(2, 5) == (2, 5)


# ═══════════════════════════════════════════════════════════════════════
# Rectangularity and flat length
# ═══════════════════════════════════════════════════════════════════════


class TestCheckRectangular:
    """Nested rows are flattened only if rectangular."""

    def test_flattens_row_major(self):
        flat, n_rows, n_cols = check_rectangular([[1, 2, 3], [4, 5, 6]], "rows")
        assert flat == [1, 2, 3, 4, 5, 6]
        assert (n_rows, n_cols) == (2, 3)

    def test_accepts_tuples(self):
        flat, n_rows, n_cols = check_rectangular(((1, 2), (3, 4)), "rows")
        assert flat == [1, 2, 3, 4]

    def test_ragged_rejected(self):
        with pytest.raises(ShapeError, match="row 1 has 1 values, expected 2"):
            check_rectangular([[1, 2], [3]], "rows")

    def test_longer_later_row_rejected(self):
        with pytest.raises(ShapeError, match="ragged"):
            check_rectangular([[1], [2, 3]], "rows")

    def test_no_rows_rejected(self):
        with pytest.raises(ShapeError, match="at least one row"):
            check_rectangular([], "rows")

    def test_empty_first_row_rejected(self):
        with pytest.raises(ShapeError, match="at least one column"):
            check_rectangular([[]], "rows")


class TestCheckFlatLength:

    def test_matching_length_passes(self):
        check_flat_length([1, 2, 3, 4, 5, 6], 2, 3, "values")

    def test_wrong_length_rejected(self):
        with pytest.raises(ShapeError, match="expected 6 values"):
            check_flat_length([1, 2, 3], 2, 3, "values")


# ═══════════════════════════════════════════════════════════════════════
# Operand compatibility
# ═══════════════════════════════════════════════════════════════════════


class TestShapeCompatibility:
    """Element-wise needs equal shapes; products need matching inner dims."""

    def test_same_shape_passes(self):
        check_same_shape((2, 3), (2, 3), "add")

    def test_same_shape_transposed_rejected(self):
        with pytest.raises(DimensionMismatch) as exc_info:
            check_same_shape((2, 3), (3, 2), "add")
        assert exc_info.value.left_shape == (2, 3)
        assert exc_info.value.right_shape == (3, 2)
        assert exc_info.value.operation == "add"

    def test_inner_dimensions_pass(self):
        check_inner_dimensions((2, 3), (3, 4), "matmul")

    def test_inner_dimensions_rejected(self):
        with pytest.raises(DimensionMismatch, match="3 columns but right has 4 rows"):
            check_inner_dimensions((2, 3), (4, 2), "matmul")


# ═══════════════════════════════════════════════════════════════════════
# Indices
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_valid_index(self):
        assert check_index(1, 1, (2, 2)) == (1, 1)

    def test_row_too_large(self):
        with pytest.raises(IndexOutOfBounds) as exc_info:
            check_index(5, 0, (2, 2))
        assert exc_info.value.row == 5
        assert exc_info.value.shape == (2, 2)

    def test_col_too_large(self):
        with pytest.raises(IndexOutOfBounds):
            check_index(0, 2, (2, 2))

    def test_negative_rejected(self):
        with pytest.raises(IndexOutOfBounds):
            check_index(-1, 0, (2, 2))

    def test_non_integer_is_type_error(self):
        with pytest.raises(TypeError):
            check_index(0.5, 0, (2, 2))


# ═══════════════════════════════════════════════════════════════════════
# Divisors
# ═══════════════════════════════════════════════════════════════════════


class TestDivisors:

    def test_nonzero_scalar_passes(self):
        check_nonzero_scalar(2.0, "divide")

    @pytest.mark.parametrize("zero", [0, 0.0, -0.0, Fraction(0), 0j])
    def test_zero_scalar_rejected(self, zero):
        with pytest.raises(DivisionByZero) as exc_info:
            check_nonzero_scalar(zero, "divide")
        assert exc_info.value.row is None

    def test_zero_cell_reports_position(self):
        with pytest.raises(DivisionByZero) as exc_info:
            check_nonzero_cells([1.0, 2.0, 3.0, 4.0, 0.0, 6.0], 3, "divide")
        assert (exc_info.value.row, exc_info.value.col) == (1, 1)

    def test_nonzero_cells_pass(self):
        check_nonzero_cells([1, 2, 3], 3, "divide")


# ═══════════════════════════════════════════════════════════════════════
# NumPy conversion
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNumericArray:

    def test_int_promoted_to_float(self):
        result = check_numeric_array([1, 2, 3], "data")
        assert result.dtype == np.float64

    def test_complex_preserved(self):
        result = check_numeric_array([1 + 2j, 3j], "data")
        assert np.issubdtype(result.dtype, np.complexfloating)

    def test_fraction_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_numeric_array([Fraction(1, 2), Fraction(1, 3)], "data")

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_numeric_array(["a", "b"], "data")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_numeric_array([True, False], "data")

    def test_large_int_warns(self):
        with pytest.warns(RuntimeWarning, match="lose precision"):
            check_numeric_array([2 ** 60, 1], "data")


class TestCheck2D:

    def test_2d_passes(self):
        check_2d(np.zeros((2, 3)), "array")

    def test_1d_rejected(self):
        with pytest.raises(ShapeError, match="expected 2D array, got 1D"):
            check_2d(np.zeros(3), "array")
