"""
Input validation utilities for pymatx.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent padding or truncation of ragged input
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import operator
import warnings
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatx.core.exceptions import (
    DimensionMismatch,
    DivisionByZero,
    IndexOutOfBounds,
    ShapeError,
    ValidationError,
)

# Largest integer magnitude float64 represents exactly
_FLOAT64_EXACT_INT = 2 ** 53


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a single matrix dimension.

    Args:
        value: Proposed row or column count
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ShapeError: If value is not an integer or is less than 1
    """
    if isinstance(value, bool):
        raise ShapeError(f"{name}: expected a positive integer, got bool {value!r}")
    try:
        dim = operator.index(value)
    except TypeError as e:
        raise ShapeError(
            f"{name}: expected a positive integer, got {type(value).__name__} {value!r}"
        ) from e
    if dim < 1:
        raise ShapeError(f"{name}: zero-sized matrices are not allowed, got {dim}")
    return dim


def check_shape(n_rows: Any, n_cols: Any) -> tuple[int, int]:
    """Validate both dimensions of a shape."""
    return check_dimension(n_rows, "n_rows"), check_dimension(n_cols, "n_cols")


def check_rectangular(rows: Sequence[Sequence[Any]], name: str) -> tuple[list[Any], int, int]:
    """
    Flatten nested rows, verifying every row has the same length.

    Args:
        rows: Outer sequence of rows, each an ordered sequence of cells
        name: Parameter name for error messages

    Returns:
        (flat row-major list, n_rows, n_cols)

    Raises:
        ShapeError: If there are no rows, the first row is empty, or any
            row length differs from the first
    """
    materialized = [list(row) for row in rows]
    if not materialized:
        raise ShapeError(f"{name}: expected at least one row, got none")

    n_cols = len(materialized[0])
    if n_cols == 0:
        raise ShapeError(f"{name}: expected at least one column, row 0 is empty")

    flat: list[Any] = []
    for i, row in enumerate(materialized):
        if len(row) != n_cols:
            raise ShapeError(
                f"{name}: ragged rows, row {i} has {len(row)} values, expected {n_cols}"
            )
        flat.extend(row)
    return flat, len(materialized), n_cols


def check_flat_length(data: Sequence[Any], n_rows: int, n_cols: int, name: str) -> None:
    """
    Verify a flat sequence holds exactly n_rows * n_cols values.

    Raises:
        ShapeError: If the length is wrong
    """
    expected = n_rows * n_cols
    if len(data) != expected:
        raise ShapeError(
            f"{name}: expected {expected} values for shape ({n_rows}, {n_cols}), "
            f"got {len(data)}"
        )


def check_same_shape(
    left_shape: tuple[int, int],
    right_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes (element-wise operations).

    Raises:
        DimensionMismatch: If the shapes differ
    """
    if left_shape != right_shape:
        raise DimensionMismatch(
            f"{operation}: operands must have the same shape, "
            f"got {left_shape} and {right_shape}",
            left_shape=left_shape,
            right_shape=right_shape,
            operation=operation,
        )


def check_inner_dimensions(
    left_shape: tuple[int, int],
    right_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify left columns equal right rows (matrix product).

    Raises:
        DimensionMismatch: If the inner dimensions differ
    """
    if left_shape[1] != right_shape[0]:
        raise DimensionMismatch(
            f"{operation}: left has {left_shape[1]} columns but right has "
            f"{right_shape[0]} rows (shapes {left_shape} and {right_shape})",
            left_shape=left_shape,
            right_shape=right_shape,
            operation=operation,
        )


def check_index(row: Any, col: Any, shape: tuple[int, int]) -> tuple[int, int]:
    """
    Validate a (row, col) index against a shape.

    Negative indices are rejected rather than wrapped.

    Returns:
        (row, col) as plain ints

    Raises:
        TypeError: If either index is not an integer
        IndexOutOfBounds: If either index is outside the shape
    """
    r = operator.index(row)
    c = operator.index(col)
    n_rows, n_cols = shape
    if not (0 <= r < n_rows and 0 <= c < n_cols):
        raise IndexOutOfBounds(
            f"index ({r}, {c}) is out of bounds for shape {shape}",
            row=r,
            col=c,
            shape=shape,
        )
    return r, c


def _is_zero(value: Any) -> bool:
    return bool(value == 0)


def check_nonzero_scalar(value: Any, name: str) -> None:
    """
    Verify a scalar divisor is not zero.

    Raises:
        DivisionByZero: If value compares equal to zero
    """
    if _is_zero(value):
        raise DivisionByZero(f"{name}: division by zero scalar {value!r}")


def check_nonzero_cells(data: Sequence[Any], n_cols: int, name: str) -> None:
    """
    Verify no cell of a row-major divisor is zero.

    Raises:
        DivisionByZero: At the first zero cell, carrying its (row, col)
    """
    for offset, value in enumerate(data):
        if _is_zero(value):
            row, col = divmod(offset, n_cols)
            raise DivisionByZero(
                f"{name}: division by zero at cell ({row}, {col})",
                row=row,
                col=col,
            )


def check_numeric_array(data: ArrayLike, name: str) -> NDArray[Any]:
    """
    Validate and convert cell data to a numeric NumPy array.

    Rejects inputs that result in object dtype (mixed or non-numeric
    cells such as Fraction or Decimal) and non-numeric dtypes. Integer
    data is promoted to float64; complex data stays complex.

    Args:
        data: Flat or nested cell values
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating or complex dtype

    Raises:
        ValidationError: If the data cannot be represented numerically
    """
    try:
        result = np.asarray(data)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.integer):
        if result.size and int(np.max(np.abs(result.astype(object)))) > _FLOAT64_EXACT_INT:
            warnings.warn(
                f"{name}: integers larger than 2**53 lose precision in float64",
                RuntimeWarning,
                stacklevel=3,
            )
        result = result.astype(np.float64)

    return result


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        ShapeError: If array is not 2D
    """
    if array.ndim != 2:
        raise ShapeError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )
