"""
Exception hierarchy for pymatx.

All exceptions inherit from MatxError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations


class MatxError(Exception):
    """Base exception for all pymatx errors."""
    pass


class ValidationError(MatxError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class ShapeError(ValidationError):
    """
    A matrix shape is invalid.

    Raised when a dimension is zero, negative or not an integer, when
    rows passed to a constructor are ragged, or when flat data does not
    hold exactly rows * cols values.
    """
    pass


class DimensionMismatch(ValidationError):
    """
    Two operand shapes are incompatible for a matrix-matrix operation.

    Element-wise operations need identical shapes; the matrix product
    needs left.n_cols == right.n_rows.

    Attributes:
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand
        operation: Name of the operation that was attempted
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int],
        right_shape: tuple[int, int],
        operation: str | None = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape
        self.operation = operation


class IndexOutOfBounds(ValidationError, IndexError):
    """
    A (row, col) index falls outside the matrix.

    Attributes:
        row: Requested row index
        col: Requested column index
        shape: (rows, cols) of the indexed matrix
    """

    def __init__(self, message: str, row: int, col: int, shape: tuple[int, int]):
        super().__init__(message)
        self.row = row
        self.col = col
        self.shape = shape


class NumericalError(MatxError):
    """
    Numerical computation failed.

    Base class for errors arising from arithmetic on cell values.
    """
    pass


class DivisionByZero(NumericalError, ZeroDivisionError):
    """
    A divisor was zero.

    Raised for scalar and element-wise division alike, for every cell
    type including floats.

    Attributes:
        row: Row of the zero divisor, or None for a scalar divisor
        col: Column of the zero divisor, or None for a scalar divisor
    """

    def __init__(self, message: str, row: int | None = None, col: int | None = None):
        super().__init__(message)
        self.row = row
        self.col = col
