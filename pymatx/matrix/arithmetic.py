"""
Arithmetic dispatch for matrices.

Public functions: add(), subtract(), multiply(), divide(), power(),
matmul(), total(). Each validates shapes and divisors, picks a backend,
and wraps the backend's flat result in a fresh Matrix. The operators on
Matrix are thin wrappers over these functions with backend='auto'.

add/subtract/multiply/divide/power are element-wise: either both
operands are matrices of identical shape, or one side is a scalar that
is combined with every cell (scalar on the left computes scalar op cell).
matmul() is the algebraic product.
"""

from __future__ import annotations

from typing import Any, Literal

from pymatx.core.exceptions import ValidationError
from pymatx.core.protocols import Backend
from pymatx.core.validation import (
    check_inner_dimensions,
    check_nonzero_cells,
    check_nonzero_scalar,
    check_same_shape,
)
from pymatx.matrix.backends.python import PythonBackend
from pymatx.matrix.backends.vectorized import NumpyBackend
from pymatx.matrix.container import Matrix


BackendChoice = Literal['auto', 'python', 'numpy']


def _get_backend(backend: BackendChoice) -> Backend:
    """
    Select backend based on preference.

    'auto' resolves to the python backend, whose results keep the cell
    type the Python operators produce. The numpy backend computes in
    float64 with IEEE semantics and is used only when requested.
    """
    if backend in ('auto', 'python'):
        return PythonBackend()

    if backend == 'numpy':
        return NumpyBackend()

    raise ValidationError(f"Unknown backend: {backend!r}")


def _elementwise(op: str, name: str, left: Any, right: Any, backend: BackendChoice) -> Matrix:
    """Shared path for every element-wise and scalar operation."""
    left_is_matrix = isinstance(left, Matrix)
    right_is_matrix = isinstance(right, Matrix)

    if left_is_matrix and right_is_matrix:
        check_same_shape(left.shape, right.shape, name)
        if op == 'truediv':
            check_nonzero_cells(right._data, right.n_cols, name)
        be = _get_backend(backend)
        return Matrix._adopt(be.elementwise(op, left._data, right._data), left.shape)

    if left_is_matrix:
        if op == 'truediv':
            check_nonzero_scalar(right, name)
        be = _get_backend(backend)
        return Matrix._adopt(be.scalar(op, left._data, right), left.shape)

    if right_is_matrix:
        if op == 'truediv':
            check_nonzero_cells(right._data, right.n_cols, name)
        be = _get_backend(backend)
        return Matrix._adopt(be.scalar(op, right._data, left, reflected=True), right.shape)

    raise TypeError(
        f"{name}: at least one operand must be a Matrix, got "
        f"{type(left).__name__} and {type(right).__name__}"
    )


def add(left: Any, right: Any, *, backend: BackendChoice = 'auto') -> Matrix:
    """
    Element-wise or scalar addition.

    Raises
    ------
    DimensionMismatch
        If both operands are matrices of different shapes.
    """
    return _elementwise('add', 'add', left, right, backend)


def subtract(left: Any, right: Any, *, backend: BackendChoice = 'auto') -> Matrix:
    """Element-wise or scalar subtraction (left - right)."""
    return _elementwise('sub', 'subtract', left, right, backend)


def multiply(left: Any, right: Any, *, backend: BackendChoice = 'auto') -> Matrix:
    """
    Element-wise (Hadamard) or scalar multiplication.

    For the algebraic product of two matrices use matmul().
    """
    return _elementwise('mul', 'multiply', left, right, backend)


def divide(left: Any, right: Any, *, backend: BackendChoice = 'auto') -> Matrix:
    """
    Element-wise or scalar true division.

    Two matrices are divided cell by cell; there is no matrix inverse.
    Every zero divisor is an error, float cells included, and the check
    runs before anything is computed.

    Raises
    ------
    DimensionMismatch
        If both operands are matrices of different shapes.
    DivisionByZero
        If the divisor (scalar or any divisor cell) equals zero.
    """
    return _elementwise('truediv', 'divide', left, right, backend)


def power(base: Any, exponent: Any, *, backend: BackendChoice = 'auto') -> Matrix:
    """
    Element-wise exponentiation.

    power(m, s) raises each cell to s; power(s, m) raises s to each cell.
    """
    return _elementwise('pow', 'power', base, exponent, backend)


def matmul(left: Matrix, right: Matrix, *, backend: BackendChoice = 'auto') -> Matrix:
    """
    Matrix product.

    result[i][j] = sum over k of left[i][k] * right[k][j].

    Parameters
    ----------
    left : Matrix
        (m x k) matrix.
    right : Matrix
        (k x n) matrix.
    backend : str
        'auto', 'python', 'numpy'.

    Returns
    -------
    Matrix of shape (m, n).

    Raises
    ------
    DimensionMismatch
        If left.n_cols != right.n_rows.
    """
    if not (isinstance(left, Matrix) and isinstance(right, Matrix)):
        raise TypeError(
            f"matmul: both operands must be Matrix, got "
            f"{type(left).__name__} and {type(right).__name__}"
        )
    check_inner_dimensions(left.shape, right.shape, "matmul")
    be = _get_backend(backend)
    data = be.matmul(left._data, right._data, left.n_rows, left.n_cols, right.n_cols)
    return Matrix._adopt(data, (left.n_rows, right.n_cols))


def total(matrix: Matrix, *, start: Any = None, backend: BackendChoice = 'auto') -> Any:
    """
    Sum of every cell.

    Without `start` the first cell seeds the fold, which gives the same
    result as seeding with the additive identity and also works for cell
    types that have no literal zero.
    """
    be = _get_backend(backend)
    return be.total(matrix._data, start)
