"""
pymatx: a small generic matrix library for Python.

Dense 2-D matrices over any numeric-capable cell type, with shape-checked
element-wise and algebraic arithmetic, element mapping, and row, column
and cell iteration. Incompatible shapes, bad indices and zero divisors
raise typed errors from pymatx.core.exceptions.

Submodules:
    matrix: the Matrix container, arithmetic functions and iterator views
    core: exceptions, validation, protocols and tolerance tiers
"""

__version__ = "0.1.0"

from pymatx.core.exceptions import (
    MatxError,
    ValidationError,
    ShapeError,
    DimensionMismatch,
    IndexOutOfBounds,
    NumericalError,
    DivisionByZero,
)
from pymatx.matrix import (
    Matrix,
    add,
    subtract,
    multiply,
    divide,
    power,
    matmul,
    total,
)

__all__ = [
    "__version__",
    "Matrix",
    "add",
    "subtract",
    "multiply",
    "divide",
    "power",
    "matmul",
    "total",
    "MatxError",
    "ValidationError",
    "ShapeError",
    "DimensionMismatch",
    "IndexOutOfBounds",
    "NumericalError",
    "DivisionByZero",
]
