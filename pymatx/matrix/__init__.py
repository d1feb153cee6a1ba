"""
Matrix module.

Dense 2-D matrices over any cell type, with shape-checked arithmetic and
double-ended row, column and cell views.

Public API:
    Matrix                      - the container
    add(a, b)                   - element-wise or scalar addition
    subtract(a, b)              - element-wise or scalar subtraction
    multiply(a, b)              - element-wise (Hadamard) or scalar product
    divide(a, b)                - element-wise or scalar division
    power(a, b)                 - element-wise exponentiation
    matmul(a, b)                - matrix product
    total(m)                    - sum of every cell
    Rows, Columns, Cells        - iterator views
"""

from pymatx.matrix.container import Matrix
from pymatx.matrix.iterators import Rows, Columns, Cells
from pymatx.matrix.arithmetic import (
    add,
    subtract,
    multiply,
    divide,
    power,
    matmul,
    total,
)

__all__ = [
    "Matrix",
    "Rows",
    "Columns",
    "Cells",
    "add",
    "subtract",
    "multiply",
    "divide",
    "power",
    "matmul",
    "total",
]
