"""
Generic pure-Python backend.

Works for any cell type satisfying the Scalar protocol: int, float,
complex, Fraction, Decimal, NumPy scalars, even nested matrices. Results
keep the cell type that the Python operators produce.
"""

from __future__ import annotations

import operator
from functools import reduce
from typing import Any, Callable, Sequence

_OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    'add': operator.add,
    'sub': operator.sub,
    'mul': operator.mul,
    'truediv': operator.truediv,
    'pow': operator.pow,
}


class PythonBackend:
    """Reference backend looping over flat row-major lists."""

    @property
    def name(self) -> str:
        return 'python_loop'

    def elementwise(self, op: str, left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
        fn = _OPERATORS[op]
        return [fn(a, b) for a, b in zip(left, right)]

    def scalar(
        self, op: str, data: Sequence[Any], value: Any, *, reflected: bool = False
    ) -> list[Any]:
        fn = _OPERATORS[op]
        if reflected:
            return [fn(value, x) for x in data]
        return [fn(x, value) for x in data]

    def matmul(
        self,
        left: Sequence[Any],
        right: Sequence[Any],
        n_rows: int,
        inner: int,
        n_cols: int,
    ) -> list[Any]:
        out: list[Any] = []
        for i in range(n_rows):
            row = left[i * inner:(i + 1) * inner]
            for j in range(n_cols):
                # inner >= 1, so the first term seeds the sum
                products = (row[k] * right[k * n_cols + j] for k in range(inner))
                out.append(reduce(operator.add, products))
        return out

    def total(self, data: Sequence[Any], start: Any = None) -> Any:
        if start is None:
            return reduce(operator.add, data)
        return reduce(operator.add, data, start)
