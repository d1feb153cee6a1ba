"""
Vectorized NumPy backend.

Requires numeric cells. Integer cells are promoted to float64 (complex
cells stay complex128), so results are Python floats or complex numbers.
Floating edge cases follow IEEE semantics as NumPy implements them: a
negative base raised to a fractional power gives nan here, where the
python backend returns a complex number. Division by zero never reaches
this backend; the function layer rejects it first.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from pymatx.core.validation import check_numeric_array

_UFUNCS = {
    'add': np.add,
    'sub': np.subtract,
    'mul': np.multiply,
    'truediv': np.true_divide,
    'pow': np.power,
}


def _to_list(result: NDArray[Any]) -> list[Any]:
    """Flatten a result array into a list of native Python scalars."""
    return result.ravel().tolist()


class NumpyBackend:
    """Backend dispatching each operation to a single NumPy call."""

    @property
    def name(self) -> str:
        return 'numpy_vectorized'

    def elementwise(self, op: str, left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
        a = check_numeric_array(left, "left")
        b = check_numeric_array(right, "right")
        return _to_list(_UFUNCS[op](a, b))

    def scalar(
        self, op: str, data: Sequence[Any], value: Any, *, reflected: bool = False
    ) -> list[Any]:
        arr = check_numeric_array(data, "data")
        s = check_numeric_array(value, "value")
        if reflected:
            return _to_list(_UFUNCS[op](s, arr))
        return _to_list(_UFUNCS[op](arr, s))

    def matmul(
        self,
        left: Sequence[Any],
        right: Sequence[Any],
        n_rows: int,
        inner: int,
        n_cols: int,
    ) -> list[Any]:
        a = check_numeric_array(left, "left").reshape(n_rows, inner)
        b = check_numeric_array(right, "right").reshape(inner, n_cols)
        return _to_list(a @ b)

    def total(self, data: Sequence[Any], start: Any = None) -> Any:
        result = np.sum(check_numeric_array(data, "data")).item()
        if start is None:
            return result
        return start + result
