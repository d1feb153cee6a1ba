"""
Core protocols for pymatx.

These define structural interfaces that cell types and kernel backends
must satisfy. We use Protocol (structural typing) rather than ABC
(nominal typing) so that int, float, complex, Fraction, Decimal, NumPy
scalars and Matrix itself all qualify without registration.

Design Principles:
    - Minimal contracts: prescribe only what arithmetic truly needs
    - Capability-driven: structural methods (indexing, iteration, apply)
      place no constraint on the cell type at all
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar('T')  # Cell type


@runtime_checkable
class Scalar(Protocol):
    """
    Capability required of a cell type for matrix arithmetic.

    A Scalar supports addition, subtraction, multiplication and true
    division with values of its own kind. Exponentiation is only needed
    by power(); reduction only needs addition.
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...


@runtime_checkable
class Backend(Protocol):
    """
    Protocol for arithmetic kernel backends.

    Backends operate on flat row-major lists and return fresh lists.
    Shape checks and the division-by-zero policy are enforced by the
    function layer before a backend is called, so kernels may assume
    valid, compatible input.

    Backends are stateless. This makes them easy to test and swap.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{engine}_{strategy}'
        Examples: 'python_loop', 'numpy_vectorized'
        """
        ...

    def elementwise(self, op: str, left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
        """Combine two equally sized flat sequences cell by cell."""
        ...

    def scalar(
        self, op: str, data: Sequence[Any], value: Any, *, reflected: bool = False
    ) -> list[Any]:
        """
        Combine every cell with a scalar.

        With reflected=True the scalar is the left operand (value op cell).
        """
        ...

    def matmul(
        self,
        left: Sequence[Any],
        right: Sequence[Any],
        n_rows: int,
        inner: int,
        n_cols: int,
    ) -> list[Any]:
        """Row-major (n_rows x inner) @ (inner x n_cols) product."""
        ...

    def total(self, data: Sequence[Any], start: Any = None) -> Any:
        """Fold every cell with addition."""
        ...
