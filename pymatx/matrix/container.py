"""
Matrix: dense 2-D container over a flat row-major list.

The shape is fixed at construction and always satisfies
len(storage) == n_rows * n_cols with both dimensions >= 1. Every derived
matrix owns fresh storage; no two instances share a list.

Construction:
    Matrix(n_rows, n_cols, dtype=float)     zero-filled with dtype()
    Matrix.from_rows([[1, 2], [3, 4]])      strictly rectangular rows
    Matrix.from_flat(values, n_rows, n_cols)
    Matrix.from_function(n_rows, n_cols, fn)
    Matrix.rand(n_rows, n_cols, low, high, rng=seed)
    Matrix.from_numpy(array) / Matrix.from_dict(d) / Matrix.from_json(s)
"""

from __future__ import annotations

import copy
import json
from typing import Any, Callable, Generic, Iterable, Iterator, Sequence, TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatx.core.compute.tolerances import ToleranceTier, select_tolerance
from pymatx.core.exceptions import ValidationError
from pymatx.core.validation import (
    check_2d,
    check_flat_length,
    check_index,
    check_rectangular,
    check_shape,
)
from pymatx.matrix._traversal import flat_offset, line_offsets, transposed
from pymatx.matrix.iterators import Cells, Columns, Rows

CellT = TypeVar('CellT')

_SERIALIZED_KEYS = ('data', 'rows', 'cols')


class Matrix(Generic[CellT]):
    """
    Dense matrix of cells of type CellT.

    Structural methods (indexing, iteration, apply, transpose) accept any
    cell type. Arithmetic requires cells satisfying the Scalar protocol.

    Operators:
        A + B, A - B, A / B     element-wise, shapes must match
        A * B, A @ B            matrix product, A.n_cols must equal B.n_rows
        A op s, s op A          scalar applied to every cell
        A ** s, s ** A          element-wise power
        -A                      element-wise negation
    """

    __slots__ = ('_data', '_n_rows', '_n_cols')
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, n_rows: int, n_cols: int, dtype: Callable[[], CellT] = float):
        self._n_rows, self._n_cols = check_shape(n_rows, n_cols)
        self._data: list[CellT] = [dtype() for _ in range(self._n_rows * self._n_cols)]

    @classmethod
    def _adopt(cls, data: list[CellT], shape: tuple[int, int]) -> Matrix[CellT]:
        """Internal constructor taking ownership of an already valid list."""
        obj = cls.__new__(cls)
        obj._data = data
        obj._n_rows, obj._n_cols = shape
        return obj

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def zeros(cls, n_rows: int, n_cols: int, dtype: Callable[[], CellT] = float) -> Matrix[CellT]:
        """Matrix filled with dtype(), the default value of the cell type."""
        return cls(n_rows, n_cols, dtype)

    @classmethod
    def filled(cls, n_rows: int, n_cols: int, value: CellT) -> Matrix[CellT]:
        """
        Matrix with every cell set to `value`.

        Each cell holds its own shallow copy of `value`, so mutable cells
        (nested matrices, say) are independent of one another.
        """
        shape = check_shape(n_rows, n_cols)
        return cls._adopt([copy.copy(value) for _ in range(shape[0] * shape[1])], shape)

    @classmethod
    def identity(cls, n: int, dtype: Callable[..., CellT] = float) -> Matrix[CellT]:
        """Square matrix with dtype(1) on the diagonal and dtype() elsewhere."""
        out = cls(n, n, dtype)
        one = dtype(1)
        for i in range(out._n_rows):
            out._data[flat_offset(i, i, n)] = one
        return out

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[CellT]]) -> Matrix[CellT]:
        """
        Build a matrix from nested rows.

        The outer sequence gives the rows, each inner sequence one row.
        Every row must have the length of the first.

        Raises
        ------
        ShapeError
            If there are no rows, rows are empty, or rows are ragged.
        """
        data, n_rows, n_cols = check_rectangular(list(rows), "rows")
        return cls._adopt(data, (n_rows, n_cols))

    @classmethod
    def from_flat(cls, values: Iterable[CellT], n_rows: int, n_cols: int) -> Matrix[CellT]:
        """Build a matrix from a copy of row-major flat values."""
        shape = check_shape(n_rows, n_cols)
        data = list(values)
        check_flat_length(data, shape[0], shape[1], "values")
        return cls._adopt(data, shape)

    @classmethod
    def from_function(
        cls, n_rows: int, n_cols: int, fn: Callable[[int, int], CellT]
    ) -> Matrix[CellT]:
        """Build a matrix whose cell (i, j) is fn(i, j)."""
        shape = check_shape(n_rows, n_cols)
        data = [
            fn(*divmod(offset, shape[1]))
            for offset in line_offsets(shape, 'all')
        ]
        return cls._adopt(data, shape)

    @classmethod
    def rand(
        cls,
        n_rows: int,
        n_cols: int,
        low: float = 0.0,
        high: float = 1.0,
        *,
        rng: int | np.random.Generator | None = None,
        integers: bool = False,
    ) -> Matrix[Any]:
        """
        Matrix of uniform random draws from [low, high).

        Parameters
        ----------
        n_rows, n_cols : int
            Shape of the result.
        low, high : float
            Half-open sampling range; low must be below high.
        rng : int, Generator or None
            Seed or generator, passed to numpy.random.default_rng.
        integers : bool
            Draw integers instead of floats; low and high are truncated
            to int.
        """
        shape = check_shape(n_rows, n_cols)
        if not low < high:
            raise ValidationError(f"rand: low must be below high, got [{low}, {high})")
        gen = np.random.default_rng(rng)
        size = shape[0] * shape[1]
        if integers:
            lo, hi = int(low), int(high)
            if not lo < hi:
                raise ValidationError(f"rand: empty integer range [{lo}, {hi})")
            draws = gen.integers(lo, hi, size=size)
        else:
            draws = gen.uniform(low, high, size=size)
        return cls._adopt(draws.tolist(), shape)

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> Matrix[Any]:
        """Build a matrix from a 2-D array; cells become native Python scalars."""
        arr = np.asarray(array)
        check_2d(arr, "array")
        shape = check_shape(*arr.shape)
        return cls._adopt(arr.ravel().tolist(), shape)

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        """Copy the cells into a new (n_rows, n_cols) array."""
        return np.array(self._data, dtype=dtype).reshape(self.shape)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> Matrix[Any]:
        """
        Rebuild a matrix from its serialized form.

        Expects {'data': [...], 'rows': r, 'cols': c}.
        """
        missing = [key for key in _SERIALIZED_KEYS if key not in payload]
        if missing:
            raise ValidationError(f"payload: missing keys {missing}")
        return cls.from_flat(payload['data'], payload['rows'], payload['cols'])

    def to_dict(self) -> dict[str, Any]:
        """Serialized form: {'data': [...], 'rows': r, 'cols': c}."""
        return {'data': list(self._data), 'rows': self._n_rows, 'cols': self._n_cols}

    @classmethod
    def from_json(cls, text: str) -> Matrix[Any]:
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValidationError(f"text: invalid JSON: {e}") from e
        if not isinstance(payload, dict):
            raise ValidationError(
                f"text: expected a JSON object, got {type(payload).__name__}"
            )
        return cls.from_dict(payload)

    def to_json(self, **kwargs: Any) -> str:
        """Compact JSON of to_dict(); keyword arguments go to json.dumps."""
        kwargs.setdefault('separators', (',', ':'))
        return json.dumps(self.to_dict(), **kwargs)

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def n_rows(self) -> int:
        """Number of rows."""
        return self._n_rows

    @property
    def n_cols(self) -> int:
        """Number of columns."""
        return self._n_cols

    @property
    def shape(self) -> tuple[int, int]:
        """(n_rows, n_cols)."""
        return self._n_rows, self._n_cols

    @property
    def size(self) -> int:
        """Total number of cells."""
        return len(self._data)

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def get(self, row: int, col: int) -> CellT:
        """
        Cell at (row, col).

        Raises
        ------
        IndexOutOfBounds
            Unless 0 <= row < n_rows and 0 <= col < n_cols.
        """
        r, c = check_index(row, col, self.shape)
        return self._data[flat_offset(r, c, self._n_cols)]

    def set(self, row: int, col: int, value: CellT) -> None:
        """Overwrite the cell at (row, col); bounds as for get()."""
        r, c = check_index(row, col, self.shape)
        self._data[flat_offset(r, c, self._n_cols)] = value

    def __getitem__(self, key: tuple[int, int]) -> CellT:
        row, col = self._unpack_key(key)
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: CellT) -> None:
        row, col = self._unpack_key(key)
        self.set(row, col, value)

    @staticmethod
    def _unpack_key(key: Any) -> tuple[Any, Any]:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError(f"Matrix indices must be a (row, col) pair, got {key!r}")
        return key

    # ------------------------------------------------------------------
    # Mapping and reshaping
    # ------------------------------------------------------------------

    def apply(self, fn: Callable[[CellT], Any]) -> Matrix[Any]:
        """New matrix with fn applied to every cell in row-major order."""
        data = self._data
        return Matrix._adopt([fn(data[i]) for i in line_offsets(self.shape, 'all')], self.shape)

    def transpose(self) -> Matrix[CellT]:
        """New (n_cols, n_rows) matrix with rows and columns swapped."""
        return Matrix._adopt(transposed(self._data, self.shape), (self._n_cols, self._n_rows))

    @property
    def T(self) -> Matrix[CellT]:
        """Transpose of the matrix."""
        return self.transpose()

    def reverse(self) -> Matrix[CellT]:
        """Same shape, storage in reverse row-major order (a 180 degree turn)."""
        return Matrix._adopt(self._data[::-1], self.shape)

    def copy(self) -> Matrix[CellT]:
        """
        Shallow copy: fresh storage holding the same cell objects.

        Mutable cells are shared with the original; use copy.deepcopy for
        fully independent nested matrices.
        """
        return Matrix._adopt(list(self._data), self.shape)

    __copy__ = copy

    def to_rows(self) -> list[list[CellT]]:
        """Nested list copy of the cells, one list per row."""
        return list(self.rows())

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def rows(self) -> Rows:
        """Double-ended view yielding each row as a list."""
        return Rows(self)

    def columns(self) -> Columns:
        """Double-ended view yielding each column as a list."""
        return Columns(self)

    cols = columns

    def cells(self, indexed: bool = False) -> Cells:
        """Double-ended view over cells, or (row, col, value) triples."""
        return Cells(self, indexed=indexed)

    def __iter__(self) -> Iterator[list[CellT]]:
        return Rows(self)

    # ------------------------------------------------------------------
    # Reductions and comparisons
    # ------------------------------------------------------------------

    def sum(self, start: Any = None, *, backend: str = 'auto') -> Any:
        """Sum of every cell; see arithmetic.total()."""
        from pymatx.matrix.arithmetic import total
        return total(self, start=start, backend=backend)

    def hadamard(self, other: Matrix[Any], *, backend: str = 'auto') -> Matrix[Any]:
        """Element-wise product with an equally shaped matrix."""
        from pymatx.matrix.arithmetic import multiply
        if not isinstance(other, Matrix):
            raise TypeError(f"hadamard: expected Matrix, got {type(other).__name__}")
        return multiply(self, other, backend=backend)

    def allclose(
        self,
        other: Matrix[Any],
        rtol: float | None = None,
        atol: float | None = None,
        *,
        tolerance: ToleranceTier | None = None,
        accumulated: bool = False,
    ) -> bool:
        """
        Whether both matrices have the same shape and every cell agrees
        within tolerance.

        The tier defaults to select_tolerance(accumulated): pass
        accumulated=True when comparing results of matmul or sum. An
        explicit `tolerance` tier takes precedence, and explicit rtol/atol
        override the tier's values.
        """
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        if tolerance is None:
            tolerance = select_tolerance(accumulated)
        tier = ToleranceTier(
            rtol=tolerance.rtol if rtol is None else rtol,
            atol=tolerance.atol if atol is None else atol,
            name=tolerance.name,
            description=tolerance.description,
        )
        return all(tier.close(a, b) for a, b in zip(self._data, other._data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> Matrix[Any]:
        from pymatx.matrix.arithmetic import add
        return add(self, other)

    def __radd__(self, other: Any) -> Matrix[Any]:
        from pymatx.matrix.arithmetic import add
        return add(other, self)

    def __sub__(self, other: Any) -> Matrix[Any]:
        from pymatx.matrix.arithmetic import subtract
        return subtract(self, other)

    def __rsub__(self, other: Any) -> Matrix[Any]:
        from pymatx.matrix.arithmetic import subtract
        return subtract(other, self)

    def __mul__(self, other: Any) -> Matrix[Any]:
        from pymatx.matrix.arithmetic import matmul, multiply
        if isinstance(other, Matrix):
            return matmul(self, other)
        return multiply(self, other)

    def __rmul__(self, other: Any) -> Matrix[Any]:
        from pymatx.matrix.arithmetic import multiply
        return multiply(other, self)

    def __matmul__(self, other: Any) -> Matrix[Any]:
        from pymatx.matrix.arithmetic import matmul
        if not isinstance(other, Matrix):
            return NotImplemented
        return matmul(self, other)

    def __truediv__(self, other: Any) -> Matrix[Any]:
        from pymatx.matrix.arithmetic import divide
        return divide(self, other)

    def __rtruediv__(self, other: Any) -> Matrix[Any]:
        from pymatx.matrix.arithmetic import divide
        return divide(other, self)

    def __pow__(self, exponent: Any) -> Matrix[Any]:
        from pymatx.matrix.arithmetic import power
        return power(self, exponent)

    def __rpow__(self, base: Any) -> Matrix[Any]:
        from pymatx.matrix.arithmetic import power
        return power(base, self)

    def __neg__(self) -> Matrix[Any]:
        return self.apply(lambda x: -x)

    def __pos__(self) -> Matrix[CellT]:
        return self.copy()

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return "\n".join(
            "".join(f"\t{value!r}" for value in row) for row in self.rows()
        )

    def __repr__(self) -> str:
        return f"Matrix({self.to_rows()!r})"
