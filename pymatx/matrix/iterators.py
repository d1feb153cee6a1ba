"""
Read-only traversal views over a Matrix.

Each view walks from both ends: next() advances the front cursor,
next_back() retreats the back cursor, and the two never cross, so a mixed
traversal yields every item exactly once. Views read the source lazily
and must not outlive a concurrent mutation of it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, Iterator, TypeVar

from pymatx.matrix._traversal import gather, line_offsets

if TYPE_CHECKING:
    from pymatx.matrix.container import Matrix

Item = TypeVar('Item')


class _DoubleEndedView(Generic[Item]):
    """Front/back cursor pair over `length` items addressed by position."""

    def __init__(self, matrix: Matrix, length: int):
        self._matrix = matrix
        self._front = 0
        self._back = length

    def _item(self, position: int) -> Item:
        raise NotImplementedError

    def __iter__(self) -> Iterator[Item]:
        return self

    def __next__(self) -> Item:
        if self._front >= self._back:
            raise StopIteration
        item = self._item(self._front)
        self._front += 1
        return item

    def next_back(self) -> Item:
        """Take the last remaining item; raises StopIteration when exhausted."""
        if self._front >= self._back:
            raise StopIteration
        self._back -= 1
        return self._item(self._back)

    def __reversed__(self) -> Iterator[Item]:
        while self._front < self._back:
            yield self.next_back()

    def __len__(self) -> int:
        return self._back - self._front

    def __repr__(self) -> str:
        return f"{type(self).__name__}(remaining={len(self)})"


class Rows(_DoubleEndedView[list]):
    """Rows of a matrix, each yielded as a fresh list."""

    def __init__(self, matrix: Matrix):
        super().__init__(matrix, matrix.n_rows)

    def _item(self, position: int) -> list:
        m = self._matrix
        return gather(m._data, line_offsets(m.shape, 'row', position))


class Columns(_DoubleEndedView[list]):
    """
    Columns of a matrix.

    Storage is row-major, so each column is gathered with stride n_cols
    into a fresh list.
    """

    def __init__(self, matrix: Matrix):
        super().__init__(matrix, matrix.n_cols)

    def _item(self, position: int) -> list:
        m = self._matrix
        return gather(m._data, line_offsets(m.shape, 'col', position))


class Cells(_DoubleEndedView[Any]):
    """Individual cells in row-major order, optionally as (row, col, value)."""

    def __init__(self, matrix: Matrix, indexed: bool = False):
        super().__init__(matrix, matrix.size)
        self._indexed = indexed

    def _item(self, position: int) -> Any:
        m = self._matrix
        value = m._data[position]
        if self._indexed:
            row, col = divmod(position, m.n_cols)
            return row, col, value
        return value
