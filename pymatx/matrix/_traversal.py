"""
Row-major traversal shared by indexing, mapping and the iterator views.

Every walk over a matrix's flat storage is expressed as a range of flat
offsets produced here, so row/column/cell addressing lives in one place.
"""

from __future__ import annotations

from typing import Any, Literal, Sequence

Axis = Literal['row', 'col', 'all']


def flat_offset(row: int, col: int, n_cols: int) -> int:
    """Offset of cell (row, col) in row-major storage."""
    return row * n_cols + col


def line_offsets(shape: tuple[int, int], axis: Axis, index: int = 0) -> range:
    """
    Flat offsets of one row, one column, or every cell.

    Parameters
    ----------
    shape : tuple of int
        (n_rows, n_cols) of the matrix.
    axis : str
        'row' for row `index`, 'col' for column `index`, 'all' for the
        whole matrix in row-major order (`index` ignored).
    index : int
        Row or column number. Not bounds-checked; callers validate.
    """
    n_rows, n_cols = shape
    if axis == 'row':
        start = index * n_cols
        return range(start, start + n_cols)
    if axis == 'col':
        return range(index, n_rows * n_cols, n_cols)
    if axis == 'all':
        return range(n_rows * n_cols)
    raise ValueError(f"Unknown axis: {axis!r}")


def gather(data: Sequence[Any], offsets: range) -> list[Any]:
    """Copy the cells at `offsets` into a fresh list."""
    if offsets.step == 1:
        return list(data[offsets.start:offsets.stop])
    return [data[i] for i in offsets]


def transposed(data: Sequence[Any], shape: tuple[int, int]) -> list[Any]:
    """Row-major storage of the transpose: the columns laid end to end."""
    out: list[Any] = []
    for j in range(shape[1]):
        out.extend(gather(data, line_offsets(shape, 'col', j)))
    return out
