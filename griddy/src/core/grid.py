"""Dense row-major 2D grid container for grid-based puzzles."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, Iterator, List, Sequence, Tuple, TypeVar

from griddy.src.utils import config_loader
from griddy.src.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
Coord = Tuple[int, int]

__all__ = [
    "Coord",
    "Grid",
    "GridIndexError",
    "NonSquareGridError",
    "UnequalColumnsError",
]


class UnequalColumnsError(ValueError):
    """Raised when rows passed to :meth:`Grid.from_2d` differ in length."""

    def __init__(self, lengths: Sequence[int]):
        self.lengths = list(lengths)
        super().__init__(f"rows have unequal lengths: {self.lengths}")


class NonSquareGridError(ValueError):
    """Raised by strict rotation when ``rows_len() != cols_len()``."""


class GridIndexError(IndexError):
    """Raised when a row index falls outside the grid."""

    def __init__(self, index: Any, rows: int):
        self.index = index
        self.rows = rows
        super().__init__(f"index {index} out of bounds. Grid has {rows} rows.")


def _as_rows(data: Iterable[Iterable[T]]) -> List[List[T]]:
    return [row if isinstance(row, list) else list(row) for row in data]


@dataclass
class Grid(Generic[T]):
    """2D grid of values addressed by ``(row, col)``.

    Row indices increase going down and column indices increase to the right::

        >>> grid = Grid.from_2d_unchecked([[1, 2], [9, 8]])
        >>> grid[1][0]
        9

    Geometric and adjacency operations assume every row has the same length.
    Only :meth:`from_2d_unchecked` and :meth:`insert_row` can break that.
    """

    data: List[List[T]] = field(default_factory=list)

    # Construction ------------------------------------------------------

    @classmethod
    def init(cls, rows: int, cols: int, value: T) -> "Grid[T]":
        """Return a ``rows`` x ``cols`` grid with every cell a copy of ``value``."""
        return cls([[copy.deepcopy(value) for _ in range(cols)] for _ in range(rows)])

    @classmethod
    def from_2d(cls, data: Iterable[Iterable[T]]) -> "Grid[T]":
        """Return a grid built from ``data``.

        Raises :class:`UnequalColumnsError` if the rows are not all the same
        length.
        """
        rows = _as_rows(data)
        lengths = sorted({len(r) for r in rows})
        if len(lengths) > 1:
            logger.warning("Rejected grid with row lengths %s", lengths)
            raise UnequalColumnsError(lengths)
        return cls(rows)

    @classmethod
    def from_2d_unchecked(cls, data: Iterable[Iterable[T]]) -> "Grid[T]":
        """Return a grid built from ``data`` without checking row lengths."""
        return cls(_as_rows(data))

    # Shape -------------------------------------------------------------

    def rows_len(self) -> int:
        """The number of rows."""
        return len(self.data)

    def cols_len(self) -> int:
        """The number of columns, taken from the first row."""
        if not self.data:
            return 0
        return len(self.data[0])

    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as (rows, cols)."""
        return self.rows_len(), self.cols_len()

    def rows(self) -> Iterator[List[T]]:
        """Return an iterator over the rows."""
        return iter(self.data)

    def __iter__(self) -> Iterator[List[T]]:
        return self.rows()

    # Indexed access ----------------------------------------------------

    def _check_row(self, idx: int) -> None:
        if idx < 0 or idx >= len(self.data):
            raise GridIndexError(idx, len(self.data))

    def __getitem__(self, idx: int) -> List[T]:
        self._check_row(idx)
        return self.data[idx]

    def __setitem__(self, idx: int, row: List[T]) -> None:
        self._check_row(idx)
        self.data[idx] = row

    def get(self, row: int, col: int, default: Any | None = None) -> Any:
        """Return the value at ``row``, ``col`` or ``default`` if out of bounds."""
        if row < 0 or col < 0 or row >= len(self.data):
            return default
        if col >= len(self.data[row]):
            return default
        return self.data[row][col]

    def set(self, row: int, col: int, value: T) -> None:
        """Set the value at the specified cell."""
        cells = self[row]
        if col < 0 or col >= len(cells):
            raise IndexError(
                f"column {col} out of bounds. Row {row} has {len(cells)} columns."
            )
        cells[col] = value

    # Structural transforms ---------------------------------------------

    def transpose(self) -> "Grid[T]":
        """Return a new grid where ``result[c][r] == self[r][c]``.

        An empty grid transposes to an empty grid. Cell values are shared,
        not copied.
        """
        rows, cols = self.shape()
        if rows == 0 or cols == 0:
            return type(self)([])
        return type(self)([[self.data[r][c] for r in range(rows)] for c in range(cols)])

    def rotate(self) -> None:
        """Rotate the grid 90 degrees clockwise in place.

        Row ``c`` of the result is column ``c`` read from the bottom row up,
        so a non-square grid swaps its dimensions. With
        ``strict_square_rotation`` enabled a non-square grid raises
        :class:`NonSquareGridError` instead.
        """
        rows, cols = self.shape()
        if rows != cols and config_loader.STRICT_SQUARE_ROTATION:
            logger.warning("Refusing to rotate non-square grid %sx%s", rows, cols)
            raise NonSquareGridError(f"cannot rotate {rows}x{cols} grid")
        rotated = [
            [self.data[r][c] for r in range(rows - 1, -1, -1)] for c in range(cols)
        ]
        self.data[:] = rotated
        logger.debug("Rotated %sx%s grid", rows, cols)

    def flip_y(self) -> None:
        """Mirror the grid left to right."""
        for row in self.data:
            row.reverse()

    def insert_row(self, idx: int, row: List[T]) -> None:
        """Insert ``row`` at ``idx``. The row length is not checked."""
        if idx < 0 or idx > len(self.data):
            raise GridIndexError(idx, len(self.data))
        self.data.insert(idx, row)

    def truncate_rows(self, size: int) -> None:
        """Drop every row from index ``size`` onward."""
        if size < 0:
            raise ValueError("size must be non-negative")
        del self.data[size:]

    def fold_at_row(self, row: int, combine: Callable[[T, T], T]) -> int:
        """Fold the grid "up" at ``row`` and return the remaining row count.

        Row ``row - 1`` is paired with ``row + 1``, ``row - 2`` with
        ``row + 2`` and so on until either side runs out. Each cell above
        the fold becomes ``combine(new, old)`` where ``new`` is its current
        value and ``old`` the mirrored value below. Rows from ``row`` onward
        are then discarded. For example, folding this grid at row 1 with a
        ``combine`` that keeps ``old``::

            0, 0, 0
            0, 0, 0
            1, 2, 3

        leaves the single row ``1, 2, 3``.
        """
        if row < 0:
            raise ValueError("fold row must be non-negative")
        cols = self.cols_len()
        pairs = list(zip(range(row - 1, -1, -1), range(row + 1, self.rows_len())))
        for dst, src in pairs:
            target = self.data[dst]
            source = self.data[src]
            for c in range(cols):
                target[c] = combine(target[c], source[c])
        self.truncate_rows(row)
        logger.debug("Folded at row %s over %s pairs", row, len(pairs))
        return self.rows_len()

    # Adjacency queries -------------------------------------------------

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows_len() and 0 <= col < self.cols_len()

    def row_left_coords(self, row: int, col: int) -> List[Coord]:
        """Return all coordinates left of ``(row, col)``, left to right."""
        if not self._in_bounds(row, col):
            return []
        return [(row, c) for c in range(col)]

    def row_right_coords(self, row: int, col: int) -> List[Coord]:
        """Return all coordinates right of ``(row, col)``, left to right."""
        if not self._in_bounds(row, col):
            return []
        return [(row, c) for c in range(col + 1, self.cols_len())]

    def col_up_coords(self, row: int, col: int) -> List[Coord]:
        """Return all coordinates above ``(row, col)``, top to bottom."""
        if not self._in_bounds(row, col):
            return []
        return [(r, col) for r in range(row)]

    def col_down_coords(self, row: int, col: int) -> List[Coord]:
        """Return all coordinates below ``(row, col)``, top to bottom."""
        if not self._in_bounds(row, col):
            return []
        return [(r, col) for r in range(row + 1, self.rows_len())]

    def row_neighbors(self, row: int, col: int) -> List[Coord]:
        """Return the left and right neighbors of ``(row, col)``."""
        if not self._in_bounds(row, col):
            return []
        n: List[Coord] = []
        if col > 0:
            n.append((row, col - 1))
        if col + 1 < self.cols_len():
            n.append((row, col + 1))
        return n

    def col_neighbors(self, row: int, col: int) -> List[Coord]:
        """Return the up and down neighbors of ``(row, col)``."""
        if not self._in_bounds(row, col):
            return []
        n: List[Coord] = []
        if row > 0:
            n.append((row - 1, col))
        if row + 1 < self.rows_len():
            n.append((row + 1, col))
        return n

    def diag_neighbors(self, row: int, col: int) -> List[Coord]:
        """Return up to four diagonal neighbors of ``(row, col)``.

        Order is up-left, up-right, down-left, down-right.
        """
        if not self._in_bounds(row, col):
            return []
        has_left = col > 0
        has_right = col + 1 < self.cols_len()
        n: List[Coord] = []
        for r in (row - 1, row + 1):
            if r < 0 or r >= self.rows_len():
                continue
            if has_left:
                n.append((r, col - 1))
            if has_right:
                n.append((r, col + 1))
        return n

    def neighbors(self, row: int, col: int) -> List[Coord]:
        """Return every valid coordinate surrounding ``(row, col)``.

        Row neighbors come first, then column neighbors, then diagonals.
        """
        return (
            self.row_neighbors(row, col)
            + self.col_neighbors(row, col)
            + self.diag_neighbors(row, col)
        )

    # Debugging ---------------------------------------------------------

    def print(self) -> None:
        """Print each row on its own line."""
        for row in self.data:
            print(repr(row))

    def to_list(self) -> List[List[T]]:
        """Return a copy of the row lists."""
        return [row[:] for row in self.data]

    def __repr__(self) -> str:
        return f"Grid(shape={self.shape()})"
