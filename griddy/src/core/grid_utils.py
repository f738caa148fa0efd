"""Grid validation helpers and numpy interop."""

from __future__ import annotations

from typing import Any, Iterable, List, Tuple

import numpy as np

from griddy.src.core.grid import Coord, Grid


def is_rectangular(grid: Grid) -> bool:
    """Return ``True`` if every row of ``grid`` has the same length."""
    return len({len(row) for row in grid.data}) <= 1


def validate_grid(grid: Grid, expected_shape: Tuple[int, int] | None = None) -> bool:
    """Return ``True`` if ``grid`` is well formed and matches ``expected_shape``."""

    if not isinstance(grid, Grid):
        return False

    if expected_shape and grid.shape() != expected_shape:
        return False

    return is_rectangular(grid)


def cell_values(grid: Grid, coords: Iterable[Coord]) -> List[Any]:
    """Return the values stored at ``coords`` in order."""
    return [grid[r][c] for r, c in coords]


def grid_to_array(grid: Grid, dtype: Any = None) -> np.ndarray:
    """Return ``grid`` as a 2D array copy."""
    if grid.rows_len() == 0:
        return np.empty((0, 0), dtype=dtype)
    return np.array(grid.data, dtype=dtype)


def grid_from_array(arr: Any) -> Grid:
    """Return a :class:`Grid` holding the values of the 2D array ``arr``."""
    arr = np.asarray(arr)
    if arr.ndim != 2:
        raise ValueError(f"expected a 2D array, got {arr.ndim} dimensions")
    return Grid.from_2d(arr.tolist())


__all__ = [
    "is_rectangular",
    "validate_grid",
    "cell_values",
    "grid_to_array",
    "grid_from_array",
]
