"""Functionality for working with 2D grids.

Get all the neighbors of the cell at ``(1, 0)`` (value ``4``)::

    >>> from griddy import Grid
    >>> grid = Grid.from_2d_unchecked([[0, 1, 2], [4, 5, 6], [7, 8, 9]])
    >>> grid.neighbors(1, 0)
    [(1, 1), (0, 0), (2, 0), (0, 1), (2, 1)]
"""

from .src.core import (
    Grid,
    GridIndexError,
    NonSquareGridError,
    UnequalColumnsError,
    cell_values,
    grid_from_array,
    grid_to_array,
    is_rectangular,
    validate_grid,
)

__all__ = [
    "Grid",
    "GridIndexError",
    "NonSquareGridError",
    "UnequalColumnsError",
    "cell_values",
    "grid_from_array",
    "grid_to_array",
    "is_rectangular",
    "validate_grid",
]
