"""Core grid utilities and data structures."""

from .grid import Grid, GridIndexError, NonSquareGridError, UnequalColumnsError
from .grid_utils import (
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
