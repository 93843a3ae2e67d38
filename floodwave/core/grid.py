"""
Floodwave - Grid Model

Value-object primitives for rectangular colour grids. A grid is a list of
rows, each row a list of colour tokens (normally "#RRGGBB" strings). None of
these functions mutate their input: anything that "changes" a grid hands
back a new one.
"""

from typing import Hashable, Optional

# A colour token only needs to support equality.
Color = Hashable
Grid = list[list[Color]]
Position = tuple[int, int]


def get_dimensions(grid: Grid) -> tuple[int, int]:
    """
    Get the dimensions of a grid.

    Args:
        grid: 2D grid of colour tokens

    Returns:
        (rows, cols). An empty grid is 0x0.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows > 0 else 0
    return rows, cols


def is_valid_position(grid: Grid, row: int, col: int) -> bool:
    """Check whether (row, col) lies inside the grid. Always False for an empty grid."""
    if len(grid) == 0:
        return False

    rows, cols = get_dimensions(grid)
    return 0 <= row < rows and 0 <= col < cols


def get_color(grid: Grid, row: int, col: int) -> Optional[Color]:
    """
    Get the colour of a cell.

    Args:
        grid: 2D grid
        row: Row index
        col: Column index

    Returns:
        The cell's colour, or None if the position is out of bounds.
    """
    if not is_valid_position(grid, row, col):
        return None
    return grid[row][col]


def set_color(grid: Grid, row: int, col: int, color: Color) -> Grid:
    """
    Return a copy of grid with one cell recoloured.

    Every row of the result is a fresh list, so writes to the new grid can
    never leak back into the original. An invalid position returns the
    original grid untouched.

    Args:
        grid: Source grid
        row: Row index
        col: Column index
        color: New colour token

    Returns:
        New grid with the modified cell, or the input grid if out of bounds.
    """
    if not is_valid_position(grid, row, col):
        return grid

    result = clone_grid(grid)
    result[row][col] = color
    return result


def clone_grid(grid: Grid) -> Grid:
    """Deep copy of a grid; rows are independent of the source."""
    return [row[:] for row in grid]


def get_neighbors(total_rows: int, total_cols: int, row: int, col: int) -> list[Position]:
    """
    Get the in-bounds 4-connected neighbours of a cell.

    Order is always up, down, left, right. Fill levels are built in this
    order, so snapshot contents depend on it.

    Args:
        total_rows: Number of rows in the grid
        total_cols: Number of columns in the grid
        row: Row index
        col: Column index

    Returns:
        List of (row, col) neighbour positions.
    """
    candidates = [
        (row - 1, col),
        (row + 1, col),
        (row, col - 1),
        (row, col + 1),
    ]
    return [
        (r, c)
        for r, c in candidates
        if 0 <= r < total_rows and 0 <= c < total_cols
    ]
