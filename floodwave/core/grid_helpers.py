"""
Floodwave - Grid Helpers

Geometry and display utilities shared by the viewer and the tools: how
many cells fit in a window, which way a fill should appear to flip, and how
to overlay a snapshot on a base grid.
"""

from .grid import Grid, Position, clone_grid

FLIP_DIRECTIONS = ("up", "down", "left", "right", "center")


def calculate_grid_dimensions(
    available_width: int, available_height: int, cell_size: int
) -> tuple[int, int]:
    """
    Work out how many whole cells fit into a pixel area.

    Args:
        available_width: Width in pixels
        available_height: Height in pixels
        cell_size: Edge length of one cell in pixels

    Returns:
        (rows, cols), each at least 1.
    """
    if cell_size <= 0:
        return 1, 1
    cols = max(1, int(available_width // cell_size))
    rows = max(1, int(available_height // cell_size))
    return rows, cols


def determine_flip_direction(row: int, col: int, total_rows: int, total_cols: int) -> str:
    """
    Classify a clicked cell relative to the grid centre.

    Rows are checked before columns, so a click anywhere above the centre
    row is "up" regardless of its column.

    Returns:
        "up", "down", "left", "right" or "center"
    """
    center_row = total_rows // 2
    center_col = total_cols // 2

    if row < center_row:
        return "up"
    if row > center_row:
        return "down"
    if col < center_col:
        return "left"
    if col > center_col:
        return "right"
    return "center"


def create_display_grid(base_grid: Grid, snapshot: Grid) -> Grid:
    """
    Overlay a snapshot on a copy of the base grid.

    Snapshot cells that fall outside the base grid are ignored, so a
    snapshot from a differently sized grid cannot change the base shape.
    """
    display = clone_grid(base_grid)
    for r, row in enumerate(snapshot):
        if r >= len(display):
            break
        for c, cell in enumerate(row):
            if c < len(display[r]):
                display[r][c] = cell
    return display


def merge_grids(base_grid: Grid, snapshot: Grid) -> Grid:
    """Alias for create_display_grid."""
    return create_display_grid(base_grid, snapshot)


def changed_cells(before: Grid, after: Grid) -> set[Position]:
    """Positions present in both grids whose colour differs."""
    changed = set()
    for r in range(min(len(before), len(after))):
        row_before = before[r]
        row_after = after[r]
        for c in range(min(len(row_before), len(row_after))):
            if row_before[c] != row_after[c]:
                changed.add((r, c))
    return changed
