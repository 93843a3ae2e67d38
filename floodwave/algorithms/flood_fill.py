"""
Floodwave - Wave Flood Fill

Repaints the 4-connected region under a start cell, one BFS level at a
time, and records a snapshot of the grid after every level so the fill can
be played back as an expanding wave.
"""

from dataclasses import dataclass, field

from ..core.grid import (
    Color,
    Grid,
    Position,
    clone_grid,
    get_color,
    get_dimensions,
    get_neighbors,
    is_valid_position,
)


@dataclass
class FloodFillResult:
    """
    Ordered grid states produced by one fill.

    snapshots[0] is a copy of the grid before the fill and snapshots[-1] is
    the finished state. Every snapshot owns its rows.
    """

    snapshots: list[Grid] = field(default_factory=list)

    @property
    def final_grid(self) -> Grid:
        return self.snapshots[-1]

    @property
    def step_count(self) -> int:
        """Number of repaint waves (0 when nothing changed)."""
        return max(0, len(self.snapshots) - 1)


class FloodFill:
    """
    Level-by-level flood fill.

    Algorithm:
        1. Seed the current level and the visited set with the start cell
        2. Keep the cells of the current level that still hold the original
           colour; stop if none are left
        3. Repaint them all in one batch and record a snapshot
        4. The next level is every in-bounds neighbour of those cells not
           visited yet (neighbour order: up, down, left, right)

    Visited cells are tracked as packed integer keys (row * cols + col).
    The loop is iterative, so large grids cannot exhaust the call stack.
    """

    def fill(self, grid: Grid, row: int, col: int, target_color: Color) -> FloodFillResult:
        """
        Flood fill from (row, col) with target_color.

        Args:
            grid: Grid to fill. Never modified.
            row: Start row (may be out of range)
            col: Start column (may be out of range)
            target_color: Colour to paint

        Returns:
            FloodFillResult. An out-of-range start, an empty grid, or a
            start cell that already has target_color give a single
            unchanged snapshot.
        """
        if not is_valid_position(grid, row, col):
            return FloodFillResult(snapshots=[clone_grid(grid)])

        original_color = get_color(grid, row, col)
        if original_color == target_color:
            return FloodFillResult(snapshots=[clone_grid(grid)])

        rows, cols = get_dimensions(grid)
        snapshots = [clone_grid(grid)]
        visited = {row * cols + col}
        current_level: list[Position] = [(row, col)]
        current_grid = grid

        while current_level:
            cells = [
                (r, c) for r, c in current_level
                if current_grid[r][c] == original_color
            ]
            if not cells:
                break

            current_grid = self._paint_level(current_grid, cells, target_color)
            snapshots.append(clone_grid(current_grid))

            current_level = self._next_level(cells, rows, cols, visited)

        return FloodFillResult(snapshots=snapshots)

    def _paint_level(self, grid: Grid, cells: list[Position], target_color: Color) -> Grid:
        """Return a new grid with every cell in cells set to target_color."""
        result = clone_grid(grid)
        for r, c in cells:
            result[r][c] = target_color
        return result

    def _next_level(
        self,
        cells: list[Position],
        rows: int,
        cols: int,
        visited: set[int],
    ) -> list[Position]:
        """Collect unvisited neighbours of cells, marking them visited as they are found."""
        next_level = []
        for r, c in cells:
            for nr, nc in get_neighbors(rows, cols, r, c):
                key = nr * cols + nc
                if key in visited:
                    continue
                visited.add(key)
                next_level.append((nr, nc))
        return next_level


def flood_fill(grid: Grid, row: int, col: int, target_color: Color) -> FloodFillResult:
    """Run a wave flood fill. See FloodFill.fill."""
    return FloodFill().fill(grid, row, col, target_color)
