"""Unit tests for the level-by-level wave flood fill."""

import pytest

from floodwave.algorithms.flood_fill import FloodFill, FloodFillResult, flood_fill
from floodwave.core.grid import get_neighbors

RED = "#FF0000"
GREEN = "#00FF00"
BLUE = "#0000FF"


def region(grid, row, col):
    """4-connected cells sharing the colour at (row, col)."""
    rows, cols = len(grid), len(grid[0])
    color = grid[row][col]
    seen = {(row, col)}
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        for nr, nc in get_neighbors(rows, cols, r, c):
            if (nr, nc) not in seen and grid[nr][nc] == color:
                seen.add((nr, nc))
                stack.append((nr, nc))
    return seen


class TestBasicFill:
    def test_single_cell(self, single_cell_grid):
        result = flood_fill(single_cell_grid, 0, 0, BLUE)
        assert result.snapshots == [[[RED]], [[BLUE]]]

    def test_row_stops_at_other_colour(self, row_grid):
        result = flood_fill(row_grid, 0, 0, BLUE)
        assert result.final_grid == [[BLUE, BLUE, GREEN]]

    def test_row_levels(self, row_grid):
        result = flood_fill(row_grid, 0, 0, BLUE)
        assert result.snapshots == [
            [[RED, RED, GREEN]],
            [[BLUE, RED, GREEN]],
            [[BLUE, BLUE, GREEN]],
        ]

    def test_cross_keeps_corners(self, cross_grid):
        result = flood_fill(cross_grid, 1, 1, BLUE)
        assert result.final_grid == [
            [GREEN, BLUE, GREEN],
            [BLUE, BLUE, BLUE],
            [GREEN, BLUE, GREEN],
        ]

    def test_cross_is_two_waves(self, cross_grid):
        """Centre first, then all four arms together."""
        result = flood_fill(cross_grid, 1, 1, BLUE)
        assert result.step_count == 2
        assert result.snapshots[1] == [
            [GREEN, RED, GREEN],
            [RED, BLUE, RED],
            [GREEN, RED, GREEN],
        ]

    def test_separate_region_untouched(self, split_grid):
        result = flood_fill(split_grid, 0, 0, BLUE)
        final = result.final_grid
        assert [row[0] for row in final] == [BLUE, BLUE, BLUE]
        assert [row[1] for row in final] == [GREEN, GREEN, GREEN]
        assert [row[2] for row in final] == [RED, RED, RED]


class TestNoOpFills:
    def test_out_of_bounds_start(self, single_cell_grid):
        result = flood_fill(single_cell_grid, 5, 5, BLUE)
        assert result.snapshots == [[[RED]]]

    def test_negative_start(self, single_cell_grid):
        result = flood_fill(single_cell_grid, -1, 0, BLUE)
        assert result.snapshots == [[[RED]]]

    def test_empty_grid(self):
        result = flood_fill([], 0, 0, BLUE)
        assert result.snapshots == [[]]

    def test_same_colour(self, cross_grid):
        result = flood_fill(cross_grid, 1, 1, RED)
        assert result.snapshots == [cross_grid]
        assert result.step_count == 0

    def test_no_op_snapshot_is_a_copy(self, single_cell_grid):
        result = flood_fill(single_cell_grid, 0, 0, RED)
        assert result.snapshots[0] is not single_cell_grid
        assert result.snapshots[0][0] is not single_cell_grid[0]


class TestWaveProperties:
    def test_first_snapshot_equals_input(self, cross_grid):
        result = flood_fill(cross_grid, 0, 1, BLUE)
        assert result.snapshots[0] == cross_grid

    def test_input_not_modified(self, cross_grid):
        before = [row[:] for row in cross_grid]
        flood_fill(cross_grid, 1, 1, BLUE)
        assert cross_grid == before

    def test_snapshots_are_independent(self, cross_grid):
        result = flood_fill(cross_grid, 1, 1, BLUE)
        result.snapshots[1][0][0] = "#123456"
        assert result.snapshots[0][0][0] == GREEN
        assert result.snapshots[2][0][0] == GREEN
        assert cross_grid[0][0] == GREEN

    def test_exactly_the_connected_region_changes(self):
        grid = [
            [RED, RED, GREEN, RED],
            [GREEN, RED, GREEN, RED],
            [RED, RED, RED, RED],
            [GREEN, GREEN, GREEN, RED],
        ]
        expected = region(grid, 0, 0)
        result = flood_fill(grid, 0, 0, BLUE)
        final = result.final_grid
        for r in range(4):
            for c in range(4):
                if (r, c) in expected:
                    assert final[r][c] == BLUE
                else:
                    assert final[r][c] == grid[r][c]

    def test_painted_cells_grow_monotonically(self, uniform_grid):
        result = flood_fill(uniform_grid, 2, 2, BLUE)
        counts = [sum(cell == BLUE for row in snap for cell in row) for snap in result.snapshots]
        assert counts[0] == 0
        assert all(a < b for a, b in zip(counts, counts[1:]))
        assert counts[-1] == 25

    def test_levels_follow_manhattan_distance(self, uniform_grid):
        """Wave k repaints exactly the cells at distance k from the start."""
        result = flood_fill(uniform_grid, 2, 2, BLUE)
        # Max distance from the centre of a 5x5 grid is 4
        assert result.step_count == 5
        for k in range(1, len(result.snapshots)):
            before = result.snapshots[k - 1]
            after = result.snapshots[k]
            changed = {
                (r, c) for r in range(5) for c in range(5) if before[r][c] != after[r][c]
            }
            assert changed == {
                (r, c) for r in range(5) for c in range(5) if abs(r - 2) + abs(c - 2) == k - 1
            }

    def test_more_levels_than_recursion_limit(self):
        grid = [["#000000"] * 1500]
        result = flood_fill(grid, 0, 0, BLUE)
        assert all(cell == BLUE for row in result.final_grid for cell in row)
        assert result.step_count == 1500

    def test_non_string_tokens(self):
        grid = [[1, 1], [2, 1]]
        result = FloodFill().fill(grid, 0, 0, 9)
        assert result.final_grid == [[9, 9], [2, 9]]


class TestFloodFillResult:
    def test_step_count_of_empty_result(self):
        assert FloodFillResult().step_count == 0

    def test_final_grid_is_last_snapshot(self, row_grid):
        result = flood_fill(row_grid, 0, 0, BLUE)
        assert result.final_grid is result.snapshots[-1]

    def test_final_grid_of_empty_result_raises(self):
        with pytest.raises(IndexError):
            FloodFillResult().final_grid
