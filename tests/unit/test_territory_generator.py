"""Unit tests for organic territory generation."""

import random

import pytest

from floodwave.algorithms.territory_generator import (
    GrowthParams,
    TerritoryGenerator,
    generate_grid_with_zones,
    generate_random_grid,
)
from floodwave.core.grid import get_neighbors
from floodwave.core.palettes import CYBERPUNK_PALETTE


def region_count(grid):
    """Number of 4-connected single-colour regions."""
    rows, cols = len(grid), len(grid[0])
    seen = set()
    regions = 0
    for r in range(rows):
        for c in range(cols):
            if (r, c) in seen:
                continue
            regions += 1
            seen.add((r, c))
            stack = [(r, c)]
            while stack:
                row, col = stack.pop()
                for nr, nc in get_neighbors(rows, cols, row, col):
                    if (nr, nc) not in seen and grid[nr][nc] == grid[row][col]:
                        seen.add((nr, nc))
                        stack.append((nr, nc))
    return regions


def same_colour_pairs(grid):
    """Fraction of right/down neighbour pairs with equal colours."""
    rows, cols = len(grid), len(grid[0])
    same = total = 0
    for r in range(rows):
        for c in range(cols):
            if c + 1 < cols:
                total += 1
                same += grid[r][c] == grid[r][c + 1]
            if r + 1 < rows:
                total += 1
                same += grid[r][c] == grid[r + 1][c]
    return same / total


class TestGenerateShape:
    @pytest.mark.parametrize("rows,cols", [(1, 1), (1, 7), (7, 1), (12, 9)])
    def test_dimensions(self, rng, rows, cols):
        grid = TerritoryGenerator(rng=rng).generate(rows, cols, 50)
        assert len(grid) == rows
        assert all(len(row) == cols for row in grid)

    @pytest.mark.parametrize("organicness", [0, 10, 50, 99, 100])
    def test_every_cell_has_palette_colour(self, rng, organicness):
        grid = TerritoryGenerator(rng=rng).generate(15, 15, organicness)
        for row in grid:
            for cell in row:
                assert cell in CYBERPUNK_PALETTE

    def test_rows_are_distinct_lists(self, rng):
        grid = TerritoryGenerator(rng=rng).generate(4, 4, 100)
        assert len({id(row) for row in grid}) == 4

    def test_custom_palette(self, rng):
        palette = ["#111111", "#222222"]
        grid = TerritoryGenerator(palette=palette, rng=rng).generate(10, 10, 70)
        assert {cell for row in grid for cell in row} <= set(palette)


class TestInvalidRequests:
    @pytest.mark.parametrize("rows,cols", [(0, 5), (5, 0), (-1, 5), (5, -3), (0, 0)])
    def test_non_positive_dimensions(self, rng, rows, cols):
        assert TerritoryGenerator(rng=rng).generate(rows, cols, 100) == []

    @pytest.mark.parametrize("organicness", [-1, 101, 1000, float("nan"), True, "50", None])
    def test_bad_organicness(self, rng, organicness):
        assert TerritoryGenerator(rng=rng).generate(5, 5, organicness) == []

    def test_empty_palette_rejected(self):
        with pytest.raises(ValueError):
            TerritoryGenerator(palette=[])

    def test_random_grid_bad_dimensions(self, rng):
        assert TerritoryGenerator(rng=rng).random_grid(0, 3) == []


class TestDeterminism:
    def test_same_seed_same_grid(self):
        a = TerritoryGenerator(rng=random.Random(42)).generate(20, 20, 60)
        b = TerritoryGenerator(rng=random.Random(42)).generate(20, 20, 60)
        assert a == b

    def test_different_seed_different_grid(self):
        a = TerritoryGenerator(rng=random.Random(1)).generate(20, 20, 60)
        b = TerritoryGenerator(rng=random.Random(2)).generate(20, 20, 60)
        assert a != b

    def test_module_helper_uses_given_rng(self):
        a = generate_grid_with_zones(8, 8, 80, rng=random.Random(5))
        b = generate_grid_with_zones(8, 8, 80, rng=random.Random(5))
        assert a == b

    def test_default_organicness_is_100(self):
        a = generate_grid_with_zones(8, 8, rng=random.Random(5))
        b = generate_grid_with_zones(8, 8, 100, rng=random.Random(5))
        assert a == b


class TestOrganicness:
    def test_zero_is_independent_noise(self):
        """Organicness 0 draws one palette colour per cell in row-major order."""
        rng = random.Random(9)
        grid = TerritoryGenerator(rng=rng).generate(6, 6, 0)
        expected_rng = random.Random(9)
        expected = [[expected_rng.choice(CYBERPUNK_PALETTE) for _ in range(6)] for _ in range(6)]
        assert grid == expected

    def test_random_grid_helper(self):
        grid = generate_random_grid(3, 4, rng=random.Random(0))
        assert len(grid) == 3 and all(len(row) == 4 for row in grid)

    def test_high_organicness_is_blobbier(self):
        """Averaged over several grids, neighbours agree more often at 100 than at 0."""
        rng = random.Random(77)
        generator = TerritoryGenerator(rng=rng)
        noisy = sum(same_colour_pairs(generator.generate(20, 20, 0)) for _ in range(5)) / 5
        organic = sum(same_colour_pairs(generator.generate(20, 20, 100)) for _ in range(5)) / 5
        assert organic > noisy
        # 9 colours at random agree about one time in nine
        assert noisy < 0.25
        assert organic > 0.5

    def test_full_organicness_gives_few_regions(self):
        """At 100 the grid splits into a handful of regions, not one per cell."""
        generator = TerritoryGenerator(rng=random.Random(31))
        organic = [region_count(generator.generate(20, 20, 100)) for _ in range(5)]
        noisy = [region_count(generator.generate(20, 20, 0)) for _ in range(5)]
        # 10 seed territories for a 20x20 grid
        assert max(organic) < 20 * 20 / 10
        assert sum(organic) * 5 < sum(noisy)


class TestTerritoryCount:
    def test_full_organicness_uses_minimum(self):
        # floor(sqrt(100) / 2) = 5
        assert TerritoryGenerator.territory_count(10, 10, 100) == 5

    def test_minimum_is_at_least_two(self):
        assert TerritoryGenerator.territory_count(2, 2, 100) == 2
        assert TerritoryGenerator.territory_count(1, 1, 100) == 2

    def test_zero_organicness_is_one_per_cell(self):
        assert TerritoryGenerator.territory_count(10, 10, 0) == 100

    def test_interpolates(self):
        # 5 + 95 * 0.5 = 52.5
        assert TerritoryGenerator.territory_count(10, 10, 50) == 52

    def test_decreases_with_organicness(self):
        counts = [TerritoryGenerator.territory_count(30, 30, o) for o in range(0, 101, 10)]
        assert counts == sorted(counts, reverse=True)


class TestGrowth:
    def test_grown_cells_carry_territory_colour(self, rng):
        grid, territories = TerritoryGenerator(rng=rng).grow(10, 10, 100)
        for territory in territories:
            for row, col in territory.cells[1:]:
                assert grid[row][col] == territory.color

    def test_growth_ends_with_all_territories_sealed(self, rng):
        _grid, territories = TerritoryGenerator(rng=rng).grow(10, 10, 100)
        assert all(t.sealed for t in territories)

    def test_claimed_cells_are_not_shared(self, rng):
        _grid, territories = TerritoryGenerator(rng=rng).grow(12, 12, 80)
        # Seeds may land on the same cell; grown cells never overlap
        grown = [cell for t in territories for cell in t.cells[1:]]
        assert len(grown) == len(set(grown))

    def test_probability_range(self, rng):
        generator = TerritoryGenerator(rng=rng)
        for organicness in (0, 50, 100):
            for row in range(5):
                for col in range(5):
                    p = generator.growth_probability(row, col, 123.4, organicness)
                    assert 0.0 <= p <= 1.0

    def test_probability_rises_with_organicness(self, rng):
        generator = TerritoryGenerator(rng=rng)
        low = generator.growth_probability(3, 4, 10.0, 0)
        high = generator.growth_probability(3, 4, 10.0, 100)
        assert high == pytest.approx(min(1.0, low + 0.4))

    def test_probability_is_clamped(self, rng):
        generator = TerritoryGenerator(params=GrowthParams(base=0.9), rng=rng)
        assert generator.growth_probability(1, 1, 0.0, 100) == 1.0

    def test_zero_growth_leaves_fill_to_nearest(self, rng):
        """With no growth at all, every cell is coloured by the leftover pass."""
        params = GrowthParams(base=0.0, noise_weight=0.0, organic_weight=0.0)
        grid = TerritoryGenerator(params=params, rng=rng).generate(9, 9, 100)
        assert all(cell in CYBERPUNK_PALETTE for row in grid for cell in row)


class TestFillRemaining:
    def test_nearest_colour_wins(self, rng):
        generator = TerritoryGenerator(rng=rng)
        grid = [
            [None, None, None],
            [None, None, "#00F5FF"],
            ["#FF006E", None, None],
        ]
        filled = generator._fill_remaining(grid, 3, 3)
        assert filled[1][1] == "#00F5FF"  # distance 1 beats distance 2
        assert filled[2][1] == "#FF006E"  # distance 1 beats distance 2
        assert filled[0][0] == "#FF006E"  # distance 2 beats distance 3

    def test_ties_go_to_first_in_scan_order(self, rng):
        generator = TerritoryGenerator(rng=rng)
        grid = [["#FF006E", None, "#06FFA5"]]
        assert generator._fill_remaining(grid, 1, 3)[0][1] == "#FF006E"

    def test_reads_grid_before_filling(self, rng):
        """Cells filled by the pass itself are not used as sources."""
        generator = TerritoryGenerator(palette=["#000001"], rng=rng)
        grid = [["#3A86FF", None, None, None]]
        filled = generator._fill_remaining(grid, 1, 4)
        assert filled[0][1] == "#3A86FF"
        assert filled[0][2] == "#3A86FF"
        # Out of radius 2, so it falls back to a palette colour
        assert filled[0][3] == "#000001"

    def test_radius_is_configurable(self, rng):
        generator = TerritoryGenerator(params=GrowthParams(fill_radius=3), rng=rng)
        grid = [["#3A86FF", None, None, None]]
        assert generator._fill_remaining(grid, 1, 4)[0][3] == "#3A86FF"

    def test_nearest_search_uses_manhattan_distance(self, rng):
        generator = TerritoryGenerator(rng=rng)
        grid = [[None] * 5 for _ in range(5)]
        grid[0][0] = "#FFBE0B"  # diagonal corner, distance 4
        grid[2][4] = "#8338EC"  # same row, distance 2
        assert generator._closest_color(grid, 2, 2, 5, 5) == "#8338EC"
