"""
Floodwave - Territory Generator

Builds a starting grid made of organically shaped colour regions
("territories") instead of per-cell noise. How blobby the result looks is
controlled by an organicness value from 0 (pure noise) to 100 (few large
regions).
"""

import math
import random
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..core.grid import Color, Grid, Position, get_neighbors
from ..core.noise import lattice_noise
from ..core.palettes import CYBERPUNK_PALETTE


@dataclass(frozen=True)
class GrowthParams:
    """
    Tuning constants for territory growth.

    The chance that a territory claims an unfilled neighbour is
    base + noise_weight * |noise| + organic_weight * organicness / 100,
    clamped to [0, 1].
    """

    base: float = 0.3
    noise_weight: float = 0.4
    organic_weight: float = 0.4
    noise_scale: float = 2.0
    # Leftover cells copy the closest colour within this Chebyshev radius
    fill_radius: int = 2
    # Noise seeds are drawn uniformly from [0, seed_range)
    seed_range: float = 10000.0


@dataclass
class Territory:
    """A region growing out from a single seed cell."""

    color: Color
    cells: list[Position] = field(default_factory=list)
    # Cells claimed last iteration whose neighbours have not been tried yet
    frontier: list[Position] = field(default_factory=list)

    @property
    def sealed(self) -> bool:
        return not self.frontier


class TerritoryGenerator:
    """
    Generates grids of organic colour territories.

    Algorithm:
        1. Pick a territory count between sqrt(area)/2 (organicness 100)
           and the full cell count (organicness 0)
        2. Drop that many seeds at random cells with random palette colours
        3. Grow every territory ring by ring; each unfilled neighbour of a
           frontier cell joins with a noise-biased probability
        4. Stop when every territory is sealed or after rows*cols rounds
        5. Colour any cell left over from its nearest coloured neighbour

    All randomness comes from the injected random.Random, so a seeded
    instance gives reproducible grids.
    """

    def __init__(
        self,
        palette: Optional[Sequence[Color]] = None,
        params: Optional[GrowthParams] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            palette: Colours to hand out (default: CYBERPUNK_PALETTE)
            params: Growth tuning constants (default: GrowthParams())
            rng: Random source (default: a fresh unseeded random.Random)

        Raises:
            ValueError: If palette is empty
        """
        self.palette = list(palette) if palette is not None else list(CYBERPUNK_PALETTE)
        if not self.palette:
            raise ValueError("palette cannot be empty")
        self.params = params if params is not None else GrowthParams()
        self.rng = rng if rng is not None else random.Random()

    def generate(self, rows: int, cols: int, organicness: float = 100) -> Grid:
        """
        Generate a fully coloured rows x cols grid.

        Args:
            rows: Number of rows
            cols: Number of columns
            organicness: 0-100. 0 gives independent random cells, higher
                         values give fewer, larger territories.

        Returns:
            New grid. Non-positive dimensions or an organicness outside
            0-100 give an empty grid.
        """
        if not self._valid_request(rows, cols, organicness):
            return []

        if organicness == 0:
            return self.random_grid(rows, cols)

        grown, _territories = self.grow(rows, cols, organicness)
        return self._fill_remaining(grown, rows, cols)

    def random_grid(self, rows: int, cols: int) -> Grid:
        """Grid where every cell independently gets a random palette colour."""
        if rows <= 0 or cols <= 0:
            return []
        return [[self._random_color() for _ in range(cols)] for _ in range(rows)]

    def grow(
        self, rows: int, cols: int, organicness: float
    ) -> tuple[list[list[Optional[Color]]], list[Territory]]:
        """
        Run seeding and growth without filling the leftovers.

        Returns:
            (grid, territories) where unclaimed cells in grid are None.
        """
        seed = self.rng.random() * self.params.seed_range
        grid: list[list[Optional[Color]]] = [[None] * cols for _ in range(rows)]

        count = self.territory_count(rows, cols, organicness)
        territories = self._create_seeds(count, rows, cols)
        for territory in territories:
            start_row, start_col = territory.cells[0]
            grid[start_row][start_col] = territory.color

        max_iterations = rows * cols
        iteration = 0
        active = len(territories)
        while iteration < max_iterations and active > 0:
            active = self._grow_iteration(grid, territories, rows, cols, seed, organicness)
            iteration += 1

        return grid, territories

    @staticmethod
    def territory_count(rows: int, cols: int, organicness: float) -> int:
        """
        Number of seeds for a grid.

        Interpolates linearly from max(2, floor(sqrt(rows*cols) / 2)) at
        organicness 100 up to rows*cols as organicness approaches 0.
        """
        total = rows * cols
        minimum = max(2, math.floor(math.sqrt(total) / 2))
        return math.floor(minimum + (total - minimum) * ((100 - organicness) / 100))

    def growth_probability(self, row: int, col: int, seed: float, organicness: float) -> float:
        """Chance that an unfilled cell at (row, col) joins a neighbouring territory."""
        noise = abs(lattice_noise(row + seed, col + seed, self.params.noise_scale))
        p = (
            self.params.base
            + noise * self.params.noise_weight
            + (organicness / 100) * self.params.organic_weight
        )
        return min(1.0, max(0.0, p))

    def _valid_request(self, rows, cols, organicness) -> bool:
        if rows <= 0 or cols <= 0:
            return False
        if isinstance(organicness, bool) or not isinstance(organicness, (int, float)):
            return False
        # NaN fails both comparisons
        return 0 <= organicness <= 100

    def _random_color(self) -> Color:
        return self.rng.choice(self.palette)

    def _create_seeds(self, count: int, rows: int, cols: int) -> list[Territory]:
        territories = []
        for _ in range(count):
            start = (self.rng.randrange(rows), self.rng.randrange(cols))
            territories.append(
                Territory(color=self._random_color(), cells=[start], frontier=[start])
            )
        return territories

    def _grow_iteration(
        self,
        grid: list[list[Optional[Color]]],
        territories: list[Territory],
        rows: int,
        cols: int,
        seed: float,
        organicness: float,
    ) -> int:
        """
        Grow every unsealed territory by one ring, in territory order.

        Claimed cells are written to grid straight away, so territories later
        in the list cannot claim them in the same round.

        Returns:
            How many territories claimed at least one cell.
        """
        active = 0
        for territory in territories:
            if territory.sealed:
                continue

            next_frontier: list[Position] = []
            for row, col in territory.frontier:
                unfilled = [
                    (nr, nc)
                    for nr, nc in get_neighbors(rows, cols, row, col)
                    if grid[nr][nc] is None
                ]
                for nr, nc in unfilled:
                    if self.rng.random() < self.growth_probability(nr, nc, seed, organicness):
                        grid[nr][nc] = territory.color
                        territory.cells.append((nr, nc))
                        next_frontier.append((nr, nc))

            territory.frontier = next_frontier
            if next_frontier:
                active += 1

        return active

    def _fill_remaining(self, grid: list[list[Optional[Color]]], rows: int, cols: int) -> Grid:
        """Colour every unclaimed cell from its closest claimed neighbour."""
        result: Grid = []
        for row in range(rows):
            new_row = []
            for col in range(cols):
                cell = grid[row][col]
                if cell is None:
                    cell = self._closest_color(grid, row, col, rows, cols)
                    if cell is None:
                        cell = self._random_color()
                new_row.append(cell)
            result.append(new_row)
        return result

    def _closest_color(
        self,
        grid: list[list[Optional[Color]]],
        row: int,
        col: int,
        rows: int,
        cols: int,
    ) -> Optional[Color]:
        """
        Find the colour of the nearest claimed cell in the surrounding square.

        Distance is Manhattan; ties go to the first cell in row-major scan
        order. Reads the grid as it was after growth, not cells filled by
        this pass.
        """
        radius = self.params.fill_radius
        closest = None
        min_dist = math.inf

        for dr in range(-radius, radius + 1):
            for dc in range(-radius, radius + 1):
                nr, nc = row + dr, col + dc
                if 0 <= nr < rows and 0 <= nc < cols and grid[nr][nc] is not None:
                    dist = abs(dr) + abs(dc)
                    if dist < min_dist:
                        min_dist = dist
                        closest = grid[nr][nc]

        return closest


def generate_grid_with_zones(
    rows: int,
    cols: int,
    organicness: float = 100,
    rng: Optional[random.Random] = None,
) -> Grid:
    """Generate a territory grid with the default palette and tuning."""
    return TerritoryGenerator(rng=rng).generate(rows, cols, organicness)


def generate_random_grid(rows: int, cols: int, rng: Optional[random.Random] = None) -> Grid:
    """Generate a grid of independent random palette colours."""
    return TerritoryGenerator(rng=rng).random_grid(rows, cols)
