"""
Floodwave - grid flood fill and organic territory generation.

The core library: grid primitives, the territory generator that builds
starting grids, and the wave flood fill that produces animation snapshots.
"""

from .algorithms.flood_fill import FloodFill, FloodFillResult, flood_fill
from .algorithms.territory_generator import (
    GrowthParams,
    Territory,
    TerritoryGenerator,
    generate_grid_with_zones,
    generate_random_grid,
)
from .core.grid import (
    clone_grid,
    get_color,
    get_dimensions,
    get_neighbors,
    is_valid_position,
    set_color,
)
from .core.grid_helpers import determine_flip_direction

__all__ = [
    "FloodFill",
    "FloodFillResult",
    "GrowthParams",
    "Territory",
    "TerritoryGenerator",
    "clone_grid",
    "determine_flip_direction",
    "flood_fill",
    "generate_grid_with_zones",
    "generate_random_grid",
    "get_color",
    "get_dimensions",
    "get_neighbors",
    "is_valid_position",
    "set_color",
]
