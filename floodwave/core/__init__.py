"""
Core grid functionality.

Grid value-object primitives, lattice noise, palettes and display helpers.
"""

from .grid import (
    Color,
    Grid,
    Position,
    clone_grid,
    get_color,
    get_dimensions,
    get_neighbors,
    is_valid_position,
    set_color,
)
from .noise import lattice_noise

__all__ = [
    "Color",
    "Grid",
    "Position",
    "clone_grid",
    "get_color",
    "get_dimensions",
    "get_neighbors",
    "is_valid_position",
    "lattice_noise",
    "set_color",
]
