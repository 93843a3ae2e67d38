"""
Floodwave - Algorithms

Territory generation and wave flood fill.
"""

from .flood_fill import FloodFill, FloodFillResult
from .territory_generator import TerritoryGenerator

__all__ = ["FloodFill", "FloodFillResult", "TerritoryGenerator"]
