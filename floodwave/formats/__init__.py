"""
Floodwave - File Formats

JSON persistence for grids and fill snapshot sequences.
"""

from .grid_data import GridData, GridFormatError, InvalidCell, load_snapshots, save_snapshots

__all__ = ["GridData", "GridFormatError", "InvalidCell", "load_snapshots", "save_snapshots"]
