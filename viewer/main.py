"""
Floodwave Viewer - Main

Command-line entry point for the viewer application.

Usage:
    floodwave-viewer [grid.json] [--width W] [--height H] [--seed S]
                     [--organicness N] [--cell-size N] [--speed MS]
"""

import argparse
import sys
from pathlib import Path

from .application import ViewerApplication
from .core.constants import (
    DEFAULT_ANIMATION_SPEED,
    DEFAULT_CELL_SIZE,
    DEFAULT_ORGANICNESS,
    DEFAULT_SCREEN_HEIGHT,
    DEFAULT_SCREEN_WIDTH,
)


def parse_arguments(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="floodwave-viewer",
        description="Interactive wave flood fill over organic colour territories",
    )
    parser.add_argument("grid", nargs="?", help="Optional grid JSON file to load on startup")
    parser.add_argument("--width", type=int, default=DEFAULT_SCREEN_WIDTH, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=DEFAULT_SCREEN_HEIGHT, help="Window height in pixels")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible grids")
    parser.add_argument(
        "--organicness", type=int, default=DEFAULT_ORGANICNESS, help="Territory organicness (0-100)"
    )
    parser.add_argument("--cell-size", type=int, default=DEFAULT_CELL_SIZE, help="Cell size in pixels")
    parser.add_argument(
        "--speed", type=int, default=DEFAULT_ANIMATION_SPEED, help="Milliseconds per fill wave"
    )
    return parser.parse_args(argv)


def validate_grid_file(path: str):
    """Validate grid file exists and is readable."""
    p = Path(path)
    if not p.exists():
        print(f"Error: Grid file not found: {path}")
        sys.exit(1)

    if not p.is_file():
        print(f"Error: Grid path is not a file: {path}")
        sys.exit(1)


def main(argv=None):
    """Main entry point for the viewer."""
    args = parse_arguments(argv)

    if args.grid:
        validate_grid_file(args.grid)

    app = ViewerApplication(args.width, args.height, seed=args.seed)

    changed = app.state.set_cell_size(args.cell_size)
    changed = app.state.set_organicness(args.organicness) or changed
    app.state.set_animation_speed(args.speed)
    if changed:
        app._on_layout_change()

    if args.grid:
        app.load_grid(args.grid)

    app.run()


if __name__ == "__main__":
    main()
