#!/usr/bin/env python3
"""
Floodwave - Grid Generator

Generates an organic territory grid and saves it as JSON (and optionally PNG).

Usage:
    python tools/generate.py ROWS COLS [--organicness N] [--seed S]
                             [-o grid.json] [--png grid.png] [--cell-size N]
Examples:
    python tools/generate.py 20 30 -o grid.json
    python tools/generate.py 40 40 --organicness 0 --seed 7 --png noise.png
"""

import argparse
import random
import sys

from floodwave.algorithms.territory_generator import TerritoryGenerator
from floodwave.formats.grid_data import GridData
from floodwave.rendering.pil_renderer import render_grid_to_image


def main():
    parser = argparse.ArgumentParser(description="Generate an organic territory grid")
    parser.add_argument("rows", type=int, help="Number of rows")
    parser.add_argument("cols", type=int, help="Number of columns")
    parser.add_argument(
        "--organicness",
        type=float,
        default=100,
        help="0 = per-cell noise, 100 = few large territories (default: 100)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("-o", "--output", default="grid.json", help="Output JSON path")
    parser.add_argument("--png", help="Also render the grid to this PNG path")
    parser.add_argument("--cell-size", type=int, default=16, help="PNG cell size in pixels")

    args = parser.parse_args()

    generator = TerritoryGenerator(rng=random.Random(args.seed))
    grid = generator.generate(args.rows, args.cols, args.organicness)
    if not grid:
        print(
            f"Error: Cannot generate {args.rows}x{args.cols} grid "
            f"with organicness {args.organicness}"
        )
        sys.exit(1)

    organicness = int(args.organicness) if float(args.organicness).is_integer() else args.organicness
    grid_data = GridData(grid, organicness)
    try:
        grid_data.save(args.output)
    except OSError as e:
        print(f"Error: Failed to write {args.output}: {e}")
        sys.exit(1)

    territories = TerritoryGenerator.territory_count(args.rows, args.cols, args.organicness)
    print(f"Generated {args.rows}x{args.cols} grid ({territories} seed territories) -> {args.output}")

    if args.png:
        img = render_grid_to_image(grid, args.cell_size)
        img.save(args.png)
        print(f"Rendered {args.png} ({img.width}x{img.height})")


if __name__ == "__main__":
    main()
