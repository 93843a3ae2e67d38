#!/usr/bin/env python3
"""
Floodwave - Fill Runner

Runs a wave flood fill on a saved grid and writes the result.

Usage:
    python tools/fill.py GRID.json ROW COL COLOR [-o filled.json]
                         [--snapshots waves.json] [--gif fill.gif]
                         [--filmstrip strip.png] [--cell-size N] [--frame-ms N]
Example:
    python tools/fill.py grid.json 5 5 "#3A86FF" --gif fill.gif
"""

import argparse
import sys

from floodwave.algorithms.flood_fill import flood_fill
from floodwave.core.grid import get_color
from floodwave.core.grid_helpers import changed_cells
from floodwave.formats.grid_data import GridData, GridFormatError, save_snapshots
from floodwave.rendering.pil_renderer import render_filmstrip, save_snapshots_gif


def main():
    parser = argparse.ArgumentParser(description="Run a wave flood fill on a grid file")
    parser.add_argument("grid", help="Grid JSON file")
    parser.add_argument("row", type=int, help="Start row")
    parser.add_argument("col", type=int, help="Start column")
    parser.add_argument("color", help='Fill colour, e.g. "#3A86FF"')
    parser.add_argument("-o", "--output", help="Write the filled grid to this JSON path")
    parser.add_argument("--snapshots", help="Write every wave snapshot to this JSON path")
    parser.add_argument("--gif", help="Write an animated GIF of the fill")
    parser.add_argument("--filmstrip", help="Write all waves side by side to this PNG path")
    parser.add_argument("--cell-size", type=int, default=16, help="Cell size in pixels for images")
    parser.add_argument("--frame-ms", type=int, default=100, help="GIF frame duration")

    args = parser.parse_args()

    grid_data = GridData()
    try:
        grid_data.load(args.grid)
    except FileNotFoundError:
        print(f"Error: Grid file not found: {args.grid}")
        sys.exit(1)
    except GridFormatError as e:
        print(f"Error: {e}")
        sys.exit(1)

    start_color = get_color(grid_data.cells, args.row, args.col)
    if start_color is None:
        print(f"Warning: ({args.row}, {args.col}) is outside the {grid_data.rows}x{grid_data.cols} grid")

    result = flood_fill(grid_data.cells, args.row, args.col, args.color)
    repainted = len(changed_cells(grid_data.cells, result.final_grid))
    print(
        f"Filled from ({args.row}, {args.col}) {start_color} -> {args.color}: "
        f"{repainted} cells in {result.step_count} waves"
    )

    if args.output:
        grid_data.set_cells(result.final_grid)
        grid_data.save(args.output)
        print(f"Saved {args.output}")

    if args.snapshots:
        save_snapshots(result.snapshots, args.snapshots)
        print(f"Saved {len(result.snapshots)} snapshots to {args.snapshots}")

    if args.gif:
        save_snapshots_gif(result.snapshots, args.gif, args.cell_size, args.frame_ms)
        print(f"Saved {args.gif}")

    if args.filmstrip:
        render_filmstrip(result.snapshots, args.cell_size).save(args.filmstrip)
        print(f"Saved {args.filmstrip}")


if __name__ == "__main__":
    main()
