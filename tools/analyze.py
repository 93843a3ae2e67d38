#!/usr/bin/env python3
"""
Floodwave - Territory Analyzer

Generates many grids and reports how organicness shapes them: number of
connected single-colour regions, region sizes, and how often orthogonal
neighbours share a colour.

Usage:
    python tools/analyze.py [--rows R] [--cols C] [--samples N] [--seed S]
                            [--organicness 0 50 100]
"""

import argparse
import random
from collections import deque

import numpy as np

from floodwave.algorithms.territory_generator import TerritoryGenerator
from floodwave.core.grid import get_dimensions, get_neighbors


def percentile_stats(values):
    """Return min/25th/50th/75th/max statistics."""
    if not values:
        raise ValueError("values cannot be empty in percentile_stats call")
    arr = np.array(values)
    return {
        "min": float(np.min(arr)),
        "25th": float(np.percentile(arr, 25)),
        "50th": float(np.percentile(arr, 50)),
        "75th": float(np.percentile(arr, 75)),
        "max": float(np.max(arr)),
        "count": len(values),
    }


def region_sizes(grid):
    """Sizes of the 4-connected single-colour regions of a grid."""
    rows, cols = get_dimensions(grid)
    seen = set()
    sizes = []
    for r in range(rows):
        for c in range(cols):
            if (r, c) in seen:
                continue
            color = grid[r][c]
            seen.add((r, c))
            queue = deque([(r, c)])
            size = 0
            while queue:
                row, col = queue.popleft()
                size += 1
                for nr, nc in get_neighbors(rows, cols, row, col):
                    if (nr, nc) not in seen and grid[nr][nc] == color:
                        seen.add((nr, nc))
                        queue.append((nr, nc))
            sizes.append(size)
    return sizes


def same_color_rate(grid):
    """Fraction of right/down neighbour pairs that share a colour."""
    arr = np.array(grid, dtype=object)
    horizontal = arr[:, 1:] == arr[:, :-1]
    vertical = arr[1:, :] == arr[:-1, :]
    pairs = horizontal.size + vertical.size
    if pairs == 0:
        return 0.0
    return float(horizontal.sum() + vertical.sum()) / pairs


def print_stats(title, stats, fmt=".1f"):
    print(f"  {title} (n={stats['count']}):")
    print(f"    Min:  {stats['min']:{fmt}}")
    print(f"    25th: {stats['25th']:{fmt}}")
    print(f"    50th: {stats['50th']:{fmt}}")
    print(f"    75th: {stats['75th']:{fmt}}")
    print(f"    Max:  {stats['max']:{fmt}}")


def main():
    parser = argparse.ArgumentParser(description="Analyze generated territory grids")
    parser.add_argument("--rows", type=int, default=20, help="Grid rows")
    parser.add_argument("--cols", type=int, default=20, help="Grid columns")
    parser.add_argument("--samples", type=int, default=50, help="Grids per organicness level")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument(
        "--organicness",
        type=float,
        nargs="+",
        default=[0, 50, 100],
        help="Organicness levels to compare",
    )

    args = parser.parse_args()

    generator = TerritoryGenerator(rng=random.Random(args.seed))
    print(f"Analyzing {args.samples} {args.rows}x{args.cols} grids per level\n")

    for organicness in args.organicness:
        region_counts = []
        all_sizes = []
        rates = []
        for _ in range(args.samples):
            grid = generator.generate(args.rows, args.cols, organicness)
            if not grid:
                break
            sizes = region_sizes(grid)
            region_counts.append(len(sizes))
            all_sizes.extend(sizes)
            rates.append(same_color_rate(grid))

        print("=" * 60)
        seeds = TerritoryGenerator.territory_count(args.rows, args.cols, organicness)
        print(f"ORGANICNESS {organicness:g} ({seeds} seed territories)")
        print("=" * 60)
        if not region_counts:
            print("  Warning: generator produced no grids for this level\n")
            continue

        print_stats("Regions per grid", percentile_stats(region_counts))
        print_stats("Region size", percentile_stats(all_sizes))
        print_stats("Same-colour neighbour rate", percentile_stats(rates), fmt=".3f")
        print(f"  Mean rate: {np.mean(rates):.3f}  Std dev: {np.std(rates):.3f}\n")


if __name__ == "__main__":
    main()
