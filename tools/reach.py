#!/usr/bin/env python3
"""
Tile Reach - Reachable Cell Counter

Counts the cells a walker can occupy after exactly N steps on a map.

Default mode (bounded):
  - The walker never leaves the map
  - Any map with a single start marker works

Infinite mode (--infinite):
  - The map repeats forever in every direction
  - Requires a square map with the start at its center, a clear start
    row and column, and a step count of start.x + k * width

Usage:
    python tools/reach.py map.txt --steps 64
    python tools/reach.py map.txt --steps 26501365 --infinite --trace trace.json
"""

import argparse
import sys

from tilereach.core.constants import DEFAULT_STEPS
from tilereach.core.flood_fill import count_reachable_in_tile
from tilereach.core.instrumented import InstrumentedFloodFill
from tilereach.core.tiling import TilingExtrapolator, TilingPreconditionError
from tilereach.formats.obstacle_grid import GridParseError, ObstacleGrid


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Count cells reachable in exactly N steps",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("map", help="Map text file ('.', '#', 'S')")
    parser.add_argument(
        "-n",
        "--steps",
        type=int,
        default=DEFAULT_STEPS,
        help=f"Number of steps (default: {DEFAULT_STEPS})",
    )
    parser.add_argument(
        "--infinite",
        action="store_true",
        help="Treat the map as tiling the plane",
    )
    parser.add_argument(
        "--trace",
        metavar="PATH",
        help="Write a JSON trace of every flood fill to PATH",
    )
    args = parser.parse_args()

    if args.steps < 0:
        print("Error: --steps must be non-negative", file=sys.stderr)
        return 1

    try:
        grid = ObstacleGrid.load(args.map)
    except FileNotFoundError:
        print(f"Error: map file not found: {args.map}", file=sys.stderr)
        return 1
    except GridParseError as e:
        print(f"Error: {args.map}: {e}", file=sys.stderr)
        return 1

    flood_fill = InstrumentedFloodFill()
    width, height = grid.dimensions()
    print(f"Loaded {width}x{height} map from {args.map}")

    try:
        if args.infinite:
            result = TilingExtrapolator(flood_fill).count_reachable(grid, args.steps)
        else:
            result = count_reachable_in_tile(grid, args.steps, flood_fill)
    except (GridParseError, TilingPreconditionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    mode = "infinite tiling" if args.infinite else "bounded map"
    print(f"Reachable cells after {args.steps} steps ({mode}): {result}")

    if args.trace:
        flood_fill.write_trace(args.trace)

    return 0


if __name__ == "__main__":
    sys.exit(main())
