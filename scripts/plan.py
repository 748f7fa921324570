#!/usr/bin/env python3
"""
Route planner CLI - run A* on a grid board and print the result.

Usage:
    python scripts/plan.py --rows 5 --cols 6 --start 0,0 --goal 4,5
    python scripts/plan.py --rows 5 --cols 6 --obstacle 0,1 --obstacle 1,1 --obstacle 2,1
    python scripts/plan.py --rows 8 --cols 8 --start 0,0 --goal 7,7 --heuristic zero -v

Heuristics:
    manhattan - Admissible for 4-directional moves (default)
    euclidean - Admissible, less informed on grids
    zero      - Dijkstra's algorithm (expands the most nodes)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from routeplan.config import LOG_LEVEL  # noqa: E402
from routeplan.errors import InvalidEndpointError  # noqa: E402
from routeplan.heuristics import get_heuristic  # noqa: E402
from routeplan.model import GridModel  # noqa: E402
from routeplan.search import AStarSearch  # noqa: E402


def parse_cell(value: str) -> tuple[int, int]:
    """Parse 'row,col' into a tuple."""
    try:
        row, col = (int(part) for part in value.split(","))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Expected 'row,col', got '{value}'") from e
    return row, col


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find a shortest path on a grid board with A*",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("--rows", type=int, default=5, help="Number of rows (default: 5)")
    parser.add_argument("--cols", type=int, default=6, help="Number of columns (default: 6)")
    parser.add_argument(
        "--start",
        type=parse_cell,
        default=(0, 0),
        help="Start cell as row,col (default: 0,0)",
    )
    parser.add_argument(
        "--goal",
        type=parse_cell,
        default=None,
        help="Goal cell as row,col (default: bottom-right corner)",
    )
    parser.add_argument(
        "--obstacle",
        type=parse_cell,
        action="append",
        default=[],
        help="Obstacle cell as row,col (repeatable)",
    )
    parser.add_argument(
        "--heuristic",
        type=str,
        default="manhattan",
        choices=["manhattan", "euclidean", "zero"],
        help="Heuristic to guide the search (default: manhattan)",
    )
    parser.add_argument(
        "--max-expansions",
        type=int,
        default=None,
        help="Abort after expanding this many nodes",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    goal = args.goal or (args.rows - 1, args.cols - 1)

    try:
        grid = GridModel(args.rows, args.cols, obstacles=args.obstacle)
        engine = AStarSearch(
            grid,
            heuristic=get_heuristic(args.heuristic),
            max_expansions=args.max_expansions,
        )
        result = engine.run(args.start, goal)
    except (InvalidEndpointError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print("\n" + "=" * 60)
    print("A* Route Planner")
    print("=" * 60)
    print(f"  Grid:      {grid.rows}x{grid.cols} ({len(args.obstacle)} obstacles)")
    print(f"  Start:     {args.start}")
    print(f"  Goal:      {goal}")
    print(f"  Heuristic: {args.heuristic}")
    print("=" * 60 + "\n")

    print(grid.render(path=result.path, start=args.start, goal=goal))
    print()

    if not result.found:
        print(f"No path found ({result.status.value}, {result.expanded} nodes expanded)")
        return 1

    print("Path taken:")
    for i, cell in enumerate(result.path):
        marker = " (START)" if i == 0 else " (GOAL)" if i == len(result.path) - 1 else ""
        print(f"  {i}. {cell}{marker}")

    print(f"\nDistance: {result.distance:g}")
    print(f"Expanded: {result.expanded} nodes in {result.elapsed_ms:.2f}ms")

    return 0


if __name__ == "__main__":
    sys.exit(main())
