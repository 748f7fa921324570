#!/usr/bin/env python3
"""
Benchmark A* against the BFS reference on random obstacle grids.

Reports, per heuristic, how often A* matched the optimal step count and how
many nodes it expanded on average.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --size 40 --density 0.3 --trials 200 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

import numpy as np

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from routeplan.heuristics import get_heuristic  # noqa: E402
from routeplan.model import GridModel  # noqa: E402
from routeplan.search import AStarSearch, bfs_shortest_path  # noqa: E402

HEURISTICS = ["manhattan", "euclidean", "zero"]


def random_grid(rng: np.random.Generator, size: int, density: float) -> GridModel:
    """Square grid with obstacles placed independently at the given density."""
    layout = (rng.random((size, size)) < density).astype(int)
    # Keep corners open so every trial has valid endpoints
    layout[0, 0] = 0
    layout[-1, -1] = 0
    return GridModel.from_rows(layout.tolist())


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Benchmark A* heuristics against BFS")
    parser.add_argument("--size", type=int, default=30, help="Grid side length (default: 30)")
    parser.add_argument("--density", type=float, default=0.25, help="Obstacle density (default: 0.25)")
    parser.add_argument("--trials", type=int, default=100, help="Number of random grids (default: 100)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()
    logging.basicConfig(level=logging.WARNING)

    rng = np.random.default_rng(args.seed)
    start, goal = (0, 0), (args.size - 1, args.size - 1)

    stats = {name: {"optimal": 0, "expanded": [], "time_ms": []} for name in HEURISTICS}
    solvable = 0

    bench_start = time.time()
    for _ in range(args.trials):
        grid = random_grid(rng, args.size, args.density)
        reference = bfs_shortest_path(grid, start, goal)

        for name in HEURISTICS:
            result = AStarSearch(grid, heuristic=get_heuristic(name)).run(start, goal)

            if (reference is None) != (not result.found):
                print(f"MISMATCH: BFS and A* ({name}) disagree on reachability", file=sys.stderr)
                return 1
            if reference is not None and result.steps == len(reference) - 1:
                stats[name]["optimal"] += 1
            stats[name]["expanded"].append(result.expanded)
            stats[name]["time_ms"].append(result.elapsed_ms)

        if reference is not None:
            solvable += 1

    elapsed = time.time() - bench_start

    print("\n" + "=" * 60)
    print(f"A* benchmark: {args.trials} grids of {args.size}x{args.size}, density {args.density}")
    print(f"Solvable: {solvable}/{args.trials}")
    print("=" * 60)
    print(f"{'Heuristic':<12} {'Optimal':>10} {'Avg expanded':>14} {'Avg time':>12}")
    for name in HEURISTICS:
        s = stats[name]
        print(
            f"{name:<12} {s['optimal']:>6}/{solvable:<3} "
            f"{np.mean(s['expanded']):>14.1f} {np.mean(s['time_ms']):>10.2f}ms"
        )
    print(f"\nTotal time: {elapsed:.2f} seconds")

    return 0 if all(stats[name]["optimal"] == solvable for name in HEURISTICS) else 1


if __name__ == "__main__":
    sys.exit(main())
