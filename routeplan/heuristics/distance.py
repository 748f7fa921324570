"""
Distance heuristics over coordinate tuples.

A heuristic is any callable h(a, b) -> float over coordinate tuples; the
search engine maps node ids to coordinates with GraphModel.coordinates().
For A* to return optimal paths it must never overestimate the remaining cost.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

Heuristic = Callable[[Sequence[float], Sequence[float]], float]


def manhattan(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Sum of absolute coordinate differences.

    Assumes each unit step costs 1. On a GridModel with a smaller edge_cost
    it overestimates; leave the engine heuristic unset to use the grid's
    own scaled distance instead.
    """
    return float(sum(abs(x - y) for x, y in zip(a, b, strict=True)))


def euclidean(a: Sequence[float], b: Sequence[float]) -> float:
    """Straight-line distance."""
    return math.dist(a, b)


def zero(a, b) -> float:
    return 0.0


_HEURISTICS: dict[str, Heuristic] = {
    "manhattan": manhattan,
    "euclidean": euclidean,
    "zero": zero,
}


def get_heuristic(name: str) -> Heuristic:
    """
    Get a heuristic by name.

    Raises:
        ValueError: If heuristic name is unknown
    """
    if name not in _HEURISTICS:
        available = ", ".join(_HEURISTICS)
        raise ValueError(f"Unknown heuristic '{name}'. Available: {available}")
    return _HEURISTICS[name]
