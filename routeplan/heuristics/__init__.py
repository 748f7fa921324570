"""
Heuristics module.

Provides distance estimates for guiding A* search:
- manhattan: Admissible for 4-directional grid movement with unit edge cost
- euclidean: Admissible for free-form geometric graphs
- zero: Reduces A* to Dijkstra's algorithm
"""

from routeplan.heuristics.distance import (
    Heuristic,
    euclidean,
    get_heuristic,
    manhattan,
    zero,
)

__all__ = [
    "Heuristic",
    "manhattan",
    "euclidean",
    "zero",
    "get_heuristic",
]
