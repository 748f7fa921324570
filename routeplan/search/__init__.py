"""
Search module.

Provides pathfinding over graph models:
- AStarSearch: Heuristic-guided shortest path (f = g + h)
- bfs_shortest_path: Fewest-moves reference path
- RoutePlanner: A* between points snapped onto a street-map graph
- SearchResult / SearchStatus: Outcome of a run
"""

from routeplan.search.bfs import bfs_shortest_path
from routeplan.search.engine import AStarSearch, find_path
from routeplan.search.open_set import OpenSet
from routeplan.search.planner import RoutePlanner
from routeplan.search.state import (
    NodeRecord,
    SearchResult,
    SearchState,
    SearchStatus,
    reconstruct_path,
)

__all__ = [
    "AStarSearch",
    "find_path",
    "bfs_shortest_path",
    "RoutePlanner",
    "OpenSet",
    "NodeRecord",
    "SearchState",
    "SearchResult",
    "SearchStatus",
    "reconstruct_path",
]
