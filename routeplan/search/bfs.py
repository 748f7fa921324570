"""
Breadth-first reference search.

Finds the path with the fewest moves, ignoring edge costs. On uniform-cost
grids this is the true optimum, which makes it the yardstick for A*.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable

from routeplan.errors import InvalidEndpointError
from routeplan.model.base import GraphModel

logger = logging.getLogger(__name__)


def bfs_shortest_path(model: GraphModel, start: Hashable, goal: Hashable) -> list[Hashable] | None:
    """
    Find a fewest-moves path using BFS.

    Returns:
        List of nodes from start to goal, or None if no path exists

    Raises:
        InvalidEndpointError: If start or goal is not a passable node
    """
    if not model.is_passable(start):
        raise InvalidEndpointError(start, role="start")
    if not model.is_passable(goal):
        raise InvalidEndpointError(goal, role="goal")

    if start == goal:
        return [start]

    # BFS with parent tracking
    queue = deque([start])
    visited = {start: None}  # Maps node to parent node

    while queue:
        current = queue.popleft()

        for neighbor, _ in model.neighbors(current):
            if neighbor in visited:
                continue

            visited[neighbor] = current

            if neighbor == goal:
                path = []
                node = neighbor
                while node is not None:
                    path.append(node)
                    node = visited[node]
                return list(reversed(path))

            queue.append(neighbor)

    logger.debug(f"BFS: no path from {start!r} to {goal!r}")
    return None
