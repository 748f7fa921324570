"""
Geometric graph model for street-map style route planning.

Nodes carry (x, y) coordinates; edges are undirected and cost the Euclidean
distance between their endpoints.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable

from routeplan.config import DEFAULT_METRIC_SCALE
from routeplan.errors import InvalidEndpointError
from routeplan.model.base import GraphModel, NodeStatus

logger = logging.getLogger(__name__)


class GeometricGraph(GraphModel):
    """
    Undirected graph of positioned nodes.

    Attributes:
        positions: Dict mapping node id to (x, y)
        adjacency: Dict mapping node id to neighbor ids in edge insertion order
        statuses: Dict of NodeStatus values recorded by mark()
    """

    def __init__(self, metric_scale: float = DEFAULT_METRIC_SCALE) -> None:
        """
        Initialize an empty graph.

        Args:
            metric_scale: Multiplier converting coordinate units to output units
        """
        if metric_scale <= 0:
            raise ValueError(f"Metric scale must be positive, got {metric_scale}")
        self._metric_scale = float(metric_scale)
        self.positions: dict[Hashable, tuple[float, float]] = {}
        self.adjacency: dict[Hashable, list[Hashable]] = {}
        self.statuses: dict[Hashable, NodeStatus] = {}

    # =========================================================================
    # Construction
    # =========================================================================

    def add_node(self, node_id: Hashable, x: float, y: float) -> None:
        """Add a node, or move it if it already exists."""
        self.positions[node_id] = (float(x), float(y))
        self.adjacency.setdefault(node_id, [])

    def add_edge(self, a: Hashable, b: Hashable) -> None:
        """
        Connect two existing nodes in both directions.

        Raises:
            KeyError: If either node is unknown
            ValueError: If a and b are the same node
        """
        for node_id in (a, b):
            if node_id not in self.positions:
                raise KeyError(f"Unknown node {node_id!r}")
        if a == b:
            raise ValueError(f"Self-loop on node {a!r} not allowed")

        if b not in self.adjacency[a]:
            self.adjacency[a].append(b)
        if a not in self.adjacency[b]:
            self.adjacency[b].append(a)

    def add_way(self, node_ids: list[Hashable]) -> None:
        """Connect consecutive nodes of a polyline (e.g. a street)."""
        for a, b in zip(node_ids, node_ids[1:]):
            self.add_edge(a, b)

    # =========================================================================
    # Accessors
    # =========================================================================

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, node_id) -> bool:
        try:
            return node_id in self.positions
        except TypeError:
            return False

    def position(self, node_id: Hashable) -> tuple[float, float]:
        return self.positions[node_id]

    def edge_count(self) -> int:
        return sum(len(ns) for ns in self.adjacency.values()) // 2

    def bounds(self) -> tuple[float, float, float, float]:
        """
        Bounding box of all node positions.

        Returns:
            (min_x, min_y, max_x, max_y)

        Raises:
            ValueError: If the graph is empty
        """
        if not self.positions:
            raise ValueError("Empty graph has no bounds")
        xs = [x for x, _ in self.positions.values()]
        ys = [y for _, y in self.positions.values()]
        return min(xs), min(ys), max(xs), max(ys)

    def find_closest_node(self, x: float, y: float) -> Hashable:
        """
        Id of the node nearest to the point (x, y).

        Nodes without edges are skipped when any connected node exists,
        since a route can never leave them.

        Raises:
            InvalidEndpointError: If the graph is empty
        """
        if not self.positions:
            raise InvalidEndpointError((x, y), role="point", reason="graph has no nodes")

        candidates = [n for n, ns in self.adjacency.items() if ns] or list(self.positions)
        closest = min(
            candidates,
            key=lambda n: math.hypot(self.positions[n][0] - x, self.positions[n][1] - y),
        )
        logger.debug(f"Closest node to ({x:.3f}, {y:.3f}) is {closest!r}")
        return closest

    # =========================================================================
    # Graph Model Contract
    # =========================================================================

    def neighbors(self, node_id: Hashable) -> list[tuple[Hashable, float]]:
        return [(other, self.distance(node_id, other)) for other in self.adjacency[node_id]]

    def distance(self, a: Hashable, b: Hashable) -> float:
        """Euclidean distance between node positions."""
        ax, ay = self.positions[a]
        bx, by = self.positions[b]
        return math.hypot(ax - bx, ay - by)

    def is_passable(self, node_id) -> bool:
        return node_id in self

    def coordinates(self, node_id: Hashable) -> tuple[float, float]:
        return self.positions[node_id]

    @property
    def metric_scale(self) -> float:
        return self._metric_scale

    def mark(self, node_id: Hashable, status: NodeStatus) -> None:
        self.statuses[node_id] = status

    def clear_marks(self) -> None:
        self.statuses.clear()

    def __repr__(self) -> str:
        return f"GeometricGraph(nodes={len(self)}, edges={self.edge_count()})"
