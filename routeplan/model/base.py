"""
Graph model base class and node status for route searches.

All graph models must implement neighbors(), distance() and is_passable()
so the search engine can traverse them without knowing their layout.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Sequence
from enum import Enum

from routeplan.config import DEFAULT_METRIC_SCALE

Node = Hashable


class NodeStatus(Enum):
    """Search status of a node. CLOSED nodes are never expanded again."""

    UNVISITED = 0
    OPEN = 1
    CLOSED = 2


class GraphModel(ABC):
    """
    Abstract base class for traversable graphs.

    Node identities are hashable values owned by the model (grid coordinates,
    street-map vertex ids). The search engine keeps its own per-run metadata
    keyed by these identities and never mutates the model's topology.
    """

    @abstractmethod
    def neighbors(self, node: Node) -> Sequence[tuple[Node, float]]:
        """
        Passable nodes adjacent to node, in a deterministic order.

        Returns:
            List of (neighbor, edge_cost) tuples
        """
        ...

    @abstractmethod
    def distance(self, a: Node, b: Node) -> float:
        """Metric distance between two nodes."""
        ...

    @abstractmethod
    def is_passable(self, node: Node) -> bool:
        """Whether node exists in the model and can be traversed."""
        ...

    def coordinates(self, node: Node):
        """Position of node as a coordinate tuple, as consumed by routeplan.heuristics."""
        return node

    @property
    def metric_scale(self) -> float:
        """Factor converting summed path distance into output units."""
        return DEFAULT_METRIC_SCALE

    def mark(self, node: Node, status: NodeStatus) -> None:
        """Annotate node for display. Override to record search progress."""
        pass

    def clear_marks(self) -> None:
        """Forget all display annotations."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
