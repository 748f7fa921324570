"""
Graph model module.

Provides the traversable structures searched by the engine:
- GraphModel: Abstract contract (neighbors, distance, mark)
- GridModel: Bounded 4-directional grid with obstacles
- GeometricGraph: Positioned nodes joined by Euclidean-cost edges
"""

from routeplan.model.base import GraphModel, NodeStatus
from routeplan.model.geometric import GeometricGraph
from routeplan.model.grid import GridModel

__all__ = [
    "GraphModel",
    "NodeStatus",
    "GridModel",
    "GeometricGraph",
]
