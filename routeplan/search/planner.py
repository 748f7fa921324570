"""
Route planner for geometric street-map graphs.

Snaps free start/end coordinates onto the graph and runs A* between the
snapped nodes.
"""

from __future__ import annotations

import logging

from routeplan.model.geometric import GeometricGraph
from routeplan.search.engine import AStarSearch
from routeplan.search.state import SearchResult

logger = logging.getLogger(__name__)


class RoutePlanner:
    """
    Plans a route between two points given as map percentages.

    Coordinates are percentages (0-100) of the graph's bounding box, measured
    from its minimum corner.

    Attributes:
        start_node: Node closest to the start point
        end_node: Node closest to the end point
        result: Outcome of the last plan() call, None before planning
    """

    def __init__(
        self,
        model: GeometricGraph,
        start_x: float,
        start_y: float,
        end_x: float,
        end_y: float,
        **search_kwargs,
    ) -> None:
        """
        Initialize the planner and snap endpoints to the graph.

        Args:
            model: Street-map graph
            start_x, start_y: Start point in percent of the map extent
            end_x, end_y: End point in percent of the map extent
            **search_kwargs: Passed to AStarSearch
        """
        for value in (start_x, start_y, end_x, end_y):
            if not 0 <= value <= 100:
                raise ValueError(f"Map coordinates must be within 0-100 percent, got {value}")

        self._model = model
        self._search = AStarSearch(model, **search_kwargs)

        self.start_node = model.find_closest_node(*self._to_model_coords(start_x, start_y))
        self.end_node = model.find_closest_node(*self._to_model_coords(end_x, end_y))
        self.result: SearchResult | None = None

        logger.info(f"Planner endpoints: {self.start_node!r} -> {self.end_node!r}")

    def _to_model_coords(self, x_percent: float, y_percent: float) -> tuple[float, float]:
        min_x, min_y, max_x, max_y = self._model.bounds()
        x = min_x + x_percent * 0.01 * (max_x - min_x)
        y = min_y + y_percent * 0.01 * (max_y - min_y)
        return x, y

    @property
    def distance(self) -> float | None:
        """Scaled length of the planned route, None if none was found."""
        return self.result.distance if self.result else None

    def plan(self) -> SearchResult:
        """Run A* between the snapped endpoints and keep the result."""
        self._model.clear_marks()
        self.result = self._search.run(self.start_node, self.end_node)
        return self.result
