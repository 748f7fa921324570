"""
Unit tests for GeometricGraph.
"""

import math

import pytest

from routeplan.errors import InvalidEndpointError
from routeplan.model import GeometricGraph, NodeStatus


@pytest.fixture
def triangle() -> GeometricGraph:
    """Return a 3-4-5 right triangle."""
    graph = GeometricGraph()
    graph.add_node("a", 0, 0)
    graph.add_node("b", 3, 0)
    graph.add_node("c", 3, 4)
    graph.add_edge("a", "b")
    graph.add_edge("b", "c")
    graph.add_edge("c", "a")
    return graph


class TestConstruction:
    """Test building graphs."""

    def test_counts(self, triangle):
        assert len(triangle) == 3
        assert triangle.edge_count() == 3

    def test_duplicate_edge_ignored(self, triangle):
        """Adding an existing edge again should not duplicate it."""
        triangle.add_edge("b", "a")
        assert triangle.edge_count() == 3

    def test_unknown_node_raises(self, triangle):
        with pytest.raises(KeyError):
            triangle.add_edge("a", "z")

    def test_self_loop_raises(self, triangle):
        with pytest.raises(ValueError):
            triangle.add_edge("a", "a")

    def test_invalid_metric_scale(self):
        with pytest.raises(ValueError):
            GeometricGraph(metric_scale=0)

    def test_add_way(self, street_graph):
        """Ways should connect consecutive nodes only."""
        assert street_graph.edge_count() == 12
        neighbors = [n for n, _ in street_graph.neighbors("n00")]
        assert neighbors == ["n01", "n10"]


class TestContract:
    """Test the graph model contract."""

    def test_neighbors_in_insertion_order(self, triangle):
        """Neighbors should follow edge insertion order with Euclidean costs."""
        assert triangle.neighbors("a") == [("b", 3.0), ("c", 5.0)]

    def test_symmetric(self, triangle):
        """Edges go both ways."""
        assert ("a", 3.0) in triangle.neighbors("b")

    def test_euclidean_distance(self, triangle):
        assert triangle.distance("a", "c") == 5.0
        assert triangle.distance("c", "a") == 5.0

    def test_is_passable(self, triangle):
        assert triangle.is_passable("a") is True
        assert triangle.is_passable("z") is False
        assert triangle.is_passable(["unhashable"]) is False

    def test_coordinates(self, street_graph):
        assert street_graph.coordinates("n12") == (2.0, 1.0)

    def test_default_metric_scale(self, triangle):
        assert triangle.metric_scale == 1.0

    def test_mark(self, triangle):
        triangle.mark("a", NodeStatus.CLOSED)
        assert triangle.statuses == {"a": NodeStatus.CLOSED}
        triangle.clear_marks()
        assert triangle.statuses == {}


class TestSpatialQueries:
    """Test bounds and closest-node lookups."""

    def test_bounds(self, triangle):
        assert triangle.bounds() == (0.0, 0.0, 3.0, 4.0)

    def test_bounds_empty_raises(self):
        with pytest.raises(ValueError):
            GeometricGraph().bounds()

    def test_find_closest_node(self, triangle):
        assert triangle.find_closest_node(0.4, 0.2) == "a"
        assert triangle.find_closest_node(2.9, 3.5) == "c"

    def test_find_closest_skips_isolated(self, triangle):
        """Nodes without edges can never be routed from, so are skipped."""
        triangle.add_node("lonely", 0.1, 0.1)
        assert triangle.find_closest_node(0.1, 0.1) == "a"

    def test_find_closest_only_isolated(self):
        """With no edges at all, any node may be returned."""
        graph = GeometricGraph()
        graph.add_node("p", 1, 1)
        graph.add_node("q", 5, 5)
        assert graph.find_closest_node(4, 4) == "q"

    def test_find_closest_empty_raises(self):
        with pytest.raises(InvalidEndpointError):
            GeometricGraph().find_closest_node(0, 0)

    def test_position(self, triangle):
        x, y = triangle.position("c")
        assert math.isclose(x, 3.0) and math.isclose(y, 4.0)
