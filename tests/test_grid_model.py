"""
Unit tests for GridModel.
"""

import numpy as np
import pytest

from routeplan.model import GridModel, NodeStatus


class TestConstruction:
    """Test grid construction."""

    def test_dimensions(self, open_grid):
        """Grid should report its shape."""
        assert open_grid.shape == (5, 6)
        assert not open_grid.obstacles.any()

    def test_obstacles_argument(self):
        """Obstacles passed to the constructor should be blocked."""
        grid = GridModel(3, 3, obstacles=[(1, 1)])
        assert grid.is_obstacle((1, 1))
        assert not grid.is_obstacle((0, 0))

    def test_from_rows_keeps_obstacles_argument(self):
        """Obstacles passed through from_rows are merged with the layout."""
        grid = GridModel.from_rows([[0, 0], [1, 0]], obstacles=[(0, 1)])
        assert grid.is_obstacle((0, 1))
        assert grid.is_obstacle((1, 0))
        assert not grid.is_obstacle((0, 0))

    def test_coordinates_are_cells(self, open_grid):
        assert open_grid.coordinates((2, 3)) == (2, 3)

    def test_non_positive_dimensions_raise(self):
        """Should reject empty grids."""
        with pytest.raises(ValueError):
            GridModel(0, 3)
        with pytest.raises(ValueError):
            GridModel(3, -1)

    def test_non_positive_edge_cost_raises(self):
        """Should reject zero edge cost."""
        with pytest.raises(ValueError):
            GridModel(3, 3, edge_cost=0)

    def test_from_rows(self, wall_grid):
        """1 values should become obstacles."""
        assert wall_grid.shape == (5, 5)
        assert wall_grid.is_obstacle((0, 2))
        assert not wall_grid.is_obstacle((3, 2))
        assert int(wall_grid.obstacles.sum()) == 4

    def test_from_rows_invalid_values(self):
        """Should reject values other than 0 and 1."""
        with pytest.raises(ValueError):
            GridModel.from_rows([[0, 2], [0, 0]])

    def test_from_rows_empty(self):
        """Should reject an empty layout."""
        with pytest.raises(ValueError):
            GridModel.from_rows([])

    def test_add_obstacle_out_of_bounds(self, open_grid):
        """Should reject cells outside the grid."""
        with pytest.raises(ValueError):
            open_grid.add_obstacle((5, 0))

    def test_remove_obstacle(self, wall_grid):
        """Removing an obstacle should reopen the cell."""
        wall_grid.remove_obstacle((0, 2))
        assert wall_grid.is_passable((0, 2))


class TestNeighbors:
    """Test neighbor generation."""

    def test_fixed_direction_order(self):
        """Neighbors come back up, left, down, right."""
        grid = GridModel(5, 5)
        cells = [cell for cell, _ in grid.neighbors((2, 2))]
        assert cells == [(1, 2), (2, 1), (3, 2), (2, 3)]

    def test_unit_edge_cost(self):
        """Every move costs 1 by default."""
        grid = GridModel(5, 5)
        assert all(cost == 1.0 for _, cost in grid.neighbors((2, 2)))

    def test_corner_stays_in_bounds(self, open_grid):
        """Corner cell has only two neighbors."""
        cells = [cell for cell, _ in open_grid.neighbors((0, 0))]
        assert cells == [(1, 0), (0, 1)]

    def test_obstacles_excluded(self, enclosed_grid):
        """Boxed-in cell has no neighbors."""
        assert enclosed_grid.neighbors((2, 2)) == []

    def test_symmetric(self, wall_grid):
        """Adjacency is symmetric on an undirected grid."""
        for cell in wall_grid.open_cells():
            for neighbor, _ in wall_grid.neighbors(cell):
                assert cell in [c for c, _ in wall_grid.neighbors(neighbor)]


class TestDistance:
    """Test distance metric."""

    def test_manhattan(self, open_grid):
        """Distance should be Manhattan."""
        assert open_grid.distance((0, 0), (4, 5)) == 9.0
        assert open_grid.distance((3, 1), (1, 4)) == 5.0

    def test_scaled_by_edge_cost(self):
        """Distance should scale with the edge cost."""
        grid = GridModel(3, 3, edge_cost=2.5)
        assert grid.distance((0, 0), (1, 1)) == 5.0


class TestPassable:
    """Test endpoint validation helper."""

    def test_open_cell(self, wall_grid):
        assert wall_grid.is_passable((0, 0)) is True

    def test_obstacle(self, wall_grid):
        assert wall_grid.is_passable((0, 2)) is False

    def test_out_of_bounds(self, open_grid):
        assert open_grid.is_passable((-1, 0)) is False
        assert open_grid.is_passable((0, 6)) is False

    def test_malformed(self, open_grid):
        """Non-coordinate values should not crash."""
        assert open_grid.is_passable("a") is False
        assert open_grid.is_passable(("a", "b")) is False
        assert open_grid.is_passable((1, 2, 3)) is False
        assert open_grid.is_passable(None) is False


class TestMarks:
    """Test display annotations."""

    def test_mark_and_clear(self, open_grid):
        """Marks should be recorded and cleared."""
        open_grid.mark((1, 1), NodeStatus.OPEN)
        open_grid.mark((2, 2), NodeStatus.CLOSED)
        assert open_grid.status_of((1, 1)) is NodeStatus.OPEN
        assert open_grid.status_of((2, 2)) is NodeStatus.CLOSED

        open_grid.clear_marks()
        assert open_grid.status_of((1, 1)) is NodeStatus.UNVISITED

    def test_marks_read_only(self, open_grid):
        """The exposed mark layer cannot be written."""
        marks = open_grid.marks
        assert isinstance(marks, np.ndarray)
        with pytest.raises(ValueError):
            marks[0, 0] = 1


class TestRender:
    """Test text rendering."""

    def test_render_path(self):
        """Path, endpoints and obstacles should be drawn."""
        grid = GridModel.from_rows([[0, 1, 0], [0, 0, 0]])
        path = [(0, 0), (1, 0), (1, 1), (1, 2), (0, 2)]
        assert grid.render(path=path) == "S # G\n* * *"

    def test_render_marks(self):
        """Search marks should show when there is no path."""
        grid = GridModel(1, 3)
        grid.mark((0, 1), NodeStatus.CLOSED)
        grid.mark((0, 2), NodeStatus.OPEN)
        assert grid.render() == ". x o"
