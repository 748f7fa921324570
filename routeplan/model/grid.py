"""
Bounded 2-D grid model with 4-directional movement.

Usage:
    from routeplan.model import GridModel

    grid = GridModel.from_rows([
        [0, 1, 0],
        [0, 1, 0],
        [0, 0, 0],
    ])
    grid.neighbors((0, 0))   # [((1, 0), 1.0)]
    grid.distance((0, 0), (2, 2))   # 4.0
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

import numpy as np

from routeplan.config import DEFAULT_EDGE_COST, GRID_DIRECTIONS
from routeplan.model.base import GraphModel, NodeStatus

logger = logging.getLogger(__name__)

Cell = tuple[int, int]


class GridModel(GraphModel):
    """
    Grid of open and obstacle cells addressed by (row, col).

    Attributes:
        rows: Number of rows
        cols: Number of columns
        obstacles: Boolean array, True where a cell is impassable
    """

    # Characters used by render()
    CELL_CHARS = {
        NodeStatus.UNVISITED: ".",
        NodeStatus.OPEN: "o",
        NodeStatus.CLOSED: "x",
    }
    OBSTACLE_CHAR = "#"
    PATH_CHAR = "*"

    def __init__(
        self,
        rows: int,
        cols: int,
        obstacles: Iterable[Cell] | None = None,
        edge_cost: float = DEFAULT_EDGE_COST,
    ) -> None:
        """
        Initialize an all-open grid.

        Args:
            rows: Number of rows (> 0)
            cols: Number of columns (> 0)
            obstacles: Cells to block
            edge_cost: Cost of moving between adjacent cells
        """
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        if edge_cost <= 0:
            raise ValueError(f"Edge cost must be positive, got {edge_cost}")

        self.rows = rows
        self.cols = cols
        self._edge_cost = float(edge_cost)
        self.obstacles = np.zeros((rows, cols), dtype=bool)
        self._marks = np.zeros((rows, cols), dtype=np.int8)

        for cell in obstacles or ():
            self.add_obstacle(cell)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], **kwargs) -> GridModel:
        """
        Build a grid from rows of 0 (open) and 1 (obstacle) values.

        Obstacles passed through kwargs are added to those in the layout.

        Raises:
            ValueError: If rows are empty, ragged, or contain other values
        """
        layout = np.asarray(rows)
        if layout.ndim != 2 or layout.size == 0:
            raise ValueError("Grid layout must be a non-empty list of equal-length rows")
        if not np.isin(layout, (0, 1)).all():
            raise ValueError("Grid layout may only contain 0 (open) and 1 (obstacle)")

        grid = cls(layout.shape[0], layout.shape[1], **kwargs)
        grid.obstacles |= layout == 1
        logger.debug(
            f"Built {grid.rows}x{grid.cols} grid with {int(grid.obstacles.sum())} obstacles"
        )
        return grid

    # =========================================================================
    # Cell Accessors
    # =========================================================================

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def in_bounds(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_obstacle(self, cell: Cell) -> bool:
        return bool(self.obstacles[cell])

    def is_passable(self, cell) -> bool:
        """Whether cell is an in-bounds (row, col) pair that is not an obstacle."""
        try:
            row, col = cell
        except (TypeError, ValueError):
            return False
        if not isinstance(row, (int, np.integer)) or not isinstance(col, (int, np.integer)):
            return False
        return self.in_bounds((row, col)) and not self.obstacles[row, col]

    def add_obstacle(self, cell: Cell) -> None:
        if not self.in_bounds(cell):
            raise ValueError(f"Cell {cell} is outside the {self.rows}x{self.cols} grid")
        self.obstacles[cell] = True

    def remove_obstacle(self, cell: Cell) -> None:
        if not self.in_bounds(cell):
            raise ValueError(f"Cell {cell} is outside the {self.rows}x{self.cols} grid")
        self.obstacles[cell] = False

    def open_cells(self) -> list[Cell]:
        """All passable cells in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(~self.obstacles)]

    # =========================================================================
    # Graph Model Contract
    # =========================================================================

    def neighbors(self, cell: Cell) -> list[tuple[Cell, float]]:
        """Passable 4-neighbors of cell in up, left, down, right order."""
        row, col = cell
        result = []
        for d_row, d_col in GRID_DIRECTIONS:
            neighbor = (row + d_row, col + d_col)
            if self.in_bounds(neighbor) and not self.obstacles[neighbor]:
                result.append((neighbor, self._edge_cost))
        return result

    def distance(self, a: Cell, b: Cell) -> float:
        """Manhattan distance scaled by the edge cost."""
        return float(abs(a[0] - b[0]) + abs(a[1] - b[1])) * self._edge_cost

    def mark(self, cell: Cell, status: NodeStatus) -> None:
        self._marks[cell] = status.value

    def clear_marks(self) -> None:
        self._marks.fill(NodeStatus.UNVISITED.value)

    @property
    def marks(self) -> np.ndarray:
        """Read-only view of the NodeStatus values recorded by mark()."""
        view = self._marks.view()
        view.flags.writeable = False
        return view

    def status_of(self, cell: Cell) -> NodeStatus:
        return NodeStatus(int(self._marks[cell]))

    # =========================================================================
    # Display
    # =========================================================================

    def render(
        self,
        path: Sequence[Cell] | None = None,
        start: Cell | None = None,
        goal: Cell | None = None,
    ) -> str:
        """
        Render the grid as text, one character per cell.

        Path cells are drawn over search marks; start and goal over the path.
        """
        on_path = set(path or ())
        if path:
            start = start if start is not None else path[0]
            goal = goal if goal is not None else path[-1]

        lines = []
        for row in range(self.rows):
            chars = []
            for col in range(self.cols):
                cell = (row, col)
                if cell == start:
                    chars.append("S")
                elif cell == goal:
                    chars.append("G")
                elif self.obstacles[cell]:
                    chars.append(self.OBSTACLE_CHAR)
                elif cell in on_path:
                    chars.append(self.PATH_CHAR)
                else:
                    chars.append(self.CELL_CHARS[self.status_of(cell)])
            lines.append(" ".join(chars))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"GridModel(rows={self.rows}, cols={self.cols}, "
            f"obstacles={int(self.obstacles.sum())})"
        )
