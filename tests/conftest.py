"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from routeplan.model import GeometricGraph, GridModel


def assert_contiguous(model, path) -> None:
    """Every consecutive pair of path nodes must be adjacent in the model."""
    for a, b in zip(path, path[1:]):
        adjacent = [n for n, _ in model.neighbors(a)]
        assert b in adjacent, f"{b!r} is not a neighbor of {a!r}"


@pytest.fixture
def open_grid() -> GridModel:
    """Return a 5x6 grid with every cell open."""
    return GridModel(5, 6)


@pytest.fixture
def wall_grid() -> GridModel:
    """Return a 5x5 grid with a wall down column 2, open only at row 3."""
    return GridModel.from_rows([
        [0, 0, 1, 0, 0],
        [0, 0, 1, 0, 0],
        [0, 0, 1, 0, 0],
        [0, 0, 0, 0, 0],
        [0, 0, 1, 0, 0],
    ])


@pytest.fixture
def split_grid() -> GridModel:
    """Return a 4x5 grid cut into two regions by a full wall."""
    return GridModel.from_rows([
        [0, 0, 1, 0, 0],
        [0, 0, 1, 0, 0],
        [0, 0, 1, 0, 0],
        [0, 0, 1, 0, 0],
    ])


@pytest.fixture
def enclosed_grid() -> GridModel:
    """Return a 5x5 grid whose center cell is boxed in by obstacles."""
    return GridModel.from_rows([
        [0, 0, 0, 0, 0],
        [0, 1, 1, 1, 0],
        [0, 1, 0, 1, 0],
        [0, 1, 1, 1, 0],
        [0, 0, 0, 0, 0],
    ])


@pytest.fixture
def detour_graph() -> GeometricGraph:
    """
    Return a graph where the first route found to B is not the cheapest.

    S expands X before Y, X reaches B expensively, then Y reaches B cheaply.
    The only way to G is through B.
    """
    graph = GeometricGraph()
    graph.add_node("S", 0, 0)
    graph.add_node("X", 1, 0)
    graph.add_node("Y", 0, 1)
    graph.add_node("B", 0, 2)
    graph.add_node("G", 10, 0)
    graph.add_edge("S", "X")
    graph.add_edge("S", "Y")
    graph.add_edge("X", "B")
    graph.add_edge("Y", "B")
    graph.add_edge("B", "G")
    return graph


@pytest.fixture
def street_graph() -> GeometricGraph:
    """Return a 3x3 street lattice with unit spacing, nodes named n<row><col>."""
    graph = GeometricGraph()
    for row in range(3):
        for col in range(3):
            graph.add_node(f"n{row}{col}", col, row)
    for i in range(3):
        graph.add_way([f"n{i}0", f"n{i}1", f"n{i}2"])
        graph.add_way([f"n0{i}", f"n1{i}", f"n2{i}"])
    return graph
