"""
Route planning toolkit.

Heuristic shortest-path search (A*) over grid boards and geometric
street-map graphs, with a breadth-first reference search for checking
optimality on uniform-cost grids.
"""

__version__ = "0.1.0"
