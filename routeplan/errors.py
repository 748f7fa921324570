"""
Exceptions and warnings raised by the route planner.

A search that finds no path is not an error: it returns a SearchResult
with status FAILED. Exceptions are reserved for bad input.
"""


class RoutePlanError(Exception):
    """Base class for route planner errors."""


class InvalidEndpointError(RoutePlanError, ValueError):
    """
    Start or goal does not resolve to a passable node in the model.

    Attributes:
        node: The offending node identity
        role: Which endpoint was rejected ("start" or "goal")
    """

    def __init__(self, node, role: str = "endpoint", reason: str = "not a passable node") -> None:
        self.node = node
        self.role = role
        super().__init__(f"Invalid {role} {node!r}: {reason}")


class InconsistentHeuristicWarning(UserWarning):
    """Heuristic overestimates remaining cost; returned paths may not be optimal."""
