"""
Per-run search state and result dataclasses.

Metadata lives in a side table keyed by node identity, so the graph model
itself stays untouched and can be searched repeatedly.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from routeplan.model.base import NodeStatus
from routeplan.search.open_set import OpenSet


class SearchStatus(Enum):
    """Lifecycle of a single search run."""

    INITIALIZED = "initialized"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    ABORTED = "aborted"


@dataclass
class NodeRecord:
    """
    Search metadata for one discovered node.

    Attributes:
        g_cost: Cost of the best known path from start
        h_cost: Heuristic estimate to goal
        status: OPEN until expanded, then CLOSED
        parent: Id of the predecessor on the best known path (None for start)
    """

    g_cost: float
    h_cost: float
    status: NodeStatus = NodeStatus.OPEN
    parent: Hashable | None = None

    @property
    def f_cost(self) -> float:
        return self.g_cost + self.h_cost


@dataclass
class SearchResult:
    """
    Outcome of a finished search.

    Attributes:
        start: Start node id
        goal: Goal node id
        status: SUCCEEDED, FAILED (no path) or ABORTED (budget/cancel)
        path: Nodes from start to goal inclusive; empty unless SUCCEEDED
        distance: Scaled path length, None unless SUCCEEDED
        expanded: Number of nodes closed during the run
        elapsed_ms: Wall-clock search time in milliseconds
        heuristic_violations: Heuristic checks that failed (0 if unchecked)
        timestamp: When the search finished
    """

    start: Hashable
    goal: Hashable
    status: SearchStatus
    path: list[Hashable] = field(default_factory=list)
    distance: float | None = None
    expanded: int = 0
    elapsed_ms: float = 0.0
    heuristic_violations: int = 0
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def found(self) -> bool:
        """Whether a path was found."""
        return self.status is SearchStatus.SUCCEEDED

    @property
    def steps(self) -> int | None:
        """Number of moves along the path, or None if no path."""
        return len(self.path) - 1 if self.path else None


@dataclass
class SearchState:
    """
    Mutable state during an active search.

    Attributes:
        start: Start node id
        goal: Goal node id
        records: Metadata for every discovered node
        open_set: Frontier ordered by f-cost
        status: Current lifecycle state
        expanded: Nodes closed so far
        heuristic_violations: Failed heuristic checks so far
        violation_message: Description of the first failed check, if any
    """

    start: Hashable
    goal: Hashable
    records: dict[Hashable, NodeRecord] = field(default_factory=dict)
    open_set: OpenSet = field(default_factory=OpenSet)
    status: SearchStatus = SearchStatus.INITIALIZED
    expanded: int = 0
    heuristic_violations: int = 0
    violation_message: str | None = None

    def open(self, node: Hashable, g_cost: float, h_cost: float, parent: Hashable | None) -> NodeRecord:
        """Discover node and add it to the open set."""
        record = NodeRecord(g_cost=g_cost, h_cost=h_cost, parent=parent)
        self.open_set.push(node, record.f_cost)
        self.records[node] = record
        return record

    def relax(self, node: Hashable, g_cost: float, parent: Hashable) -> NodeRecord:
        """Record a cheaper path to an open node and re-position it."""
        record = self.records[node]
        record.g_cost = g_cost
        record.parent = parent
        self.open_set.push(node, record.f_cost)
        return record

    def close_next(self) -> tuple[Hashable, NodeRecord]:
        """Remove the lowest-f node from the open set and mark it CLOSED."""
        node = self.open_set.pop()
        record = self.records[node]
        record.status = NodeStatus.CLOSED
        self.expanded += 1
        return node, record

    def is_closed(self, node: Hashable) -> bool:
        record = self.records.get(node)
        return record is not None and record.status is NodeStatus.CLOSED


def reconstruct_path(records: dict[Hashable, NodeRecord], goal: Hashable) -> list[Hashable]:
    """
    Follow parent links from goal back to the start.

    Returns:
        Node ids ordered start first, goal last
    """
    path = []
    node = goal
    while node is not None:
        path.append(node)
        node = records[node].parent
    return list(reversed(path))
