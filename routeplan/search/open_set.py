"""
Priority queue of open nodes ordered by f-cost.

Ties on f are broken in favor of the most recently inserted node, so among
equal-cost candidates the newest discovery is expanded first.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Hashable


class OpenSet:
    """
    Binary heap of (f, -sequence, node) entries with lazy deletion.

    Pushing a node that is already present supersedes its old entry; stale
    entries are skipped when popped.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, Hashable]] = []
        self._live: dict[Hashable, int] = {}  # node -> sequence of its live entry
        self._counter = itertools.count(1)

    def push(self, node: Hashable, f_cost: float) -> int:
        """
        Insert node, or re-position it if already present.

        Returns:
            Sequence number of the new entry
        """
        sequence = next(self._counter)
        self._live[node] = sequence
        # Sequence is unique, so nodes themselves are never compared
        heapq.heappush(self._heap, (f_cost, -sequence, node))
        return sequence

    def pop(self) -> Hashable:
        """
        Remove and return the node with the lowest f-cost.

        Raises:
            KeyError: If the open set is empty
        """
        while self._heap:
            _, neg_sequence, node = heapq.heappop(self._heap)
            if self._live.get(node) == -neg_sequence:
                del self._live[node]
                return node
        raise KeyError("pop from empty open set")

    def __contains__(self, node) -> bool:
        return node in self._live

    def __len__(self) -> int:
        return len(self._live)

    def __bool__(self) -> bool:
        return bool(self._live)

    def __repr__(self) -> str:
        return f"OpenSet(size={len(self)})"
