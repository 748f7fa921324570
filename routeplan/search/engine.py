"""
A* search engine.

Runs best-first search over any GraphModel using f = g + h, where g is the
accumulated edge cost from start and h an admissible estimate to the goal.
"""

from __future__ import annotations

import logging
import time
import warnings
from collections.abc import Callable, Hashable
from typing import Any, Protocol

from routeplan.config import CHECK_HEURISTIC, DEFAULT_MAX_EXPANSIONS, HEURISTIC_TOLERANCE
from routeplan.errors import InconsistentHeuristicWarning, InvalidEndpointError
from routeplan.model.base import GraphModel, NodeStatus
from routeplan.search.state import SearchResult, SearchState, SearchStatus, reconstruct_path

logger = logging.getLogger(__name__)


class CancelToken(Protocol):
    def is_set(self) -> bool: ...


class AStarSearch:
    """
    A* shortest-path search over a graph model.

    The engine keeps no state between runs: each call to run() builds a fresh
    SearchState, so one engine and one model can serve repeated searches.

    Ties between open nodes with equal f-cost go to the node inserted (or
    re-positioned) most recently.
    """

    def __init__(
        self,
        model: GraphModel,
        heuristic: Callable[[Any, Any], float] | None = None,
        max_expansions: int | None = DEFAULT_MAX_EXPANSIONS,
        check_heuristic: bool = CHECK_HEURISTIC,
        relax: bool = True,
    ) -> None:
        """
        Initialize the search engine.

        Args:
            model: Graph to search
            heuristic: h(a, b) over node coordinates (see
                GraphModel.coordinates), e.g. routeplan.heuristics.euclidean;
                defaults to model.distance over node ids
            max_expansions: Abort after closing this many nodes (None = no limit)
            check_heuristic: Warn when the heuristic overestimates
            relax: Update open nodes when a strictly cheaper path is found.
                False skips every already-discovered neighbor, which is only
                optimal when all edge costs are equal.
        """
        if max_expansions is not None and max_expansions < 0:
            raise ValueError(f"max_expansions must be >= 0, got {max_expansions}")

        self._model = model
        if heuristic is None:
            self._heuristic = model.distance
        else:
            self._heuristic = lambda node, goal: heuristic(
                model.coordinates(node), model.coordinates(goal)
            )
        self._max_expansions = max_expansions
        self._check_heuristic = check_heuristic
        self._relax = relax

    @property
    def model(self) -> GraphModel:
        return self._model

    def _validate_endpoint(self, node: Hashable, role: str) -> None:
        if not self._model.is_passable(node):
            raise InvalidEndpointError(node, role=role)

    def _report_violation(self, state: SearchState, message: str) -> None:
        """Count a heuristic violation, keeping the first message of the run."""
        state.heuristic_violations += 1
        if state.violation_message is None:
            state.violation_message = message
            logger.warning(f"Heuristic check failed: {message}")

    def _open(self, state: SearchState, node: Hashable, g_cost: float, parent: Hashable | None) -> None:
        h_cost = self._heuristic(node, state.goal)
        state.open(node, g_cost, h_cost, parent)
        self._model.mark(node, NodeStatus.OPEN)

    def _expand(self, state: SearchState, current: Hashable) -> None:
        """Discover or relax every neighbor of current that is not closed."""
        current_record = state.records[current]

        for neighbor, edge_cost in self._model.neighbors(current):
            if state.is_closed(neighbor):
                continue

            g_new = current_record.g_cost + edge_cost
            record = state.records.get(neighbor)

            if record is None:
                self._open(state, neighbor, g_new, parent=current)
                record = state.records[neighbor]
            elif self._relax and g_new < record.g_cost:
                logger.debug(
                    f"Relaxed {neighbor!r}: g {record.g_cost:.3f} -> {g_new:.3f} via {current!r}"
                )
                state.relax(neighbor, g_new, parent=current)

            if self._check_heuristic and current_record.h_cost > edge_cost + record.h_cost + HEURISTIC_TOLERANCE:
                self._report_violation(
                    state,
                    f"h({current!r})={current_record.h_cost:.3f} exceeds edge cost "
                    f"{edge_cost:.3f} + h({neighbor!r})={record.h_cost:.3f}",
                )

    def _check_path_estimates(self, state: SearchState, path: list[Hashable]) -> None:
        """Flag nodes on the final path whose h exceeds the true remaining cost."""
        goal_cost = state.records[state.goal].g_cost
        for node in path:
            record = state.records[node]
            remaining = goal_cost - record.g_cost
            if record.h_cost > remaining + HEURISTIC_TOLERANCE:
                self._report_violation(
                    state,
                    f"h({node!r})={record.h_cost:.3f} overestimates remaining cost {remaining:.3f}",
                )

    def path_distance(self, path: list[Hashable]) -> float:
        """Sum of distances between consecutive path nodes, in model units."""
        total = sum(self._model.distance(a, b) for a, b in zip(path, path[1:]))
        return total * self._model.metric_scale

    def _should_abort(self, state: SearchState, cancel: CancelToken | None) -> bool:
        if cancel is not None and cancel.is_set():
            logger.warning(f"Search cancelled after {state.expanded} expansions")
            return True
        if self._max_expansions is not None and state.expanded >= self._max_expansions:
            logger.warning(f"Search aborted: expansion budget of {self._max_expansions} exhausted")
            return True
        return False

    def run(
        self,
        start: Hashable,
        goal: Hashable,
        cancel: CancelToken | None = None,
    ) -> SearchResult:
        """
        Find a minimum-cost path from start to goal.

        Args:
            start: Start node id
            goal: Goal node id
            cancel: Optional token (e.g. threading.Event) checked once per
                iteration; the run aborts once it is set

        Returns:
            SearchResult. No path is reported as status FAILED, not raised.

        Raises:
            InvalidEndpointError: If start or goal is not a passable node
        """
        self._validate_endpoint(start, "start")
        self._validate_endpoint(goal, "goal")

        logger.info(f"Starting A* search: {start!r} -> {goal!r}")
        start_time_ms = time.time() * 1000

        state = SearchState(start=start, goal=goal)
        self._open(state, start, 0.0, parent=None)
        state.status = SearchStatus.RUNNING

        if start == goal:
            # Trivial run: close the start and stop without expanding it
            state.close_next()
            self._model.mark(start, NodeStatus.CLOSED)
            state.status = SearchStatus.SUCCEEDED

        while state.status is SearchStatus.RUNNING:
            if not state.open_set:
                state.status = SearchStatus.FAILED
                break
            if self._should_abort(state, cancel):
                state.status = SearchStatus.ABORTED
                break

            current, record = state.close_next()
            self._model.mark(current, NodeStatus.CLOSED)
            logger.debug(
                f"Expanding {current!r} (g={record.g_cost:.3f}, h={record.h_cost:.3f})"
            )

            if current == goal:
                state.status = SearchStatus.SUCCEEDED
                break

            self._expand(state, current)

        result = self._finish(state, start_time_ms)
        if state.violation_message is not None:
            warnings.warn(state.violation_message, InconsistentHeuristicWarning, stacklevel=2)
        return result

    def _finish(self, state: SearchState, start_time_ms: float) -> SearchResult:
        """Build the result for a run that has left the RUNNING state."""
        result = SearchResult(
            start=state.start,
            goal=state.goal,
            status=state.status,
            expanded=state.expanded,
        )

        if state.status is SearchStatus.SUCCEEDED:
            result.path = reconstruct_path(state.records, state.goal)
            result.distance = self.path_distance(result.path)
            if self._check_heuristic:
                self._check_path_estimates(state, result.path)
            logger.info(
                f"Path found ({len(result.path) - 1} steps, distance {result.distance:.3f}, "
                f"{state.expanded} expanded)"
            )
        elif state.status is SearchStatus.FAILED:
            logger.warning(
                f"No path found from {state.start!r} to {state.goal!r} "
                f"after {state.expanded} expansions"
            )

        result.heuristic_violations = state.heuristic_violations
        result.elapsed_ms = time.time() * 1000 - start_time_ms
        return result


def find_path(model: GraphModel, start: Hashable, goal: Hashable, **kwargs) -> SearchResult:
    """
    Run a single A* search.

    Args:
        model: Graph to search
        start: Start node id
        goal: Goal node id
        **kwargs: Passed to AStarSearch (heuristic, max_expansions, ...)
    """
    return AStarSearch(model, **kwargs).run(start, goal)
