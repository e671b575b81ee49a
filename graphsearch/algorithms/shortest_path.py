"""
Shortest-path search: Dijkstra and A*.

Both engines run the same best-first loop over a PriorityFrontier. They only
differ in the frontier priority: Dijkstra orders by distance from the start,
A* by distance plus a heuristic estimate of the remaining cost.

Stale frontier entries (a node pushed again after a cheaper path to it was
found) are not removed from the heap. They are skipped when popped.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Generic, Hashable, Sequence, TypeVar

from graphsearch.algorithms.frontier import PriorityFrontier
from graphsearch.algorithms.providers import Heuristic, NeighborProvider, WeightProvider
from graphsearch.config import SEARCH_TIMEOUT
from graphsearch.errors import ConfigurationError, NegativeWeightError, SearchTimeoutError

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)


@dataclass
class _SearchState(Generic[N]):
    """Bookkeeping of one best-first run."""

    # Final distances of the nodes expanded so far
    settled: dict[N, float] = field(default_factory=dict)
    # Best known predecessor of each discovered node (start has none)
    parents: dict[N, N] = field(default_factory=dict)
    expanded: int = 0


def _zero(node: object, target: object) -> float:
    return 0.0


def _best_first(
    algorithm: str,
    neighbors: NeighborProvider[N],
    weight: WeightProvider[N],
    start: N,
    target: N | None,
    heuristic: Heuristic[N],
    visit: Callable[[N], None] | None,
    timeout: float | None,
) -> _SearchState[N]:
    """
    Shared best-first loop.

    A node whose distance improves after it was expanded is pushed and
    expanded again, so an admissible heuristic that is not consistent still
    yields optimal results. With a zero heuristic and non-negative weights
    every node is expanded at most once.
    """
    state: _SearchState[N] = _SearchState()
    g_score: dict[N, float] = {start: 0.0}
    frontier: PriorityFrontier[tuple[N, float]] = PriorityFrontier()
    frontier.push((start, 0.0), heuristic(start, target) if target is not None else 0.0)

    deadline = None if timeout is None else time.monotonic() + timeout

    while frontier:
        if deadline is not None and time.monotonic() > deadline:
            raise SearchTimeoutError(algorithm, timeout, state.expanded)

        (node, distance), _ = frontier.pop()
        if distance > g_score[node]:
            continue  # stale entry

        state.settled[node] = distance
        state.expanded += 1
        if visit is not None:
            visit(node)

        if target is not None and node == target:
            break

        for neighbor in neighbors(node):
            edge_weight = weight(node, neighbor)
            if edge_weight < 0:
                raise NegativeWeightError(node, neighbor, edge_weight)

            tentative = distance + edge_weight
            if tentative < g_score.get(neighbor, float("inf")):
                g_score[neighbor] = tentative
                state.parents[neighbor] = node
                estimate = heuristic(neighbor, target) if target is not None else 0.0
                frontier.push((neighbor, tentative), tentative + estimate)

    logger.debug(
        f"{algorithm} expanded {state.expanded} nodes, settled {len(state.settled)}"
    )
    return state


def dijkstra(
    neighbors: NeighborProvider[N],
    weight: WeightProvider[N],
    start: N,
    target: N | None = None,
    *,
    visit: Callable[[N], None] | None = None,
    timeout: float | None = SEARCH_TIMEOUT,
) -> dict[N, float]:
    """
    Shortest distances from `start` (Dijkstra's algorithm).

    Args:
        neighbors: Neighbor enumeration capability
        weight: Edge weight capability (non-negative weights only)
        start: Source node
        target: Stop as soon as this node's distance is final
        visit: Callback invoked for each node when its distance becomes final
        timeout: Wall-clock budget in seconds (None = unlimited)

    Returns:
        Mapping node -> exact distance. Unreachable nodes are absent; with a
        target, only the nodes settled before the target are present.

    Raises:
        NegativeWeightError: If a negative edge weight is met
        SearchTimeoutError: If the search exceeds `timeout`
    """
    state = _best_first("Dijkstra", neighbors, weight, start, target, _zero, visit, timeout)
    return state.settled


def dijkstra_path(
    neighbors: NeighborProvider[N],
    weight: WeightProvider[N],
    start: N,
    target: N,
    *,
    visit: Callable[[N], None] | None = None,
    timeout: float | None = SEARCH_TIMEOUT,
) -> list[N]:
    """
    Cheapest path from `start` to `target` found by Dijkstra's algorithm.

    Returns:
        The path including both endpoints, `[start]` when start == target,
        or an empty list when `target` is unreachable
    """
    state = _best_first("Dijkstra", neighbors, weight, start, target, _zero, visit, timeout)
    if target not in state.settled:
        return []
    return _reconstruct(state.parents, start, target)


def a_star(
    neighbors: NeighborProvider[N],
    weight: WeightProvider[N],
    start: N,
    target: N,
    heuristic: Heuristic[N] | None,
    *,
    visit: Callable[[N], None] | None = None,
    timeout: float | None = SEARCH_TIMEOUT,
) -> list[N]:
    """
    Cheapest path from `start` to `target` found by A* search.

    The frontier is ordered by g(node) + heuristic(node, target). The result is
    optimal only if the heuristic never overestimates the remaining cost; that
    is the caller's responsibility and is not checked here. A heuristic that
    always returns 0 makes A* behave exactly like Dijkstra.

    Returns:
        The path including both endpoints, `[start]` when start == target,
        or an empty list when `target` is unreachable

    Raises:
        ConfigurationError: If no heuristic is given
        NegativeWeightError: If a negative edge weight is met
        SearchTimeoutError: If the search exceeds `timeout`
    """
    if heuristic is None:
        raise ConfigurationError("A* requires a heuristic (use zero_heuristic for none)")

    state = _best_first("A*", neighbors, weight, start, target, heuristic, visit, timeout)
    if target not in state.settled:
        logger.debug(f"A*: no path from {start!r} to {target!r}")
        return []
    return _reconstruct(state.parents, start, target)


def path_cost(weight: WeightProvider[N], path: Sequence[N]) -> float:
    """
    Total weight of a path.

    Raises:
        ConfigurationError: If the path is empty (no path has no cost)
    """
    if not path:
        raise ConfigurationError("An empty path has no cost")
    return float(sum(weight(a, b) for a, b in zip(path, path[1:])))


def _reconstruct(parents: dict[N, N], start: N, target: N) -> list[N]:
    """Walk predecessors back from target to start, then reverse."""
    path = [target]
    node = target
    while node != start:
        node = parents[node]
        path.append(node)
    path.reverse()
    return path
