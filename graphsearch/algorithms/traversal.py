"""
Breadth-first and depth-first traversal.

Both traversals work purely through a NeighborProvider, so the start node
does not have to belong to any Graph. An optional goal predicate stops the
traversal early, and the path to the goal can be reconstructed.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, Hashable, TypeVar

from graphsearch.algorithms.providers import NeighborProvider
from graphsearch.config import TRAVERSAL_MODES
from graphsearch.errors import ConfigurationError

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)

# Parent marker for the start node (None may be a legitimate node)
_ROOT = object()


class TraversalMode(str, Enum):
    """Order in which a traversal visits nodes."""

    BFS = "BFS"
    DFS = "DFS"

    @classmethod
    def parse(cls, mode: TraversalMode | str) -> TraversalMode:
        """
        Resolve a mode given as an enum member or a case-insensitive string.

        Raises:
            ConfigurationError: If the mode is unknown
        """
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str) and mode.upper() in TRAVERSAL_MODES:
            return cls(mode.upper())
        available = ", ".join(TRAVERSAL_MODES)
        raise ConfigurationError(f"Invalid traversal type {mode!r}. Available: {available}")


@dataclass
class TraversalResult(Generic[N]):
    """
    Outcome of a BFS or DFS run.

    Attributes:
        visited: Nodes in the order they were visited
        path: Start-to-goal path when a path was requested. Empty when the
            goal was not reached. None when no path was requested.
        found: Whether the goal was reached
    """

    visited: list[N] = field(default_factory=list)
    path: list[N] | None = None
    found: bool = False

    @property
    def visited_count(self) -> int:
        return len(self.visited)


def bfs(
    neighbors: NeighborProvider[N],
    start: N,
    goal: Callable[[N], bool] | None = None,
    *,
    return_path: bool = False,
    visit: Callable[[N], None] | None = None,
) -> TraversalResult[N]:
    """
    Breadth-first traversal from `start`.

    The first time a goal node is dequeued, its reconstructed path has the
    fewest edges of all paths from `start`. Edge weights play no part.

    Args:
        neighbors: Neighbor enumeration capability
        start: Node to start from
        goal: Predicate marking the node to stop at (None = visit everything)
        return_path: Reconstruct the path to the goal
        visit: Callback invoked once per visited node

    Returns:
        TraversalResult with the visit order, and the path if requested
    """
    queue = deque([start])
    # Maps node to the node it was discovered from; doubles as the visited set
    parents: dict[N, object] = {start: _ROOT}
    visited: list[N] = []

    while queue:
        node = queue.popleft()
        visited.append(node)
        if visit is not None:
            visit(node)

        if goal is not None and goal(node):
            path = _reconstruct(parents, node) if return_path else None
            logger.debug(f"BFS reached goal after visiting {len(visited)} nodes")
            return TraversalResult(visited=visited, path=path, found=True)

        for neighbor in neighbors(node):
            if neighbor in parents:
                continue
            parents[neighbor] = node
            queue.append(neighbor)

    logger.debug(f"BFS exhausted {len(visited)} reachable nodes")
    return TraversalResult(visited=visited, path=_not_found_path(goal, return_path))


def dfs(
    neighbors: NeighborProvider[N],
    start: N,
    goal: Callable[[N], bool] | None = None,
    *,
    return_path: bool = False,
    visit: Callable[[N], None] | None = None,
) -> TraversalResult[N]:
    """
    Depth-first (pre-order) traversal from `start`.

    Explores one branch fully before backtracking. Uses an explicit stack, so
    very deep graphs do not hit the interpreter's recursion limit. The path
    returned for a goal is the current branch, with no minimality guarantee.

    Args:
        neighbors: Neighbor enumeration capability
        start: Node to start from
        goal: Predicate marking the node to stop at (None = visit everything)
        return_path: Reconstruct the path to the goal
        visit: Callback invoked once per visited node

    Returns:
        TraversalResult with the visit order, and the path if requested
    """
    seen = {start}
    visited = [start]
    if visit is not None:
        visit(start)

    if goal is not None and goal(start):
        return TraversalResult(
            visited=visited, path=[start] if return_path else None, found=True
        )

    # Each frame holds a node and the iterator over its unexplored neighbors
    stack = [(start, iter(neighbors(start)))]

    while stack:
        _, pending = stack[-1]
        for neighbor in pending:
            if neighbor not in seen:
                break
        else:
            stack.pop()
            continue

        seen.add(neighbor)
        visited.append(neighbor)
        if visit is not None:
            visit(neighbor)

        if goal is not None and goal(neighbor):
            path = [node for node, _ in stack] + [neighbor] if return_path else None
            logger.debug(f"DFS reached goal at depth {len(stack)}")
            return TraversalResult(visited=visited, path=path, found=True)

        stack.append((neighbor, iter(neighbors(neighbor))))

    logger.debug(f"DFS exhausted {len(visited)} reachable nodes")
    return TraversalResult(visited=visited, path=_not_found_path(goal, return_path))


def traverse(
    neighbors: NeighborProvider[N],
    start: N,
    mode: TraversalMode | str = TraversalMode.BFS,
) -> list[N]:
    """
    Visit every node reachable from `start` and return them in visit order.

    Raises:
        ConfigurationError: If `mode` is not BFS or DFS
    """
    mode = TraversalMode.parse(mode)
    search = bfs if mode is TraversalMode.BFS else dfs
    return search(neighbors, start).visited


def _reconstruct(parents: dict[N, object], node: N) -> list[N]:
    path = [node]
    parent = parents[node]
    while parent is not _ROOT:
        path.append(parent)
        parent = parents[parent]
    path.reverse()
    return path


def _not_found_path(goal: Callable | None, return_path: bool) -> list | None:
    # An unreached goal yields an empty path, never [start]
    if goal is not None and return_path:
        return []
    return None
