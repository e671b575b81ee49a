"""
Topological sort of a directed acyclic graph.

Depth-first linearization with three node states: unvisited, in progress
and finished. Reaching a node that is still in progress means the graph has
a cycle, which aborts the whole sort.
"""

from __future__ import annotations

import logging
from typing import Hashable, Iterable, TypeVar

from graphsearch.algorithms.providers import NeighborProvider
from graphsearch.errors import NotADAGError

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)


def topological_sort(nodes: Iterable[N], neighbors: NeighborProvider[N]) -> list[N]:
    """
    Order `nodes` so that every edge's source comes before its target.

    Every node in `nodes` is covered, so disconnected components all appear
    in the result. For a fixed input order the output is deterministic, but
    it is only one of possibly many valid orders.

    Args:
        nodes: All nodes to order
        neighbors: Neighbor enumeration capability (edge direction matters)

    Returns:
        Nodes in topological order (reverse post-order of the DFS)

    Raises:
        NotADAGError: If a cycle is reachable from any node
    """
    finished: set[N] = set()
    in_progress: set[N] = set()
    post_order: list[N] = []

    for root in nodes:
        if root in finished:
            continue

        in_progress.add(root)
        stack = [(root, iter(neighbors(root)))]

        while stack:
            node, pending = stack[-1]
            for neighbor in pending:
                if neighbor in in_progress:
                    raise NotADAGError(_cycle_through(stack, neighbor))
                if neighbor not in finished:
                    break
            else:
                stack.pop()
                in_progress.discard(node)
                finished.add(node)
                post_order.append(node)
                continue

            in_progress.add(neighbor)
            stack.append((neighbor, iter(neighbors(neighbor))))

    post_order.reverse()
    logger.debug(f"Topologically sorted {len(post_order)} nodes")
    return post_order


def is_dag(nodes: Iterable[N], neighbors: NeighborProvider[N]) -> bool:
    """Check whether the graph spanned by `nodes` has no directed cycle."""
    try:
        topological_sort(nodes, neighbors)
    except NotADAGError:
        return False
    return True


def _cycle_through(stack: list, node: N) -> list[N]:
    """The cycle closed by an edge back to `node`, which is on the stack."""
    branch = [frame_node for frame_node, _ in stack]
    return branch[branch.index(node):] + [node]
