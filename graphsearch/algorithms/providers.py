"""
Capability interface between the search engines and graph storage.

The engines never touch a concrete graph. They only call:
- a NeighborProvider: node -> iterable of neighbor nodes
- a WeightProvider: (node, neighbor) -> edge weight
- optionally a Heuristic: (node, target) -> estimated remaining cost

Bound methods of `Graph` (`graph.neighbors`, `graph.weight`) satisfy these
protocols, and so do plain closures over dictionaries, which is what the
helpers below build.
"""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Mapping, Protocol, Sequence, TypeVar

from graphsearch.errors import EdgeNotFoundError

N = TypeVar("N", bound=Hashable)
N_contra = TypeVar("N_contra", contravariant=True)


class NeighborProvider(Protocol[N_contra]):
    """Enumerates the direct successors of a node."""

    def __call__(self, node: N_contra, /) -> Iterable: ...


class WeightProvider(Protocol[N_contra]):
    """Returns the cost of moving from `node` to `neighbor`."""

    def __call__(self, node: N_contra, neighbor: N_contra, /) -> float: ...


class Heuristic(Protocol[N_contra]):
    """Estimates the remaining cost from `node` to `target`."""

    def __call__(self, node: N_contra, target: N_contra, /) -> float: ...


# Predicate deciding whether a node is the one being searched for
Goal = Callable[[N], bool]


def neighbors_from_mapping(adjacency: Mapping[N, Sequence[N]]) -> NeighborProvider[N]:
    """
    Build a neighbor provider from an unweighted adjacency mapping.

    Nodes missing from the mapping are treated as having no outgoing edges.

    Example:
        neighbors = neighbors_from_mapping({1: [2, 3], 2: [4], 3: [4, 5]})
    """

    def neighbors(node: N) -> list[N]:
        return list(adjacency.get(node, ()))

    return neighbors


def providers_from_weighted_mapping(
    adjacency: Mapping[N, Sequence[tuple[N, float]]],
) -> tuple[NeighborProvider[N], WeightProvider[N]]:
    """
    Build neighbor and weight providers from a weighted adjacency mapping.

    The mapping lists `(neighbor, weight)` pairs per node. A neighbor listed
    several times is a set of parallel edges: it is enumerated once, and its
    weight is the cheapest of the parallel weights.

    Example:
        neighbors, weight = providers_from_weighted_mapping(
            {1: [(2, 4), (3, 2)], 2: [(3, 2), (4, 7)], 3: [(4, 1)], 4: []}
        )
    """
    cheapest: dict[N, dict[N, float]] = {}
    for node, edges in adjacency.items():
        per_neighbor = cheapest.setdefault(node, {})
        for neighbor, edge_weight in edges:
            current = per_neighbor.get(neighbor)
            if current is None or edge_weight < current:
                per_neighbor[neighbor] = edge_weight

    def neighbors(node: N) -> list[N]:
        return list(cheapest.get(node, {}))

    def weight(node: N, neighbor: N) -> float:
        try:
            return cheapest[node][neighbor]
        except KeyError:
            raise EdgeNotFoundError(node, neighbor) from None

    return neighbors, weight


def edges_of(neighbors: NeighborProvider[N], nodes: Iterable[N]) -> list[tuple[N, N]]:
    """List every (source, target) edge reachable through `neighbors` from `nodes`."""
    return [(node, neighbor) for node in nodes for neighbor in neighbors(node)]
