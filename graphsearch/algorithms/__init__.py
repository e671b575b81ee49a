"""
Graph algorithms module.

Every algorithm works through the capability interface in `providers`
(neighbor / weight functions), never through a concrete graph class:
- bfs / dfs / traverse: Traversal with optional goal and path reconstruction
- dijkstra / dijkstra_path: Shortest distances and paths, non-negative weights
- a_star: Heuristic-guided shortest path
- topological_sort / is_dag: DAG linearization with cycle detection
"""

from graphsearch.algorithms.frontier import PriorityFrontier
from graphsearch.algorithms.providers import (
    Heuristic,
    NeighborProvider,
    WeightProvider,
    edges_of,
    neighbors_from_mapping,
    providers_from_weighted_mapping,
)
from graphsearch.algorithms.shortest_path import a_star, dijkstra, dijkstra_path, path_cost
from graphsearch.algorithms.topological import is_dag, topological_sort
from graphsearch.algorithms.traversal import (
    TraversalMode,
    TraversalResult,
    bfs,
    dfs,
    traverse,
)

__all__ = [
    "Heuristic",
    "NeighborProvider",
    "WeightProvider",
    "PriorityFrontier",
    "TraversalMode",
    "TraversalResult",
    "a_star",
    "bfs",
    "dfs",
    "dijkstra",
    "dijkstra_path",
    "edges_of",
    "is_dag",
    "neighbors_from_mapping",
    "path_cost",
    "providers_from_weighted_mapping",
    "topological_sort",
    "traverse",
]
