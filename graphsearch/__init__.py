"""
graphsearch - graph data structures and graph-search algorithms.

A vertex/edge model (directed or undirected, weighted or unweighted, with
parallel edges), a graph container, and algorithms that run over any
neighbor/weight capability: BFS, DFS, Dijkstra, A* and topological sort.
"""

from graphsearch.algorithms import (
    TraversalMode,
    TraversalResult,
    a_star,
    bfs,
    dfs,
    dijkstra,
    dijkstra_path,
    is_dag,
    topological_sort,
    traverse,
)
from graphsearch.errors import (
    ConfigurationError,
    EdgeNotFoundError,
    GraphError,
    NegativeWeightError,
    NotADAGError,
    SearchTimeoutError,
    UnknownVertexError,
)
from graphsearch.graph import Edge, Graph, Vertex, create_random_graph

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Edge",
    "EdgeNotFoundError",
    "Graph",
    "GraphError",
    "NegativeWeightError",
    "NotADAGError",
    "SearchTimeoutError",
    "TraversalMode",
    "TraversalResult",
    "UnknownVertexError",
    "Vertex",
    "a_star",
    "bfs",
    "create_random_graph",
    "dfs",
    "dijkstra",
    "dijkstra_path",
    "is_dag",
    "topological_sort",
    "traverse",
]
