"""
Graph representation module.

Provides the vertex/edge model and the graph container:
- Vertex, UnweightedVertex, WeightedVertex: Identity-bearing nodes with adjacency
- Edge: Snapshot of the edges from a vertex to one neighbor
- Graph: Vertex set plus edge mutation and search entry points
- create_random_graph: Random graphs for tests and benchmarks
"""

from graphsearch.graph.container import Comparator, Graph
from graphsearch.graph.random_graph import create_random_graph
from graphsearch.graph.vertex import Edge, UnweightedVertex, Vertex, WeightedVertex

__all__ = [
    "Comparator",
    "Edge",
    "Graph",
    "UnweightedVertex",
    "Vertex",
    "WeightedVertex",
    "create_random_graph",
]
