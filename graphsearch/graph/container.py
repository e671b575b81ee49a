"""
Graph container: owns a set of vertices and mutates edges between them.

The container fixes two things at construction time:
- whether edges are weighted (which Vertex class it creates)
- whether edges are undirected (every edge mutation is mirrored)

Search methods delegate to `graphsearch.algorithms`, passing the bound
methods `neighbors` and `weight` as the capability interface.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, Iterator, TypeVar

from graphsearch.algorithms import shortest_path, topological, traversal
from graphsearch.algorithms.providers import Heuristic
from graphsearch.algorithms.traversal import TraversalMode
from graphsearch.config import DEFAULT_MAX_EDGES, DEFAULT_MIN_EDGES
from graphsearch.errors import ConfigurationError, EdgeNotFoundError, UnknownVertexError
from graphsearch.graph.vertex import Edge, UnweightedVertex, Vertex, WeightedVertex

if TYPE_CHECKING:
    import numpy as np

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Payload comparator: negative, zero or positive like a classic cmp()
Comparator = Callable[[Any, Any], int]


class Graph(Generic[T]):
    """
    A directed or undirected, weighted or unweighted graph.

    Vertices are created only through `add_vertex` and compared by identity.
    Each vertex also has a stable integer handle (`vertex.vid`) that can be
    resolved with `get_vertex`.

    Attributes:
        weighted: Whether edges carry weights (parallel edges allowed)
        undirected: Whether every edge is mirrored
        compare: Payload comparator used to match search targets
    """

    def __init__(
        self,
        weighted: bool = False,
        undirected: bool = False,
        compare: Comparator | None = None,
    ) -> None:
        """
        Initialize an empty graph.

        Args:
            weighted: Store weighted edges (fixed for the graph's lifetime)
            undirected: Mirror every edge mutation on the neighbor
            compare: Payload comparator, required only for target-value searches
        """
        self._weighted = weighted
        self._undirected = undirected
        self._compare = compare
        self._vertex_cls: type[Vertex[T]] = WeightedVertex if weighted else UnweightedVertex
        self._vertices: dict[int, Vertex[T]] = {}

    @property
    def weighted(self) -> bool:
        return self._weighted

    @property
    def undirected(self) -> bool:
        return self._undirected

    @property
    def compare(self) -> Comparator | None:
        return self._compare

    # =========================================================================
    # Vertices
    # =========================================================================

    def add_vertex(self, value: T) -> Vertex[T]:
        """Create a vertex holding `value` and return its handle."""
        vertex = self._vertex_cls(value)
        self._vertices[vertex.vid] = vertex
        return vertex

    def remove_vertex(self, vertex: Vertex[T]) -> bool:
        """
        Remove a vertex and every edge pointing at it.

        The whole container is scanned, so incoming edges of a directed graph
        are retracted too, not only the ones mirrored by the vertex's own
        adjacency. Costs O(V + E).

        Returns:
            False if the vertex is not part of this graph
        """
        if not self._owns(vertex):
            return False

        retracted = 0
        for other in self._vertices.values():
            if other is not vertex and other._drop_edges_to(vertex):
                retracted += 1
        vertex._clear()
        del self._vertices[vertex.vid]

        logger.debug(f"Removed {vertex!r} and edges from {retracted} neighbors")
        return True

    def get_vertex(self, vid: int) -> Vertex[T]:
        """
        Resolve a handle id to its vertex.

        Raises:
            UnknownVertexError: If no vertex with this id is in the graph
        """
        try:
            return self._vertices[vid]
        except KeyError:
            raise UnknownVertexError(vid) from None

    def get_vertices(self) -> list[Vertex[T]]:
        """Snapshot of all vertices, in insertion order."""
        return list(self._vertices.values())

    def find_vertex(self, value: T) -> Vertex[T] | None:
        """
        First vertex whose payload compares equal to `value`.

        Raises:
            ConfigurationError: If the graph has no comparator
        """
        matches = self._goal(value)
        for vertex in self._vertices.values():
            if matches(vertex):
                return vertex
        return None

    # =========================================================================
    # Edges
    # =========================================================================

    def add_edge(self, vertex1: Vertex[T], vertex2: Vertex[T], weight: float | None = None) -> bool:
        """
        Add an edge from `vertex1` to `vertex2` (both ways if undirected).

        Returns:
            False if that edge (with that weight) already exists
        """
        self._require(vertex1, vertex2)
        return vertex1.add_edge(vertex2, weight, self._undirected)

    def remove_edge(self, vertex1: Vertex[T], vertex2: Vertex[T], weight: float | None = None) -> bool:
        """
        Remove one edge from `vertex1` to `vertex2` (both ways if undirected).

        For weighted graphs `weight` picks the parallel edge; without it the
        oldest parallel edge is removed.
        """
        self._require(vertex1, vertex2)
        return vertex1.remove_edge(vertex2, weight, self._undirected)

    def has_edge(self, vertex1: Vertex[T], vertex2: Vertex[T], weight: float | None = None) -> bool:
        self._require(vertex1, vertex2)
        return vertex1.has_edge(vertex2, weight)

    def get_edges(self, vertex: Vertex[T]) -> list[Edge[T]]:
        """Snapshot of the outgoing edges of `vertex`."""
        self._require(vertex)
        return vertex.get_edges()

    def set_edges(self, vertex: Vertex[T], edges: Iterable[Edge[T]]) -> None:
        """Replace all outgoing edges of `vertex` (mirrored if undirected)."""
        edges = list(edges)
        self._require(vertex, *(edge.vertex for edge in edges))
        vertex.set_edges(edges, self._undirected)

    def replace_edge(
        self,
        vertex: Vertex[T],
        old: Vertex[T],
        new: Vertex[T],
        weight: float | None = None,
    ) -> bool:
        """Re-point the edge(s) `vertex -> old` to `vertex -> new`."""
        self._require(vertex, old, new)
        return vertex.replace_edge(old, new, weight, self._undirected)

    def edge_count(self) -> int:
        """
        Number of stored adjacency entries, parallel edges included.

        An undirected edge is stored on both endpoints and counts twice
        (a self-loop counts once).
        """
        return sum(vertex.edge_count for vertex in self._vertices.values())

    # =========================================================================
    # Capability interface
    # =========================================================================

    def neighbors(self, vertex: Vertex[T]) -> list[Vertex[T]]:
        """Distinct successors of `vertex`."""
        self._require(vertex)
        return vertex.neighbors()

    def weight(self, vertex1: Vertex[T], vertex2: Vertex[T]) -> float:
        """
        Cost of the edge `vertex1 -> vertex2`.

        Parallel edges resolve to the cheapest weight. Unweighted edges cost
        `config.UNIT_EDGE_WEIGHT`.

        Raises:
            EdgeNotFoundError: If there is no such edge
        """
        weight = vertex1.weight_to(vertex2)
        if weight is None:
            raise EdgeNotFoundError(vertex1, vertex2)
        return weight

    # =========================================================================
    # Searches
    # =========================================================================

    def depth_first_search(
        self,
        start: Vertex[T],
        target_value: T | None = None,
        return_path: bool = True,
        visit: Callable[[Vertex[T]], None] | None = None,
    ) -> list[Vertex[T]] | bool:
        """
        Depth-first search from `start`.

        Returns:
            With `return_path`: the branch path to the first vertex whose
            payload matches `target_value` (empty if none matches), or the full
            visit order when no target is given. Without `return_path`:
            whether a matching vertex was found.
        """
        return self._search(traversal.dfs, start, target_value, return_path, visit)

    def breadth_first_search(
        self,
        start: Vertex[T],
        target_value: T | None = None,
        return_path: bool = True,
        visit: Callable[[Vertex[T]], None] | None = None,
    ) -> list[Vertex[T]] | bool:
        """
        Breadth-first search from `start`.

        Returns:
            Like `depth_first_search`, but a returned path has the fewest
            edges of all paths to a matching vertex
        """
        return self._search(traversal.bfs, start, target_value, return_path, visit)

    def traverse(
        self,
        start: Vertex[T],
        mode: TraversalMode | str = TraversalMode.BFS,
    ) -> list[Vertex[T]]:
        """Every vertex reachable from `start`, in BFS or DFS order."""
        mode = TraversalMode.parse(mode)
        self._require(start)
        return traversal.traverse(self.neighbors, start, mode)

    def dijkstra(self, start: Vertex[T], target: Vertex[T] | None = None) -> dict[Vertex[T], float]:
        """Shortest distances from `start`; unreachable vertices are absent."""
        self._require(start)
        if target is not None:
            self._require(target)
        return shortest_path.dijkstra(self.neighbors, self.weight, start, target)

    def dijkstra_path(self, start: Vertex[T], target: Vertex[T]) -> list[Vertex[T]]:
        """Cheapest path from `start` to `target`, or [] if unreachable."""
        self._require(start, target)
        return shortest_path.dijkstra_path(self.neighbors, self.weight, start, target)

    def a_star(
        self,
        start: Vertex[T],
        target: Vertex[T],
        heuristic: Heuristic[Vertex[T]] | None,
    ) -> list[Vertex[T]]:
        """Cheapest path found by A*, or [] if unreachable."""
        self._require(start, target)
        return shortest_path.a_star(self.neighbors, self.weight, start, target, heuristic)

    def topological_sort(self) -> list[Vertex[T]]:
        """
        All vertices in topological order.

        Raises:
            NotADAGError: If the graph has a cycle (any edge of an undirected
                graph is a two-vertex cycle)
        """
        return topological.topological_sort(self.get_vertices(), self.neighbors)

    # =========================================================================
    # Construction helpers
    # =========================================================================

    @classmethod
    def create_random_graph(
        cls,
        vertex_count: int,
        min_edges: int = DEFAULT_MIN_EDGES,
        max_edges: int = DEFAULT_MAX_EDGES,
        weight_range: tuple[int, int] | None = None,
        undirected: bool = False,
        seed: int | np.random.Generator | None = None,
    ) -> Graph[int]:
        """Random graph with payloads 1..vertex_count (see random_graph module)."""
        from graphsearch.graph.random_graph import create_random_graph

        return create_random_graph(
            vertex_count,
            min_edges=min_edges,
            max_edges=max_edges,
            weight_range=weight_range,
            undirected=undirected,
            seed=seed,
        )

    # =========================================================================
    # Internals
    # =========================================================================

    def _owns(self, vertex: object) -> bool:
        return isinstance(vertex, Vertex) and self._vertices.get(vertex.vid) is vertex

    def _require(self, *vertices: object) -> None:
        for vertex in vertices:
            if not self._owns(vertex):
                raise UnknownVertexError(vertex)

    def _goal(self, target_value: T) -> Callable[[Vertex[T]], bool]:
        if self._compare is None:
            raise ConfigurationError(
                "Matching a target value requires a comparator; "
                "pass compare= when creating the graph"
            )
        compare = self._compare
        return lambda vertex: compare(vertex.value, target_value) == 0

    def _search(
        self,
        search: Callable[..., traversal.TraversalResult[Vertex[T]]],
        start: Vertex[T],
        target_value: T | None,
        return_path: bool,
        visit: Callable[[Vertex[T]], None] | None,
    ) -> list[Vertex[T]] | bool:
        goal = self._goal(target_value) if target_value is not None else None
        self._require(start)
        result = search(self.neighbors, start, goal, return_path=return_path, visit=visit)

        if not return_path:
            return result.found
        if goal is None:
            return result.visited
        return result.path

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return self._owns(vertex)

    def __iter__(self) -> Iterator[Vertex[T]]:
        return iter(self.get_vertices())

    def __repr__(self) -> str:
        kind = "weighted" if self._weighted else "unweighted"
        direction = "undirected" if self._undirected else "directed"
        return f"Graph({kind}, {direction}, vertices={len(self)}, edges={self.edge_count()})"
