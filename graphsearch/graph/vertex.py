"""
Vertex and edge model.

A vertex carries a payload value, a stable integer handle id and its own
outgoing adjacency. Two adjacency representations exist, fixed per graph:

- UnweightedVertex: insertion-ordered set of neighbors
- WeightedVertex: neighbor -> list of parallel edge weights

Vertices compare and hash by identity. Two vertices holding equal payloads
are still different vertices.
"""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Iterable, TypeVar

from graphsearch.config import UNIT_EDGE_WEIGHT
from graphsearch.errors import ConfigurationError

T = TypeVar("T")

# Process-wide handle counter: a vid is never handed out twice
_vertex_ids = itertools.count(1)


@dataclass(frozen=True)
class Edge(Generic[T]):
    """
    Snapshot of the edges from one vertex to one neighbor.

    Attributes:
        vertex: The neighbor the edges point at
        weights: Parallel edge weights in insertion order (None when unweighted)
    """

    vertex: Vertex[T]
    weights: tuple[float, ...] | None = None

    @property
    def weight(self) -> float | None:
        """Cheapest parallel weight, or None for an unweighted edge."""
        if self.weights is None:
            return None
        return min(self.weights)


class Vertex(ABC, Generic[T]):
    """
    Abstract base class for graph vertices.

    Subclasses decide how edges are stored. All edge mutators accept an
    `undirected` flag; when set, the mirrored operation is applied to the
    neighbor with `undirected=False` so the two calls never recurse further.
    """

    weighted: bool = False

    def __init__(self, value: T) -> None:
        self._value = value
        self._vid = next(_vertex_ids)
        # Keys are neighbor vertices; dicts keep insertion order
        self._edges: dict[Vertex[T], Any] = {}

    @property
    def vid(self) -> int:
        """Stable handle id, unique for the lifetime of the process."""
        return self._vid

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self._value = value

    @property
    def degree(self) -> int:
        """Number of distinct neighbors (parallel edges count once)."""
        return len(self._edges)

    @property
    @abstractmethod
    def edge_count(self) -> int:
        """Number of outgoing edges, counting parallel edges separately."""
        ...

    @abstractmethod
    def add_edge(
        self,
        vertex: Vertex[T],
        weight: float | None = None,
        undirected: bool = False,
    ) -> bool:
        """
        Add an edge to `vertex`.

        Returns:
            False if the edge already exists, True if it was inserted
        """
        ...

    @abstractmethod
    def remove_edge(
        self,
        vertex: Vertex[T],
        weight: float | None = None,
        undirected: bool = False,
    ) -> bool:
        """
        Remove one edge to `vertex`.

        Returns:
            True if an edge was removed, False if none matched
        """
        ...

    @abstractmethod
    def has_edge(self, vertex: Vertex[T], weight: float | None = None) -> bool:
        """Check for an edge to `vertex` (with exactly `weight`, if given)."""
        ...

    @abstractmethod
    def get_edges(self) -> list[Edge[T]]:
        """Snapshot of all outgoing edges, grouped per neighbor."""
        ...

    @abstractmethod
    def weight_to(self, vertex: Vertex[T]) -> float | None:
        """Cheapest weight of the edges to `vertex`, or None if there is no edge."""
        ...

    @abstractmethod
    def _weights_to(self, vertex: Vertex[T]) -> list[float | None]:
        """Arguments that would re-create the current edges to `vertex`."""
        ...

    @abstractmethod
    def _check_weight(self, weight: float | None) -> None:
        """Raise ConfigurationError if `weight` is unusable for a new edge."""
        ...

    def neighbors(self) -> list[Vertex[T]]:
        """Snapshot of the distinct neighbors, in insertion order."""
        return list(self._edges)

    def set_edges(self, edges: Iterable[Edge[T]], undirected: bool = False) -> None:
        """
        Replace every outgoing edge with `edges`.

        Args:
            edges: Edge records, e.g. another vertex's get_edges() snapshot
            undirected: Also retract and re-add the mirrored edges
        """
        edges = list(edges)
        for edge in edges:
            for weight in _edge_weights(edge):
                self._check_weight(weight)

        for neighbor in list(self._edges):
            self._drop_edges_to(neighbor, undirected)

        for edge in edges:
            for weight in _edge_weights(edge):
                self.add_edge(edge.vertex, weight, undirected)

    def replace_edge(
        self,
        old: Vertex[T],
        new: Vertex[T],
        weight: float | None = None,
        undirected: bool = False,
    ) -> bool:
        """
        Re-point edges from `old` to `new`.

        With `weight` only that parallel edge moves; without it every edge to
        `old` moves.

        Returns:
            False if there was no matching edge to `old`
        """
        if not self.has_edge(old, weight):
            return False

        if weight is None:
            moved = self._weights_to(old)
            self._drop_edges_to(old, undirected)
        else:
            self.remove_edge(old, weight, undirected)
            moved = [weight]

        for moved_weight in moved:
            self.add_edge(new, moved_weight, undirected)
        return True

    def _drop_edges_to(self, vertex: Vertex[T], undirected: bool = False) -> bool:
        """Remove every parallel edge to `vertex` at once."""
        if vertex not in self._edges:
            return False
        del self._edges[vertex]
        if undirected and vertex is not self:
            vertex._drop_edges_to(self)
        return True

    def _clear(self) -> None:
        self._edges.clear()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(vid={self._vid}, value={self._value!r})"


def _edge_weights(edge: Edge[T]) -> tuple[float | None, ...]:
    return (None,) if edge.weights is None else edge.weights


class UnweightedVertex(Vertex[T]):
    """Vertex whose adjacency is a set of neighbors."""

    weighted = False

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def _check_weight(self, weight: float | None) -> None:
        if weight is not None:
            raise ConfigurationError(
                f"Unweighted edges do not carry a weight (got {weight!r})"
            )

    def add_edge(
        self,
        vertex: Vertex[T],
        weight: float | None = None,
        undirected: bool = False,
    ) -> bool:
        self._check_weight(weight)
        if vertex in self._edges:
            return False
        self._edges[vertex] = None

        if undirected:
            vertex.add_edge(self, undirected=False)
        return True

    def remove_edge(
        self,
        vertex: Vertex[T],
        weight: float | None = None,
        undirected: bool = False,
    ) -> bool:
        self._check_weight(weight)
        if vertex not in self._edges:
            return False
        del self._edges[vertex]

        if undirected:
            vertex.remove_edge(self, undirected=False)
        return True

    def has_edge(self, vertex: Vertex[T], weight: float | None = None) -> bool:
        self._check_weight(weight)
        return vertex in self._edges

    def get_edges(self) -> list[Edge[T]]:
        return [Edge(vertex) for vertex in self._edges]

    def weight_to(self, vertex: Vertex[T]) -> float | None:
        return UNIT_EDGE_WEIGHT if vertex in self._edges else None

    def _weights_to(self, vertex: Vertex[T]) -> list[float | None]:
        return [None] if vertex in self._edges else []


class WeightedVertex(Vertex[T]):
    """
    Vertex whose adjacency maps each neighbor to its parallel edge weights.

    A neighbor key never maps to an empty list: removing the last weight
    removes the key.
    """

    weighted = True

    @property
    def edge_count(self) -> int:
        return sum(len(weights) for weights in self._edges.values())

    def _check_weight(self, weight: float | None) -> None:
        if weight is None:
            raise ConfigurationError("Weighted edges need a weight")

    def add_edge(
        self,
        vertex: Vertex[T],
        weight: float | None = None,
        undirected: bool = False,
    ) -> bool:
        self._check_weight(weight)
        weights = self._edges.get(vertex)
        if weights is not None and weight in weights:
            return False
        self._edges.setdefault(vertex, []).append(weight)

        if undirected:
            vertex.add_edge(self, weight, undirected=False)
        return True

    def remove_edge(
        self,
        vertex: Vertex[T],
        weight: float | None = None,
        undirected: bool = False,
    ) -> bool:
        """
        Remove one parallel edge to `vertex`.

        Without `weight`, the oldest parallel edge is removed.
        """
        weights = self._edges.get(vertex)
        if weights is None:
            return False
        if weight is None:
            weight = weights[0]
        elif weight not in weights:
            return False

        weights.remove(weight)
        if not weights:
            del self._edges[vertex]

        if undirected:
            vertex.remove_edge(self, weight, undirected=False)
        return True

    def has_edge(self, vertex: Vertex[T], weight: float | None = None) -> bool:
        weights = self._edges.get(vertex)
        if weights is None:
            return False
        return weight is None or weight in weights

    def get_edges(self) -> list[Edge[T]]:
        return [Edge(vertex, tuple(weights)) for vertex, weights in self._edges.items()]

    def weight_to(self, vertex: Vertex[T]) -> float | None:
        weights = self._edges.get(vertex)
        if weights is None:
            return None
        # Parallel edges: the cheapest one wins
        return min(weights)

    def _weights_to(self, vertex: Vertex[T]) -> list[float | None]:
        return list(self._edges.get(vertex, ()))
