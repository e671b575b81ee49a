"""
Exception hierarchy for graphsearch.

Three kinds of failure exist:
- Configuration errors: the caller broke a contract (unknown traversal mode,
  missing comparator or heuristic, wrong weight usage). Raised eagerly.
- Structural errors: the input has no valid answer (a cycle given to a
  topological sort). The whole operation aborts.
- Not-found is NOT an error: unreachable targets are reported through the
  return value (empty path, absent distance entry).
"""

from __future__ import annotations

from typing import Any


class GraphError(Exception):
    """Base class for all graphsearch errors."""


class ConfigurationError(GraphError, ValueError):
    """A caller contract violation detected before any work is done."""


class UnknownVertexError(ConfigurationError):
    """A vertex handle that is not registered in the graph was used."""

    def __init__(self, vertex: Any) -> None:
        super().__init__(f"Vertex {vertex!r} is not part of this graph")
        self.vertex = vertex


class NegativeWeightError(ConfigurationError):
    """A negative edge weight was met by an algorithm that forbids them."""

    def __init__(self, source: Any, target: Any, weight: float) -> None:
        super().__init__(
            f"Negative weight {weight} on edge {source!r} -> {target!r}; "
            "shortest-path search requires non-negative weights"
        )
        self.source = source
        self.target = target
        self.weight = weight


class EdgeNotFoundError(GraphError, KeyError):
    """Asked for the weight of an edge that does not exist."""

    def __init__(self, source: Any, target: Any) -> None:
        super().__init__(f"No edge from {source!r} to {target!r}")
        self.source = source
        self.target = target

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class NotADAGError(GraphError):
    """The graph contains a cycle, so it has no topological order."""

    def __init__(self, cycle: list[Any]) -> None:
        path = " -> ".join(repr(node) for node in cycle)
        super().__init__(f"The graph is not a DAG (cycle: {path})")
        self.cycle = cycle


class SearchTimeoutError(GraphError, TimeoutError):
    """A shortest-path search ran past its time budget."""

    def __init__(self, algorithm: str, timeout: float, expanded: int) -> None:
        super().__init__(
            f"{algorithm} exceeded its {timeout:.3f}s budget "
            f"after expanding {expanded} nodes"
        )
        self.algorithm = algorithm
        self.timeout = timeout
        self.expanded = expanded
