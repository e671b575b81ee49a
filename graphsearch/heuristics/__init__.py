"""
Heuristics module.

Provides heuristic functions for guiding A* search:
- zero_heuristic: No guidance (A* behaves like Dijkstra)
- manhattan_heuristic: L1 distance between node positions
- euclidean_heuristic: L2 distance between node positions
- weighted_heuristic: Scales another heuristic (weighted A*)

Distance heuristics are admissible only when every edge costs at least the
distance between its endpoints' positions (times `scale`).
"""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

from graphsearch.algorithms.providers import Heuristic
from graphsearch.errors import ConfigurationError

# Maps a node to its coordinates
Position = Callable[[object], Sequence[float]]


def zero_heuristic(node: object, target: object) -> float:
    """Always 0: admissible for any graph, gives Dijkstra's expansion order."""
    return 0.0


def _identity(node: object) -> Sequence[float]:
    return node  # type: ignore[return-value]


def _difference(position: Position, node: object, target: object) -> np.ndarray:
    return np.asarray(position(node), dtype=float) - np.asarray(position(target), dtype=float)


def manhattan_heuristic(position: Position = _identity, scale: float = 1.0) -> Heuristic:
    """
    Build an L1 (grid) distance heuristic.

    Args:
        position: Maps a node to its coordinates (default: the node itself)
        scale: Minimum cost per unit of distance
    """

    def heuristic(node: object, target: object) -> float:
        return scale * float(np.abs(_difference(position, node, target)).sum())

    return heuristic


def euclidean_heuristic(position: Position = _identity, scale: float = 1.0) -> Heuristic:
    """
    Build a straight-line (L2) distance heuristic.

    Args:
        position: Maps a node to its coordinates (default: the node itself)
        scale: Minimum cost per unit of distance
    """

    def heuristic(node: object, target: object) -> float:
        return scale * float(np.linalg.norm(_difference(position, node, target)))

    return heuristic


def weighted_heuristic(heuristic: Heuristic, epsilon: float) -> Heuristic:
    """
    Scale a heuristic by `epsilon` (weighted A*).

    With epsilon > 1 the search expands fewer nodes but the path may cost up
    to epsilon times the optimum.
    """
    if epsilon < 0:
        raise ConfigurationError(f"epsilon must be >= 0 (got {epsilon})")

    def scaled(node: object, target: object) -> float:
        return epsilon * heuristic(node, target)

    return scaled


__all__ = [
    "Position",
    "euclidean_heuristic",
    "manhattan_heuristic",
    "weighted_heuristic",
    "zero_heuristic",
]
