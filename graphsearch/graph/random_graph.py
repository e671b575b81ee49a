"""
Random graph generation for tests and benchmarks.

Usage:
    from graphsearch.graph import create_random_graph

    graph = create_random_graph(50, min_edges=1, max_edges=4, weight_range=(1, 10), seed=7)
"""

from __future__ import annotations

import logging

import numpy as np

from graphsearch.config import (
    DEFAULT_MAX_EDGES,
    DEFAULT_MIN_EDGES,
    RANDOM_SEED,
)
from graphsearch.errors import ConfigurationError
from graphsearch.graph.container import Graph

logger = logging.getLogger(__name__)


def _compare_numbers(a: int, b: int) -> int:
    return (a > b) - (a < b)


def create_random_graph(
    vertex_count: int,
    min_edges: int = DEFAULT_MIN_EDGES,
    max_edges: int = DEFAULT_MAX_EDGES,
    weight_range: tuple[int, int] | None = None,
    undirected: bool = False,
    seed: int | np.random.Generator | None = RANDOM_SEED,
) -> Graph[int]:
    """
    Build a graph with payloads 1..vertex_count and random edges.

    For each vertex an edge count is drawn uniformly from
    [min_edges, max_edges], then each edge gets a uniformly drawn target.
    Targets are not distinct across draws: two draws of the same target give
    parallel edges (weighted) or a duplicate that is ignored (unweighted).
    A draw that lands on the vertex itself adds no edge.

    Args:
        vertex_count: Number of vertices to create
        min_edges: Minimum edges drawn per vertex
        max_edges: Maximum edges drawn per vertex
        weight_range: Inclusive (low, high) integer weight range. When given
            the graph is weighted, otherwise unweighted.
        undirected: Create an undirected graph
        seed: Seed or numpy Generator, for reproducible graphs

    Returns:
        The generated graph, with a numeric comparator installed

    Raises:
        ConfigurationError: If the counts or the weight range are invalid
    """
    if vertex_count < 0:
        raise ConfigurationError(f"vertex_count must be >= 0 (got {vertex_count})")
    if min_edges < 0 or max_edges < min_edges:
        raise ConfigurationError(
            f"Need 0 <= min_edges <= max_edges (got {min_edges}, {max_edges})"
        )
    if weight_range is not None and weight_range[0] > weight_range[1]:
        raise ConfigurationError(f"Empty weight range {weight_range}")

    rng = np.random.default_rng(seed)
    graph: Graph[int] = Graph(
        weighted=weight_range is not None,
        undirected=undirected,
        compare=_compare_numbers,
    )

    for value in range(1, vertex_count + 1):
        graph.add_vertex(value)

    vertices = graph.get_vertices()
    if not vertices:
        return graph

    for vertex in vertices:
        edge_count = int(rng.integers(min_edges, max_edges, endpoint=True))
        targets = rng.integers(0, len(vertices), size=edge_count)

        for target_idx in targets:
            target = vertices[int(target_idx)]
            if target is vertex:
                continue
            weight = None
            if weight_range is not None:
                low, high = weight_range
                weight = int(rng.integers(low, high, endpoint=True))
            graph.add_edge(vertex, target, weight)

    logger.info(
        f"Created random graph: {vertex_count} vertices, "
        f"{graph.edge_count()} adjacency entries"
    )
    return graph
