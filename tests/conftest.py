"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from __future__ import annotations

import pytest

from graphsearch.algorithms import neighbors_from_mapping, providers_from_weighted_mapping
from graphsearch.graph import Graph


def compare_numbers(a: int, b: int) -> int:
    return (a > b) - (a < b)


@pytest.fixture
def weighted_adjacency() -> dict[int, list[tuple[int, float]]]:
    """Small weighted DAG whose cheapest 1 -> 4 route is 1 -> 3 -> 4."""
    return {
        1: [(2, 4), (3, 2)],
        2: [(3, 2), (4, 7)],
        3: [(4, 1)],
        4: [],
    }


@pytest.fixture
def weighted_providers(weighted_adjacency):
    """(neighbors, weight) closures over weighted_adjacency."""
    return providers_from_weighted_mapping(weighted_adjacency)


@pytest.fixture
def unweighted_adjacency() -> dict[int, list[int]]:
    """Diamond-with-tail graph used by the traversal scenarios."""
    return {1: [2, 3], 2: [4], 3: [4, 5], 4: [], 5: []}


@pytest.fixture
def unweighted_neighbors(unweighted_adjacency):
    return neighbors_from_mapping(unweighted_adjacency)


@pytest.fixture
def directed_graph() -> Graph[int]:
    """Empty unweighted directed graph with a numeric comparator."""
    return Graph(compare=compare_numbers)


@pytest.fixture
def undirected_graph() -> Graph[int]:
    """Empty unweighted undirected graph with a numeric comparator."""
    return Graph(undirected=True, compare=compare_numbers)


@pytest.fixture
def weighted_graph() -> Graph[int]:
    """Empty weighted directed graph with a numeric comparator."""
    return Graph(weighted=True, compare=compare_numbers)


@pytest.fixture
def weighted_undirected_graph() -> Graph[int]:
    """Empty weighted undirected graph with a numeric comparator."""
    return Graph(weighted=True, undirected=True, compare=compare_numbers)


@pytest.fixture
def scenario_graph(weighted_graph, weighted_adjacency):
    """weighted_adjacency loaded into a Graph; returns (graph, {payload: vertex})."""
    vertices = {value: weighted_graph.add_vertex(value) for value in weighted_adjacency}
    for source, edges in weighted_adjacency.items():
        for target, weight in edges:
            weighted_graph.add_edge(vertices[source], vertices[target], weight)
    return weighted_graph, vertices
