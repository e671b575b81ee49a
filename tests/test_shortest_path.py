"""
Tests for Dijkstra, A* and path costs.
"""

import math
import time

import pytest

from graphsearch.algorithms import (
    a_star,
    dijkstra,
    dijkstra_path,
    neighbors_from_mapping,
    path_cost,
    providers_from_weighted_mapping,
)
from graphsearch.errors import (
    ConfigurationError,
    EdgeNotFoundError,
    NegativeWeightError,
    SearchTimeoutError,
)
from graphsearch.graph import create_random_graph
from graphsearch.heuristics import manhattan_heuristic, zero_heuristic


class TestDijkstra:
    """Distances and paths from Dijkstra's algorithm."""

    def test_distances(self, weighted_providers):
        neighbors, weight = weighted_providers
        assert dijkstra(neighbors, weight, 1) == {1: 0, 2: 4, 3: 2, 4: 3}

    def test_path(self, weighted_providers):
        neighbors, weight = weighted_providers
        path = dijkstra_path(neighbors, weight, 1, 4)
        assert path == [1, 3, 4]
        assert path_cost(weight, path) == 3

    def test_start_equals_target(self, weighted_providers):
        neighbors, weight = weighted_providers
        assert dijkstra_path(neighbors, weight, 2, 2) == [2]

    def test_unreachable_absent(self, weighted_providers):
        neighbors, weight = weighted_providers
        distances = dijkstra(neighbors, weight, 3)
        assert distances == {3: 0, 4: 1}
        assert dijkstra_path(neighbors, weight, 4, 1) == []

    def test_no_edges(self):
        neighbors, weight = providers_from_weighted_mapping({})
        assert dijkstra(neighbors, weight, "a") == {"a": 0}
        assert dijkstra_path(neighbors, weight, "a", "b") == []

    def test_target_stops_early(self, weighted_providers):
        """With a target only the nodes settled up to it are returned."""
        neighbors, weight = weighted_providers
        distances = dijkstra(neighbors, weight, 1, target=3)
        assert distances == {1: 0, 3: 2}

    def test_parallel_edges_use_cheapest(self):
        neighbors, weight = providers_from_weighted_mapping(
            {"a": [("b", 9), ("b", 2), ("c", 4)], "b": [("c", 1)], "c": []}
        )
        assert dijkstra(neighbors, weight, "a") == {"a": 0, "b": 2, "c": 3}

    def test_zero_weight_edges(self):
        neighbors, weight = providers_from_weighted_mapping(
            {1: [(2, 0)], 2: [(3, 0)], 3: []}
        )
        assert dijkstra(neighbors, weight, 1) == {1: 0, 2: 0, 3: 0}

    def test_negative_weight_raises(self):
        neighbors, weight = providers_from_weighted_mapping({1: [(2, -1)], 2: []})
        with pytest.raises(NegativeWeightError) as exc_info:
            dijkstra(neighbors, weight, 1)
        assert exc_info.value.weight == -1

    def test_visit_reports_settled_order(self, weighted_providers):
        neighbors, weight = weighted_providers
        seen = []
        dijkstra(neighbors, weight, 1, visit=seen.append)
        assert seen == [1, 3, 4, 2]

    def test_timeout(self):
        """A search that outruns its budget raises SearchTimeoutError."""
        neighbors, fast_weight = providers_from_weighted_mapping(
            {1: [(2, 1)], 2: [(3, 1)], 3: []}
        )

        def slow_weight(a, b):
            time.sleep(0.05)
            return fast_weight(a, b)

        with pytest.raises(SearchTimeoutError) as exc_info:
            dijkstra(neighbors, slow_weight, 1, timeout=0.01)
        assert exc_info.value.expanded >= 1
        assert isinstance(exc_info.value, TimeoutError)

    def test_unweighted_graph_counts_hops(self, unweighted_adjacency):
        neighbors = neighbors_from_mapping(unweighted_adjacency)
        distances = dijkstra(neighbors, lambda a, b: 1.0, 1)
        assert distances == {1: 0, 2: 1, 3: 1, 4: 2, 5: 2}


class TestRelaxation:
    """No edge can shorten a settled distance."""

    @pytest.mark.parametrize("seed", range(5))
    def test_edge_relaxation_invariant(self, seed):
        graph = create_random_graph(60, weight_range=(1, 10), seed=seed)
        start = graph.find_vertex(1)
        distances = graph.dijkstra(start)

        assert distances[start] == 0
        for u, du in distances.items():
            for v in graph.neighbors(u):
                assert v in distances
                assert distances[v] <= du + graph.weight(u, v)

    @pytest.mark.parametrize("seed", range(5))
    def test_paths_match_distances(self, seed):
        graph = create_random_graph(60, weight_range=(1, 10), seed=seed)
        start = graph.find_vertex(1)
        distances = graph.dijkstra(start)
        for target, distance in distances.items():
            path = graph.dijkstra_path(start, target)
            assert path[0] is start and path[-1] is target
            assert path_cost(graph.weight, path) == distance


class TestAStar:
    """A* search."""

    def test_zero_heuristic_path(self, weighted_providers):
        neighbors, weight = weighted_providers
        assert a_star(neighbors, weight, 1, 4, zero_heuristic) == [1, 3, 4]

    def test_start_equals_target(self, weighted_providers):
        neighbors, weight = weighted_providers
        assert a_star(neighbors, weight, 3, 3, zero_heuristic) == [3]

    def test_unreachable(self, weighted_providers):
        neighbors, weight = weighted_providers
        assert a_star(neighbors, weight, 4, 1, zero_heuristic) == []

    def test_missing_heuristic(self, weighted_providers):
        neighbors, weight = weighted_providers
        with pytest.raises(ConfigurationError):
            a_star(neighbors, weight, 1, 4, None)

    def test_negative_weight_raises(self):
        neighbors, weight = providers_from_weighted_mapping({1: [(2, -3)], 2: []})
        with pytest.raises(NegativeWeightError):
            a_star(neighbors, weight, 1, 2, zero_heuristic)

    @pytest.mark.parametrize("seed", range(5))
    def test_zero_heuristic_matches_dijkstra_cost(self, seed):
        graph = create_random_graph(60, weight_range=(1, 10), seed=seed)
        start = graph.find_vertex(1)
        distances = graph.dijkstra(start)
        for target in graph:
            path = graph.a_star(start, target, zero_heuristic)
            if target in distances:
                assert path_cost(graph.weight, path) == distances[target]
            else:
                assert path == []

    def test_grid_heuristic_is_optimal(self):
        """An admissible Manhattan heuristic on a grid finds a shortest path."""
        size = 6
        adjacency = {}
        for x in range(size):
            for y in range(size):
                adjacency[(x, y)] = [
                    ((x + dx, y + dy), 1)
                    for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1))
                    if 0 <= x + dx < size and 0 <= y + dy < size
                ]
        neighbors, weight = providers_from_weighted_mapping(adjacency)

        expanded_astar, expanded_dijkstra = [], []
        path = a_star(
            neighbors, weight, (0, 0), (5, 5), manhattan_heuristic(),
            visit=expanded_astar.append,
        )
        dijkstra_path(neighbors, weight, (0, 0), (5, 5), visit=expanded_dijkstra.append)

        assert path_cost(weight, path) == 10
        assert len(expanded_astar) <= len(expanded_dijkstra)

    def test_inconsistent_heuristic_still_optimal(self):
        """Admissible but inconsistent estimates reopen nodes and stay optimal."""
        neighbors, weight = providers_from_weighted_mapping({
            "s": [("a", 1), ("b", 4)],
            "a": [("b", 1)],
            "b": [("t", 5)],
            "t": [],
        })
        estimates = {"s": 0, "a": 6, "b": 0, "t": 0}
        path = a_star(neighbors, weight, "s", "t", lambda n, target: estimates[n])
        assert path == ["s", "a", "b", "t"]
        assert path_cost(weight, path) == 7


class TestPathCost:

    def test_single_vertex_costs_nothing(self, weighted_providers):
        _, weight = weighted_providers
        assert path_cost(weight, [1]) == 0.0

    def test_empty_path_rejected(self, weighted_providers):
        _, weight = weighted_providers
        with pytest.raises(ConfigurationError):
            path_cost(weight, [])

    def test_missing_edge(self, weighted_providers):
        _, weight = weighted_providers
        with pytest.raises(EdgeNotFoundError):
            path_cost(weight, [4, 1])

    def test_float_weights(self):
        _, weight = providers_from_weighted_mapping({1: [(2, 0.1)], 2: [(3, 0.2)]})
        assert math.isclose(path_cost(weight, [1, 2, 3]), 0.3)
