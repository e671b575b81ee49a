"""
Tests for BFS, DFS and traverse() over plain neighbor functions.
"""

import pytest

from graphsearch.algorithms import (
    TraversalMode,
    bfs,
    dfs,
    neighbors_from_mapping,
    traverse,
)
from graphsearch.errors import ConfigurationError
from graphsearch.graph import create_random_graph


class TestBFS:
    """Breadth-first traversal."""

    def test_visit_order(self, unweighted_neighbors):
        """Layer-by-layer order, each node once."""
        result = bfs(unweighted_neighbors, 1)
        assert result.visited == [1, 2, 3, 4, 5]
        assert result.visited_count == 5
        assert result.path is None
        assert result.found is False

    def test_path_to_goal(self, unweighted_neighbors):
        result = bfs(unweighted_neighbors, 1, lambda n: n == 4, return_path=True)
        assert result.found
        assert result.path == [1, 2, 4]

    def test_stops_at_goal(self, unweighted_neighbors):
        result = bfs(unweighted_neighbors, 1, lambda n: n == 3)
        assert result.visited == [1, 2, 3]
        assert result.path is None

    def test_start_is_goal(self, unweighted_neighbors):
        result = bfs(unweighted_neighbors, 1, lambda n: n == 1, return_path=True)
        assert result.path == [1]

    def test_isolated_start(self):
        neighbors = neighbors_from_mapping({})
        result = bfs(neighbors, "x")
        assert result.visited == ["x"]

    def test_unreachable_goal_gives_empty_path(self, unweighted_neighbors):
        """Not found is an empty path, never [start]."""
        result = bfs(unweighted_neighbors, 4, lambda n: n == 1, return_path=True)
        assert result.found is False
        assert result.path == []
        assert result.visited == [4]

    def test_cycles_are_visited_once(self):
        neighbors = neighbors_from_mapping({1: [2], 2: [3], 3: [1, 2]})
        assert bfs(neighbors, 1).visited == [1, 2, 3]

    def test_visit_callback(self, unweighted_neighbors):
        seen = []
        bfs(unweighted_neighbors, 1, visit=seen.append)
        assert seen == [1, 2, 3, 4, 5]

    def test_shortest_hop_count(self):
        """BFS finds the fewest-edges path even when a longer one is listed first."""
        neighbors = neighbors_from_mapping({"a": ["b", "d"], "b": ["c"], "c": ["d"], "d": []})
        result = bfs(neighbors, "a", lambda n: n == "d", return_path=True)
        assert result.path == ["a", "d"]


class TestDFS:
    """Depth-first traversal."""

    def test_visit_order(self, unweighted_neighbors):
        assert dfs(unweighted_neighbors, 1).visited == [1, 2, 4, 3, 5]

    def test_path_follows_branch(self, unweighted_neighbors):
        result = dfs(unweighted_neighbors, 1, lambda n: n == 5, return_path=True)
        assert result.path == [1, 3, 5]
        assert result.visited == [1, 2, 4, 3, 5]

    def test_backtracking_drops_dead_branch(self):
        """Nodes of a finished branch do not appear in the path."""
        neighbors = neighbors_from_mapping({1: [2, 4], 2: [3], 3: [], 4: [5]})
        result = dfs(neighbors, 1, lambda n: n == 5, return_path=True)
        assert result.path == [1, 4, 5]

    def test_start_is_goal(self, unweighted_neighbors):
        result = dfs(unweighted_neighbors, 2, lambda n: n == 2, return_path=True)
        assert result.path == [2]
        assert result.visited == [2]

    def test_unreachable_goal(self, unweighted_neighbors):
        result = dfs(unweighted_neighbors, 2, lambda n: n == 3, return_path=True)
        assert result.path == []
        assert result.found is False

    def test_deep_chain_without_recursion(self):
        """A chain far deeper than the recursion limit is traversed."""
        depth = 20_000
        neighbors = neighbors_from_mapping({i: [i + 1] for i in range(depth)})
        result = dfs(neighbors, 0, lambda n: n == depth, return_path=True)
        assert len(result.path) == depth + 1
        assert result.path[-1] == depth

    def test_visit_callback(self, unweighted_neighbors):
        seen = []
        dfs(unweighted_neighbors, 1, visit=seen.append)
        assert seen == [1, 2, 4, 3, 5]


class TestHopComparison:
    """BFS paths are never longer than DFS paths."""

    @pytest.mark.parametrize("seed", range(5))
    def test_bfs_hops_at_most_dfs_hops(self, seed):
        graph = create_random_graph(40, min_edges=1, max_edges=3, seed=seed)
        start = graph.find_vertex(1)
        for target in graph:
            goal = lambda v, target=target: v is target  # noqa: E731
            bfs_result = bfs(graph.neighbors, start, goal, return_path=True)
            dfs_result = dfs(graph.neighbors, start, goal, return_path=True)

            assert bfs_result.found == dfs_result.found
            if bfs_result.found:
                assert len(bfs_result.path) <= len(dfs_result.path)

    @pytest.mark.parametrize("seed", range(3))
    def test_same_reachable_set(self, seed):
        graph = create_random_graph(30, seed=seed)
        start = graph.find_vertex(1)
        assert set(traverse(graph.neighbors, start, "BFS")) == set(
            traverse(graph.neighbors, start, "DFS")
        )


class TestTraverse:
    """traverse() and mode parsing."""

    def test_default_mode_is_bfs(self, unweighted_neighbors):
        assert traverse(unweighted_neighbors, 1) == [1, 2, 3, 4, 5]

    def test_enum_mode(self, unweighted_neighbors):
        assert traverse(unweighted_neighbors, 1, TraversalMode.DFS) == [1, 2, 4, 3, 5]

    def test_mode_is_case_insensitive(self):
        assert TraversalMode.parse("dfs") is TraversalMode.DFS

    def test_invalid_mode(self, unweighted_neighbors):
        with pytest.raises(ConfigurationError, match="Invalid traversal type"):
            traverse(unweighted_neighbors, 1, "zigzag")

    def test_invalid_mode_type(self):
        with pytest.raises(ConfigurationError):
            TraversalMode.parse(3)
