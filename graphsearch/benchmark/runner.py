"""
Benchmark runner comparing the search algorithms on the same problems.

Each algorithm is run on identical start/target pairs, recording the path it
returns, its hop count and cost, how many nodes it expanded and how long it
took.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Sequence

import numpy as np

from graphsearch.algorithms import a_star, bfs, dfs, dijkstra_path, path_cost
from graphsearch.algorithms.providers import Heuristic
from graphsearch.config import BENCHMARK_ALGORITHMS, DEFAULT_BENCHMARK_PROBLEMS
from graphsearch.errors import ConfigurationError
from graphsearch.graph import Graph, Vertex
from graphsearch.heuristics import zero_heuristic

logger = logging.getLogger(__name__)


@dataclass
class SearchProblem:
    """
    A single start/target pair.

    Attributes:
        start: Vertex to search from
        target: Vertex to reach
    """

    start: Vertex
    target: Vertex


@dataclass
class SearchRecord:
    """
    Outcome of one algorithm on one problem.

    Attributes:
        algorithm: Algorithm name (bfs, dfs, dijkstra, astar)
        start_value: Payload of the start vertex
        target_value: Payload of the target vertex
        path: Path returned (empty if the target was not reached)
        cost: Total weight of the path, None if nothing was found
        expanded: Nodes visited/expanded by the algorithm
        time_ms: Wall-clock time in milliseconds
        timestamp: When the run happened
    """

    algorithm: str
    start_value: object
    target_value: object
    path: list[Vertex]
    cost: float | None
    expanded: int
    time_ms: float
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def hops(self) -> int | None:
        """Edges on the returned path, None if nothing was found."""
        return len(self.path) - 1 if self.path else None


@dataclass
class AlgorithmSummary:
    """Aggregated statistics for one algorithm across problems."""

    algorithm: str
    runs: int
    found: int
    mean_hops: float | None
    mean_cost: float | None
    mean_expanded: float
    mean_time_ms: float


class BenchmarkRunner:
    """
    Runs the configured algorithms over a graph.

    Usage:
        graph = create_random_graph(200, weight_range=(1, 10), seed=1)
        runner = BenchmarkRunner(graph)
        records = runner.run(runner.random_problems(10, seed=1))
        summaries = BenchmarkRunner.summarize(records)
    """

    def __init__(
        self,
        graph: Graph,
        algorithms: Sequence[str] = BENCHMARK_ALGORITHMS,
        heuristic: Heuristic = zero_heuristic,
    ) -> None:
        """
        Initialize the runner.

        Args:
            graph: Graph to search
            algorithms: Names of the algorithms to compare
            heuristic: Heuristic handed to A*

        Raises:
            ConfigurationError: If an algorithm name is unknown
        """
        unknown = [name for name in algorithms if name not in BENCHMARK_ALGORITHMS]
        if unknown:
            available = ", ".join(BENCHMARK_ALGORITHMS)
            raise ConfigurationError(f"Unknown algorithm(s) {unknown}. Available: {available}")

        self._graph = graph
        self._algorithms = list(algorithms)
        self._heuristic = heuristic

    @property
    def algorithms(self) -> list[str]:
        return list(self._algorithms)

    def random_problems(
        self,
        count: int = DEFAULT_BENCHMARK_PROBLEMS,
        seed: int | None = None,
    ) -> list[SearchProblem]:
        """Draw `count` start/target pairs uniformly from the graph's vertices."""
        vertices = self._graph.get_vertices()
        if not vertices:
            return []
        rng = np.random.default_rng(seed)
        picks = rng.integers(0, len(vertices), size=(count, 2))
        return [SearchProblem(vertices[int(a)], vertices[int(b)]) for a, b in picks]

    def run_problem(self, problem: SearchProblem) -> list[SearchRecord]:
        """Run every configured algorithm on one problem."""
        return [self._run_one(name, problem) for name in self._algorithms]

    def run(self, problems: Sequence[SearchProblem]) -> list[SearchRecord]:
        """Run every configured algorithm on every problem."""
        records: list[SearchRecord] = []
        for i, problem in enumerate(problems, 1):
            logger.info(
                f"[{i}/{len(problems)}] {problem.start.value!r} -> {problem.target.value!r}"
            )
            records.extend(self.run_problem(problem))
        return records

    def _run_one(self, algorithm: str, problem: SearchProblem) -> SearchRecord:
        graph = self._graph
        expanded = 0

        def count(_: Vertex) -> None:
            nonlocal expanded
            expanded += 1

        search = self._search_function(algorithm)
        start_time = time.time() * 1000
        path = search(problem.start, problem.target, count)
        elapsed = time.time() * 1000 - start_time

        cost = path_cost(graph.weight, path) if path else None
        logger.debug(f"{algorithm}: {len(path)} vertices, {expanded} expanded, {elapsed:.2f}ms")

        return SearchRecord(
            algorithm=algorithm,
            start_value=problem.start.value,
            target_value=problem.target.value,
            path=path,
            cost=cost,
            expanded=expanded,
            time_ms=elapsed,
        )

    def _search_function(
        self, algorithm: str
    ) -> Callable[[Vertex, Vertex, Callable[[Vertex], None]], list[Vertex]]:
        graph = self._graph

        def run_bfs(start: Vertex, target: Vertex, visit: Callable) -> list[Vertex]:
            result = bfs(graph.neighbors, start, lambda v: v is target, return_path=True, visit=visit)
            return result.path

        def run_dfs(start: Vertex, target: Vertex, visit: Callable) -> list[Vertex]:
            result = dfs(graph.neighbors, start, lambda v: v is target, return_path=True, visit=visit)
            return result.path

        def run_dijkstra(start: Vertex, target: Vertex, visit: Callable) -> list[Vertex]:
            return dijkstra_path(graph.neighbors, graph.weight, start, target, visit=visit)

        def run_astar(start: Vertex, target: Vertex, visit: Callable) -> list[Vertex]:
            return a_star(graph.neighbors, graph.weight, start, target, self._heuristic, visit=visit)

        searches = {
            "bfs": run_bfs,
            "dfs": run_dfs,
            "dijkstra": run_dijkstra,
            "astar": run_astar,
        }
        return searches[algorithm]

    @staticmethod
    def summarize(records: Sequence[SearchRecord]) -> dict[str, AlgorithmSummary]:
        """Aggregate records per algorithm, in first-seen order."""
        grouped: dict[str, list[SearchRecord]] = {}
        for record in records:
            grouped.setdefault(record.algorithm, []).append(record)

        summaries = {}
        for algorithm, group in grouped.items():
            found = [r for r in group if r.found]
            summaries[algorithm] = AlgorithmSummary(
                algorithm=algorithm,
                runs=len(group),
                found=len(found),
                mean_hops=float(np.mean([r.hops for r in found])) if found else None,
                mean_cost=float(np.mean([r.cost for r in found])) if found else None,
                mean_expanded=float(np.mean([r.expanded for r in group])),
                mean_time_ms=float(np.mean([r.time_ms for r in group])),
            )
        return summaries
