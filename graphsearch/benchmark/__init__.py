"""
Benchmark module.

Provides infrastructure for comparing the search algorithms:
- SearchProblem: A start/target pair
- BenchmarkRunner: Runs algorithms on problem sets
- SearchRecord: Outcome of one algorithm on one problem
- AlgorithmSummary: Aggregated statistics per algorithm
"""

from graphsearch.benchmark.runner import (
    AlgorithmSummary,
    BenchmarkRunner,
    SearchProblem,
    SearchRecord,
)

__all__ = [
    "AlgorithmSummary",
    "BenchmarkRunner",
    "SearchProblem",
    "SearchRecord",
]
