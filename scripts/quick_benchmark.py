#!/usr/bin/env python3
"""
Quick benchmark to compare the search algorithms on a random graph.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

import logging
logging.basicConfig(level=logging.WARNING)  # Quiet mode

from graphsearch.benchmark import BenchmarkRunner  # noqa: E402
from graphsearch.config import (  # noqa: E402
    DEFAULT_BENCHMARK_PROBLEMS,
    DEFAULT_BENCHMARK_VERTICES,
    DEFAULT_MAX_WEIGHT,
    DEFAULT_MIN_WEIGHT,
    RANDOM_SEED,
)
from graphsearch.graph import create_random_graph  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare BFS, DFS, Dijkstra and A*")
    parser.add_argument("--vertices", type=int, default=DEFAULT_BENCHMARK_VERTICES)
    parser.add_argument("--problems", type=int, default=DEFAULT_BENCHMARK_PROBLEMS)
    parser.add_argument("--seed", type=int, default=RANDOM_SEED)
    return parser.parse_args()


def run_benchmark() -> None:
    args = parse_args()

    print("=" * 70)
    print("graphsearch - Algorithm Comparison")
    print("=" * 70)

    graph = create_random_graph(
        args.vertices,
        weight_range=(DEFAULT_MIN_WEIGHT, DEFAULT_MAX_WEIGHT),
        seed=args.seed,
    )
    runner = BenchmarkRunner(graph)
    problems = runner.random_problems(args.problems, seed=args.seed)

    print(f"\nGraph: {graph!r}")
    print(f"Testing {len(runner.algorithms)} algorithms on {len(problems)} problems...\n")

    records = []
    for i, problem in enumerate(problems, 1):
        print(f"[{i}/{len(problems)}] {problem.start.value} -> {problem.target.value}")
        print("-" * 50)

        batch = runner.run_problem(problem)
        records.extend(batch)
        for record in batch:
            if record.found:
                status = f"{record.hops:2} edges, cost {record.cost:6g}"
            else:
                status = "unreachable"
            print(
                f"  {record.algorithm:10} : {status:28} "
                f"{record.expanded:5} expanded ({record.time_ms:.2f}ms)"
            )

    # Summary
    print("\n" + "=" * 70)
    print("SUMMARY")
    print("=" * 70)

    for summary in BenchmarkRunner.summarize(records).values():
        hops = f"{summary.mean_hops:.1f}" if summary.mean_hops is not None else "-"
        cost = f"{summary.mean_cost:.1f}" if summary.mean_cost is not None else "-"
        print(
            f"  {summary.algorithm:10} : {summary.found}/{summary.runs} found, "
            f"avg {hops} edges, avg cost {cost}, "
            f"avg {summary.mean_expanded:.0f} expanded"
        )


if __name__ == "__main__":
    run_benchmark()
