#!/usr/bin/env python3
"""
graphsearch CLI - Run one search algorithm on a random graph.

Usage:
    python scripts/search.py --vertices 30 --start 1 --target 17
    python scripts/search.py --vertices 30 --start 1 --target 17 --algorithm dijkstra --weighted
    python scripts/search.py --vertices 12 --algorithm topo --seed 3
    python scripts/search.py --vertices 50 --start 4 --algorithm bfs --undirected

Algorithms:
    bfs       - Breadth-first search (fewest edges)
    dfs       - Depth-first search (any path)
    dijkstra  - Cheapest path, or all distances when --target is omitted
    astar     - A* with the zero heuristic
    topo      - Topological order of the whole graph
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

from graphsearch.config import (  # noqa: E402 - must be after sys.path modification
    DEFAULT_MAX_EDGES,
    DEFAULT_MAX_WEIGHT,
    DEFAULT_MIN_EDGES,
    DEFAULT_MIN_WEIGHT,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
    RANDOM_SEED,
)
from graphsearch.algorithms import path_cost  # noqa: E402
from graphsearch.errors import GraphError  # noqa: E402
from graphsearch.graph import Graph, create_random_graph  # noqa: E402
from graphsearch.heuristics import zero_heuristic  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run a graph search on a random graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--vertices",
        type=int,
        default=20,
        help="Number of vertices (default: 20)",
    )
    parser.add_argument(
        "--min-edges",
        type=int,
        default=DEFAULT_MIN_EDGES,
        help=f"Minimum edges drawn per vertex (default: {DEFAULT_MIN_EDGES})",
    )
    parser.add_argument(
        "--max-edges",
        type=int,
        default=DEFAULT_MAX_EDGES,
        help=f"Maximum edges drawn per vertex (default: {DEFAULT_MAX_EDGES})",
    )
    parser.add_argument(
        "--weighted",
        action="store_true",
        help=f"Use random integer weights in [{DEFAULT_MIN_WEIGHT}, {DEFAULT_MAX_WEIGHT}]",
    )
    parser.add_argument(
        "--undirected",
        action="store_true",
        help="Create an undirected graph",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=RANDOM_SEED,
        help="Random seed (default: $GRAPHSEARCH_SEED or fresh entropy)",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default="bfs",
        choices=["bfs", "dfs", "dijkstra", "astar", "topo"],
        help="Algorithm to run (default: bfs)",
    )
    parser.add_argument(
        "--start",
        type=int,
        default=1,
        help="Payload of the start vertex (default: 1)",
    )
    parser.add_argument(
        "--target",
        type=int,
        default=None,
        help="Payload of the target vertex (omit to traverse everything)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def format_path(path: list) -> str:
    return " -> ".join(str(vertex.value) for vertex in path) if path else "(none)"


def run(graph: Graph[int], args: argparse.Namespace) -> int:
    """Run the chosen algorithm and print its result. Returns the exit code."""
    if args.algorithm == "topo":
        order = graph.topological_sort()
        print(f"Topological order: {' '.join(str(v.value) for v in order)}")
        return 0

    start = graph.find_vertex(args.start)
    if start is None:
        print(f"Error: no vertex with payload {args.start}", file=sys.stderr)
        return 1

    target = None
    if args.target is not None:
        target = graph.find_vertex(args.target)
        if target is None:
            print(f"Error: no vertex with payload {args.target}", file=sys.stderr)
            return 1

    if args.algorithm in ("bfs", "dfs"):
        search = graph.breadth_first_search if args.algorithm == "bfs" else graph.depth_first_search
        result = search(start, args.target)
        label = "Visit order" if target is None else "Path"
        print(f"{label}: {format_path(result)}")
        return 0 if result else 1

    if args.algorithm == "dijkstra" and target is None:
        distances = graph.dijkstra(start)
        print(f"Reachable from {start.value}: {len(distances)} vertices")
        for vertex, distance in sorted(distances.items(), key=lambda item: item[1]):
            print(f"  {vertex.value:>4}: {distance:g}")
        return 0

    if target is None:
        print("Error: --target is required for astar", file=sys.stderr)
        return 1

    if args.algorithm == "dijkstra":
        path = graph.dijkstra_path(start, target)
    else:
        path = graph.a_star(start, target, zero_heuristic)

    print(f"Path: {format_path(path)}")
    if path:
        cost = path_cost(graph.weight, path)
        print(f"Cost: {cost:g} ({len(path) - 1} edges)")
    return 0 if path else 1


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    try:
        graph = create_random_graph(
            args.vertices,
            min_edges=args.min_edges,
            max_edges=args.max_edges,
            weight_range=(DEFAULT_MIN_WEIGHT, DEFAULT_MAX_WEIGHT) if args.weighted else None,
            undirected=args.undirected,
            seed=args.seed,
        )
    except GraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("=" * 60)
    print(f"  Graph:     {graph!r}")
    print(f"  Algorithm: {args.algorithm}")
    print("=" * 60)

    try:
        return run(graph, args)
    except GraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
