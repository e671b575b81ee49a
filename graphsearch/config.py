"""
Configuration constants for the graphsearch library.

All tunable defaults are defined here. Values that make sense to change per
environment can be overridden through environment variables (scripts also
load a `.env` file from the project root).
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of graphsearch/
PROJECT_ROOT = Path(__file__).parent.parent

# Optional .env file read by the scripts
ENV_FILE_PATH = PROJECT_ROOT / ".env"


def _optional_int(name: str) -> int | None:
    """Read an integer environment variable, or None if unset/empty."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


def _optional_float(name: str) -> float | None:
    """Read a float environment variable, or None if unset/empty."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    return float(raw)


# =============================================================================
# Edge Configuration
# =============================================================================

# Weight reported for an edge of an unweighted graph, so that shortest-path
# search over an unweighted graph counts hops
UNIT_EDGE_WEIGHT = 1.0

# =============================================================================
# Random Graph Configuration
# =============================================================================

# Outgoing edges drawn per vertex: uniform in [MIN, MAX]
DEFAULT_MIN_EDGES = 1
DEFAULT_MAX_EDGES = 3

# Integer weight range used by weighted random graphs
DEFAULT_MIN_WEIGHT = 1
DEFAULT_MAX_WEIGHT = 10

# Seed for reproducible random graphs (None = fresh entropy)
RANDOM_SEED = _optional_int("GRAPHSEARCH_SEED")

# =============================================================================
# Search Configuration
# =============================================================================

# Traversal modes accepted by traverse()
TRAVERSAL_MODES = ("BFS", "DFS")

# Wall-clock budget (seconds) for a single Dijkstra / A* run.
# None disables the check.
SEARCH_TIMEOUT = _optional_float("GRAPHSEARCH_SEARCH_TIMEOUT")

# =============================================================================
# Benchmark Configuration
# =============================================================================

# Size of the random graph used by scripts/quick_benchmark.py
DEFAULT_BENCHMARK_VERTICES = 200

# Number of random start/target problems per benchmark run
DEFAULT_BENCHMARK_PROBLEMS = 10

# Algorithms compared by the benchmark runner
BENCHMARK_ALGORITHMS = ("bfs", "dfs", "dijkstra", "astar")

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Format used by the scripts' logging.basicConfig
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
