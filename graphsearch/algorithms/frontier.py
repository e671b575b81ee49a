"""
Min-priority frontier for best-first search.

A binary heap whose entries are ordered by priority, then by insertion order,
so equal-priority items come out first-in first-out and the nodes themselves
never need to be comparable.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Generic, TypeVar

T = TypeVar("T")


class PriorityFrontier(Generic[T]):
    """
    Heap of (priority, item) pairs.

    The same item may be pushed several times with different priorities.
    Callers drop the stale copies when they pop them.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, T]] = []
        self._counter = itertools.count()

    def push(self, item: T, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def pop(self) -> tuple[T, float]:
        """Remove and return the lowest-priority item and its priority."""
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        priority, _, item = heapq.heappop(self._heap)
        return item, priority

    def peek(self) -> tuple[T, float]:
        if not self._heap:
            raise IndexError("peek at an empty frontier")
        priority, _, item = self._heap[0]
        return item, priority

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
