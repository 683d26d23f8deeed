"""
Ranked Backlog - sampled coordinates waiting to be expanded, best value first.

Coordinates are grouped into buckets by the value they produced. Buckets are
served highest value first; inside a bucket the most recently added
coordinate comes out first (stack order).

Bucket keys live in a min-heap of negated values so the best bucket is found
in O(log n); the buckets themselves are plain lists used as stacks.
"""

import heapq
from typing import Dict, List, Optional, Tuple

from core.plot_bounds import Coord


class EmptyBacklogError(LookupError):
    """pop_best() was called with nothing left to expand."""


class RankedBacklog:
    """Value -> LIFO stack of coordinates, ordered by value descending."""

    def __init__(self):
        self._buckets: Dict[int, List[Coord]] = {}
        self._keys: List[int] = []  # heap of -value, one entry per live bucket
        self._size = 0

    def insert(self, value: int, coord: Coord):
        bucket = self._buckets.get(value)
        if bucket is None:
            bucket = []
            self._buckets[value] = bucket
            heapq.heappush(self._keys, -value)
        bucket.append(coord)
        self._size += 1

    def pop_best(self) -> Tuple[int, Coord]:
        """Remove and return (value, coord) from the highest-value bucket."""
        if not self._keys:
            raise EmptyBacklogError("ranked backlog is empty")
        value = -self._keys[0]
        bucket = self._buckets[value]
        coord = bucket.pop()
        self._size -= 1
        if not bucket:
            del self._buckets[value]
            heapq.heappop(self._keys)
        return value, coord

    def peek_best_value(self) -> Optional[int]:
        if not self._keys:
            return None
        return -self._keys[0]

    def bucket(self, value: int) -> List[Coord]:
        """Copy of a bucket, top of stack last."""
        return list(self._buckets.get(value, ()))

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, coord) -> bool:
        return any(coord in bucket for bucket in self._buckets.values())
