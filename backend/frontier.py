from typing import Hashable, List, Optional, Tuple
import heapq
import itertools

# -----------------------------
# Frontier (min-heap)
# -----------------------------

class Frontier:
    """
    Min-priority queue of (node, distance) pairs.

    - no deduplication by node: stale entries stay in the heap and the caller skips them
    - equal distances come out in insertion order (counter as tie-breaker)
    - enqueue / dequeue_min are O(log n) via heapq
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, Hashable]] = []
        self._counter = itertools.count()

    def enqueue(self, node: Hashable, distance: float) -> None:
        heapq.heappush(self._heap, (distance, next(self._counter), node))

    def dequeue_min(self) -> Optional[Tuple[Hashable, float]]:
        if not self._heap:
            return None
        distance, _, node = heapq.heappop(self._heap)
        return node, distance

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
