from typing import Dict, Hashable, Iterator, List, Set, Tuple
from contextlib import contextmanager
import logging
import math
import threading

from backend.errors import InvalidWeightError

logger = logging.getLogger(__name__)

# -----------------------------
# Read/Write Lock
# -----------------------------

class _ReadWriteLock:
    """Many readers or one writer. Readers may re-enter."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            while self._readers > 0:
                self._cond.wait()
            yield

# -----------------------------
# Graph Store
# -----------------------------

class GraphStore:
    """
    Undirected weighted adjacency list.

    Each edge (a, b, w) is stored twice: b in a's list and a in b's list.
    Neighbor lists keep insertion order, parallel edges are allowed.
    """

    def __init__(self) -> None:
        self._adj: Dict[Hashable, List[Tuple[Hashable, float]]] = {}
        self._lock = _ReadWriteLock()

    def add_edge(self, a: Hashable, b: Hashable, weight: float) -> None:
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise InvalidWeightError(f"weight must be a number, got {weight!r}")
        if not math.isfinite(weight) or weight < 0:
            raise InvalidWeightError(f"weight must be finite and non-negative, got {weight!r} for {a!r}-{b!r}")

        with self._lock.write():
            self._adj.setdefault(a, []).append((b, weight))
            self._adj.setdefault(b, []).append((a, weight))  # undirected

    def neighbors(self, node: Hashable) -> Tuple[Tuple[Hashable, float], ...]:
        # unknown node -> empty, not an error
        with self._lock.read():
            return tuple(self._adj.get(node, ()))

    def nodes(self) -> Set[Hashable]:
        with self._lock.read():
            return set(self._adj)

    @contextmanager
    def reading(self) -> Iterator["GraphStore"]:
        """Hold shared read access, e.g. for the length of one path query."""
        with self._lock.read():
            yield self

    def list_topology(self) -> Tuple[List[Hashable], List[Tuple[Hashable, Hashable, float]]]:
        """
        Snapshot for rendering: nodes in first-seen order and one entry per
        undirected pair (first-seen orientation wins; parallel edges collapse too).
        """
        with self._lock.read():
            nodes = list(self._adj)
            edges: List[Tuple[Hashable, Hashable, float]] = []
            seen: Set[Tuple[Hashable, Hashable]] = set()
            for source, incident in self._adj.items():
                for target, weight in incident:
                    if (source, target) in seen or (target, source) in seen:
                        continue
                    edges.append((source, target, weight))
                    seen.add((source, target))
        return nodes, edges

    def __contains__(self, node: Hashable) -> bool:
        with self._lock.read():
            return node in self._adj

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._adj)
