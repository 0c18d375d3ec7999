from typing import Dict, Hashable, List, Optional
import logging

from backend.errors import InvalidInputError
from backend.frontier import Frontier
from backend.graph_store import GraphStore
from backend.models import PathResult

logger = logging.getLogger(__name__)

# -----------------------------
# Pathfinding
# -----------------------------

def _require(node: Optional[Hashable], name: str) -> None:
    if node is None or node == "":
        raise InvalidInputError(f"{name} node is required")

def reconstruct_path(parents: Dict[Hashable, Optional[Hashable]], end: Hashable) -> List[Hashable]:
    # walk parents back from end, then flip to start..end order
    path = []
    node: Optional[Hashable] = end
    while node is not None:
        path.append(node)
        node = parents.get(node)
    path.reverse()
    return path

def find_shortest_path(graph: GraphStore, start: Hashable, end: Hashable) -> Optional[PathResult]:
    """
    Dijkstra with a lazy-deletion frontier.

    Returns a PathResult, or None when end cannot be reached from start
    (different components, or either node unknown to the graph).
    Raises InvalidInputError when start/end is missing or empty.
    """
    _require(start, "start")
    _require(end, "end")

    with graph.reading():
        if start not in graph:
            logger.debug("start %r not in graph", start)
            return None

        dist: Dict[Hashable, float] = {node: float("inf") for node in graph.nodes()}
        dist[start] = 0
        parents: Dict[Hashable, Optional[Hashable]] = {node: None for node in dist}
        visited = set()

        frontier = Frontier()
        frontier.enqueue(start, 0)

        while not frontier.is_empty():
            current, current_dist = frontier.dequeue_min()

            # stale duplicate of an already finalized node
            if current in visited:
                continue
            visited.add(current)

            if current == end:
                path = reconstruct_path(parents, end)
                logger.debug("path %r -> %r: %s (distance %s)", start, end, path, dist[end])
                return PathResult(path=path, distance=dist[end])

            for nbr, w in graph.neighbors(current):
                if nbr in visited:
                    continue
                candidate = current_dist + w
                if candidate < dist[nbr]:  # dv > du + w
                    dist[nbr] = candidate
                    parents[nbr] = current
                    frontier.enqueue(nbr, candidate)

    logger.debug("no path %r -> %r after visiting %d nodes", start, end, len(visited))
    return None
