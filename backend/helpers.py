from typing import Hashable, Iterable, List, Optional, Sequence
from pathlib import Path
import logging
import time

import yaml

from backend.graph_store import GraphStore
from backend.models import Edge

logger = logging.getLogger(__name__)

# -----------------------------
# Logging
# -----------------------------

def setup_logging(level: str = "INFO", log_dir: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger once: console handler, plus a timestamped
    file under log_dir when given. Later calls only adjust the level.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Avoid adding handlers multiple times
    if root_logger.hasHandlers():
        return logging.getLogger("backend")

    formatter = logging.Formatter(
        '[%(levelname)-7s] %(asctime)s - %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_dir:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        file_handler = logging.FileHandler(directory / f"routefinder_{timestamp}.log")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return logging.getLogger("backend")

# -----------------------------
# Graph construction
# -----------------------------

def build_graph(edges: Iterable[Edge]) -> GraphStore:
    graph = GraphStore()
    count = 0
    for e in edges:
        graph.add_edge(e.from_, e.to, e.weight)
        count += 1
    logger.info("Graph built: %d nodes, %d edges", len(graph), count)
    return graph

def load_graph_file(path: str) -> List[Edge]:
    """
    Read edges from a YAML file of the form:

        edges:
          - {from: A, to: B, weight: 4}
    """
    file_path = Path(path)
    if not file_path.exists():
        raise ValueError(f"graph file not found: {path}")
    with open(file_path, 'r') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict) or not isinstance(data.get("edges"), list):
        raise ValueError(f"graph file {path} must contain an 'edges' list")
    return [Edge(**item) for item in data["edges"]]

def path_weight(graph: GraphStore, path: Sequence[Hashable]) -> float:
    """
    Sum of edge weights along path, taking the lightest edge for each hop.
    Raises ValueError if two consecutive nodes are not adjacent.
    """
    total = 0.0
    for a, b in zip(path, path[1:]):
        weights = [w for nbr, w in graph.neighbors(a) if nbr == b]
        if not weights:
            raise ValueError(f"no edge between {a!r} and {b!r}")
        total += min(weights)
    return total
