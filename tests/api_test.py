import asyncio

import pytest
from fastapi import HTTPException

from backend.config import Config
from backend.graph_store import GraphStore
from backend.helpers import build_graph
from backend.main import app, create_app, find_path, get_topology, healthz
from backend.models import REFERENCE_EDGES, FindPathRequest, PathResult

# -----------------------------
# Test Fixtures
# -----------------------------

@pytest.fixture
def graph():
    return build_graph(REFERENCE_EDGES)

class BrokenGraph(GraphStore):
    """Graph whose neighbor lookup blows up mid-query."""

    def neighbors(self, node):
        raise RuntimeError("adjacency corrupted")

def call_find_path(graph, **body):
    return asyncio.run(find_path(FindPathRequest(**body), graph=graph))

# -----------------------------
# /find-path
# -----------------------------

def test_find_path_ok(graph):
    result = call_find_path(graph, start="Restaurant", end="CustomerHouse")
    assert isinstance(result, PathResult)
    assert result.path == ["Restaurant", "Crossroads", "GasStation", "CustomerHouse"]
    assert result.distance == 11

def test_find_path_trivial(graph):
    result = call_find_path(graph, start="GasStation", end="GasStation")
    assert result.path == ["GasStation"]
    assert result.distance == 0

@pytest.mark.parametrize("body", [{}, {"start": "Restaurant"}, {"end": "Restaurant"}, {"start": "", "end": "Restaurant"}])
def test_find_path_missing_fields_is_400(graph, body):
    with pytest.raises(HTTPException) as exc:
        call_find_path(graph, **body)
    assert exc.value.status_code == 400
    assert exc.value.detail == "Start and end nodes are required."

def test_find_path_without_body_is_400(graph):
    with pytest.raises(HTTPException) as exc:
        asyncio.run(find_path(None, graph=graph))
    assert exc.value.status_code == 400

def test_find_path_numeric_ids(graph):
    # a number is a valid identifier, it just is not on this map
    with pytest.raises(HTTPException) as exc:
        call_find_path(graph, start=5, end="Restaurant")
    assert exc.value.status_code == 404

    numbered = GraphStore()
    numbered.add_edge(0, 1, 2)
    numbered.add_edge(1, 2, 2)
    result = call_find_path(numbered, start=0, end=2)
    assert result.path == [0, 1, 2]
    assert result.distance == 4

def test_find_path_unreachable_is_404(graph):
    with pytest.raises(HTTPException) as exc:
        call_find_path(graph, start="Restaurant", end="Nowhere")
    assert exc.value.status_code == 404
    assert exc.value.detail == "No path found."

def test_find_path_internal_fault_is_500():
    broken = BrokenGraph()
    broken.add_edge("A", "B", 1)
    with pytest.raises(HTTPException) as exc:
        call_find_path(broken, start="A", end="B")
    assert exc.value.status_code == 500
    assert exc.value.detail == "Internal server error."

# -----------------------------
# /graph and /healthz
# -----------------------------

def test_get_topology(graph):
    topo = asyncio.run(get_topology(graph=graph))
    assert topo.nodes == ["Restaurant", "Crossroads", "GasStation", "CustomerHouse"]
    assert len(topo.edges) == 5
    first = topo.edges[0]
    assert (first.from_, first.to, first.weight) == ("Restaurant", "Crossroads", 4)
    assert [e.id for e in topo.edges] == [
        "Restaurant-Crossroads",
        "Restaurant-GasStation",
        "Crossroads-GasStation",
        "Crossroads-CustomerHouse",
        "GasStation-CustomerHouse",
    ]
    # serialized with the "from" key
    assert topo.model_dump(by_alias=True)["edges"][0]["from"] == "Restaurant"

def test_healthz():
    assert asyncio.run(healthz()) == {"ok": True}

# -----------------------------
# App construction
# -----------------------------

def test_module_app_uses_reference_map():
    assert app.state.graph.nodes() == {"Restaurant", "Crossroads", "GasStation", "CustomerHouse"}

def test_create_app_with_explicit_graph():
    g = GraphStore()
    g.add_edge("X", "Y", 2)
    built = create_app(Config(), graph=g)
    assert built.state.graph is g
    paths = {route.path for route in built.routes}
    assert {"/find-path", "/graph", "/healthz"} <= paths

def test_create_app_loads_graph_file(tmp_path):
    graph_file = tmp_path / "map.yaml"
    graph_file.write_text(
        "edges:\n"
        "  - {from: Depot, to: Shop, weight: 3}\n"
        "  - {from: Shop, to: Home, weight: 1}\n"
    )
    cfg = Config()
    cfg.graph.file = str(graph_file)
    built = create_app(cfg)
    result = call_find_path(built.state.graph, start="Depot", end="Home")
    assert result.path == ["Depot", "Shop", "Home"]
    assert result.distance == 4
