from typing import Dict, Optional
import logging
import os

from fastapi import APIRouter, Body, Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from backend.algo_funcs import find_shortest_path
from backend.config import Config, load_config
from backend.errors import InvalidInputError
from backend.graph_store import GraphStore
from backend.helpers import build_graph, load_graph_file, setup_logging
from backend.models import REFERENCE_EDGES, Edge, ErrorResponse, FindPathRequest, Graph, PathResult

logger = logging.getLogger(__name__)

router = APIRouter()

# -----------------------------
# Dependencies
# -----------------------------

def get_graph(request: Request) -> GraphStore:
    # built once in create_app, read-only afterwards
    return request.app.state.graph

# -----------------------------
# Endpoints
# -----------------------------

@router.get("/healthz")
async def healthz() -> Dict[str, bool]:
    return {"ok": True}

@router.get("/graph", response_model=Graph, tags=["graph"])
async def get_topology(graph: GraphStore = Depends(get_graph)) -> Graph:
    nodes, edges = graph.list_topology()
    return Graph(
        nodes=[str(n) for n in nodes],
        edges=[Edge(**{"from": str(a), "to": str(b), "weight": w, "id": f"{a}-{b}"}) for a, b, w in edges],
    )

@router.post(
    "/find-path",
    response_model=PathResult,
    tags=["paths"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def find_path(
    req: Optional[FindPathRequest] = Body(default=None),
    graph: GraphStore = Depends(get_graph),
) -> PathResult:
    # no body at all is treated like missing start/end
    req = req or FindPathRequest()
    try:
        result = find_shortest_path(graph, req.start, req.end)
    except InvalidInputError:
        raise HTTPException(status_code=400, detail="Start and end nodes are required.")
    except Exception:
        logger.exception("find-path failed for %r -> %r", req.start, req.end)
        raise HTTPException(status_code=500, detail="Internal server error.")

    if result is None:
        raise HTTPException(status_code=404, detail="No path found.")
    return result

# -----------------------------
# App Setup
# -----------------------------

def create_app(config: Optional[Config] = None, graph: Optional[GraphStore] = None) -> FastAPI:
    """
    Build the API. The graph comes from (in order): the graph argument,
    config.graph.file, the built-in reference map.
    """
    config = config or Config()
    setup_logging(config.logging.level, config.logging.log_dir)

    if graph is None:
        if config.graph.file:
            logger.info("Loading graph from %s", config.graph.file)
            graph = build_graph(load_graph_file(config.graph.file))
        else:
            graph = build_graph(REFERENCE_EDGES)

    app = FastAPI(
        title="Delivery Route Finder API",
        version="0.1.0",
        description=(
            "Shortest delivery route between two named locations.\n\n"
            "Endpoints provided: /find-path, /graph, /healthz.\n"
            "The map is loaded once at startup and never changes."
        ),
    )
    app.state.graph = graph
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)
    return app

CONFIG = load_config(os.environ.get("ROUTEFINDER_PROFILE", "default"))
app = create_app(CONFIG)

# -----------------------------
# Run (if executed directly)
# -----------------------------

# Use: uvicorn backend.main:app --reload // or python -m backend.main
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "backend.main:app",
        host=CONFIG.server.host,
        port=CONFIG.server.port,
        reload=CONFIG.server.reload,
    )
