from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# -----------------------------
# Domain Models (Pydantic)
# -----------------------------

class Edge(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    weight: float = 1.0
    id: Optional[str] = None  # "source-target", set on exported topology

class Graph(BaseModel):
    nodes: List[str]
    edges: List[Edge]

class PathResult(BaseModel):
    path: List[Any]  # start..end inclusive, any hashable node id
    distance: float

# -----------------------------
# API Schemas
# -----------------------------

class FindPathRequest(BaseModel):
    # optional so a missing field maps to 400, not a validation 422
    start: Optional[Union[str, int]] = None
    end: Optional[Union[str, int]] = None

class ErrorResponse(BaseModel):
    detail: str

# -----------------------------
# Reference Map (delivery example)
# -----------------------------

REFERENCE_EDGES: List[Edge] = [
    Edge(**{"from": "Restaurant", "to": "Crossroads", "weight": 4}),
    Edge(**{"from": "Restaurant", "to": "GasStation", "weight": 8}),
    Edge(**{"from": "Crossroads", "to": "GasStation", "weight": 2}),
    Edge(**{"from": "Crossroads", "to": "CustomerHouse", "weight": 10}),
    Edge(**{"from": "GasStation", "to": "CustomerHouse", "weight": 5}),
]
