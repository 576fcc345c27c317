"""Graph API endpoints - random graph generation."""

from fastapi import APIRouter

from parabfs.api.routers.traversals import check_vertex_limit
from parabfs.graph.generator import random_graph
from parabfs.schemas.traversal import RandomGraphRequest, RandomGraphResponse

router = APIRouter(prefix="/graphs", tags=["graphs"])


@router.post("/random", response_model=RandomGraphResponse)
def generate_random_graph(request: RandomGraphRequest) -> RandomGraphResponse:
    """Generate a random symmetric graph; self-loops may occur."""
    check_vertex_limit(request.vertex_count)
    graph = random_graph(request.vertex_count, seed=request.seed)

    return RandomGraphResponse(
        vertex_count=graph.vertex_count(),
        matrix=[list(row) for row in graph.adjacency],
    )
