"""Traversal API endpoints - all-vertices BFS fan-out."""

from fastapi import APIRouter

from parabfs.common.config import get_settings
from parabfs.common.exceptions import ValidationError
from parabfs.graph.model import Graph
from parabfs.schemas.traversal import TraversalRequest, TraversalResponse
from parabfs.tasks.executor import FanOutExecutor

router = APIRouter(prefix="/traversals", tags=["traversals"])


def check_vertex_limit(vertex_count: int) -> None:
    """Reject graphs above the configured API size limit."""
    max_vertices = get_settings().api.max_vertices
    if vertex_count > max_vertices:
        raise ValidationError(
            f"Graph has {vertex_count} vertices, the limit is {max_vertices}",
            details={"vertex_count": vertex_count, "max_vertices": max_vertices},
        )


# Plain def: FastAPI runs it in its threadpool, so the blocking fan-out
# does not stall the event loop.
@router.post("", response_model=TraversalResponse)
def traverse_from_all_vertices(request: TraversalRequest) -> TraversalResponse:
    """Run a BFS from every vertex of the submitted graph.

    Results are ordered by start vertex regardless of completion order.
    """
    check_vertex_limit(len(request.matrix))
    graph = Graph.from_matrix(request.matrix)

    executor = FanOutExecutor(settings=get_settings().traversal)
    result = executor.traverse_from_all_vertices(graph, request.worker_count)

    return TraversalResponse.from_result(graph.vertex_count(), result)
