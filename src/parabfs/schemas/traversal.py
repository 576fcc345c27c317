"""Pydantic schemas for traversal and graph generation endpoints."""

from pydantic import BaseModel, Field

from parabfs.tasks.executor import AllVerticesResult, SingleVertexResult


class TraversalRequest(BaseModel):
    """Request for an all-vertices BFS run."""

    matrix: list[list[int]] = Field(
        ...,
        description="Square 0/1 adjacency matrix, row-major",
    )
    # Validated by the executor so that bad counts map to INVALID_WORKER_COUNT
    worker_count: int | None = None


class SingleVertexTraversal(BaseModel):
    """Traversal started from one vertex."""

    start_vertex: int
    traversal: list[int]
    elapsed_ms: float
    worker_id: int

    @classmethod
    def from_result(cls, result: SingleVertexResult) -> "SingleVertexTraversal":
        return cls(
            start_vertex=result.start_vertex,
            traversal=result.traversal,
            elapsed_ms=result.elapsed_ms,
            worker_id=result.worker_id,
        )


class TraversalResponse(BaseModel):
    """Result of an all-vertices BFS run."""

    vertex_count: int
    worker_count: int
    workers_used: int
    total_elapsed_ms: float
    results: list[SingleVertexTraversal]

    @classmethod
    def from_result(cls, vertex_count: int, result: AllVerticesResult) -> "TraversalResponse":
        return cls(
            vertex_count=vertex_count,
            worker_count=result.worker_count,
            workers_used=result.workers_used,
            total_elapsed_ms=result.total_elapsed_ms,
            results=[SingleVertexTraversal.from_result(r) for r in result.results],
        )


class RandomGraphRequest(BaseModel):
    """Request for a random symmetric graph."""

    vertex_count: int
    seed: int | None = None


class RandomGraphResponse(BaseModel):
    """Generated graph."""

    vertex_count: int
    matrix: list[list[int]]
