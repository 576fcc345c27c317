"""Concurrent traversal tasks for ParaBFS."""

from parabfs.tasks.executor import (
    AllVerticesResult,
    FanOutExecutor,
    SingleVertexResult,
    traverse_from_all_vertices,
)

__all__ = [
    "AllVerticesResult",
    "FanOutExecutor",
    "SingleVertexResult",
    "traverse_from_all_vertices",
]
