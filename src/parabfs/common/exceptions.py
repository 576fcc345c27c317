"""Custom exceptions for ParaBFS.

Provides a hierarchy of exceptions with stable error codes, HTTP status
codes for the API, and structured error payloads.
"""

from typing import Any


class ParaBFSError(Exception):
    """Base exception for all ParaBFS errors."""

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize exception with optional details.

        Args:
            message: Human-readable error message.
            details: Additional error details for debugging.
            cause: Original exception that caused this error.
        """
        self.message = message or self.message
        self.details = details or {}
        self.cause = cause
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API response."""
        result = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# 400 Bad Request errors
class ValidationError(ParaBFSError):
    """Input validation failed."""

    status_code = 400
    error_code = "VALIDATION_ERROR"
    message = "Input validation failed"


class InvalidMatrixError(ValidationError):
    """Adjacency matrix is not square or holds values outside {0, 1}."""

    error_code = "INVALID_MATRIX"
    message = "Invalid adjacency matrix"


class InvalidFormatError(ValidationError):
    """Persisted graph text does not follow the matrix file format."""

    error_code = "INVALID_FORMAT"
    message = "Graph text has invalid format"


class InvalidWorkerCountError(ValidationError):
    """Worker count for a fan-out is below one."""

    error_code = "INVALID_WORKER_COUNT"
    message = "Worker count must be at least 1"


class NegativeVertexCountError(ValidationError):
    """Requested vertex count for a generated graph is negative."""

    error_code = "NEGATIVE_VERTEX_COUNT"
    message = "Graph cannot have a negative number of vertices"


# 404 Not Found errors
class NotFoundError(ParaBFSError):
    """Resource not found."""

    status_code = 404
    error_code = "NOT_FOUND"
    message = "Resource not found"


class UnknownVertexError(NotFoundError):
    """Vertex is outside the graph's [0, N) range."""

    error_code = "UNKNOWN_VERTEX"
    message = "Vertex is not in the graph"

    def __init__(self, vertex: int, vertex_count: int) -> None:
        self.vertex = vertex
        super().__init__(
            message=f"Vertex {vertex} is not in the graph",
            details={"vertex": vertex, "vertex_count": vertex_count},
        )


# 500 Internal errors
class InternalError(ParaBFSError):
    """Internal error."""

    status_code = 500
    error_code = "INTERNAL_ERROR"
    message = "An internal error occurred"


class TaskFailureError(InternalError):
    """A scheduled BFS task raised; the whole fan-out is aborted."""

    error_code = "TASK_FAILURE"
    message = "Traversal task failed"
