"""Immutable adjacency-matrix graph.

Vertices are the row indices ``0..N-1`` of a square 0/1 matrix, where
``adjacency[i][j] == 1`` means an edge from ``i`` to ``j``. Self-loops are
allowed. A Graph is validated once at construction and never mutated, so
any number of traversal threads may read it without locking.
"""

import operator
from collections.abc import Iterable
from typing import Any

from parabfs.common.exceptions import InvalidMatrixError, UnknownVertexError

Vertex = int
Row = tuple[int, ...]
AdjMatrix = tuple[Row, ...]
BFSTraversal = list[Vertex]


def _validate_matrix(matrix: Iterable[Iterable[Any]]) -> AdjMatrix:
    """Validate and freeze a matrix into a tuple of int tuples.

    Raises:
        InvalidMatrixError: If the matrix is not square or a cell is not 0/1.
    """
    try:
        rows = [tuple(row) for row in matrix]
    except TypeError as e:
        raise InvalidMatrixError(
            "Adjacency matrix rows must be sequences",
            cause=e,
        ) from e

    size = len(rows)
    frozen: list[Row] = []

    for i, row in enumerate(rows):
        if len(row) != size:
            raise InvalidMatrixError(
                f"Adjacency matrix has incorrect dimensions: row {i} has "
                f"{len(row)} entries, expected {size}",
                details={"row": i, "width": len(row), "expected": size},
            )

        cells = []
        for j, value in enumerate(row):
            try:
                cell = operator.index(value)
            except TypeError as e:
                raise InvalidMatrixError(
                    f"Incorrect value {value!r} at ({i}, {j}); each value must be 0 or 1",
                    details={"row": i, "column": j},
                    cause=e,
                ) from e
            if cell not in (0, 1):
                raise InvalidMatrixError(
                    f"Incorrect value {cell} at ({i}, {j}); each value must be 0 or 1",
                    details={"row": i, "column": j, "value": cell},
                )
            cells.append(cell)
        frozen.append(tuple(cells))

    return tuple(frozen)


class Graph:
    """Read-only graph over a dense adjacency matrix.

    Build instances with :meth:`from_matrix` or :meth:`empty`; the
    constructor expects an already validated matrix.
    """

    __slots__ = ("_adjacency",)

    def __init__(self, adjacency: AdjMatrix) -> None:
        self._adjacency = adjacency

    @classmethod
    def from_matrix(cls, matrix: Iterable[Iterable[Any]]) -> "Graph":
        """Create a graph from a square 0/1 matrix.

        Args:
            matrix: Rows of integer-like cells (lists, tuples or numpy arrays).

        Returns:
            Validated graph.

        Raises:
            InvalidMatrixError: If the matrix is not square or not binary.
        """
        return cls(_validate_matrix(matrix))

    @classmethod
    def empty(cls) -> "Graph":
        """Create a graph without vertices."""
        return cls(())

    @property
    def adjacency(self) -> AdjMatrix:
        """The adjacency matrix as a tuple of row tuples."""
        return self._adjacency

    def vertex_count(self) -> int:
        return len(self._adjacency)

    def get_vertices(self) -> frozenset[Vertex]:
        return frozenset(range(self.vertex_count()))

    def has_vertex(self, v: Vertex) -> bool:
        return 0 <= v < self.vertex_count()

    def _require_vertex(self, v: Vertex) -> None:
        if not self.has_vertex(v):
            raise UnknownVertexError(v, self.vertex_count())

    def has_edge(self, v1: Vertex, v2: Vertex) -> bool:
        """Check for an edge from ``v1`` to ``v2``.

        Raises:
            UnknownVertexError: If either vertex is outside the graph.
        """
        self._require_vertex(v1)
        self._require_vertex(v2)
        return self._adjacency[v1][v2] == 1

    def neighbors(self, v: Vertex) -> frozenset[Vertex]:
        """Get every vertex ``u`` with an edge ``v -> u``.

        Raises:
            UnknownVertexError: If ``v`` is outside the graph.
        """
        self._require_vertex(v)
        return frozenset(u for u, cell in enumerate(self._adjacency[v]) if cell == 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._adjacency == other._adjacency

    def __hash__(self) -> int:
        return hash(self._adjacency)

    def __repr__(self) -> str:
        return f"Graph(vertex_count={self.vertex_count()})"
