"""Text persistence for adjacency-matrix graphs.

File format for a graph with 3 vertices::

    3
    0 1 0
    1 0 1
    0 0 1

The first line holds the vertex count ``N``; the next ``N`` lines hold
the matrix rows as space-separated 0/1 values. No trailing newline is
written; one is tolerated on read.
"""

from pathlib import Path

from parabfs.common.exceptions import InvalidFormatError, InvalidMatrixError
from parabfs.common.logging import get_logger
from parabfs.graph.model import Graph

logger = get_logger(__name__)


def parse_graph(text: str) -> Graph:
    """Parse a graph from its text form.

    Raises:
        InvalidFormatError: If the header, line count or any row is invalid.
    """
    lines = text.splitlines()
    if not lines:
        raise InvalidFormatError("Graph text is empty")

    try:
        size = int(lines[0].strip())
    except ValueError as e:
        raise InvalidFormatError(
            f"First line must be the vertex count, got {lines[0]!r}",
            details={"line": 1},
            cause=e,
        ) from e

    if len(lines) != size + 1:
        raise InvalidFormatError(
            f"Expected {size + 1} lines for {size} vertices, found {len(lines)}",
            details={"expected_lines": size + 1, "lines": len(lines)},
        )

    rows = []
    for number, line in enumerate(lines[1:], start=2):
        try:
            rows.append([int(token) for token in line.split()])
        except ValueError as e:
            raise InvalidFormatError(
                f"Line {number} contains a non-integer value",
                details={"line": number},
                cause=e,
            ) from e

    try:
        return Graph.from_matrix(rows)
    except InvalidMatrixError as e:
        raise InvalidFormatError(e.message, details=e.details, cause=e) from e


def serialize_graph(graph: Graph) -> str:
    """Render a graph in the text format read by :func:`parse_graph`."""
    lines = [str(graph.vertex_count())]
    lines.extend(" ".join(str(cell) for cell in row) for row in graph.adjacency)
    return "\n".join(lines)


def load_graph(path: str | Path) -> Graph:
    """Load a graph from ``path``.

    Raises:
        InvalidFormatError: If the file content is not a valid graph.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    try:
        graph = parse_graph(path.read_text(encoding="utf-8"))
    except InvalidFormatError as e:
        e.details.setdefault("path", str(path))
        raise

    logger.debug("Loaded graph", path=str(path), vertex_count=graph.vertex_count())
    return graph


def save_graph(path: str | Path, graph: Graph) -> None:
    """Write ``graph`` to ``path`` in the text format."""
    path = Path(path)
    path.write_text(serialize_graph(graph), encoding="utf-8")
    logger.debug("Saved graph", path=str(path), vertex_count=graph.vertex_count())
