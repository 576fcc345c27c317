"""Pytest configuration and fixtures for ParaBFS tests."""

from collections.abc import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from parabfs.api.main import create_app
from parabfs.common.config import Settings, TraversalSettings
from parabfs.graph.model import Graph


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a small, fixed worker pool and generator seed."""
    return Settings(
        environment="development",
        debug=True,
        traversal={"worker_count": 3},
        generator={"seed": 1234, "default_vertex_count": 6},
    )


@pytest.fixture
def traversal_settings() -> TraversalSettings:
    return TraversalSettings(worker_count=3)


# =============================================================================
# Sample Graph Fixtures
# =============================================================================


@pytest.fixture
def cycle_matrix() -> list[list[int]]:
    """Three vertices, edges 0-1 and 1-2, self-loop on 2."""
    return [
        [0, 1, 0],
        [1, 0, 1],
        [0, 1, 1],
    ]


@pytest.fixture
def cycle_graph(cycle_matrix: list[list[int]]) -> Graph:
    return Graph.from_matrix(cycle_matrix)


@pytest.fixture
def disconnected_graph() -> Graph:
    return Graph.from_matrix([[0, 0], [0, 0]])


@pytest.fixture
def directed_graph() -> Graph:
    """Directed graph: 0 -> 1, 0 -> 2, 1 -> 3, 2 -> 3, 3 -> 4; 5 isolated."""
    matrix = [[0] * 6 for _ in range(6)]
    for source, target in [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4)]:
        matrix[source][target] = 1
    return Graph.from_matrix(matrix)


def _distances_from(graph: Graph, start: int) -> dict[int, int]:
    """Shortest hop count to every reachable vertex, by level expansion."""
    distances = {start: 0}
    level = {start}
    depth = 0
    while level:
        depth += 1
        next_level = set()
        for vertex in level:
            for neighbor in graph.neighbors(vertex):
                if neighbor not in distances:
                    distances[neighbor] = depth
                    next_level.add(neighbor)
        level = next_level
    return distances


@pytest.fixture
def assert_valid_bfs() -> Callable[[Graph, int, list[int]], None]:
    """Check that a traversal is a breadth-first order from its start."""

    def check(graph: Graph, start: int, traversal: list[int]) -> None:
        distances = _distances_from(graph, start)

        assert traversal[0] == start
        assert len(traversal) == len(set(traversal))
        assert set(traversal) == set(distances)
        assert len(traversal) <= graph.vertex_count()

        layers = [distances[v] for v in traversal]
        assert layers == sorted(layers)

    return check


# =============================================================================
# API Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for testing API endpoints."""
    app = create_app()

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
