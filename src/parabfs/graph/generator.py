"""Random undirected graph generation.

Each cell of the lower triangle, diagonal included, is an independent
fair coin flip mirrored into the upper triangle. The resulting matrix is
symmetric and may contain self-loops.
"""

import numpy as np

from parabfs.common.config import get_settings
from parabfs.common.exceptions import NegativeVertexCountError
from parabfs.graph.model import Graph


def random_graph(
    vertex_count: int,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
) -> Graph:
    """Generate a random symmetric graph.

    Args:
        vertex_count: Number of vertices, at least 0.
        seed: Seed for a fresh generator. Falls back to the configured
            generator seed when neither ``seed`` nor ``rng`` is given.
        rng: Generator to draw from; takes precedence over ``seed``.

    Returns:
        Generated graph.

    Raises:
        NegativeVertexCountError: If ``vertex_count`` is negative.
    """
    if vertex_count < 0:
        raise NegativeVertexCountError(
            f"Graph cannot have a negative number of vertices: {vertex_count}",
            details={"vertex_count": vertex_count},
        )

    if rng is None:
        if seed is None:
            seed = get_settings().generator.seed
        rng = np.random.default_rng(seed)

    draws = rng.integers(0, 2, size=(vertex_count, vertex_count), dtype=np.int8)
    lower = np.tril(draws)
    matrix = lower + np.tril(draws, k=-1).T

    return Graph.from_matrix(matrix.tolist())
