"""Unit tests for random graph generation."""

import numpy as np
import pytest

from parabfs.common.config import get_settings
from parabfs.common.exceptions import NegativeVertexCountError
from parabfs.graph.generator import random_graph
from parabfs.graph.model import Graph


@pytest.mark.unit
class TestRandomGraph:
    """Test cases for random_graph."""

    def test_negative_vertex_count(self):
        """Test negative sizes fail."""
        with pytest.raises(NegativeVertexCountError) as exc_info:
            random_graph(-1)

        assert exc_info.value.error_code == "NEGATIVE_VERTEX_COUNT"
        assert exc_info.value.details == {"vertex_count": -1}

    def test_zero_vertices(self):
        """Test size zero yields the empty graph."""
        assert random_graph(0, seed=1) == Graph.empty()

    @pytest.mark.parametrize("size", [1, 2, 10, 40])
    def test_symmetric_and_binary(self, size):
        """Test every generated matrix is square, binary and symmetric."""
        graph = random_graph(size, seed=99)
        matrix = np.array(graph.adjacency)

        assert matrix.shape == (size, size)
        assert set(np.unique(matrix)) <= {0, 1}
        assert (matrix == matrix.T).all()

    def test_seed_reproducible(self):
        """Test equal seeds produce equal graphs."""
        assert random_graph(30, seed=7) == random_graph(30, seed=7)

    def test_seeds_differ(self):
        """Test different seeds produce different graphs."""
        assert random_graph(30, seed=7) != random_graph(30, seed=8)

    def test_rng_takes_precedence(self):
        """Test an explicit generator is used instead of the seed."""
        expected = random_graph(12, rng=np.random.default_rng(5))

        assert random_graph(12, seed=123, rng=np.random.default_rng(5)) == expected

    def test_diagonal_drawn(self):
        """Test self-loops appear on the diagonal for a large graph."""
        graph = random_graph(200, seed=3)

        assert any(graph.has_edge(v, v) for v in range(graph.vertex_count()))

    def test_edges_are_coin_flips(self):
        """Test roughly half of all cells hold an edge."""
        matrix = np.array(random_graph(200, seed=11).adjacency)

        assert 0.4 < matrix.mean() < 0.6

    def test_configured_seed_used(self, monkeypatch):
        """Test the generator seed from settings applies when none is passed."""
        get_settings.cache_clear()
        monkeypatch.setenv("GENERATOR_SEED", "42")
        try:
            first = random_graph(15)
            second = random_graph(15)
        finally:
            get_settings.cache_clear()

        assert first == second == random_graph(15, seed=42)
