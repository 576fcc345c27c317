"""Unit tests for the adjacency-matrix graph."""

import numpy as np
import pytest

from parabfs.common.exceptions import InvalidMatrixError, UnknownVertexError
from parabfs.graph.model import Graph


@pytest.mark.unit
class TestGraphConstruction:
    """Test cases for Graph.from_matrix validation."""

    def test_square_binary_matrix_accepted(self, cycle_matrix):
        """Test a square 0/1 matrix builds a graph."""
        graph = Graph.from_matrix(cycle_matrix)

        assert graph.vertex_count() == 3
        assert graph.adjacency == ((0, 1, 0), (1, 0, 1), (0, 1, 1))

    def test_numpy_matrix_accepted(self):
        """Test numpy arrays are accepted and stored as plain ints."""
        graph = Graph.from_matrix(np.array([[0, 1], [1, 0]], dtype=np.int64))

        assert graph.adjacency == ((0, 1), (1, 0))
        assert all(type(cell) is int for row in graph.adjacency for cell in row)

    def test_short_row_rejected(self):
        """Test a row narrower than the row count fails."""
        with pytest.raises(InvalidMatrixError) as exc_info:
            Graph.from_matrix([[0, 1], [1]])

        assert exc_info.value.error_code == "INVALID_MATRIX"
        assert exc_info.value.details == {"row": 1, "width": 1, "expected": 2}

    def test_non_square_matrix_rejected(self):
        """Test a 2x3 matrix fails."""
        with pytest.raises(InvalidMatrixError):
            Graph.from_matrix([[0, 1, 0], [1, 0, 1]])

    def test_value_outside_binary_rejected(self):
        """Test cells other than 0 and 1 fail."""
        with pytest.raises(InvalidMatrixError) as exc_info:
            Graph.from_matrix([[0, 2], [1, 0]])

        assert exc_info.value.details["row"] == 0
        assert exc_info.value.details["column"] == 1
        assert exc_info.value.details["value"] == 2

    def test_negative_value_rejected(self):
        """Test negative cells fail."""
        with pytest.raises(InvalidMatrixError):
            Graph.from_matrix([[0, -1], [1, 0]])

    def test_non_integer_value_rejected(self):
        """Test floats and strings are not treated as 0/1."""
        with pytest.raises(InvalidMatrixError):
            Graph.from_matrix([[0, 1.0], [1, 0]])
        with pytest.raises(InvalidMatrixError):
            Graph.from_matrix([[0, "1"], [1, 0]])

    def test_non_iterable_row_rejected(self):
        """Test rows that are not sequences fail."""
        with pytest.raises(InvalidMatrixError):
            Graph.from_matrix([1, 0])

    def test_self_loops_allowed(self):
        """Test diagonal entries are valid input."""
        graph = Graph.from_matrix([[1]])

        assert graph.has_edge(0, 0) is True
        assert graph.neighbors(0) == frozenset({0})

    def test_empty_matrix(self):
        """Test an empty matrix builds an empty graph."""
        assert Graph.from_matrix([]) == Graph.empty()

    def test_source_matrix_copy_is_isolated(self):
        """Test mutating the input after construction leaves the graph unchanged."""
        matrix = [[0, 1], [1, 0]]
        graph = Graph.from_matrix(matrix)

        matrix[0][1] = 0

        assert graph.has_edge(0, 1) is True


@pytest.mark.unit
class TestEmptyGraph:
    """Test cases for the empty graph."""

    def test_vertex_count(self):
        """Test an empty graph has no vertices."""
        graph = Graph.empty()

        assert graph.vertex_count() == 0
        assert graph.get_vertices() == frozenset()

    def test_no_vertex_is_valid(self):
        """Test membership is false for every vertex."""
        assert Graph.empty().has_vertex(0) is False

    def test_queries_fail(self):
        """Test neighbor lookup on an empty graph fails."""
        with pytest.raises(UnknownVertexError):
            Graph.empty().neighbors(0)


@pytest.mark.unit
class TestGraphQueries:
    """Test cases for vertex, edge and neighbor queries."""

    def test_get_vertices(self, cycle_graph):
        """Test vertices are the row indices."""
        assert cycle_graph.get_vertices() == frozenset({0, 1, 2})

    def test_has_vertex_bounds(self, cycle_graph):
        """Test membership at and around the range boundaries."""
        assert cycle_graph.has_vertex(0) is True
        assert cycle_graph.has_vertex(2) is True
        assert cycle_graph.has_vertex(3) is False
        assert cycle_graph.has_vertex(-1) is False

    def test_has_edge(self, cycle_graph):
        """Test edge lookup follows the matrix cells."""
        assert cycle_graph.has_edge(0, 1) is True
        assert cycle_graph.has_edge(0, 2) is False
        assert cycle_graph.has_edge(2, 2) is True

    def test_has_edge_is_directed(self, directed_graph):
        """Test edges are read from the source row only."""
        assert directed_graph.has_edge(0, 1) is True
        assert directed_graph.has_edge(1, 0) is False

    @pytest.mark.parametrize("v1,v2,bad", [(3, 0, 3), (0, 3, 3), (-1, 0, -1), (0, -5, -5)])
    def test_has_edge_unknown_vertex(self, cycle_graph, v1, v2, bad):
        """Test edge lookup names the first out-of-range vertex."""
        with pytest.raises(UnknownVertexError) as exc_info:
            cycle_graph.has_edge(v1, v2)

        assert exc_info.value.vertex == bad
        assert exc_info.value.error_code == "UNKNOWN_VERTEX"
        assert str(bad) in exc_info.value.message

    def test_neighbors(self, cycle_graph):
        """Test neighbor sets include self-loops."""
        assert cycle_graph.neighbors(0) == frozenset({1})
        assert cycle_graph.neighbors(1) == frozenset({0, 2})
        assert cycle_graph.neighbors(2) == frozenset({1, 2})

    def test_neighbors_isolated_vertex(self, directed_graph):
        """Test an isolated vertex has no neighbors."""
        assert directed_graph.neighbors(5) == frozenset()

    @pytest.mark.parametrize("vertex", [-1, 3, 100])
    def test_neighbors_unknown_vertex(self, cycle_graph, vertex):
        """Test neighbor lookup fails outside [0, N)."""
        with pytest.raises(UnknownVertexError) as exc_info:
            cycle_graph.neighbors(vertex)

        assert exc_info.value.details == {"vertex": vertex, "vertex_count": 3}


@pytest.mark.unit
class TestGraphEquality:
    """Test cases for equality and hashing."""

    def test_equal_matrices(self, cycle_matrix):
        """Test graphs over equal matrices compare equal."""
        assert Graph.from_matrix(cycle_matrix) == Graph.from_matrix([list(r) for r in cycle_matrix])

    def test_different_matrices(self, cycle_graph, disconnected_graph):
        """Test graphs over different matrices differ."""
        assert cycle_graph != disconnected_graph

    def test_hashable(self, cycle_matrix):
        """Test equal graphs share a hash."""
        assert len({Graph.from_matrix(cycle_matrix), Graph.from_matrix(cycle_matrix)}) == 1

    def test_repr(self, cycle_graph):
        """Test repr shows the vertex count."""
        assert repr(cycle_graph) == "Graph(vertex_count=3)"
