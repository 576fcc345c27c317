"""Graph model and algorithms - matrix graph, BFS, persistence, generation.

Graphs are dense adjacency matrices held in memory and shared read-only
between traversal workers.
"""

from parabfs.graph.generator import random_graph
from parabfs.graph.io import load_graph, parse_graph, save_graph, serialize_graph
from parabfs.graph.model import BFSTraversal, Graph, Vertex
from parabfs.graph.traversal import bfs_from

__all__ = [
    # Model
    "Graph",
    "Vertex",
    "BFSTraversal",
    # Traversal
    "bfs_from",
    # Persistence
    "parse_graph",
    "serialize_graph",
    "load_graph",
    "save_graph",
    # Generation
    "random_graph",
]
