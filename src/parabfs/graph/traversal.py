"""Single-source breadth-first traversal.

Runs an iterative BFS over a Graph's read-only adjacency data. Every call
owns its frontier and reached set, so concurrent calls against the same
Graph never interfere.
"""

from collections import deque

from parabfs.graph.model import BFSTraversal, Graph, Vertex


def bfs_from(graph: Graph, start: Vertex) -> BFSTraversal:
    """Traverse ``graph`` breadth-first from ``start``.

    Newly discovered neighbors are enqueued in ascending vertex order,
    which makes the visitation order deterministic.

    Args:
        graph: Graph to traverse.
        start: Starting vertex. Callers pass vertices taken from the graph.

    Returns:
        Vertices in visitation order, beginning with ``start``.
    """
    frontier: deque[Vertex] = deque([start])
    reached: set[Vertex] = {start}
    order: BFSTraversal = []

    while frontier:
        current = frontier.popleft()
        order.append(current)

        discovered = sorted(v for v in graph.neighbors(current) if v not in reached)
        reached.update(discovered)
        frontier.extend(discovered)

    return order
