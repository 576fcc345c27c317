"""ParaBFS - concurrent all-vertices breadth-first traversal.

Models graphs as dense adjacency matrices and runs a BFS from every
vertex on a bounded worker pool, reporting per-traversal and aggregate
timing and thread utilization.
"""

__version__ = "0.1.0"
