"""API routers."""

from parabfs.api.routers import admin, graphs, traversals

__all__ = [
    "admin",
    "graphs",
    "traversals",
]
