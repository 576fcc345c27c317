"""Concurrent all-vertices BFS fan-out.

Submits one single-source traversal per vertex to a bounded thread pool,
blocks until every task has finished, and aggregates per-task timings
into a run summary.

Usage:
    executor = FanOutExecutor(worker_count=4)
    result = executor.traverse_from_all_vertices(graph)

    for item in result.results:
        print(item.start_vertex, item.traversal, item.worker_id)

Running tasks cannot be cancelled or timed out; a task that never
returns blocks the whole fan-out.
"""

import itertools
import threading
from collections.abc import Iterator, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass

from parabfs.common.config import TraversalSettings, get_settings
from parabfs.common.exceptions import InvalidWorkerCountError, TaskFailureError
from parabfs.common.logging import LoggerMixin
from parabfs.common.metrics import (
    FANOUT_DURATION,
    FANOUT_RUNS,
    FANOUT_WORKERS_USED,
    TRAVERSAL_DURATION,
    TRAVERSAL_VERTICES_VISITED,
    TRAVERSALS_COMPLETED,
)
from parabfs.common.timing import timed
from parabfs.graph.model import BFSTraversal, Graph, Vertex
from parabfs.graph.traversal import bfs_from

# Worker identity, set once per pool thread by the pool initializer
_worker_state = threading.local()


@dataclass(frozen=True)
class SingleVertexResult:
    """Outcome of one traversal task."""

    start_vertex: Vertex
    traversal: BFSTraversal
    elapsed: float  # seconds
    worker_id: int

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000


@dataclass(frozen=True)
class AllVerticesResult:
    """Outcome of a fan-out run, one result per vertex in ascending order."""

    results: list[SingleVertexResult]
    total_elapsed: float  # seconds
    worker_count: int

    @property
    def total_elapsed_ms(self) -> float:
        return self.total_elapsed * 1000

    @property
    def workers_used(self) -> int:
        """Number of distinct pool workers that ran at least one task."""
        return len({r.worker_id for r in self.results})


def _assign_worker_id(ids: Iterator[int], lock: threading.Lock) -> None:
    with lock:
        _worker_state.worker_id = next(ids)


def current_worker_id() -> int:
    """Id of the pool worker running the caller, 0 outside a fan-out pool."""
    return getattr(_worker_state, "worker_id", 0)


class FanOutExecutor(LoggerMixin):
    """Runs a BFS from every vertex of a graph on a bounded thread pool.

    The pool is created per run and torn down before the run returns,
    whether it succeeds or fails.
    """

    def __init__(
        self,
        worker_count: int | None = None,
        settings: TraversalSettings | None = None,
    ) -> None:
        """Initialize executor.

        Args:
            worker_count: Default pool size for runs. Taken from settings
                when not provided.
            settings: Traversal settings. Uses global settings if not provided.
        """
        if settings is None:
            settings = get_settings().traversal

        self._worker_count = worker_count if worker_count is not None else settings.worker_count

    @property
    def worker_count(self) -> int:
        return self._worker_count

    def traverse_from_all_vertices(
        self,
        graph: Graph,
        worker_count: int | None = None,
    ) -> AllVerticesResult:
        """Traverse ``graph`` breadth-first from each of its vertices.

        Args:
            graph: Graph shared read-only by all tasks.
            worker_count: Pool size for this run; overrides the executor default.

        Returns:
            Per-vertex results ordered by start vertex, with total timing.

        Raises:
            InvalidWorkerCountError: If the worker count is below 1.
            TaskFailureError: If any traversal task raises.
        """
        workers = worker_count if worker_count is not None else self._worker_count
        if workers < 1:
            raise InvalidWorkerCountError(
                f"Number of workers for BFS traversal cannot be less than 1, got {workers}",
                details={"worker_count": workers},
            )

        vertices = sorted(graph.get_vertices())

        self.logger.debug(
            "Starting BFS traversal from all vertices",
            vertex_count=len(vertices),
            worker_count=workers,
        )

        if not vertices:
            calculation = timed(list)
            return AllVerticesResult(
                results=calculation.result,
                total_elapsed=calculation.elapsed,
                worker_count=workers,
            )

        try:
            with ThreadPoolExecutor(
                max_workers=workers,
                thread_name_prefix="bfs-worker",
                initializer=_assign_worker_id,
                initargs=(itertools.count(1), threading.Lock()),
            ) as pool:
                calculation = timed(lambda: self._submit_and_collect(pool, graph, vertices))
        except TaskFailureError:
            FANOUT_RUNS.labels(status="failed").inc()
            raise

        result = AllVerticesResult(
            results=calculation.result,
            total_elapsed=calculation.elapsed,
            worker_count=workers,
        )

        FANOUT_RUNS.labels(status="success").inc()
        FANOUT_DURATION.observe(result.total_elapsed)
        FANOUT_WORKERS_USED.set(result.workers_used)

        self.logger.info(
            "Finished BFS traversal from all vertices",
            vertex_count=len(vertices),
            worker_count=workers,
            workers_used=result.workers_used,
            total_elapsed_ms=round(result.total_elapsed_ms, 3),
        )

        return result

    def _submit_and_collect(
        self,
        pool: ThreadPoolExecutor,
        graph: Graph,
        vertices: Sequence[Vertex],
    ) -> list[SingleVertexResult]:
        futures: list[Future[SingleVertexResult]] = [
            pool.submit(self._traverse_from, graph, vertex) for vertex in vertices
        ]

        results = []
        for vertex, future in zip(vertices, futures):
            try:
                results.append(future.result())
            except Exception as e:
                pool.shutdown(wait=True, cancel_futures=True)
                self.logger.error(
                    "BFS task failed",
                    start_vertex=vertex,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise TaskFailureError(
                    f"BFS task started from vertex {vertex} failed: {e}",
                    details={"vertex": vertex, "error_type": type(e).__name__},
                    cause=e,
                ) from e

        return results

    def _traverse_from(self, graph: Graph, start: Vertex) -> SingleVertexResult:
        worker_id = current_worker_id()
        self.logger.debug("Start BFS", start_vertex=start, worker_id=worker_id)

        calculation = timed(lambda: bfs_from(graph, start))

        TRAVERSALS_COMPLETED.inc()
        TRAVERSAL_DURATION.observe(calculation.elapsed)
        TRAVERSAL_VERTICES_VISITED.observe(len(calculation.result))

        self.logger.debug(
            "Finish BFS",
            start_vertex=start,
            worker_id=worker_id,
            visited=len(calculation.result),
            elapsed_ms=round(calculation.elapsed_ms, 3),
        )

        return SingleVertexResult(
            start_vertex=start,
            traversal=calculation.result,
            elapsed=calculation.elapsed,
            worker_id=worker_id,
        )


def traverse_from_all_vertices(
    graph: Graph,
    worker_count: int | None = None,
) -> AllVerticesResult:
    """Run a fan-out with a one-off executor. See :class:`FanOutExecutor`."""
    return FanOutExecutor().traverse_from_all_vertices(graph, worker_count)
