"""Prometheus metrics for ParaBFS.

Provides pre-defined metrics for monitoring traversal tasks, fan-out
runs, and API performance.
"""

from prometheus_client import Counter, Gauge, Histogram, Info

# Application info
APP_INFO = Info(
    "parabfs",
    "ParaBFS application information",
)

# Single-source traversal metrics
TRAVERSALS_COMPLETED = Counter(
    "parabfs_traversals_completed_total",
    "Total number of single-source BFS traversals completed",
)

TRAVERSAL_DURATION = Histogram(
    "parabfs_traversal_duration_seconds",
    "Time to run one single-source BFS traversal",
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
)

TRAVERSAL_VERTICES_VISITED = Histogram(
    "parabfs_traversal_vertices_visited",
    "Number of vertices visited in one traversal",
    buckets=[1, 5, 10, 25, 50, 100, 250, 500, 1000, 5000],
)

# Fan-out metrics
FANOUT_RUNS = Counter(
    "parabfs_fanout_runs_total",
    "Total number of all-vertices fan-out runs",
    ["status"],
)

FANOUT_DURATION = Histogram(
    "parabfs_fanout_duration_seconds",
    "Time to submit and collect all traversals of a fan-out run",
    buckets=[0.001, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

FANOUT_WORKERS_USED = Gauge(
    "parabfs_fanout_workers_used",
    "Distinct pool workers that ran tasks in the last fan-out run",
)

# API metrics
API_REQUESTS = Counter(
    "parabfs_api_requests_total",
    "Total number of API requests",
    ["method", "endpoint", "status"],
)

API_REQUEST_DURATION = Histogram(
    "parabfs_api_request_duration_seconds",
    "API request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


def set_app_info(version: str, environment: str, build_hash: str = "") -> None:
    """Set application info metric.

    Args:
        version: Application version.
        environment: Deployment environment.
        build_hash: Git commit hash or build identifier.
    """
    APP_INFO.info({
        "version": version,
        "environment": environment,
        "build_hash": build_hash,
    })
