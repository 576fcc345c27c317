"""Health check contract for the ParaBFS API.

Provides standardized health check responses for Kubernetes probes
and monitoring systems.
"""

import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from parabfs.graph.model import Graph
from parabfs.graph.traversal import bfs_from

HealthCheck = Callable[[], Awaitable["ComponentHealth"]]


class HealthStatus(str, Enum):
    """Health check status values."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


@dataclass
class ComponentHealth:
    """Health status of a single component."""

    name: str
    status: HealthStatus
    message: str | None = None
    latency_ms: float | None = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class HealthResponse:
    """Complete health check response."""

    status: HealthStatus
    timestamp: datetime
    service: str
    version: str
    components: list[ComponentHealth] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON response."""
        return {
            "status": self.status.value,
            "timestamp": self.timestamp.isoformat(),
            "service": self.service,
            "version": self.version,
            "components": [
                {
                    "name": c.name,
                    "status": c.status.value,
                    "message": c.message,
                    "latency_ms": c.latency_ms,
                    "details": c.details if c.details else None,
                }
                for c in self.components
            ],
        }


async def check_traversal_engine() -> ComponentHealth:
    """Run a BFS over a tiny fixed graph and compare the visitation order."""
    start = time.perf_counter()
    try:
        graph = Graph.from_matrix([[0, 1, 0], [1, 0, 1], [0, 1, 1]])
        order = bfs_from(graph, 0)
        latency = (time.perf_counter() - start) * 1000

        if order == [0, 1, 2]:
            return ComponentHealth(
                name="traversal_engine",
                status=HealthStatus.HEALTHY,
                message="Traversal engine responding",
                latency_ms=round(latency, 2),
            )
        return ComponentHealth(
            name="traversal_engine",
            status=HealthStatus.UNHEALTHY,
            message="Traversal engine returned an unexpected order",
            latency_ms=round(latency, 2),
            details={"order": order},
        )
    except Exception as e:
        latency = (time.perf_counter() - start) * 1000
        return ComponentHealth(
            name="traversal_engine",
            status=HealthStatus.UNHEALTHY,
            message=f"Traversal engine check error: {str(e)}",
            latency_ms=round(latency, 2),
        )


class HealthChecker:
    """Health check manager for a service."""

    def __init__(self, service_name: str, version: str) -> None:
        """Initialize health checker.

        Args:
            service_name: Name of the service.
            version: Service version.
        """
        self.service_name = service_name
        self.version = version
        self._checks: list[tuple[str, HealthCheck]] = []

    def register_check(self, name: str, check_func: HealthCheck) -> None:
        """Register a health check function.

        Args:
            name: Name of the component being checked.
            check_func: Async function that returns ComponentHealth.
        """
        self._checks.append((name, check_func))

    async def liveness(self) -> HealthResponse:
        """Kubernetes liveness probe - is the process alive?"""
        return HealthResponse(
            status=HealthStatus.HEALTHY,
            timestamp=datetime.now(timezone.utc),
            service=self.service_name,
            version=self.version,
        )

    async def readiness(self) -> HealthResponse:
        """Kubernetes readiness probe - can the service handle requests?

        Runs every registered check; any unhealthy component makes the
        service unhealthy, any degraded one makes it degraded.
        """
        components = []
        overall_status = HealthStatus.HEALTHY

        for name, check_func in self._checks:
            try:
                component_health = await check_func()
                components.append(component_health)

                if component_health.status == HealthStatus.UNHEALTHY:
                    overall_status = HealthStatus.UNHEALTHY
                elif (
                    component_health.status == HealthStatus.DEGRADED
                    and overall_status == HealthStatus.HEALTHY
                ):
                    overall_status = HealthStatus.DEGRADED
            except Exception as e:
                components.append(ComponentHealth(
                    name=name,
                    status=HealthStatus.UNHEALTHY,
                    message=f"Check failed: {str(e)}",
                ))
                overall_status = HealthStatus.UNHEALTHY

        return HealthResponse(
            status=overall_status,
            timestamp=datetime.now(timezone.utc),
            service=self.service_name,
            version=self.version,
            components=components,
        )
