"""Admin API endpoints - health, metrics."""

from typing import Any

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from parabfs.common.config import get_settings
from parabfs.common.health import HealthChecker, HealthStatus, check_traversal_engine

router = APIRouter(prefix="/admin", tags=["admin"])

# Health checker instance
_health_checker: HealthChecker | None = None


def get_health_checker() -> HealthChecker:
    """Get or create health checker singleton."""
    global _health_checker
    if _health_checker is None:
        settings = get_settings()
        _health_checker = HealthChecker(
            service_name="parabfs-api",
            version=settings.app_version,
        )
        _health_checker.register_check("traversal_engine", check_traversal_engine)
    return _health_checker


@router.get("/health")
async def health() -> dict[str, Any]:
    """Complete health check endpoint.

    Returns detailed health status of all components.
    """
    checker = get_health_checker()
    result = await checker.readiness()
    return result.to_dict()


@router.get("/health/live")
async def liveness() -> dict[str, str]:
    """Kubernetes liveness probe.

    Returns 200 if the process is alive.
    """
    return {"status": "ok"}


@router.get("/health/ready")
async def readiness() -> Any:
    """Kubernetes readiness probe.

    Returns 200 if the service can handle requests.
    """
    checker = get_health_checker()
    result = await checker.readiness()

    if result.status == HealthStatus.UNHEALTHY:
        return Response(
            content='{"status": "unhealthy"}',
            status_code=503,
            media_type="application/json",
        )

    return result.to_dict()


@router.get("/metrics")
async def metrics() -> Response:
    """Prometheus metrics endpoint.

    Returns metrics in Prometheus text format.
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )
