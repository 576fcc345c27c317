"""Unit tests for health checks."""

import pytest

from parabfs.common.health import (
    ComponentHealth,
    HealthChecker,
    HealthStatus,
    check_traversal_engine,
)


@pytest.mark.unit
class TestHealthChecker:
    """Test cases for HealthChecker."""

    @pytest.mark.asyncio
    async def test_traversal_engine_check(self):
        """Test the engine smoke check passes."""
        component = await check_traversal_engine()

        assert component.status == HealthStatus.HEALTHY
        assert component.latency_ms is not None

    @pytest.mark.asyncio
    async def test_no_checks_is_healthy(self):
        """Test a checker without checks reports healthy."""
        result = await HealthChecker("svc", "1.0").readiness()

        assert result.status == HealthStatus.HEALTHY
        assert result.components == []

    @pytest.mark.asyncio
    async def test_degraded_component(self):
        """Test a degraded component degrades the service."""
        async def degraded() -> ComponentHealth:
            return ComponentHealth(name="slow", status=HealthStatus.DEGRADED)

        checker = HealthChecker("svc", "1.0")
        checker.register_check("slow", degraded)

        result = await checker.readiness()

        assert result.status == HealthStatus.DEGRADED

    @pytest.mark.asyncio
    async def test_raising_check_is_unhealthy(self):
        """Test a check that raises marks the service unhealthy."""
        async def broken() -> ComponentHealth:
            raise RuntimeError("down")

        checker = HealthChecker("svc", "1.0")
        checker.register_check("traversal_engine", check_traversal_engine)
        checker.register_check("broken", broken)

        result = await checker.readiness()
        payload = result.to_dict()

        assert result.status == HealthStatus.UNHEALTHY
        assert [c["name"] for c in payload["components"]] == ["traversal_engine", "broken"]
        assert payload["components"][1]["message"] == "Check failed: down"

    @pytest.mark.asyncio
    async def test_liveness(self):
        """Test liveness always reports healthy."""
        result = await HealthChecker("svc", "1.0").liveness()

        assert result.to_dict()["status"] == "healthy"
