"""Health check and metrics endpoints."""

import time

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

import nuremento
from nuremento.api import dependencies
from nuremento.api.dependencies import SettingsDep
from nuremento.api.models.health import ComponentHealth, HealthResponse, HealthStatus
from nuremento.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


async def _check_storage(settings: SettingsDep) -> ComponentHealth:
    """Check the storage backend.

    The in-memory backend is always healthy. For Postgres the shared pool
    is connected if needed and asked to run a trivial query.
    """
    if settings.storage.backend == "inmemory":
        return ComponentHealth(name="storage", status="healthy", message="inmemory")

    start = time.time()
    try:
        pool = await dependencies.get_postgres_pool(settings)
        healthy = await pool.health_check()
    except Exception as e:
        return ComponentHealth(
            name="storage",
            status="unhealthy",
            latency_ms=(time.time() - start) * 1000,
            message=str(e),
        )
    return ComponentHealth(
        name="storage",
        status="healthy" if healthy else "unhealthy",
        latency_ms=(time.time() - start) * 1000,
    )


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep) -> HealthResponse:
    """Report service health. No authentication required."""
    components = [await _check_storage(settings)]
    overall_status: HealthStatus = (
        "unhealthy" if any(c.status == "unhealthy" for c in components) else "healthy"
    )
    logger.debug("health_check_completed", status=overall_status)

    return HealthResponse(
        status=overall_status,
        version=nuremento.__version__,
        storage_backend=settings.storage.backend,
        capsule_open_mode=settings.capsules.open_mode.value,
        components=components,
    )


metrics_router = APIRouter()


@metrics_router.get("/metrics")
async def get_metrics() -> Response:
    """Get Prometheus metrics in text format for scraping."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
