"""API route registration.

This module provides helper functions for registering API routers
with the FastAPI application.
"""

from fastapi import APIRouter, FastAPI

from nuremento.observability.logging import get_logger

logger = get_logger(__name__)


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all routes."""
    router = APIRouter(prefix="/v1")

    from nuremento.api.routes.capsules import router as capsules_router
    from nuremento.api.routes.lake_notes import router as lake_notes_router
    from nuremento.api.routes.memories import router as memories_router

    router.include_router(memories_router, tags=["Memories"])
    router.include_router(lake_notes_router, tags=["Lake"])
    router.include_router(capsules_router, tags=["Time Capsules"])

    logger.debug("v1_router_created", routes=["memories", "lake-notes", "time-capsules"])

    return router


def register_routes(app: FastAPI, *, metrics_enabled: bool = True) -> None:
    """Register all routes with the FastAPI application.

    Args:
        app: FastAPI application instance
        metrics_enabled: Whether to expose /metrics
    """
    app.include_router(create_v1_router())

    # Health and metrics live at root level
    from nuremento.api.routes.health import metrics_router
    from nuremento.api.routes.health import router as health_router

    app.include_router(health_router, tags=["Health"])
    if metrics_enabled:
        app.include_router(metrics_router, tags=["Health"])

    logger.info("routes_registered")
