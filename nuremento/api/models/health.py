"""Models for GET /health."""

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field

HealthStatus = Literal["healthy", "unhealthy"]


class ComponentHealth(BaseModel):
    """Result of probing one dependency, e.g. the storage backend."""

    name: str
    status: HealthStatus
    latency_ms: float | None = None
    message: str | None = None


class HealthResponse(BaseModel):
    """Service status plus the settings that change observable behavior.

    storage_backend and capsule_open_mode let operators confirm which
    store and which capsule semantics a running instance uses.
    """

    status: HealthStatus
    version: str
    storage_backend: str
    capsule_open_mode: str
    components: list[ComponentHealth] = Field(default_factory=list)
    checked_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
