"""Request-scoped context models."""

from datetime import datetime

from pydantic import BaseModel


class OwnerContext(BaseModel):
    """Authenticated owner extracted from the bearer token."""

    owner_id: str
    """Opaque owner identifier (the token's sub claim)."""


class RateLimitResult(BaseModel):
    """Outcome of a rate limit check."""

    allowed: bool
    limit: int
    remaining: int
    reset_at: datetime


class RequestContext(BaseModel):
    """Identifiers bound to logs for the duration of a request."""

    trace_id: str
    span_id: str = ""
    request_id: str
    owner_id: str | None = None
