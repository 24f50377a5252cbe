"""Per-request identifiers, log binding and request metrics."""

import time
import uuid
from collections.abc import Awaitable, Callable
from contextvars import ContextVar

import structlog
from fastapi import Request, Response
from opentelemetry import trace
from starlette.middleware.base import BaseHTTPMiddleware

from nuremento.api.models.context import RequestContext
from nuremento.observability.logging import get_logger
from nuremento.observability.metrics import REQUEST_COUNT, REQUEST_LATENCY

logger = get_logger(__name__)

_current: ContextVar[RequestContext | None] = ContextVar("nuremento_request", default=None)


def get_request_context() -> RequestContext | None:
    return _current.get()


def update_request_context(*, owner_id: str | None = None) -> None:
    """Record the authenticated owner on the current request's logs."""
    context = _current.get()
    if context is None or not owner_id:
        return
    context.owner_id = owner_id
    structlog.contextvars.bind_contextvars(owner_id=owner_id)


def _new_context() -> RequestContext:
    request_id = uuid.uuid4().hex
    span = trace.get_current_span().get_span_context()
    if span.is_valid:
        return RequestContext(
            trace_id=f"{span.trace_id:032x}",
            span_id=f"{span.span_id:016x}",
            request_id=request_id,
        )
    # No active span: the request id doubles as the trace id
    return RequestContext(trace_id=request_id, request_id=request_id)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tags every log line and response with request and trace ids.

    Responses carry X-Request-ID and X-Trace-ID. Request count and
    latency are recorded per route template.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        context = _new_context()
        _current.set(context)
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=context.request_id,
            trace_id=context.trace_id,
        )

        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        # Route template, not the raw path
        endpoint = getattr(request.scope.get("route"), "path", "unmatched")
        REQUEST_LATENCY.labels(endpoint=endpoint).observe(elapsed)
        REQUEST_COUNT.labels(endpoint=endpoint, status=str(response.status_code)).inc()
        logger.debug(
            "request_completed",
            method=request.method,
            endpoint=endpoint,
            status_code=response.status_code,
            duration_ms=round(elapsed * 1000, 2),
        )

        response.headers["X-Request-ID"] = context.request_id
        response.headers["X-Trace-ID"] = context.trace_id
        return response
