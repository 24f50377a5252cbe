"""Authentication, request context and rate limiting."""

from nuremento.api.middleware.auth import OwnerContextDep, get_owner_context
from nuremento.api.middleware.context import (
    RequestContextMiddleware,
    get_request_context,
    update_request_context,
)
from nuremento.api.middleware.rate_limit import (
    RateLimiter,
    SlidingWindowRateLimiter,
    add_rate_limit_headers,
)

__all__ = [
    "OwnerContextDep",
    "RateLimiter",
    "RequestContextMiddleware",
    "SlidingWindowRateLimiter",
    "add_rate_limit_headers",
    "get_owner_context",
    "get_request_context",
    "update_request_context",
]
