"""Per-owner rate limiting for write endpoints."""

import time
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable
from datetime import UTC, datetime

from fastapi import Response

from nuremento.api.models.context import RateLimitResult


class RateLimiter(ABC):
    @abstractmethod
    def check(self, key: str, limit: int) -> RateLimitResult:
        """Count one request against key if it fits under limit.

        Args:
            key: Bucket name, e.g. "memories:<owner_id>"
            limit: Requests allowed per window
        """
        pass

    @abstractmethod
    def reset(self, key: str) -> None:
        pass


class SlidingWindowRateLimiter(RateLimiter):
    """Keeps the accepted request times of each key for one window.

    Rejected requests are not recorded, so a client hammering a full
    bucket does not push its own reset time back. A key is forgotten
    once none of its requests fall inside the window. State lives in
    the process.
    """

    def __init__(
        self,
        window_seconds: int = 3600,
        time_func: Callable[[], float] = time.time,
    ) -> None:
        self._window_seconds = window_seconds
        self._time = time_func
        self._accepted: dict[str, deque[float]] = {}
        self._next_sweep = 0.0

    @property
    def window_seconds(self) -> int:
        return self._window_seconds

    @property
    def tracked_keys(self) -> int:
        """Number of keys with requests inside the window."""
        return len(self._accepted)

    def check(self, key: str, limit: int) -> RateLimitResult:
        now = self._time()
        cutoff = now - self._window_seconds
        if now >= self._next_sweep:
            self._evict_idle(cutoff)
            self._next_sweep = now + self._window_seconds

        accepted = self._accepted.get(key, deque())
        while accepted and accepted[0] <= cutoff:
            accepted.popleft()

        allowed = len(accepted) < limit
        if allowed:
            accepted.append(now)

        if accepted:
            self._accepted[key] = accepted
        else:
            self._accepted.pop(key, None)

        oldest = accepted[0] if accepted else now
        return RateLimitResult(
            allowed=allowed,
            limit=limit,
            remaining=max(0, limit - len(accepted)),
            reset_at=datetime.fromtimestamp(oldest + self._window_seconds, tz=UTC),
        )

    def reset(self, key: str) -> None:
        self._accepted.pop(key, None)

    def _evict_idle(self, cutoff: float) -> None:
        # Deques are in time order; the newest entry decides
        idle = [key for key, accepted in self._accepted.items() if accepted[-1] <= cutoff]
        for key in idle:
            del self._accepted[key]


def add_rate_limit_headers(response: Response, result: RateLimitResult) -> None:
    """Expose the limit state as X-RateLimit-Limit/Remaining/Reset."""
    headers = response.headers
    headers["X-RateLimit-Limit"] = str(result.limit)
    headers["X-RateLimit-Remaining"] = str(result.remaining)
    headers["X-RateLimit-Reset"] = str(int(result.reset_at.timestamp()))
