"""Clock abstraction for every calendar-day computation.

Seeds, the once-per-day gate and capsule locks must agree on what "today"
is. Each operation reads the clock once and passes the resulting date
along instead of re-reading wall-clock time.
"""

from abc import ABC, abstractmethod
from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo


class Clock(ABC):
    """Source of the current instant and calendar day."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current timezone-aware instant."""
        pass

    def today(self) -> date:
        """Return the calendar day of now() in the clock's timezone."""
        return self.now().date()


class SystemClock(Clock):
    """Wall-clock time with day boundaries in a fixed timezone."""

    def __init__(self, timezone: str = "UTC") -> None:
        self._tz = ZoneInfo(timezone)

    def now(self) -> datetime:
        return datetime.now(self._tz)


class FixedClock(Clock):
    """Clock frozen at a given instant, advanced explicitly.

    Used by tests to simulate calendar days.
    """

    def __init__(self, instant: datetime | None = None) -> None:
        self._now = instant or datetime(2025, 1, 1, 12, 0, tzinfo=UTC)
        if self._now.tzinfo is None:
            self._now = self._now.replace(tzinfo=UTC)

    def now(self) -> datetime:
        return self._now

    def set(self, instant: datetime) -> None:
        """Move the clock to an absolute instant."""
        self._now = instant if instant.tzinfo else instant.replace(tzinfo=UTC)

    def advance(self, *, days: int = 0, hours: int = 0, minutes: int = 0) -> None:
        """Move the clock forward by a relative amount."""
        self._now += timedelta(days=days, hours=hours, minutes=minutes)
