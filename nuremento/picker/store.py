"""DailyPickStateStore abstract interface."""

from abc import ABC, abstractmethod
from datetime import date, datetime

from nuremento.picker.models import DailyPickState


class DailyPickStateStore(ABC):
    """Abstract interface for the once-per-day gate state."""

    @abstractmethod
    async def get(self, owner_id: str) -> DailyPickState | None:
        """Get the owner's pick state, if any pick was ever served."""
        pass

    @abstractmethod
    async def claim_day(self, owner_id: str, day: date, now: datetime) -> bool:
        """Atomically record that a pick was served to the owner on day.

        Implementations must perform a single conditional upsert: the
        write happens only if last_served_on is absent or differs from
        day.

        Returns:
            True if this call recorded the day, False if the day was
            already recorded (e.g. by a concurrent request)
        """
        pass
