"""In-memory implementation of DailyPickStateStore."""

import asyncio
from datetime import date, datetime

from nuremento.picker.models import DailyPickState
from nuremento.picker.store import DailyPickStateStore


class InMemoryDailyPickStateStore(DailyPickStateStore):
    """In-memory implementation for testing and development.

    An asyncio.Lock makes claim_day a single atomic step.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._states: dict[str, DailyPickState] = {}
        self._lock = asyncio.Lock()

    async def get(self, owner_id: str) -> DailyPickState | None:
        """Get an owner's pick state."""
        state = self._states.get(owner_id)
        return state.model_copy() if state else None

    async def claim_day(self, owner_id: str, day: date, now: datetime) -> bool:
        """Record day as served unless it already is."""
        async with self._lock:
            current = self._states.get(owner_id)
            if current is not None and current.last_served_on == day:
                return False
            self._states[owner_id] = DailyPickState(
                owner_id=owner_id,
                last_served_on=day,
                updated_at=now,
            )
            return True
