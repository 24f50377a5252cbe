"""In-memory implementation of CapsuleStore."""

import asyncio
from datetime import date, datetime
from uuid import UUID

from nuremento.capsules.models import TimeCapsule
from nuremento.capsules.store import CapsuleStore


class InMemoryCapsuleStore(CapsuleStore):
    """In-memory implementation of CapsuleStore for testing and development.

    Conditional writes run under a single asyncio.Lock.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._capsules: dict[UUID, TimeCapsule] = {}
        self._lock = asyncio.Lock()

    def _owned(self, owner_id: str, capsule_id: UUID) -> TimeCapsule | None:
        """Return the stored capsule if owner_id owns it."""
        capsule = self._capsules.get(capsule_id)
        if capsule is None or capsule.owner_id != owner_id:
            return None
        return capsule

    async def add_within_quota(self, capsule: TimeCapsule, max_count: int) -> bool:
        """Add capsule unless its owner already holds max_count."""
        async with self._lock:
            held = sum(1 for c in self._capsules.values() if c.owner_id == capsule.owner_id)
            if held >= max_count:
                return False
            self._capsules[capsule.id] = capsule.model_copy()
            return True

    async def get(self, owner_id: str, capsule_id: UUID) -> TimeCapsule | None:
        """Get a capsule by ID, scoped to its owner."""
        capsule = self._owned(owner_id, capsule_id)
        return capsule.model_copy() if capsule else None

    async def list_for_owner(self, owner_id: str) -> list[TimeCapsule]:
        """List an owner's capsules by open date, then creation time."""
        results = [c.model_copy() for c in self._capsules.values() if c.owner_id == owner_id]
        results.sort(key=lambda c: (c.open_on, c.created_at))
        return results

    async def mark_opened(
        self, owner_id: str, capsule_id: UUID, opened_at: datetime
    ) -> TimeCapsule | None:
        """Stamp opened_at on the first open only."""
        async with self._lock:
            capsule = self._owned(owner_id, capsule_id)
            if capsule is None:
                return None
            if capsule.opened_at is None:
                capsule.opened_at = opened_at
            return capsule.model_copy()

    async def consume(self, owner_id: str, capsule_id: UUID, today: date) -> TimeCapsule | None:
        """Remove and return a capsule whose open date has arrived."""
        async with self._lock:
            capsule = self._owned(owner_id, capsule_id)
            if capsule is None or capsule.open_on > today:
                return None
            del self._capsules[capsule_id]
            return capsule

    async def delete(self, owner_id: str, capsule_id: UUID) -> bool:
        """Delete a capsule owned by owner_id."""
        async with self._lock:
            if self._owned(owner_id, capsule_id) is None:
                return False
            del self._capsules[capsule_id]
            return True
