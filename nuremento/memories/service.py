"""Memory operations."""

import re
from uuid import UUID

from nuremento.clock import Clock
from nuremento.errors import NotFoundError
from nuremento.memories.models import Memory, MemoryCreate, MemoryUpdate
from nuremento.memories.store import MemoryStore
from nuremento.observability.logging import get_logger
from nuremento.picker import DailyPicker

logger = get_logger(__name__)

DEFAULT_RECENT_LIMIT = 3
MAX_RECENT_LIMIT = 12

LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


def clamp_recent_limit(limit: str | int | None) -> int:
    """Resolve a requested page size to the 1..12 range.

    Query strings are read up to the first non-digit, so "5abc" means 5.
    Missing, empty or non-numeric input falls back to the default of 3.
    """
    if isinstance(limit, str):
        match = LEADING_INTEGER.match(limit)
        limit = int(match.group(1)) if match else None
    if limit is None:
        return DEFAULT_RECENT_LIMIT
    return min(max(limit, 1), MAX_RECENT_LIMIT)


class MemoryService:
    """Create, browse and resurface an owner's memories."""

    def __init__(self, store: MemoryStore, clock: Clock) -> None:
        self._store = store
        self._clock = clock
        self._picker: DailyPicker[Memory] = DailyPicker(store, clock, collection="memories")

    async def create_memory(self, owner_id: str, data: MemoryCreate) -> Memory:
        memory = Memory(
            owner_id=owner_id,
            title=data.title,
            description=data.description,
            mood=data.mood,
            location=data.location,
            occurred_on=data.occurred_on,
            created_at=self._clock.now(),
        )
        await self._store.add(memory)
        logger.info("memory_created", memory_id=str(memory.id))
        return memory

    async def list_recent(self, owner_id: str, limit: str | int | None = None) -> list[Memory]:
        return await self._store.list_recent(owner_id, limit=clamp_recent_limit(limit))

    async def update_memory(self, owner_id: str, memory_id: UUID, data: MemoryUpdate) -> Memory:
        """Replace a memory's content.

        Raises:
            NotFoundError: If the memory is missing or owned by someone else
        """
        memory = await self._store.get(owner_id, memory_id)
        if memory is None:
            raise NotFoundError("Memory not found.")

        updated = memory.model_copy(
            update={
                "title": data.title,
                "description": data.description,
                "mood": data.mood,
                "location": data.location,
                "occurred_on": data.occurred_on,
            }
        )
        if not await self._store.update(updated):
            raise NotFoundError("Memory not found.")

        logger.info("memory_updated", memory_id=str(memory_id))
        return updated

    async def delete_memory(self, owner_id: str, memory_id: UUID) -> None:
        if not await self._store.delete(owner_id, memory_id):
            raise NotFoundError("Memory not found.")
        logger.info("memory_deleted", memory_id=str(memory_id))

    async def daily_memory(self, owner_id: str) -> Memory | None:
        """Today's memory for the owner; stable for the whole day."""
        return await self._picker.pick_today(owner_id)
