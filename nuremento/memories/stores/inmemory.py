"""In-memory implementation of MemoryStore."""

import asyncio
from uuid import UUID

from nuremento.memories.models import Memory
from nuremento.memories.store import MemoryStore


class InMemoryMemoryStore(MemoryStore):
    """In-memory implementation of MemoryStore for testing and development.

    Uses simple dict storage with linear scan for queries.
    Not suitable for production use.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._memories: dict[UUID, Memory] = {}
        self._lock = asyncio.Lock()

    async def add(self, memory: Memory) -> UUID:
        """Add a memory."""
        async with self._lock:
            self._memories[memory.id] = memory.model_copy()
        return memory.id

    async def get(self, owner_id: str, memory_id: UUID) -> Memory | None:
        """Get a memory by ID, scoped to its owner."""
        memory = self._memories.get(memory_id)
        if memory is None or memory.owner_id != owner_id:
            return None
        return memory.model_copy()

    async def list_ordered(self, owner_id: str) -> list[Memory]:
        """List an owner's memories oldest first."""
        results = [m.model_copy() for m in self._memories.values() if m.owner_id == owner_id]
        results.sort(key=lambda m: (m.created_at, m.id))
        return results

    async def list_recent(self, owner_id: str, *, limit: int) -> list[Memory]:
        """List an owner's newest memories, up to limit."""
        results = [m.model_copy() for m in self._memories.values() if m.owner_id == owner_id]
        results.sort(key=lambda m: m.created_at, reverse=True)
        return results[:limit]

    async def update(self, memory: Memory) -> bool:
        """Replace a memory's stored content."""
        async with self._lock:
            current = self._memories.get(memory.id)
            if current is None or current.owner_id != memory.owner_id:
                return False
            self._memories[memory.id] = memory.model_copy()
            return True

    async def delete(self, owner_id: str, memory_id: UUID) -> bool:
        """Delete a memory owned by owner_id."""
        async with self._lock:
            current = self._memories.get(memory_id)
            if current is None or current.owner_id != owner_id:
                return False
            del self._memories[memory_id]
            return True
