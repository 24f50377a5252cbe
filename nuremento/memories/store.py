"""MemoryStore abstract interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from nuremento.memories.models import Memory


class MemoryStore(ABC):
    """Abstract interface for memory storage.

    Every method is scoped by owner_id.
    """

    @abstractmethod
    async def add(self, memory: Memory) -> UUID:
        """Persist a new memory."""
        pass

    @abstractmethod
    async def get(self, owner_id: str, memory_id: UUID) -> Memory | None:
        """Get one of the owner's memories."""
        pass

    @abstractmethod
    async def list_ordered(self, owner_id: str) -> list[Memory]:
        """List all of the owner's memories by created_at, then id."""
        pass

    @abstractmethod
    async def list_recent(self, owner_id: str, *, limit: int) -> list[Memory]:
        """List the owner's newest memories first."""
        pass

    @abstractmethod
    async def update(self, memory: Memory) -> bool:
        """Replace the editable content of a memory.

        Returns:
            False if no row matched id and owner
        """
        pass

    @abstractmethod
    async def delete(self, owner_id: str, memory_id: UUID) -> bool:
        """Delete one of the owner's memories.

        Returns:
            False if no row matched id and owner
        """
        pass
