"""LakeNoteStore abstract interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from nuremento.lake.models import LakeNote


class LakeNoteStore(ABC):
    """Abstract interface for lake note storage."""

    @abstractmethod
    async def add(self, note: LakeNote) -> UUID:
        """Persist a new note."""
        pass

    @abstractmethod
    async def list_ordered(self, owner_id: str) -> list[LakeNote]:
        """List all of the owner's notes by created_at, then id."""
        pass

    @abstractmethod
    async def delete(self, owner_id: str, note_id: UUID) -> bool:
        """Delete one of the owner's notes.

        Returns:
            False if no row matched id and owner
        """
        pass
