"""In-memory implementation of LakeNoteStore."""

import asyncio
from uuid import UUID

from nuremento.lake.models import LakeNote
from nuremento.lake.store import LakeNoteStore


class InMemoryLakeNoteStore(LakeNoteStore):
    """In-memory implementation of LakeNoteStore for testing and development."""

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._notes: dict[UUID, LakeNote] = {}
        self._lock = asyncio.Lock()

    async def add(self, note: LakeNote) -> UUID:
        """Add a note."""
        async with self._lock:
            self._notes[note.id] = note.model_copy()
        return note.id

    async def list_ordered(self, owner_id: str) -> list[LakeNote]:
        """List an owner's notes oldest first."""
        results = [n.model_copy() for n in self._notes.values() if n.owner_id == owner_id]
        results.sort(key=lambda n: (n.created_at, n.id))
        return results

    async def delete(self, owner_id: str, note_id: UUID) -> bool:
        """Delete a note owned by owner_id."""
        async with self._lock:
            current = self._notes.get(note_id)
            if current is None or current.owner_id != owner_id:
                return False
            del self._notes[note_id]
            return True
