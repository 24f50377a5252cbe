"""Memory API models."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel

from nuremento.memories.models import Memory


class MemoryResponse(BaseModel):
    id: UUID
    title: str
    description: str
    mood: str | None = None
    location: str | None = None
    occurred_on: date | None = None
    created_at: datetime

    @classmethod
    def from_memory(cls, memory: Memory) -> "MemoryResponse":
        return cls(
            id=memory.id,
            title=memory.title,
            description=memory.description,
            mood=memory.mood,
            location=memory.location,
            occurred_on=memory.occurred_on,
            created_at=memory.created_at,
        )


class MemoryEnvelope(BaseModel):
    """Single memory, or null when there is nothing to show."""

    memory: MemoryResponse | None


class MemoryListResponse(BaseModel):
    memories: list[MemoryResponse]
