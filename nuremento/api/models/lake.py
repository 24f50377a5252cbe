"""Lake note API models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from nuremento.lake.models import LakeNote


class LakeNoteResponse(BaseModel):
    id: UUID
    title: str
    message: str
    created_at: datetime

    @classmethod
    def from_note(cls, note: LakeNote) -> "LakeNoteResponse":
        return cls(
            id=note.id,
            title=note.title,
            message=note.message,
            created_at=note.created_at,
        )


class LakeNoteEnvelope(BaseModel):
    """Single note, or null when there is nothing to show."""

    note: LakeNoteResponse | None
