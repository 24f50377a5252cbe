"""The lake: short notes resurfaced one per day."""

from nuremento.lake.models import LakeNote, LakeNoteCreate
from nuremento.lake.service import LakeService
from nuremento.lake.store import LakeNoteStore

__all__ = ["LakeNote", "LakeNoteCreate", "LakeNoteStore", "LakeService"]
