"""Lake operations: drop notes in, fish one out per day."""

from uuid import UUID

from nuremento.clock import Clock
from nuremento.errors import NotFoundError
from nuremento.lake.models import LakeNote, LakeNoteCreate
from nuremento.lake.store import LakeNoteStore
from nuremento.observability.logging import get_logger
from nuremento.picker import DailyPicker, DailyPickStateStore

logger = get_logger(__name__)


class LakeService:
    """Lake note operations.

    daily_note is the open lake: the same note all day, on every visit.
    ocean_note is the gated view: the day's note is handed out once and
    later visits that day get nothing.
    """

    def __init__(
        self,
        store: LakeNoteStore,
        state_store: DailyPickStateStore,
        clock: Clock,
    ) -> None:
        self._store = store
        self._clock = clock
        self._lake: DailyPicker[LakeNote] = DailyPicker(store, clock, collection="lake")
        self._ocean: DailyPicker[LakeNote] = DailyPicker(
            store, clock, collection="ocean", state_store=state_store
        )

    async def create_note(self, owner_id: str, data: LakeNoteCreate) -> LakeNote:
        note = LakeNote(
            owner_id=owner_id,
            title=data.title,
            message=data.message,
            created_at=self._clock.now(),
        )
        await self._store.add(note)
        logger.info("lake_note_created", note_id=str(note.id))
        return note

    async def delete_note(self, owner_id: str, note_id: UUID) -> None:
        if not await self._store.delete(owner_id, note_id):
            raise NotFoundError("Lake note not found.")
        logger.info("lake_note_deleted", note_id=str(note_id))

    async def daily_note(self, owner_id: str) -> LakeNote | None:
        return await self._lake.pick_today(owner_id)

    async def ocean_note(self, owner_id: str) -> LakeNote | None:
        return await self._ocean.pick_today_once(owner_id)
