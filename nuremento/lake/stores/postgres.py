"""PostgreSQL implementation of LakeNoteStore."""

from uuid import UUID

from nuremento.db.errors import ConnectionError
from nuremento.db.pool import PostgresPool
from nuremento.lake.models import LakeNote
from nuremento.lake.store import LakeNoteStore
from nuremento.observability.logging import get_logger

logger = get_logger(__name__)


class PostgresLakeNoteStore(LakeNoteStore):
    """PostgreSQL implementation of LakeNoteStore."""

    def __init__(self, pool: PostgresPool) -> None:
        self._pool = pool

    async def add(self, note: LakeNote) -> UUID:
        try:
            async with self._pool.acquire() as conn:
                await conn.execute(
                    """
                    INSERT INTO lake_notes (id, owner_id, title, message, created_at)
                    VALUES ($1, $2, $3, $4, $5)
                    """,
                    note.id,
                    note.owner_id,
                    note.title,
                    note.message,
                    note.created_at,
                )
                return note.id
        except Exception as e:
            logger.error("postgres_add_lake_note_error", note_id=str(note.id), error=str(e))
            raise ConnectionError(f"Failed to save lake note: {e}", cause=e) from e

    async def list_ordered(self, owner_id: str) -> list[LakeNote]:
        try:
            async with self._pool.acquire() as conn:
                rows = await conn.fetch(
                    """
                    SELECT id, owner_id, title, message, created_at
                    FROM lake_notes
                    WHERE owner_id = $1
                    ORDER BY created_at ASC, id ASC
                    """,
                    owner_id,
                )
                return [
                    LakeNote(
                        id=row["id"],
                        owner_id=row["owner_id"],
                        title=row["title"],
                        message=row["message"],
                        created_at=row["created_at"],
                    )
                    for row in rows
                ]
        except Exception as e:
            logger.error("postgres_list_lake_notes_error", error=str(e))
            raise ConnectionError(f"Failed to list lake notes: {e}", cause=e) from e

    async def delete(self, owner_id: str, note_id: UUID) -> bool:
        try:
            async with self._pool.acquire() as conn:
                deleted = await conn.fetchval(
                    "DELETE FROM lake_notes WHERE id = $1 AND owner_id = $2 RETURNING id",
                    note_id,
                    owner_id,
                )
                return deleted is not None
        except Exception as e:
            logger.error("postgres_delete_lake_note_error", note_id=str(note_id), error=str(e))
            raise ConnectionError(f"Failed to delete lake note: {e}", cause=e) from e
