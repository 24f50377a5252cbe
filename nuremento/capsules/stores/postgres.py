"""PostgreSQL implementation of CapsuleStore.

Uses asyncpg for async database access.
"""

from datetime import date, datetime
from typing import Any
from uuid import UUID

from nuremento.capsules.models import TimeCapsule
from nuremento.capsules.store import CapsuleStore
from nuremento.db.errors import ConnectionError
from nuremento.db.pool import PostgresPool
from nuremento.observability.logging import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, owner_id, title, message, open_on, opened_at, created_at"


class PostgresCapsuleStore(CapsuleStore):
    """PostgreSQL implementation of CapsuleStore.

    add_within_quota serializes per owner with a transaction-scoped
    advisory lock so two concurrent creations cannot both pass the count.
    consume is a single DELETE ... RETURNING, so only one caller can
    receive the deleted row.
    """

    def __init__(self, pool: PostgresPool) -> None:
        self._pool = pool

    async def add_within_quota(self, capsule: TimeCapsule, max_count: int) -> bool:
        try:
            async with self._pool.acquire() as conn:
                async with conn.transaction():
                    await conn.execute(
                        "SELECT pg_advisory_xact_lock(hashtext('time_capsules:' || $1))",
                        capsule.owner_id,
                    )
                    held = await conn.fetchval(
                        "SELECT count(*) FROM time_capsules WHERE owner_id = $1",
                        capsule.owner_id,
                    )
                    if held >= max_count:
                        return False
                    await conn.execute(
                        """
                        INSERT INTO time_capsules (
                            id, owner_id, title, message, open_on, opened_at, created_at
                        ) VALUES ($1, $2, $3, $4, $5, $6, $7)
                        """,
                        capsule.id,
                        capsule.owner_id,
                        capsule.title,
                        capsule.message,
                        capsule.open_on,
                        capsule.opened_at,
                        capsule.created_at,
                    )
                    logger.debug("capsule_saved", capsule_id=str(capsule.id))
                    return True
        except Exception as e:
            logger.error("postgres_add_capsule_error", capsule_id=str(capsule.id), error=str(e))
            raise ConnectionError(f"Failed to save time capsule: {e}", cause=e) from e

    async def get(self, owner_id: str, capsule_id: UUID) -> TimeCapsule | None:
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    f"SELECT {_COLUMNS} FROM time_capsules WHERE id = $1 AND owner_id = $2",
                    capsule_id,
                    owner_id,
                )
                return self._row_to_capsule(row) if row else None
        except Exception as e:
            logger.error("postgres_get_capsule_error", capsule_id=str(capsule_id), error=str(e))
            raise ConnectionError(f"Failed to get time capsule: {e}", cause=e) from e

    async def list_for_owner(self, owner_id: str) -> list[TimeCapsule]:
        try:
            async with self._pool.acquire() as conn:
                rows = await conn.fetch(
                    f"""
                    SELECT {_COLUMNS} FROM time_capsules
                    WHERE owner_id = $1
                    ORDER BY open_on ASC, created_at ASC
                    """,
                    owner_id,
                )
                return [self._row_to_capsule(row) for row in rows]
        except Exception as e:
            logger.error("postgres_list_capsules_error", error=str(e))
            raise ConnectionError(f"Failed to list time capsules: {e}", cause=e) from e

    async def mark_opened(
        self, owner_id: str, capsule_id: UUID, opened_at: datetime
    ) -> TimeCapsule | None:
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    f"""
                    UPDATE time_capsules
                    SET opened_at = COALESCE(opened_at, $3)
                    WHERE id = $1 AND owner_id = $2
                    RETURNING {_COLUMNS}
                    """,
                    capsule_id,
                    owner_id,
                    opened_at,
                )
                return self._row_to_capsule(row) if row else None
        except Exception as e:
            logger.error("postgres_mark_opened_error", capsule_id=str(capsule_id), error=str(e))
            raise ConnectionError(f"Failed to open time capsule: {e}", cause=e) from e

    async def consume(self, owner_id: str, capsule_id: UUID, today: date) -> TimeCapsule | None:
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    f"""
                    DELETE FROM time_capsules
                    WHERE id = $1 AND owner_id = $2 AND open_on <= $3
                    RETURNING {_COLUMNS}
                    """,
                    capsule_id,
                    owner_id,
                    today,
                )
                return self._row_to_capsule(row) if row else None
        except Exception as e:
            logger.error("postgres_consume_capsule_error", capsule_id=str(capsule_id), error=str(e))
            raise ConnectionError(f"Failed to open time capsule: {e}", cause=e) from e

    async def delete(self, owner_id: str, capsule_id: UUID) -> bool:
        try:
            async with self._pool.acquire() as conn:
                deleted = await conn.fetchval(
                    "DELETE FROM time_capsules WHERE id = $1 AND owner_id = $2 RETURNING id",
                    capsule_id,
                    owner_id,
                )
                return deleted is not None
        except Exception as e:
            logger.error("postgres_delete_capsule_error", capsule_id=str(capsule_id), error=str(e))
            raise ConnectionError(f"Failed to delete time capsule: {e}", cause=e) from e

    def _row_to_capsule(self, row: Any) -> TimeCapsule:
        return TimeCapsule(
            id=row["id"],
            owner_id=row["owner_id"],
            title=row["title"],
            message=row["message"],
            open_on=row["open_on"],
            opened_at=row["opened_at"],
            created_at=row["created_at"],
        )
