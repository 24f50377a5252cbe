"""PostgreSQL implementation of MemoryStore.

Uses asyncpg for async database access.
"""

from typing import Any
from uuid import UUID

from nuremento.db.errors import ConnectionError
from nuremento.db.pool import PostgresPool
from nuremento.memories.models import Memory
from nuremento.memories.store import MemoryStore
from nuremento.observability.logging import get_logger

logger = get_logger(__name__)

_COLUMNS = """
    id, owner_id, title, description, mood, location, occurred_on, created_at
"""


class PostgresMemoryStore(MemoryStore):
    """PostgreSQL implementation of MemoryStore."""

    def __init__(self, pool: PostgresPool) -> None:
        self._pool = pool

    async def add(self, memory: Memory) -> UUID:
        try:
            async with self._pool.acquire() as conn:
                await conn.execute(
                    """
                    INSERT INTO memories (
                        id, owner_id, title, description, mood, location,
                        occurred_on, created_at
                    ) VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
                    """,
                    memory.id,
                    memory.owner_id,
                    memory.title,
                    memory.description,
                    memory.mood,
                    memory.location,
                    memory.occurred_on,
                    memory.created_at,
                )
                logger.debug("memory_saved", memory_id=str(memory.id))
                return memory.id
        except Exception as e:
            logger.error("postgres_add_memory_error", memory_id=str(memory.id), error=str(e))
            raise ConnectionError(f"Failed to save memory: {e}", cause=e) from e

    async def get(self, owner_id: str, memory_id: UUID) -> Memory | None:
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    f"SELECT {_COLUMNS} FROM memories WHERE id = $1 AND owner_id = $2",
                    memory_id,
                    owner_id,
                )
                return self._row_to_memory(row) if row else None
        except Exception as e:
            logger.error("postgres_get_memory_error", memory_id=str(memory_id), error=str(e))
            raise ConnectionError(f"Failed to get memory: {e}", cause=e) from e

    async def list_ordered(self, owner_id: str) -> list[Memory]:
        try:
            async with self._pool.acquire() as conn:
                rows = await conn.fetch(
                    f"""
                    SELECT {_COLUMNS} FROM memories
                    WHERE owner_id = $1
                    ORDER BY created_at ASC, id ASC
                    """,
                    owner_id,
                )
                return [self._row_to_memory(row) for row in rows]
        except Exception as e:
            logger.error("postgres_list_memories_error", error=str(e))
            raise ConnectionError(f"Failed to list memories: {e}", cause=e) from e

    async def list_recent(self, owner_id: str, *, limit: int) -> list[Memory]:
        try:
            async with self._pool.acquire() as conn:
                rows = await conn.fetch(
                    f"""
                    SELECT {_COLUMNS} FROM memories
                    WHERE owner_id = $1
                    ORDER BY created_at DESC
                    LIMIT $2
                    """,
                    owner_id,
                    limit,
                )
                return [self._row_to_memory(row) for row in rows]
        except Exception as e:
            logger.error("postgres_list_recent_memories_error", error=str(e))
            raise ConnectionError(f"Failed to list recent memories: {e}", cause=e) from e

    async def update(self, memory: Memory) -> bool:
        try:
            async with self._pool.acquire() as conn:
                updated = await conn.fetchval(
                    """
                    UPDATE memories
                    SET title = $3, description = $4, mood = $5,
                        location = $6, occurred_on = $7
                    WHERE id = $1 AND owner_id = $2
                    RETURNING id
                    """,
                    memory.id,
                    memory.owner_id,
                    memory.title,
                    memory.description,
                    memory.mood,
                    memory.location,
                    memory.occurred_on,
                )
                return updated is not None
        except Exception as e:
            logger.error("postgres_update_memory_error", memory_id=str(memory.id), error=str(e))
            raise ConnectionError(f"Failed to update memory: {e}", cause=e) from e

    async def delete(self, owner_id: str, memory_id: UUID) -> bool:
        try:
            async with self._pool.acquire() as conn:
                deleted = await conn.fetchval(
                    "DELETE FROM memories WHERE id = $1 AND owner_id = $2 RETURNING id",
                    memory_id,
                    owner_id,
                )
                return deleted is not None
        except Exception as e:
            logger.error("postgres_delete_memory_error", memory_id=str(memory_id), error=str(e))
            raise ConnectionError(f"Failed to delete memory: {e}", cause=e) from e

    def _row_to_memory(self, row: Any) -> Memory:
        return Memory(
            id=row["id"],
            owner_id=row["owner_id"],
            title=row["title"],
            description=row["description"],
            mood=row["mood"],
            location=row["location"],
            occurred_on=row["occurred_on"],
            created_at=row["created_at"],
        )
