"""PostgreSQL implementation of DailyPickStateStore."""

from datetime import date, datetime

from nuremento.db.errors import ConnectionError
from nuremento.db.pool import PostgresPool
from nuremento.observability.logging import get_logger
from nuremento.picker.models import DailyPickState
from nuremento.picker.store import DailyPickStateStore

logger = get_logger(__name__)


class PostgresDailyPickStateStore(DailyPickStateStore):
    """PostgreSQL implementation of DailyPickStateStore.

    claim_day is one INSERT ... ON CONFLICT statement whose update branch
    only fires when the stored day differs, so two concurrent claims for
    the same day cannot both return a row.
    """

    def __init__(self, pool: PostgresPool) -> None:
        self._pool = pool

    async def get(self, owner_id: str) -> DailyPickState | None:
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    """
                    SELECT owner_id, last_served_on, updated_at
                    FROM daily_pick_state
                    WHERE owner_id = $1
                    """,
                    owner_id,
                )
                if row is None:
                    return None
                return DailyPickState(
                    owner_id=row["owner_id"],
                    last_served_on=row["last_served_on"],
                    updated_at=row["updated_at"],
                )
        except Exception as e:
            logger.error("postgres_get_pick_state_error", error=str(e))
            raise ConnectionError(f"Failed to get daily pick state: {e}", cause=e) from e

    async def claim_day(self, owner_id: str, day: date, now: datetime) -> bool:
        try:
            async with self._pool.acquire() as conn:
                claimed = await conn.fetchval(
                    """
                    INSERT INTO daily_pick_state (owner_id, last_served_on, updated_at)
                    VALUES ($1, $2, $3)
                    ON CONFLICT (owner_id) DO UPDATE
                    SET last_served_on = EXCLUDED.last_served_on,
                        updated_at = EXCLUDED.updated_at
                    WHERE daily_pick_state.last_served_on
                        IS DISTINCT FROM EXCLUDED.last_served_on
                    RETURNING owner_id
                    """,
                    owner_id,
                    day,
                    now,
                )
                return claimed is not None
        except Exception as e:
            logger.error("postgres_claim_day_error", day=day.isoformat(), error=str(e))
            raise ConnectionError(f"Failed to record daily pick: {e}", cause=e) from e
