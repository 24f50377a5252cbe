"""asyncpg connection pool shared by every Postgres store."""

import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import asyncpg

from nuremento.db.errors import ConnectionError
from nuremento.observability.logging import get_logger

logger = get_logger(__name__)


class PostgresPool:
    """Lazily connected asyncpg pool.

    Stores call acquire(); the first call opens the pool. Driver errors
    raised inside an acquired connection surface as ConnectionError.
    """

    def __init__(
        self,
        dsn: str | None = None,
        min_size: int = 5,
        max_size: int = 20,
        max_inactive_connection_lifetime: float = 300.0,
        command_timeout: float = 60.0,
    ) -> None:
        self._dsn = dsn or self.dsn_from_env()
        self._pool_kwargs = {
            "min_size": min_size,
            "max_size": max_size,
            "max_inactive_connection_lifetime": max_inactive_connection_lifetime,
            "command_timeout": command_timeout,
        }
        self._pool: asyncpg.Pool | None = None

    @staticmethod
    def dsn_from_env() -> str:
        """Resolve the DSN from NUREMENTO_DATABASE_URL or DATABASE_URL.

        Falls back to a local database assembled from the POSTGRES_* variables.
        """
        dsn = os.environ.get("NUREMENTO_DATABASE_URL") or os.environ.get("DATABASE_URL")
        if dsn:
            return dsn
        user = os.environ.get("POSTGRES_USER", "nuremento")
        password = os.environ.get("POSTGRES_PASSWORD", "nuremento")
        host = os.environ.get("POSTGRES_HOST", "localhost")
        port = os.environ.get("POSTGRES_PORT", "5432")
        database = os.environ.get("POSTGRES_DB", "nuremento")
        return f"postgresql://{user}:{password}@{host}:{port}/{database}"

    async def connect(self) -> None:
        if self._pool is not None:
            return
        try:
            self._pool = await asyncpg.create_pool(dsn=self._dsn, **self._pool_kwargs)
        except (OSError, asyncpg.PostgresError, asyncpg.InterfaceError) as e:
            logger.error("postgres_pool_connection_failed", error=str(e))
            raise ConnectionError(f"Failed to connect to PostgreSQL: {e}", cause=e) from e
        logger.info(
            "postgres_pool_connected",
            min_size=self._pool_kwargs["min_size"],
            max_size=self._pool_kwargs["max_size"],
        )

    async def close(self) -> None:
        if self._pool is None:
            return
        await self._pool.close()
        self._pool = None
        logger.info("postgres_pool_closed")

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[asyncpg.Connection]:
        if self._pool is None:
            await self.connect()
        try:
            async with self._pool.acquire() as connection:
                yield connection
        except asyncpg.PostgresError as e:
            logger.error("postgres_query_failed", error=str(e))
            raise ConnectionError(f"PostgreSQL error: {e}", cause=e) from e

    async def health_check(self) -> bool:
        """Run SELECT 1; False when the pool is closed or the query fails."""
        if self._pool is None:
            return False
        try:
            async with self._pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
        except (OSError, asyncpg.PostgresError, asyncpg.InterfaceError) as e:
            logger.warning("postgres_health_check_failed", error=str(e))
            return False
        return True
