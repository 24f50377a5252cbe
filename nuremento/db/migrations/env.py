"""Alembic environment for the Nuremento schema.

Migrations run on SQLAlchemy's async engine with the asyncpg driver,
against the same database the stores use.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from nuremento.db.pool import PostgresPool

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Migrations are written by hand; no autogenerate metadata
target_metadata = None


def get_database_url() -> str:
    """Resolve the database URL for migrations.

    An explicit -x url=... wins; otherwise the stores' own resolution
    applies (NUREMENTO_DATABASE_URL, DATABASE_URL, then POSTGRES_*).
    The scheme is switched to postgresql+asyncpg.
    """
    url = context.get_x_argument(as_dictionary=True).get("url")
    if not url:
        url = PostgresPool.dsn_from_env()
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def run_migrations_offline() -> None:
    """Emit migration SQL without connecting to the database."""
    context.configure(
        url=get_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _apply(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Apply migrations against the live database."""
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = get_database_url()
    engine = async_engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)

    async with engine.connect() as connection:
        await connection.run_sync(_apply)
    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
