"""FastAPI dependencies wiring routes to services.

Stores, the clock, the pool and the rate limiter are process-wide
singletons built on first use from settings; settings.storage.backend
picks in-memory or Postgres stores. Tests swap any of them through
app.dependency_overrides.
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends

from nuremento.api.exceptions import RateLimitExceededError, ResourceNotFoundError
from nuremento.api.middleware.auth import OwnerContextDep
from nuremento.api.middleware.rate_limit import RateLimiter, SlidingWindowRateLimiter
from nuremento.api.models.context import RateLimitResult
from nuremento.capsules import CapsuleService, CapsuleStore
from nuremento.capsules.stores import InMemoryCapsuleStore, PostgresCapsuleStore
from nuremento.clock import Clock, SystemClock
from nuremento.config import get_settings
from nuremento.config.settings import Settings
from nuremento.db.pool import PostgresPool
from nuremento.lake import LakeNoteStore, LakeService
from nuremento.lake.stores import InMemoryLakeNoteStore, PostgresLakeNoteStore
from nuremento.memories import MemoryService, MemoryStore
from nuremento.memories.stores import InMemoryMemoryStore, PostgresMemoryStore
from nuremento.observability.logging import get_logger
from nuremento.picker import DailyPickStateStore
from nuremento.picker.stores import InMemoryDailyPickStateStore, PostgresDailyPickStateStore

logger = get_logger(__name__)

# Built on first use
_postgres_pool: PostgresPool | None = None
_clock: Clock | None = None
_memory_store: MemoryStore | None = None
_lake_note_store: LakeNoteStore | None = None
_pick_state_store: DailyPickStateStore | None = None
_capsule_store: CapsuleStore | None = None
_rate_limiter: RateLimiter | None = None


SettingsDep = Annotated[Settings, Depends(get_settings)]


async def get_postgres_pool(settings: SettingsDep) -> PostgresPool:
    """Connect the shared pool on first use. See PostgresPool.dsn_from_env."""
    global _postgres_pool
    if _postgres_pool is None:
        pg = settings.storage.postgres
        pool = PostgresPool(
            min_size=pg.min_pool_size,
            max_size=pg.max_pool_size,
            max_inactive_connection_lifetime=pg.max_inactive_connection_lifetime,
            command_timeout=pg.command_timeout,
        )
        await pool.connect()
        _postgres_pool = pool
    return _postgres_pool


def get_clock(settings: SettingsDep) -> Clock:
    """Get the clock every date computation reads from."""
    global _clock
    if _clock is None:
        _clock = SystemClock(settings.clock.timezone)
        logger.info("clock_initialized", timezone=settings.clock.timezone)
    return _clock


async def get_memory_store(settings: SettingsDep) -> MemoryStore:
    global _memory_store
    if _memory_store is None:
        if settings.storage.backend == "postgres":
            _memory_store = PostgresMemoryStore(await get_postgres_pool(settings))
        else:
            _memory_store = InMemoryMemoryStore()
        logger.info("memory_store_initialized", store_type=settings.storage.backend)
    return _memory_store


async def get_lake_note_store(settings: SettingsDep) -> LakeNoteStore:
    global _lake_note_store
    if _lake_note_store is None:
        if settings.storage.backend == "postgres":
            _lake_note_store = PostgresLakeNoteStore(await get_postgres_pool(settings))
        else:
            _lake_note_store = InMemoryLakeNoteStore()
        logger.info("lake_note_store_initialized", store_type=settings.storage.backend)
    return _lake_note_store


async def get_pick_state_store(settings: SettingsDep) -> DailyPickStateStore:
    global _pick_state_store
    if _pick_state_store is None:
        if settings.storage.backend == "postgres":
            _pick_state_store = PostgresDailyPickStateStore(await get_postgres_pool(settings))
        else:
            _pick_state_store = InMemoryDailyPickStateStore()
        logger.info("pick_state_store_initialized", store_type=settings.storage.backend)
    return _pick_state_store


async def get_capsule_store(settings: SettingsDep) -> CapsuleStore:
    global _capsule_store
    if _capsule_store is None:
        if settings.storage.backend == "postgres":
            _capsule_store = PostgresCapsuleStore(await get_postgres_pool(settings))
        else:
            _capsule_store = InMemoryCapsuleStore()
        logger.info("capsule_store_initialized", store_type=settings.storage.backend)
    return _capsule_store


def get_rate_limiter(settings: SettingsDep) -> RateLimiter:
    global _rate_limiter
    if _rate_limiter is None:
        _rate_limiter = SlidingWindowRateLimiter(
            window_seconds=settings.api.rate_limit.window_seconds
        )
    return _rate_limiter


ClockDep = Annotated[Clock, Depends(get_clock)]
MemoryStoreDep = Annotated[MemoryStore, Depends(get_memory_store)]
LakeNoteStoreDep = Annotated[LakeNoteStore, Depends(get_lake_note_store)]
PickStateStoreDep = Annotated[DailyPickStateStore, Depends(get_pick_state_store)]
CapsuleStoreDep = Annotated[CapsuleStore, Depends(get_capsule_store)]
RateLimiterDep = Annotated[RateLimiter, Depends(get_rate_limiter)]


def get_memory_service(store: MemoryStoreDep, clock: ClockDep) -> MemoryService:
    return MemoryService(store, clock)


def get_lake_service(
    store: LakeNoteStoreDep,
    state_store: PickStateStoreDep,
    clock: ClockDep,
) -> LakeService:
    return LakeService(store, state_store, clock)


def get_capsule_service(
    store: CapsuleStoreDep,
    clock: ClockDep,
    settings: SettingsDep,
) -> CapsuleService:
    return CapsuleService(store, clock, settings.capsules)


def enforce_memory_rate_limit(
    owner: OwnerContextDep,
    limiter: RateLimiterDep,
    settings: SettingsDep,
) -> RateLimitResult | None:
    """Reject memory creation once the owner's window is full.

    Raises:
        RateLimitExceededError: If the owner exceeded the configured limit
    """
    config = settings.api.rate_limit
    if not config.enabled:
        return None

    result = limiter.check(f"memories:{owner.owner_id}", config.memories_per_window)
    if not result.allowed:
        logger.warning("memory_rate_limit_exceeded", limit=result.limit)
        raise RateLimitExceededError(
            "Too many memories created recently. Please try again later."
        )
    return result


MemoryServiceDep = Annotated[MemoryService, Depends(get_memory_service)]
LakeServiceDep = Annotated[LakeService, Depends(get_lake_service)]
CapsuleServiceDep = Annotated[CapsuleService, Depends(get_capsule_service)]
MemoryRateLimitDep = Annotated[RateLimitResult | None, Depends(enforce_memory_rate_limit)]


async def reset_dependencies() -> None:
    """Drop every singleton, closing the pool first, and reload settings on next use."""
    global _postgres_pool, _clock, _memory_store, _lake_note_store
    global _pick_state_store, _capsule_store, _rate_limiter

    if _postgres_pool is not None:
        await _postgres_pool.close()
        _postgres_pool = None

    _clock = None
    _memory_store = None
    _lake_note_store = None
    _pick_state_store = None
    _capsule_store = None
    _rate_limiter = None
    get_settings.cache_clear()


def parse_record_id(raw: str, message: str) -> UUID:
    """Parse a path id; a malformed id is reported like a missing record."""
    try:
        return UUID(raw)
    except ValueError:
        raise ResourceNotFoundError(message) from None
