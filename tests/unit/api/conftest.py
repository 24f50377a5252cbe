"""Fixtures for API tests: an app wired to in-memory stores and a fixed clock."""

from collections.abc import Callable

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from nuremento.api.app import create_app
from nuremento.api.dependencies import (
    get_capsule_store,
    get_clock,
    get_lake_note_store,
    get_memory_store,
    get_pick_state_store,
    get_rate_limiter,
    get_settings,
    reset_dependencies,
)
from nuremento.api.middleware.rate_limit import SlidingWindowRateLimiter
from nuremento.capsules.stores.inmemory import InMemoryCapsuleStore
from nuremento.clock import FixedClock
from nuremento.config.settings import Settings
from nuremento.lake.stores.inmemory import InMemoryLakeNoteStore
from nuremento.memories.stores.inmemory import InMemoryMemoryStore
from nuremento.picker.stores.inmemory import InMemoryDailyPickStateStore


class ManualTime:
    """Epoch-seconds source for the rate limiter, advanced by hand."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.value = start

    def __call__(self) -> float:
        return self.value


@pytest.fixture
def settings_overrides() -> dict:
    """Per-test Settings overrides; tests replace this fixture to change behavior."""
    return {}


@pytest.fixture
def test_settings(settings_overrides: dict) -> Settings:
    return Settings(storage={"backend": "inmemory"}, **settings_overrides)


@pytest.fixture
def memory_store() -> InMemoryMemoryStore:
    return InMemoryMemoryStore()


@pytest.fixture
def lake_note_store() -> InMemoryLakeNoteStore:
    return InMemoryLakeNoteStore()


@pytest.fixture
def pick_state_store() -> InMemoryDailyPickStateStore:
    return InMemoryDailyPickStateStore()


@pytest.fixture
def capsule_store() -> InMemoryCapsuleStore:
    return InMemoryCapsuleStore()


@pytest.fixture
def manual_time() -> ManualTime:
    return ManualTime()


@pytest.fixture
def rate_limiter(test_settings: Settings, manual_time: ManualTime) -> SlidingWindowRateLimiter:
    return SlidingWindowRateLimiter(
        window_seconds=test_settings.api.rate_limit.window_seconds,
        time_func=manual_time,
    )


@pytest.fixture
async def app(
    test_settings: Settings,
    clock: FixedClock,
    memory_store: InMemoryMemoryStore,
    lake_note_store: InMemoryLakeNoteStore,
    pick_state_store: InMemoryDailyPickStateStore,
    capsule_store: InMemoryCapsuleStore,
    rate_limiter: SlidingWindowRateLimiter,
    jwt_secret: str,
) -> FastAPI:
    """Create the application with every external dependency overridden."""
    await reset_dependencies()

    app = create_app()
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_memory_store] = lambda: memory_store
    app.dependency_overrides[get_lake_note_store] = lambda: lake_note_store
    app.dependency_overrides[get_pick_state_store] = lambda: pick_state_store
    app.dependency_overrides[get_capsule_store] = lambda: capsule_store
    app.dependency_overrides[get_rate_limiter] = lambda: rate_limiter
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def auth_headers(make_token: Callable[[str], str]) -> Callable[[str], dict[str, str]]:
    """Factory for Authorization headers for a given owner."""

    def _headers(owner_id: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {make_token(owner_id)}"}

    return _headers
