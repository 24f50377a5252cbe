"""Shared fixtures: configuration sandboxes, a frozen clock and tokens."""

from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from datetime import UTC, datetime
from pathlib import Path

import pytest

from nuremento.clock import FixedClock

TEST_JWT_SECRET = "test-secret-do-not-use"


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """An empty config/ directory to point NUREMENTO_CONFIG_DIR at."""
    path = tmp_path / "config"
    path.mkdir()
    return path


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Write {filename: toml_text} into test_config_dir.

        mock_toml_files({"default.toml": "[capsules]\\nmax_per_owner = 3"})
    """

    def _write(files: dict[str, str]) -> None:
        for name, text in files.items():
            (test_config_dir / name).write_text(text)

    return _write


@pytest.fixture
def env_override(
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[[dict[str, str]], AbstractContextManager[None]]:
    """Set environment variables for the duration of a with block.

        with env_override({"NUREMENTO_ENV": "test"}):
            ...
    """

    @contextmanager
    def _override(values: dict[str, str]) -> Iterator[None]:
        with monkeypatch.context() as patch:
            for key, value in values.items():
                patch.setenv(key, value)
            yield

    return _override


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Every test starts and ends with freshly loaded settings."""
    from nuremento.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clock() -> FixedClock:
    """Clock frozen at 2025-03-10 09:30 UTC."""
    return FixedClock(datetime(2025, 3, 10, 9, 30, tzinfo=UTC))


@pytest.fixture
def owner_id() -> str:
    return "user_alice"


@pytest.fixture
def other_owner_id() -> str:
    return "user_bob"


@pytest.fixture
def jwt_secret(monkeypatch: pytest.MonkeyPatch) -> str:
    """Set the JWT secret the auth dependency verifies tokens with."""
    monkeypatch.setenv("NUREMENTO_JWT_SECRET", TEST_JWT_SECRET)
    return TEST_JWT_SECRET


@pytest.fixture
def make_token(jwt_secret: str) -> Callable[[str], str]:
    """Factory for signed bearer tokens with the given sub claim."""
    from jose import jwt

    def _make_token(sub: str) -> str:
        return jwt.encode({"sub": sub}, jwt_secret, algorithm="HS256")

    return _make_token
