"""Unit tests for capsule lock derivation and open-date rules."""

from datetime import UTC, date, datetime

import pytest

from nuremento.capsules import CapsuleState, TimeCapsule, capsule_state, is_locked, parse_open_on
from nuremento.capsules.lock import validate_open_on
from nuremento.errors import ValidationError

TODAY = date(2025, 3, 10)


def _capsule(open_on: date, opened_at: datetime | None = None) -> TimeCapsule:
    return TimeCapsule(
        owner_id="owner",
        title="For later",
        message="Hello from the past",
        open_on=open_on,
        opened_at=opened_at,
    )


class TestIsLocked:
    """Tests for is_locked."""

    def test_locked_before_open_date(self) -> None:
        assert is_locked(date(2025, 3, 11), TODAY) is True

    def test_unlocked_on_open_date(self) -> None:
        assert is_locked(TODAY, TODAY) is False

    def test_unlocked_after_open_date(self) -> None:
        assert is_locked(date(2025, 3, 1), TODAY) is False


class TestCapsuleState:
    """Tests for capsule_state."""

    def test_locked(self) -> None:
        assert capsule_state(_capsule(date(2025, 4, 1)), TODAY) == CapsuleState.LOCKED

    def test_unlocked_unread(self) -> None:
        assert capsule_state(_capsule(TODAY), TODAY) == CapsuleState.UNLOCKED_UNREAD

    def test_unlocked_read(self) -> None:
        opened = datetime(2025, 3, 10, 8, tzinfo=UTC)
        assert capsule_state(_capsule(TODAY, opened), TODAY) == CapsuleState.UNLOCKED_READ


class TestParseOpenOn:
    """Tests for parse_open_on."""

    def test_parses_iso_string(self) -> None:
        assert parse_open_on("2025-06-01") == date(2025, 6, 1)

    def test_strips_whitespace(self) -> None:
        assert parse_open_on(" 2025-06-01 ") == date(2025, 6, 1)

    def test_passes_dates_through(self) -> None:
        assert parse_open_on(date(2025, 6, 1)) == date(2025, 6, 1)

    def test_datetime_becomes_date(self) -> None:
        assert parse_open_on(datetime(2025, 6, 1, 15, 0)) == date(2025, 6, 1)

    @pytest.mark.parametrize("raw", ["06/01/2025", "2025-6-1", "tomorrow", "", "2025-06-01T00:00"])
    def test_rejects_non_iso_syntax(self, raw: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse_open_on(raw)
        assert exc_info.value.message == "openOn must be an ISO date string."

    @pytest.mark.parametrize("raw", ["2025-02-30", "2025-13-01", "2023-02-29"])
    def test_rejects_impossible_dates(self, raw: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse_open_on(raw)
        assert exc_info.value.message == "openOn is not a valid date."

    def test_rejects_non_strings(self) -> None:
        with pytest.raises(ValidationError):
            parse_open_on(20250601)  # type: ignore[arg-type]


class TestValidateOpenOn:
    """Tests for validate_open_on bounds."""

    def test_today_is_allowed(self) -> None:
        validate_open_on(TODAY, TODAY, 183)

    def test_last_allowed_day(self) -> None:
        validate_open_on(date(2025, 9, 9), TODAY, 183)

    def test_yesterday_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_open_on(date(2025, 3, 9), TODAY, 183)
        assert exc_info.value.message == "openOn must be today or later."

    def test_one_day_past_limit_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_open_on(date(2025, 9, 10), TODAY, 183)
        assert exc_info.value.message == "openOn cannot be more than 183 days away."
        assert exc_info.value.details == [("openOn", "At most 183 days ahead")]
