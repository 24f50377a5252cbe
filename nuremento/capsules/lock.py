"""Lock derivation and open-date rules.

All comparisons are between calendar dates. Time of day never matters:
a capsule due today opens at the first moment of today.
"""

from datetime import date, datetime, timedelta
from enum import Enum

from nuremento.capsules.models import TimeCapsule
from nuremento.errors import ValidationError
from nuremento.models import ISO_DATE_PATTERN


class CapsuleState(str, Enum):
    """Observable states of a capsule.

    CONSUMED is never observed on a record: in single-use mode the record
    no longer exists once it is reached.
    """

    LOCKED = "locked"
    UNLOCKED_UNREAD = "unlocked_unread"
    UNLOCKED_READ = "unlocked_read"
    CONSUMED = "consumed"


def is_locked(open_on: date, today: date) -> bool:
    return today < open_on


def capsule_state(capsule: TimeCapsule, today: date) -> CapsuleState:
    if is_locked(capsule.open_on, today):
        return CapsuleState.LOCKED
    if capsule.opened_at is None:
        return CapsuleState.UNLOCKED_UNREAD
    return CapsuleState.UNLOCKED_READ


def parse_open_on(raw: date | str) -> date:
    """Parse an open date given as a date or a YYYY-MM-DD string.

    Raises:
        ValidationError: If the value is not a real calendar date
    """
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str) or not ISO_DATE_PATTERN.match(raw.strip()):
        raise ValidationError(
            "openOn must be an ISO date string.",
            details=[("openOn", "Expected YYYY-MM-DD")],
        )
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        raise ValidationError(
            "openOn is not a valid date.",
            details=[("openOn", "Not a calendar date")],
        ) from None


def validate_open_on(open_on: date, today: date, max_future_days: int) -> None:
    """Check that open_on is between today and today + max_future_days.

    Raises:
        ValidationError: If open_on is in the past or too far ahead
    """
    if open_on < today:
        raise ValidationError(
            "openOn must be today or later.",
            details=[("openOn", "Date is in the past")],
        )
    if open_on > today + timedelta(days=max_future_days):
        raise ValidationError(
            f"openOn cannot be more than {max_future_days} days away.",
            details=[("openOn", f"At most {max_future_days} days ahead")],
        )
