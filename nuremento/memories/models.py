"""Memory domain models and input schemas."""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nuremento.models import ISO_DATE_PATTERN, OwnedModel, normalize_optional, required_text

MAX_TITLE_LENGTH = 120
MAX_DESCRIPTION_LENGTH = 2000
MAX_LOCATION_LENGTH = 120
MAX_MOOD_LENGTH = 60


class Memory(OwnedModel):
    """A journal entry."""

    title: str
    description: str
    mood: str | None = None
    location: str | None = None
    occurred_on: date | None = None


def _optional_text(value: Any, field: str, max_length: int) -> str | None:
    value = normalize_optional(value)
    if value is not None and len(value) > max_length:
        raise ValueError(f"{field} must be {max_length} characters or less.")
    return value


def _optional_date(value: Any) -> date | None:
    if isinstance(value, date):
        return value
    value = normalize_optional(value)
    if value is None:
        return None
    if not ISO_DATE_PATTERN.match(value):
        raise ValueError("occurredOn must be YYYY-MM-DD.")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValueError("occurredOn must be a valid date.") from None


class MemoryCreate(BaseModel):
    """Validated input for a new memory.

    Strings are trimmed; blank optional fields become None.
    """

    title: str
    description: str
    occurred_on: date | None = Field(default=None, alias="occurredOn")
    location: str | None = None
    mood: str | None = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v: Any) -> str:
        return required_text(v, "Title", MAX_TITLE_LENGTH)

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v: Any) -> str:
        return required_text(v, "Description", MAX_DESCRIPTION_LENGTH)

    @field_validator("occurred_on", mode="before")
    @classmethod
    def validate_occurred_on(cls, v: Any) -> date | None:
        return _optional_date(v)

    @field_validator("location", mode="before")
    @classmethod
    def validate_location(cls, v: Any) -> str | None:
        return _optional_text(v, "Location", MAX_LOCATION_LENGTH)

    @field_validator("mood", mode="before")
    @classmethod
    def validate_mood(cls, v: Any) -> str | None:
        return _optional_text(v, "Mood", MAX_MOOD_LENGTH)


class MemoryUpdate(MemoryCreate):
    """Replacement content for an existing memory.

    Same rules as MemoryCreate; the whole editable content is replaced.
    """
