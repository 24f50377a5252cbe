"""Base models for owner-scoped entities."""

import re
from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class OwnedModel(BaseModel):
    """Base for every entity owned by a single account.

    owner_id is the opaque subject identifier handed to us by the
    identity provider. Stores filter on it for every read and write.
    """

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        extra="ignore",
    )

    id: UUID = Field(default_factory=uuid4, description="Record identifier")
    owner_id: str = Field(..., min_length=1, description="Owning account identifier")
    created_at: datetime = Field(default_factory=utc_now, description="Creation timestamp")


def normalize_optional(value: object) -> str | None:
    """Trim a string and collapse blanks to None; non-strings become None."""
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    return trimmed or None


def required_text(value: Any, field: str, max_length: int, *, strip: bool = True) -> str:
    """Validate a mandatory text field.

    Blank input is rejected either way. With strip=False the value is
    kept exactly as supplied and its raw length is checked.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{field} is required")
    if strip:
        value = value.strip()
    if len(value) > max_length:
        raise ValueError(f"{field} must be {max_length} characters or less.")
    return value
