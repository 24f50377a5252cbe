"""Time capsule models."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nuremento.models import OwnedModel, required_text

MAX_TITLE_LENGTH = 120
MAX_MESSAGE_LENGTH = 2000


class TimeCapsule(OwnedModel):
    """A message sealed until open_on.

    Lock state is never stored; see nuremento.capsules.lock.
    """

    title: str
    message: str
    open_on: date
    opened_at: datetime | None = None


class CapsuleCreate(BaseModel):
    """Input for a new capsule.

    Title and message are stored exactly as written, surrounding
    whitespace included. open_on stays a raw value here; its date rules
    depend on today and are checked by CapsuleService.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str
    message: str
    open_on: date | str = Field(..., alias="openOn")

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v: Any) -> str:
        return required_text(v, "Title", MAX_TITLE_LENGTH, strip=False)

    @field_validator("message", mode="before")
    @classmethod
    def validate_message(cls, v: Any) -> str:
        return required_text(v, "Message", MAX_MESSAGE_LENGTH, strip=False)
