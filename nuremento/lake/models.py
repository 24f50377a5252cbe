"""Lake note models."""

from typing import Any

from pydantic import BaseModel, field_validator

from nuremento.models import OwnedModel, required_text

MAX_TITLE_LENGTH = 120
MAX_MESSAGE_LENGTH = 2000


class LakeNote(OwnedModel):
    """A note dropped into the owner's lake."""

    title: str
    message: str


class LakeNoteCreate(BaseModel):
    """Validated input for a new lake note."""

    title: str
    message: str

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v: Any) -> str:
        return required_text(v, "Title", MAX_TITLE_LENGTH)

    @field_validator("message", mode="before")
    @classmethod
    def validate_message(cls, v: Any) -> str:
        return required_text(v, "Message", MAX_MESSAGE_LENGTH)
