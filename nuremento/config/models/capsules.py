"""Time capsule configuration models."""

from enum import Enum

from pydantic import BaseModel, Field


class CapsuleOpenMode(str, Enum):
    """What happens to a capsule once it has been opened."""

    REPEATABLE = "repeatable"
    """opened_at is stamped on first open; the message stays readable."""

    SINGLE_USE = "single_use"
    """The capsule is deleted by the open that returns its message."""


class CapsuleConfig(BaseModel):
    """Time capsule creation and open rules."""

    open_mode: CapsuleOpenMode = Field(
        default=CapsuleOpenMode.REPEATABLE,
        description="Repeatable or single-use open semantics",
    )
    max_per_owner: int = Field(
        default=10,
        gt=0,
        description="Maximum capsules an owner may hold at once",
    )
    max_future_days: int = Field(
        default=183,
        ge=0,
        description="Furthest open date allowed, in days from today",
    )
