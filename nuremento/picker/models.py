"""Daily-pick state model."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from nuremento.models import utc_now


class DailyPickState(BaseModel):
    """Per-owner marker of the last day a gated pick was served.

    At most one exists per owner.
    """

    owner_id: str
    last_served_on: date
    updated_at: datetime = Field(default_factory=utc_now)
