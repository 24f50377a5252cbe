"""Calendar day configuration."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator


class ClockConfig(BaseModel):
    """Timezone whose midnight defines a calendar day.

    Seeds, the daily-pick gate and capsule locks all read "today" in
    this timezone.
    """

    timezone: str = Field(default="UTC", description="IANA timezone name")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Reject unknown timezone names at load time."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v
