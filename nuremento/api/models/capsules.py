"""Time capsule API models.

Only OpenedCapsuleResponse carries the message; every other view is
safe to render while the capsule is locked.
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel

from nuremento.capsules import CapsuleState, CapsuleSummary, TimeCapsule


class CapsuleSummaryResponse(BaseModel):
    id: UUID
    title: str
    open_on: date
    opened_at: datetime | None = None
    created_at: datetime
    locked: bool
    state: CapsuleState

    @classmethod
    def from_summary(cls, summary: CapsuleSummary) -> "CapsuleSummaryResponse":
        return cls(**summary.model_dump())


class CapsuleListResponse(BaseModel):
    capsules: list[CapsuleSummaryResponse]


class CreatedCapsule(BaseModel):
    id: UUID
    title: str
    open_on: date
    created_at: datetime


class CapsuleCreatedResponse(BaseModel):
    capsule_id: UUID
    capsule: CreatedCapsule

    @classmethod
    def from_capsule(cls, capsule: TimeCapsule) -> "CapsuleCreatedResponse":
        return cls(
            capsule_id=capsule.id,
            capsule=CreatedCapsule(
                id=capsule.id,
                title=capsule.title,
                open_on=capsule.open_on,
                created_at=capsule.created_at,
            ),
        )


class OpenedCapsule(BaseModel):
    id: UUID
    title: str
    message: str
    open_on: date
    opened_at: datetime | None = None
    created_at: datetime


class OpenedCapsuleResponse(BaseModel):
    capsule: OpenedCapsule

    @classmethod
    def from_capsule(cls, capsule: TimeCapsule) -> "OpenedCapsuleResponse":
        return cls(
            capsule=OpenedCapsule(
                id=capsule.id,
                title=capsule.title,
                message=capsule.message,
                open_on=capsule.open_on,
                opened_at=capsule.opened_at,
                created_at=capsule.created_at,
            )
        )
