"""Time capsule endpoints."""

from fastapi import APIRouter, Response

from nuremento.api.dependencies import CapsuleServiceDep, parse_record_id
from nuremento.api.middleware.auth import OwnerContextDep
from nuremento.api.models.capsules import (
    CapsuleCreatedResponse,
    CapsuleListResponse,
    CapsuleSummaryResponse,
    OpenedCapsuleResponse,
)
from nuremento.capsules import CapsuleCreate

router = APIRouter(prefix="/time-capsules")

NOT_FOUND_MESSAGE = "Time capsule not found."


@router.get("", response_model=CapsuleListResponse)
async def list_capsules(
    owner: OwnerContextDep,
    service: CapsuleServiceDep,
) -> CapsuleListResponse:
    """List the owner's capsules, soonest open date first.

    Messages are never included.
    """
    summaries = await service.list_capsules(owner.owner_id)
    return CapsuleListResponse(
        capsules=[CapsuleSummaryResponse.from_summary(s) for s in summaries]
    )


@router.post("", response_model=CapsuleCreatedResponse, status_code=201)
async def create_capsule(
    request: CapsuleCreate,
    owner: OwnerContextDep,
    service: CapsuleServiceDep,
) -> CapsuleCreatedResponse:
    """Seal a new capsule.

    openOn must be a YYYY-MM-DD date between today and 183 days ahead,
    and an owner may hold at most 10 capsules.
    """
    capsule = await service.create_capsule(owner.owner_id, request)
    return CapsuleCreatedResponse.from_capsule(capsule)


@router.get("/{capsule_id}", response_model=OpenedCapsuleResponse)
async def open_capsule(
    capsule_id: str,
    owner: OwnerContextDep,
    service: CapsuleServiceDep,
) -> OpenedCapsuleResponse:
    """Open a capsule and reveal its message.

    A capsule whose open date has not arrived yields 423 CAPSULE_LOCKED
    with the open date. In single-use mode the capsule is gone afterwards.
    """
    capsule = await service.open_capsule(
        owner.owner_id, parse_record_id(capsule_id, NOT_FOUND_MESSAGE)
    )
    return OpenedCapsuleResponse.from_capsule(capsule)


@router.get("/{capsule_id}/status", response_model=CapsuleSummaryResponse)
async def get_capsule_status(
    capsule_id: str,
    owner: OwnerContextDep,
    service: CapsuleServiceDep,
) -> CapsuleSummaryResponse:
    summary = await service.get_capsule_status(
        owner.owner_id, parse_record_id(capsule_id, NOT_FOUND_MESSAGE)
    )
    return CapsuleSummaryResponse.from_summary(summary)


@router.delete("/{capsule_id}", status_code=204)
async def delete_capsule(
    capsule_id: str,
    owner: OwnerContextDep,
    service: CapsuleServiceDep,
) -> Response:
    await service.delete_capsule(owner.owner_id, parse_record_id(capsule_id, NOT_FOUND_MESSAGE))
    return Response(status_code=204)
