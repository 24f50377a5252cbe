"""Lake note endpoints."""

from fastapi import APIRouter, Response

from nuremento.api.dependencies import LakeServiceDep, parse_record_id
from nuremento.api.middleware.auth import OwnerContextDep
from nuremento.api.models.lake import LakeNoteEnvelope, LakeNoteResponse
from nuremento.lake import LakeNoteCreate

router = APIRouter(prefix="/lake-notes")


@router.get("/daily", response_model=LakeNoteEnvelope)
async def get_daily_note(
    owner: OwnerContextDep,
    service: LakeServiceDep,
) -> LakeNoteEnvelope:
    """Get today's note from the lake. Stable for the whole day."""
    note = await service.daily_note(owner.owner_id)
    return LakeNoteEnvelope(note=LakeNoteResponse.from_note(note) if note else None)


@router.get("/ocean", response_model=LakeNoteEnvelope)
async def get_ocean_note(
    owner: OwnerContextDep,
    service: LakeServiceDep,
) -> LakeNoteEnvelope:
    """Fish today's note out of the ocean.

    Only the first request of the day gets a note; later requests that
    day get note: null.
    """
    note = await service.ocean_note(owner.owner_id)
    return LakeNoteEnvelope(note=LakeNoteResponse.from_note(note) if note else None)


@router.post("", response_model=LakeNoteEnvelope, status_code=201)
async def create_note(
    request: LakeNoteCreate,
    owner: OwnerContextDep,
    service: LakeServiceDep,
) -> LakeNoteEnvelope:
    note = await service.create_note(owner.owner_id, request)
    return LakeNoteEnvelope(note=LakeNoteResponse.from_note(note))


@router.delete("/{note_id}", status_code=204)
async def delete_note(
    note_id: str,
    owner: OwnerContextDep,
    service: LakeServiceDep,
) -> Response:
    await service.delete_note(owner.owner_id, parse_record_id(note_id, "Lake note not found."))
    return Response(status_code=204)
