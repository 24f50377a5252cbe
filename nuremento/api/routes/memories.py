"""Memory endpoints."""

from fastapi import APIRouter, Query, Response

from nuremento.api.dependencies import MemoryRateLimitDep, MemoryServiceDep, parse_record_id
from nuremento.api.middleware.auth import OwnerContextDep
from nuremento.api.middleware.rate_limit import add_rate_limit_headers
from nuremento.api.models.memories import MemoryEnvelope, MemoryListResponse, MemoryResponse
from nuremento.memories import MemoryCreate, MemoryUpdate

router = APIRouter(prefix="/memories")

NOT_FOUND_MESSAGE = "Memory not found."


@router.get("/daily", response_model=MemoryEnvelope)
async def get_daily_memory(
    owner: OwnerContextDep,
    service: MemoryServiceDep,
) -> MemoryEnvelope:
    """Get today's memory.

    The same memory is returned on every request during one calendar day.
    memory is null when the owner has no memories.
    """
    memory = await service.daily_memory(owner.owner_id)
    return MemoryEnvelope(memory=MemoryResponse.from_memory(memory) if memory else None)


@router.get("/recent", response_model=MemoryListResponse)
async def list_recent_memories(
    owner: OwnerContextDep,
    service: MemoryServiceDep,
    limit: str | None = Query(default=None, description="Page size, clamped to 1-12"),
) -> MemoryListResponse:
    """List the newest memories first."""
    memories = await service.list_recent(owner.owner_id, limit)
    return MemoryListResponse(memories=[MemoryResponse.from_memory(m) for m in memories])


@router.post("", response_model=MemoryEnvelope, status_code=201)
async def create_memory(
    request: MemoryCreate,
    response: Response,
    owner: OwnerContextDep,
    service: MemoryServiceDep,
    rate_limit: MemoryRateLimitDep,
) -> MemoryEnvelope:
    """Create a memory. Limited per owner per window."""
    memory = await service.create_memory(owner.owner_id, request)
    if rate_limit is not None:
        add_rate_limit_headers(response, rate_limit)
    return MemoryEnvelope(memory=MemoryResponse.from_memory(memory))


@router.patch("/{memory_id}", response_model=MemoryEnvelope)
async def update_memory(
    memory_id: str,
    request: MemoryUpdate,
    owner: OwnerContextDep,
    service: MemoryServiceDep,
) -> MemoryEnvelope:
    memory = await service.update_memory(
        owner.owner_id, parse_record_id(memory_id, NOT_FOUND_MESSAGE), request
    )
    return MemoryEnvelope(memory=MemoryResponse.from_memory(memory))


@router.delete("/{memory_id}", status_code=204)
async def delete_memory(
    memory_id: str,
    owner: OwnerContextDep,
    service: MemoryServiceDep,
) -> Response:
    await service.delete_memory(owner.owner_id, parse_record_id(memory_id, NOT_FOUND_MESSAGE))
    return Response(status_code=204)
