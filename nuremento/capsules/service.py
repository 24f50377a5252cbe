"""Time capsule operations."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel

from nuremento.capsules.lock import (
    CapsuleState,
    capsule_state,
    is_locked,
    parse_open_on,
    validate_open_on,
)
from nuremento.capsules.models import CapsuleCreate, TimeCapsule
from nuremento.capsules.store import CapsuleStore
from nuremento.clock import Clock
from nuremento.config.models.capsules import CapsuleConfig, CapsuleOpenMode
from nuremento.errors import LockedError, NotFoundError, ValidationError
from nuremento.observability.logging import get_logger
from nuremento.observability.metrics import CAPSULE_OPENS, CAPSULES_CREATED

logger = get_logger(__name__)


class CapsuleSummary(BaseModel):
    """What may be shown about a capsule without opening it."""

    id: UUID
    title: str
    open_on: date
    opened_at: datetime | None
    created_at: datetime
    locked: bool
    state: CapsuleState


class CapsuleService:
    """Create, list, open and delete an owner's time capsules.

    The open mode decides what opening an unlocked capsule does:
    REPEATABLE stamps opened_at on the first open and keeps the capsule,
    SINGLE_USE deletes it and hands the message out exactly once.
    """

    def __init__(
        self,
        store: CapsuleStore,
        clock: Clock,
        config: CapsuleConfig | None = None,
    ) -> None:
        self._store = store
        self._clock = clock
        self._config = config or CapsuleConfig()

    @property
    def open_mode(self) -> CapsuleOpenMode:
        return self._config.open_mode

    async def create_capsule(self, owner_id: str, data: CapsuleCreate) -> TimeCapsule:
        """Seal a new capsule.

        Raises:
            ValidationError: If open_on is malformed or out of range, or
                the owner already holds the maximum number of capsules
        """
        now = self._clock.now()
        open_on = parse_open_on(data.open_on)
        validate_open_on(open_on, now.date(), self._config.max_future_days)

        capsule = TimeCapsule(
            owner_id=owner_id,
            title=data.title,
            message=data.message,
            open_on=open_on,
            created_at=now,
        )
        if not await self._store.add_within_quota(capsule, self._config.max_per_owner):
            logger.info("capsule_quota_reached", max_per_owner=self._config.max_per_owner)
            raise ValidationError(
                f"You have reached the maximum of {self._config.max_per_owner} time capsules."
            )

        CAPSULES_CREATED.inc()
        logger.info(
            "capsule_created",
            capsule_id=str(capsule.id),
            open_on=open_on.isoformat(),
        )
        return capsule

    async def open_capsule(self, owner_id: str, capsule_id: UUID) -> TimeCapsule:
        """Reveal an unlocked capsule.

        Raises:
            NotFoundError: If the capsule is missing, foreign, or was
                consumed by a concurrent single-use open
            LockedError: If today is before open_on; nothing is changed
        """
        mode = self._config.open_mode.value
        now = self._clock.now()
        today = now.date()

        capsule = await self._store.get(owner_id, capsule_id)
        if capsule is None:
            CAPSULE_OPENS.labels(mode=mode, outcome="not_found").inc()
            raise NotFoundError("Time capsule not found.")

        if is_locked(capsule.open_on, today):
            logger.info(
                "capsule_locked",
                capsule_id=str(capsule_id),
                open_on=capsule.open_on.isoformat(),
            )
            CAPSULE_OPENS.labels(mode=mode, outcome="locked").inc()
            raise LockedError(capsule.open_on)

        if self._config.open_mode == CapsuleOpenMode.SINGLE_USE:
            opened = await self._store.consume(owner_id, capsule_id, today)
            if opened is not None and opened.opened_at is None:
                opened.opened_at = now
        else:
            opened = await self._store.mark_opened(owner_id, capsule_id, now)

        if opened is None:
            # Deleted between the read and the write
            CAPSULE_OPENS.labels(mode=mode, outcome="not_found").inc()
            raise NotFoundError("Time capsule not found.")

        CAPSULE_OPENS.labels(mode=mode, outcome="opened").inc()
        logger.info("capsule_opened", capsule_id=str(capsule_id), mode=mode)
        return opened

    async def delete_capsule(self, owner_id: str, capsule_id: UUID) -> None:
        if not await self._store.delete(owner_id, capsule_id):
            raise NotFoundError("Time capsule not found.")
        logger.info("capsule_deleted", capsule_id=str(capsule_id))

    async def list_capsules(self, owner_id: str) -> list[CapsuleSummary]:
        today = self._clock.today()
        capsules = await self._store.list_for_owner(owner_id)
        return [self._summarize(capsule, today) for capsule in capsules]

    async def get_capsule_status(self, owner_id: str, capsule_id: UUID) -> CapsuleSummary:
        capsule = await self._store.get(owner_id, capsule_id)
        if capsule is None:
            raise NotFoundError("Time capsule not found.")
        return self._summarize(capsule, self._clock.today())

    def _summarize(self, capsule: TimeCapsule, today: date) -> CapsuleSummary:
        return CapsuleSummary(
            id=capsule.id,
            title=capsule.title,
            open_on=capsule.open_on,
            opened_at=capsule.opened_at,
            created_at=capsule.created_at,
            locked=is_locked(capsule.open_on, today),
            state=capsule_state(capsule, today),
        )
