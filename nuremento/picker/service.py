"""Daily pick orchestration."""

from datetime import date
from typing import Generic, Protocol, TypeVar
from uuid import UUID

from nuremento.clock import Clock
from nuremento.errors import ProgrammingInvariantViolation
from nuremento.observability.logging import get_logger
from nuremento.observability.metrics import DAILY_PICKS
from nuremento.picker.seed import compute_seed, select_index
from nuremento.picker.store import DailyPickStateStore

logger = get_logger(__name__)


class PickableItem(Protocol):
    id: UUID


ItemT = TypeVar("ItemT", bound=PickableItem)


class OrderedItemSource(Protocol[ItemT]):
    """Anything that lists an owner's items in stable order.

    Order must be created_at ascending, then id ascending, so the same
    collection always yields the same sequence.
    """

    async def list_ordered(self, owner_id: str) -> list[ItemT]: ...


class DailyPicker(Generic[ItemT]):
    """Selects "today's" item from an owner's collection.

    The choice is a pure function of (owner, day, collection). No pointer
    to the chosen item is stored; the optional state store only records
    the last day a gated pick was served.
    """

    def __init__(
        self,
        source: OrderedItemSource[ItemT],
        clock: Clock,
        *,
        collection: str,
        state_store: DailyPickStateStore | None = None,
    ) -> None:
        """Initialize the picker.

        Args:
            source: Store listing the owner's items in stable order
            clock: Single source of "today"
            collection: Name used in logs and metrics
            state_store: Required only for pick_today_once
        """
        self._source = source
        self._clock = clock
        self._collection = collection
        self._state_store = state_store

    async def pick_today(self, owner_id: str) -> ItemT | None:
        """Return today's item, or None if the owner has no items."""
        item = await self._pick_for_day(owner_id, self._clock.today())
        DAILY_PICKS.labels(
            collection=self._collection,
            outcome="served" if item is not None else "empty",
        ).inc()
        return item

    async def pick_today_once(self, owner_id: str) -> ItemT | None:
        """Return today's item only on the owner's first request of the day.

        Returns None when a pick was already served today, when the owner
        has no items, or when a concurrent request claimed the day first.
        A failing state write propagates and nothing counts as served.
        """
        if self._state_store is None:
            raise ProgrammingInvariantViolation(
                f"pick_today_once on '{self._collection}' needs a DailyPickStateStore"
            )

        # Read once; seed and gate must use the same day
        now = self._clock.now()
        day = now.date()

        state = await self._state_store.get(owner_id)
        if state is not None and state.last_served_on == day:
            logger.debug("daily_pick_already_served", collection=self._collection)
            DAILY_PICKS.labels(collection=self._collection, outcome="already_served").inc()
            return None

        item = await self._pick_for_day(owner_id, day)
        if item is None:
            DAILY_PICKS.labels(collection=self._collection, outcome="empty").inc()
            return None

        if not await self._state_store.claim_day(owner_id, day, now):
            logger.info("daily_pick_claim_lost", collection=self._collection)
            DAILY_PICKS.labels(collection=self._collection, outcome="lost_race").inc()
            return None

        logger.info(
            "daily_pick_served",
            collection=self._collection,
            item_id=str(item.id),
            day=day.isoformat(),
        )
        DAILY_PICKS.labels(collection=self._collection, outcome="served").inc()
        return item

    async def _pick_for_day(self, owner_id: str, day: date) -> ItemT | None:
        items = await self._source.list_ordered(owner_id)
        if not items:
            return None
        index = select_index(compute_seed(owner_id, day), len(items))
        return items[index]
