"""CapsuleStore abstract interface."""

from abc import ABC, abstractmethod
from datetime import date, datetime
from uuid import UUID

from nuremento.capsules.models import TimeCapsule


class CapsuleStore(ABC):
    """Abstract interface for time capsule storage.

    Every method is scoped by owner_id. The conditional writes
    (add_within_quota, mark_opened, consume) must each be a single atomic
    step in the backend.
    """

    @abstractmethod
    async def add_within_quota(self, capsule: TimeCapsule, max_count: int) -> bool:
        """Persist a capsule unless the owner already holds max_count.

        Returns:
            False if the quota was reached and nothing was written
        """
        pass

    @abstractmethod
    async def get(self, owner_id: str, capsule_id: UUID) -> TimeCapsule | None:
        """Get one of the owner's capsules."""
        pass

    @abstractmethod
    async def list_for_owner(self, owner_id: str) -> list[TimeCapsule]:
        """List the owner's capsules by open_on, then created_at."""
        pass

    @abstractmethod
    async def mark_opened(
        self, owner_id: str, capsule_id: UUID, opened_at: datetime
    ) -> TimeCapsule | None:
        """Stamp opened_at if it is not set yet and return the capsule.

        Returns:
            The capsule after the write, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def consume(self, owner_id: str, capsule_id: UUID, today: date) -> TimeCapsule | None:
        """Delete an unlocked capsule and return what was deleted.

        Only a capsule with open_on <= today is deleted. Of several
        concurrent calls at most one gets the capsule back.
        """
        pass

    @abstractmethod
    async def delete(self, owner_id: str, capsule_id: UUID) -> bool:
        """Delete one of the owner's capsules regardless of lock state.

        Returns:
            False if no row matched id and owner
        """
        pass
