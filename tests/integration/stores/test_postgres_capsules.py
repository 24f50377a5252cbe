"""Integration tests for PostgresCapsuleStore."""

import asyncio
from datetime import UTC, date, datetime, timedelta

import pytest
import pytest_asyncio

from nuremento.capsules.models import TimeCapsule
from nuremento.capsules.stores.postgres import PostgresCapsuleStore

pytestmark = pytest.mark.integration

NOW = datetime(2025, 3, 10, 9, 30, tzinfo=UTC)
TODAY = date(2025, 3, 10)


@pytest_asyncio.fixture
async def store(postgres_pool, clean_postgres):
    return PostgresCapsuleStore(postgres_pool)


def make_capsule(owner_id: str, open_on: date = TODAY, **kwargs) -> TimeCapsule:
    return TimeCapsule(
        owner_id=owner_id,
        title=kwargs.pop("title", "Sealed"),
        message="Open me later.",
        open_on=open_on,
        created_at=kwargs.pop("created_at", NOW),
        **kwargs,
    )


class TestQuota:
    async def test_add_within_quota(self, store, owner_id) -> None:
        capsule = make_capsule(owner_id)

        assert await store.add_within_quota(capsule, 2) is True
        fetched = await store.get(owner_id, capsule.id)
        assert fetched is not None
        assert fetched.message == "Open me later."

    async def test_quota_reached(self, store, owner_id) -> None:
        assert await store.add_within_quota(make_capsule(owner_id), 2)
        assert await store.add_within_quota(make_capsule(owner_id), 2)

        assert await store.add_within_quota(make_capsule(owner_id), 2) is False
        assert len(await store.list_for_owner(owner_id)) == 2

    async def test_concurrent_adds_respect_quota(self, store, owner_id) -> None:
        results = await asyncio.gather(
            *(store.add_within_quota(make_capsule(owner_id), 3) for _ in range(6))
        )

        assert results.count(True) == 3
        assert len(await store.list_for_owner(owner_id)) == 3


class TestReads:
    async def test_get_is_owner_scoped(self, store, owner_id, other_owner_id) -> None:
        capsule = make_capsule(owner_id)
        await store.add_within_quota(capsule, 10)

        assert await store.get(other_owner_id, capsule.id) is None

    async def test_list_ordered_by_open_date(self, store, owner_id) -> None:
        late = make_capsule(owner_id, open_on=TODAY + timedelta(days=30), title="late")
        soon = make_capsule(owner_id, open_on=TODAY + timedelta(days=1), title="soon")
        await store.add_within_quota(late, 10)
        await store.add_within_quota(soon, 10)

        titles = [c.title for c in await store.list_for_owner(owner_id)]

        assert titles == ["soon", "late"]


class TestOpen:
    async def test_mark_opened_keeps_first_timestamp(self, store, owner_id) -> None:
        capsule = make_capsule(owner_id)
        await store.add_within_quota(capsule, 10)

        first = await store.mark_opened(owner_id, capsule.id, NOW)
        second = await store.mark_opened(owner_id, capsule.id, NOW + timedelta(hours=2))

        assert first.opened_at == NOW
        assert second.opened_at == NOW

    async def test_mark_opened_foreign(self, store, owner_id, other_owner_id) -> None:
        capsule = make_capsule(owner_id)
        await store.add_within_quota(capsule, 10)

        assert await store.mark_opened(other_owner_id, capsule.id, NOW) is None

    async def test_consume_removes_capsule(self, store, owner_id) -> None:
        capsule = make_capsule(owner_id)
        await store.add_within_quota(capsule, 10)

        consumed = await store.consume(owner_id, capsule.id, TODAY)

        assert consumed is not None
        assert consumed.id == capsule.id
        assert await store.get(owner_id, capsule.id) is None

    async def test_consume_refuses_locked_capsule(self, store, owner_id) -> None:
        capsule = make_capsule(owner_id, open_on=TODAY + timedelta(days=1))
        await store.add_within_quota(capsule, 10)

        assert await store.consume(owner_id, capsule.id, TODAY) is None
        assert await store.get(owner_id, capsule.id) is not None

    async def test_concurrent_consume_has_one_winner(self, store, owner_id) -> None:
        capsule = make_capsule(owner_id)
        await store.add_within_quota(capsule, 10)

        results = await asyncio.gather(
            *(store.consume(owner_id, capsule.id, TODAY) for _ in range(4))
        )

        assert sum(r is not None for r in results) == 1


class TestDelete:
    async def test_delete(self, store, owner_id, other_owner_id) -> None:
        capsule = make_capsule(owner_id)
        await store.add_within_quota(capsule, 10)

        assert await store.delete(other_owner_id, capsule.id) is False
        assert await store.delete(owner_id, capsule.id) is True
        assert await store.delete(owner_id, capsule.id) is False
