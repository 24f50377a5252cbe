"""Unit tests for InMemoryCapsuleStore."""

from datetime import UTC, date, datetime, timedelta
from uuid import uuid4

from nuremento.capsules import TimeCapsule
from nuremento.capsules.stores.inmemory import InMemoryCapsuleStore


def _capsule(owner_id: str, open_on: date, minutes: int = 0) -> TimeCapsule:
    return TimeCapsule(
        owner_id=owner_id,
        title="t",
        message="m",
        open_on=open_on,
        created_at=datetime(2025, 1, 1, tzinfo=UTC) + timedelta(minutes=minutes),
    )


class TestInMemoryCapsuleStore:
    """Tests for InMemoryCapsuleStore."""

    async def test_add_within_quota(self) -> None:
        store = InMemoryCapsuleStore()
        assert await store.add_within_quota(_capsule("a", date(2025, 4, 1)), 1) is True
        assert await store.add_within_quota(_capsule("a", date(2025, 4, 1)), 1) is False
        assert await store.add_within_quota(_capsule("b", date(2025, 4, 1)), 1) is True

    async def test_list_orders_by_open_on_then_created_at(self) -> None:
        store = InMemoryCapsuleStore()
        late = _capsule("a", date(2025, 5, 1), minutes=0)
        early_second = _capsule("a", date(2025, 4, 1), minutes=2)
        early_first = _capsule("a", date(2025, 4, 1), minutes=1)
        for capsule in (late, early_second, early_first):
            await store.add_within_quota(capsule, 10)

        listed = await store.list_for_owner("a")

        assert [c.id for c in listed] == [early_first.id, early_second.id, late.id]

    async def test_mark_opened_only_once(self) -> None:
        store = InMemoryCapsuleStore()
        capsule = _capsule("a", date(2025, 4, 1))
        await store.add_within_quota(capsule, 10)
        first = datetime(2025, 4, 1, 8, tzinfo=UTC)

        await store.mark_opened("a", capsule.id, first)
        result = await store.mark_opened("a", capsule.id, first + timedelta(days=1))

        assert result is not None
        assert result.opened_at == first

    async def test_mark_opened_missing(self) -> None:
        store = InMemoryCapsuleStore()
        assert await store.mark_opened("a", uuid4(), datetime.now(UTC)) is None

    async def test_consume_respects_open_date(self) -> None:
        store = InMemoryCapsuleStore()
        capsule = _capsule("a", date(2025, 4, 1))
        await store.add_within_quota(capsule, 10)

        assert await store.consume("a", capsule.id, date(2025, 3, 31)) is None
        consumed = await store.consume("a", capsule.id, date(2025, 4, 1))

        assert consumed is not None
        assert consumed.id == capsule.id
        assert await store.consume("a", capsule.id, date(2025, 4, 1)) is None

    async def test_consume_is_owner_scoped(self) -> None:
        store = InMemoryCapsuleStore()
        capsule = _capsule("a", date(2025, 4, 1))
        await store.add_within_quota(capsule, 10)

        assert await store.consume("b", capsule.id, date(2025, 4, 2)) is None
        assert await store.get("a", capsule.id) is not None

    async def test_delete(self) -> None:
        store = InMemoryCapsuleStore()
        capsule = _capsule("a", date(2025, 4, 1))
        await store.add_within_quota(capsule, 10)

        assert await store.delete("b", capsule.id) is False
        assert await store.delete("a", capsule.id) is True
        assert await store.delete("a", capsule.id) is False

    async def test_returned_copies_are_detached(self) -> None:
        store = InMemoryCapsuleStore()
        capsule = _capsule("a", date(2025, 4, 1))
        await store.add_within_quota(capsule, 10)

        fetched = await store.get("a", capsule.id)
        assert fetched is not None
        fetched.title = "changed"

        again = await store.get("a", capsule.id)
        assert again is not None
        assert again.title == "t"
