"""Unit tests for memory endpoints."""

from uuid import uuid4

import pytest

from nuremento.db.errors import ConnectionError
from nuremento.memories.stores.inmemory import InMemoryMemoryStore


def _payload(**overrides) -> dict:
    payload = {
        "title": "Picnic",
        "description": "Lunch by the river.",
        "occurredOn": "2025-03-01",
        "location": "Riverside",
        "mood": "content",
    }
    payload.update(overrides)
    return payload


class TestCreateMemory:
    """Tests for POST /v1/memories."""

    def test_create_returns_201(self, client, auth_headers, owner_id) -> None:
        response = client.post("/v1/memories", json=_payload(), headers=auth_headers(owner_id))

        assert response.status_code == 201
        memory = response.json()["memory"]
        assert memory["title"] == "Picnic"
        assert memory["occurred_on"] == "2025-03-01"
        assert response.headers["X-RateLimit-Limit"] == "6"
        assert response.headers["X-RateLimit-Remaining"] == "5"

    def test_blank_title_is_invalid_request(self, client, auth_headers, owner_id) -> None:
        response = client.post(
            "/v1/memories", json=_payload(title="  "), headers=auth_headers(owner_id)
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INVALID_REQUEST"
        assert error["message"] == "Title is required"
        assert error["details"] == [{"field": "title", "message": "Title is required"}]

    def test_bad_occurred_on(self, client, auth_headers, owner_id) -> None:
        response = client.post(
            "/v1/memories", json=_payload(occurredOn="March 1"), headers=auth_headers(owner_id)
        )
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "occurredOn must be YYYY-MM-DD."

    def test_seventh_memory_in_an_hour_is_rate_limited(
        self, client, auth_headers, owner_id, manual_time
    ) -> None:
        headers = auth_headers(owner_id)
        for _ in range(6):
            assert client.post("/v1/memories", json=_payload(), headers=headers).status_code == 201

        response = client.post("/v1/memories", json=_payload(), headers=headers)
        assert response.status_code == 429
        assert response.json()["error"]["code"] == "RATE_LIMIT_EXCEEDED"

        manual_time.value += 3601
        assert client.post("/v1/memories", json=_payload(), headers=headers).status_code == 201

    def test_rate_limit_is_per_owner(
        self, client, auth_headers, owner_id, other_owner_id
    ) -> None:
        for _ in range(6):
            client.post("/v1/memories", json=_payload(), headers=auth_headers(owner_id))

        response = client.post(
            "/v1/memories", json=_payload(), headers=auth_headers(other_owner_id)
        )
        assert response.status_code == 201


class TestReadMemories:
    """Tests for the daily and recent views."""

    def test_daily_is_null_without_memories(self, client, auth_headers, owner_id) -> None:
        response = client.get("/v1/memories/daily", headers=auth_headers(owner_id))

        assert response.status_code == 200
        assert response.json() == {"memory": None}

    def test_daily_is_stable(self, client, auth_headers, owner_id, clock) -> None:
        headers = auth_headers(owner_id)
        for i in range(4):
            client.post("/v1/memories", json=_payload(title=f"M{i}"), headers=headers)
            clock.advance(minutes=1)

        first = client.get("/v1/memories/daily", headers=headers).json()["memory"]
        second = client.get("/v1/memories/daily", headers=headers).json()["memory"]

        assert first is not None
        assert first["id"] == second["id"]

    def test_recent_limit(self, client, auth_headers, owner_id, clock) -> None:
        headers = auth_headers(owner_id)
        for i in range(5):
            client.post("/v1/memories", json=_payload(title=f"M{i}"), headers=headers)
            clock.advance(minutes=1)

        default = client.get("/v1/memories/recent", headers=headers).json()["memories"]
        two = client.get("/v1/memories/recent?limit=2", headers=headers).json()["memories"]
        zero = client.get("/v1/memories/recent?limit=0", headers=headers).json()["memories"]

        assert [m["title"] for m in default] == ["M4", "M3", "M2"]
        assert [m["title"] for m in two] == ["M4", "M3"]
        assert len(zero) == 1

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("abc", ["M4", "M3", "M2"]),
            ("5abc", ["M4", "M3", "M2", "M1", "M0"]),
            ("0", ["M4"]),
            ("99", ["M4", "M3", "M2", "M1", "M0"]),
        ],
    )
    def test_recent_limit_is_read_leniently(
        self, client, auth_headers, owner_id, clock, raw, expected
    ) -> None:
        headers = auth_headers(owner_id)
        for i in range(5):
            client.post("/v1/memories", json=_payload(title=f"M{i}"), headers=headers)
            clock.advance(minutes=1)

        response = client.get("/v1/memories/recent", params={"limit": raw}, headers=headers)

        assert response.status_code == 200
        assert [m["title"] for m in response.json()["memories"]] == expected

    def test_recent_is_owner_scoped(
        self, client, auth_headers, owner_id, other_owner_id
    ) -> None:
        client.post("/v1/memories", json=_payload(), headers=auth_headers(owner_id))

        response = client.get("/v1/memories/recent", headers=auth_headers(other_owner_id))

        assert response.json() == {"memories": []}


class TestUpdateAndDeleteMemory:
    """Tests for PATCH and DELETE /v1/memories/{id}."""

    def test_update(self, client, auth_headers, owner_id) -> None:
        headers = auth_headers(owner_id)
        memory_id = client.post("/v1/memories", json=_payload(), headers=headers).json()[
            "memory"
        ]["id"]

        response = client.patch(
            f"/v1/memories/{memory_id}",
            json={"title": "Picnic, again", "description": "Rain this time."},
            headers=headers,
        )

        assert response.status_code == 200
        memory = response.json()["memory"]
        assert memory["title"] == "Picnic, again"
        assert memory["location"] is None

    def test_update_foreign_memory_is_404(
        self, client, auth_headers, owner_id, other_owner_id
    ) -> None:
        memory_id = client.post(
            "/v1/memories", json=_payload(), headers=auth_headers(owner_id)
        ).json()["memory"]["id"]

        response = client.patch(
            f"/v1/memories/{memory_id}",
            json={"title": "Mine now", "description": "x"},
            headers=auth_headers(other_owner_id),
        )

        assert response.status_code == 404
        assert response.json() == {
            "error": {"code": "NOT_FOUND", "message": "Memory not found."}
        }

    def test_delete(self, client, auth_headers, owner_id) -> None:
        headers = auth_headers(owner_id)
        memory_id = client.post("/v1/memories", json=_payload(), headers=headers).json()[
            "memory"
        ]["id"]

        assert client.delete(f"/v1/memories/{memory_id}", headers=headers).status_code == 204
        assert client.delete(f"/v1/memories/{memory_id}", headers=headers).status_code == 404

    def test_delete_unknown_and_malformed_ids(self, client, auth_headers, owner_id) -> None:
        headers = auth_headers(owner_id)
        assert client.delete(f"/v1/memories/{uuid4()}", headers=headers).status_code == 404
        assert client.delete("/v1/memories/not-a-uuid", headers=headers).status_code == 404


class BrokenMemoryStore(InMemoryMemoryStore):
    async def list_ordered(self, owner_id: str):
        raise ConnectionError("connection refused")


class TestStoreFailures:
    """Store failures surface as 503."""

    def test_store_error_is_503(self, app, client, auth_headers, owner_id) -> None:
        from nuremento.api.dependencies import get_memory_store

        broken = BrokenMemoryStore()
        app.dependency_overrides[get_memory_store] = lambda: broken

        response = client.get("/v1/memories/daily", headers=auth_headers(owner_id))

        assert response.status_code == 503
        assert response.json()["error"]["code"] == "STORE_UNAVAILABLE"
