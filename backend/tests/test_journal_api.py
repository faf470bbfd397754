"""
Daily Pause Backend — Journal API Tests (server variant)
=========================================================

What:  End-to-end tests of /api/journal* through the FastAPI app.

What we test:
    ✅ Register → save → get roundtrip in camelCase
    ✅ Second save for a day overwrites, same id, one row
    ✅ Missing entry → {} (200, not 404)
    ✅ Delete is idempotent; body is optional
    ✅ /dates newest first, scoped to the caller
    ✅ Every journal route requires a session
    ✅ Bad dates → 400
"""

import pytest
from sqlalchemy import func, select

from daily_pause.models.journal_entry import JournalEntry


class TestSaveAndGet:
    @pytest.mark.asyncio
    async def test_roundtrip(self, auth_client):
        response = await auth_client.post(
            "/api/journal", json={"date": "2024-01-01", "morningGratitude1": "sun"}
        )
        assert response.status_code == 200
        assert response.json() == {"success": True}

        response = await auth_client.get("/api/journal", params={"date": "2024-01-01"})
        assert response.status_code == 200
        assert response.headers["cache-control"] == "private, no-store"
        body = response.json()
        assert body["date"] == "2024-01-01"
        assert body["morningGratitude1"] == "sun"
        assert body["eveningGratitude"] is None
        assert body["id"]

    @pytest.mark.asyncio
    async def test_second_save_overwrites(self, auth_client, db_session):
        await auth_client.post(
            "/api/journal",
            json={"date": "2024-01-01", "morningGratitude1": "sun", "morningPrayer": "thanks"},
        )
        first = (await auth_client.get("/api/journal", params={"date": "2024-01-01"})).json()

        await auth_client.post(
            "/api/journal", json={"date": "2024-01-01", "eveningLearning": "patience"}
        )
        second = (await auth_client.get("/api/journal", params={"date": "2024-01-01"})).json()

        assert second["id"] == first["id"]
        assert second["eveningLearning"] == "patience"
        assert second["morningGratitude1"] is None
        assert second["morningPrayer"] is None
        count = await db_session.scalar(select(func.count()).select_from(JournalEntry))
        assert count == 1

    @pytest.mark.asyncio
    async def test_date_defaults_to_today(self, auth_client):
        await auth_client.post("/api/journal", json={"morningIntention": "rest"})

        today = (await auth_client.get("/api/journal")).json()
        assert today["morningIntention"] == "rest"

    @pytest.mark.asyncio
    async def test_missing_entry_is_empty_object(self, auth_client):
        response = await auth_client.get("/api/journal", params={"date": "1999-12-31"})
        assert response.status_code == 200
        assert response.json() == {}

    @pytest.mark.asyncio
    async def test_unknown_keys_ignored(self, auth_client):
        response = await auth_client.post(
            "/api/journal", json={"date": "2024-01-01", "mood": "great"}
        )
        assert response.status_code == 200

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_date", ["2024-13-01", "yesterday"])
    async def test_bad_date_is_400(self, auth_client, bad_date):
        response = await auth_client.post("/api/journal", json={"date": bad_date})
        assert response.status_code == 400
        response = await auth_client.get("/api/journal", params={"date": bad_date})
        assert response.status_code == 400


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_then_get_is_empty(self, auth_client):
        await auth_client.post("/api/journal", json={"date": "2024-01-01", "morningGratitude1": "sun"})

        response = await auth_client.post("/api/journal/delete", json={"date": "2024-01-01"})
        assert response.status_code == 200
        assert response.json() == {"success": True}

        assert (await auth_client.get("/api/journal", params={"date": "2024-01-01"})).json() == {}

    @pytest.mark.asyncio
    async def test_delete_missing_is_noop(self, auth_client):
        response = await auth_client.post("/api/journal/delete", json={"date": "2024-01-01"})
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_delete_with_null_body_targets_today(self, auth_client):
        await auth_client.post("/api/journal", json={"morningIntention": "rest"})

        response = await auth_client.post(
            "/api/journal/delete", content=b"null", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 200
        assert (await auth_client.get("/api/journal")).json() == {}

    @pytest.mark.asyncio
    async def test_delete_without_body_targets_today(self, auth_client):
        await auth_client.post("/api/journal", json={"morningIntention": "rest"})

        response = await auth_client.post("/api/journal/delete")
        assert response.status_code == 200
        assert (await auth_client.get("/api/journal")).json() == {}


class TestDates:
    @pytest.mark.asyncio
    async def test_newest_first(self, auth_client):
        for day in ("2024-01-02", "2024-03-01", "2023-12-31"):
            await auth_client.post("/api/journal", json={"date": day})

        response = await auth_client.get("/api/journal/dates")
        assert response.status_code == 200
        assert response.json() == [
            {"date": "2024-03-01"},
            {"date": "2024-01-02"},
            {"date": "2023-12-31"},
        ]

    @pytest.mark.asyncio
    async def test_scoped_to_caller(self, auth_client):
        await auth_client.post("/api/journal", json={"date": "2024-01-01"})

        auth_client.cookies.clear()
        await auth_client.post(
            "/api/auth/register", json={"email": "b@x.com", "password": "secret2"}
        )
        assert (await auth_client.get("/api/journal/dates")).json() == []
        assert (await auth_client.get("/api/journal", params={"date": "2024-01-01"})).json() == {}


class TestRequiresSession:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,path",
        [
            ("POST", "/api/journal"),
            ("GET", "/api/journal"),
            ("POST", "/api/journal/delete"),
            ("GET", "/api/journal/dates"),
        ],
    )
    async def test_401_without_session(self, test_client, method, path):
        response = await test_client.request(method, path, json={} if method == "POST" else None)
        assert response.status_code == 401
