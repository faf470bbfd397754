"""
Daily Pause Backend — Session Service Tests
============================================

What:  Resolve/create/revoke/purge against a real SQLite database.
Why:   Every protected endpoint depends on these rules.

What we test:
    ✅ No token → "Not authenticated"
    ✅ Unknown token → "Session expired"
    ✅ Expired token → "Session expired" (expiry is not extended)
    ✅ Live token → its user
    ✅ Revoke removes only the given session
    ✅ purge_expired deletes only past-expiry rows
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select

from daily_pause.exceptions import AuthenticationError
from daily_pause.models.user import AuthSession, User
from daily_pause.services.session_service import SessionService


@pytest.fixture
def service():
    return SessionService(ttl_days=7)


async def _make_user(db, email="s@x.com"):
    user = User(email=email, password="x" * 64, name=None)
    db.add(user)
    await db.flush()
    return user


class TestResolve:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, ""])
    async def test_no_token(self, service, db_session, token):
        with pytest.raises(AuthenticationError) as exc_info:
            await service.resolve(db_session, token)
        assert exc_info.value.message == "Not authenticated"

    @pytest.mark.asyncio
    async def test_unknown_token(self, service, db_session):
        with pytest.raises(AuthenticationError) as exc_info:
            await service.resolve(db_session, "does-not-exist")
        assert exc_info.value.message == "Session expired"

    @pytest.mark.asyncio
    async def test_live_token_resolves_user(self, service, db_session):
        user = await _make_user(db_session)
        session = await service.create(db_session, user.id)
        await db_session.commit()

        resolved = await service.resolve(db_session, session.id)
        assert resolved.id == user.id

    @pytest.mark.asyncio
    async def test_expired_token(self, service, db_session):
        user = await _make_user(db_session)
        db_session.add(
            AuthSession(
                id="expired-token",
                user_id=user.id,
                expires_at=datetime.now(timezone.utc) - timedelta(seconds=1),
            )
        )
        await db_session.commit()

        with pytest.raises(AuthenticationError) as exc_info:
            await service.resolve(db_session, "expired-token")
        assert exc_info.value.message == "Session expired"


class TestCreate:
    @pytest.mark.asyncio
    async def test_expiry_is_ttl_from_now(self, service, db_session):
        user = await _make_user(db_session)
        before = datetime.now(timezone.utc)
        session = await service.create(db_session, user.id)
        assert before + timedelta(days=7) <= session.expires_at
        assert session.expires_at <= datetime.now(timezone.utc) + timedelta(days=7)

    @pytest.mark.asyncio
    async def test_tokens_are_unique(self, service, db_session):
        user = await _make_user(db_session)
        first = await service.create(db_session, user.id)
        second = await service.create(db_session, user.id)
        assert first.id != second.id

    def test_max_age(self, service):
        assert service.max_age_seconds == 604800


class TestRevokeAndPurge:
    @pytest.mark.asyncio
    async def test_revoke_only_that_session(self, service, db_session):
        user = await _make_user(db_session)
        keep = await service.create(db_session, user.id)
        drop = await service.create(db_session, user.id)
        await db_session.commit()

        await service.revoke(db_session, drop.id)
        await db_session.commit()

        assert (await service.resolve(db_session, keep.id)).id == user.id
        with pytest.raises(AuthenticationError):
            await service.resolve(db_session, drop.id)

    @pytest.mark.asyncio
    async def test_revoke_unknown_is_noop(self, service, db_session):
        await service.revoke(db_session, "nope")
        await service.revoke(db_session, None)

    @pytest.mark.asyncio
    async def test_purge_expired(self, service, db_session):
        user = await _make_user(db_session)
        live = await service.create(db_session, user.id)
        db_session.add(
            AuthSession(
                id="old",
                user_id=user.id,
                expires_at=datetime.now(timezone.utc) - timedelta(days=1),
            )
        )
        await db_session.commit()

        assert await service.purge_expired(db_session) == 1
        await db_session.commit()

        remaining = await db_session.scalar(select(func.count()).select_from(AuthSession))
        assert remaining == 1
        assert (await service.resolve(db_session, live.id)).id == user.id
