"""
Daily Pause Backend — Session Service (Auth Guard)
===================================================

What:  Issues, resolves and revokes server-side session tokens.
Why:   Every protected endpoint in both app variants funnels through
       `resolve()`, so the "who is calling" rule lives in exactly one place.
How:   A session row's primary key IS the token. Resolution is one query
       joining `sessions` to `users` filtered on `expires_at > now`.

Failure kinds (both HTTP 401):
    no token presented                   → "Not authenticated"
    token unknown, revoked or expired    → "Session expired"

Expiry is fixed at creation (SESSION_TTL_DAYS, default 7) and never
extended by activity.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from daily_pause.config import settings
from daily_pause.exceptions import AuthenticationError, DatabaseError
from daily_pause.models.user import AuthSession, User

logger = logging.getLogger(__name__)


class SessionService:
    """
    Stateless session store front-end.

    Every method takes the request's AsyncSession; commits happen in the
    caller's transaction scope (get_db_session / session_scope).
    """

    def __init__(self, ttl_days: int = 7):
        self.ttl = timedelta(days=ttl_days)

    @property
    def max_age_seconds(self) -> int:
        """Cookie Max-Age matching the session lifetime."""
        return int(self.ttl.total_seconds())

    @staticmethod
    def new_token() -> str:
        # 32 random bytes → 43 url-safe chars; fits sessions.id (64)
        return secrets.token_urlsafe(32)

    async def create(self, db: AsyncSession, user_id: str) -> AuthSession:
        """Open a new session for `user_id`; other sessions stay valid."""
        session = AuthSession(
            id=self.new_token(),
            user_id=user_id,
            expires_at=datetime.now(timezone.utc) + self.ttl,
        )
        try:
            db.add(session)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Could not create session for user %s: %s", user_id, str(e))
            raise DatabaseError(context={"operation": "create_session"}) from e
        return session

    async def resolve(self, db: AsyncSession, token: Optional[str]) -> User:
        """
        Map a token to its user.

        Raises:
            AuthenticationError: "Not authenticated" when token is falsy,
                "Session expired" when no live session matches.
            DatabaseError: The lookup itself failed.
        """
        if not token:
            raise AuthenticationError("Not authenticated")

        try:
            result = await db.execute(
                select(User)
                .join(AuthSession, AuthSession.user_id == User.id)
                .where(
                    AuthSession.id == token,
                    AuthSession.expires_at > datetime.now(timezone.utc),
                )
            )
            user = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Session lookup failed: %s", str(e))
            raise DatabaseError(context={"operation": "resolve_session"}) from e

        if user is None:
            raise AuthenticationError("Session expired")
        return user

    async def revoke(self, db: AsyncSession, token: Optional[str]) -> None:
        """Delete the session row if it exists. Unknown tokens are ignored."""
        if not token:
            return
        try:
            await db.execute(delete(AuthSession).where(AuthSession.id == token))
        except SQLAlchemyError as e:
            logger.error("Session revoke failed: %s", str(e))
            raise DatabaseError(context={"operation": "revoke_session"}) from e

    async def purge_expired(self, db: AsyncSession) -> int:
        """Remove sessions past their expiry. Returns the number deleted."""
        try:
            result = await db.execute(
                delete(AuthSession).where(AuthSession.expires_at <= datetime.now(timezone.utc))
            )
        except SQLAlchemyError as e:
            logger.error("Session purge failed: %s", str(e))
            raise DatabaseError(context={"operation": "purge_sessions"}) from e
        purged = result.rowcount or 0
        if purged:
            logger.info("Purged %d expired sessions", purged)
        return purged


session_service = SessionService(ttl_days=settings.session_ttl_days)
