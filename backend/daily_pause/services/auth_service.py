"""
Daily Pause Backend — Auth Service
===================================

What:  Registration, login and logout.
Why:   Both app variants expose the same four auth endpoints; this keeps the
       rules (unique email, credential check, session issue) in one place.
How:   Composes PasswordHasher and SessionService over the request's
       AsyncSession.

Flows:
    register: email unused? → hash password → insert user → open session
    login:    user exists and password verifies? → (rehash) → open session
    logout:   revoke the presented session
"""

import logging
from typing import Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from daily_pause.exceptions import AuthenticationError, DatabaseError, ValidationError
from daily_pause.models.user import AuthSession, User
from daily_pause.schemas.auth import LoginRequest, RegisterRequest
from daily_pause.security.passwords import PasswordHasher, password_hasher
from daily_pause.services.session_service import SessionService, session_service

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(
        self,
        hasher: PasswordHasher = password_hasher,
        sessions: SessionService = session_service,
    ):
        self.hasher = hasher
        self.sessions = sessions

    async def _find_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        try:
            result = await db.execute(select(User).where(User.email == email))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("User lookup failed: %s", str(e))
            raise DatabaseError(context={"operation": "find_user"}) from e

    async def register(
        self, db: AsyncSession, payload: RegisterRequest
    ) -> Tuple[User, AuthSession]:
        """
        Create an account and log it in.

        Raises:
            ValidationError: Email already registered (→ 400). No row is added.
        """
        if await self._find_by_email(db, payload.email) is not None:
            raise ValidationError("User already exists", field="email")

        user = User(
            email=payload.email,
            password=self.hasher.hash(payload.password),
            name=payload.name,
        )
        try:
            db.add(user)
            await db.flush()
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email
            await db.rollback()
            raise ValidationError("User already exists", field="email") from e
        except SQLAlchemyError as e:
            logger.error("User insert failed: %s", str(e))
            raise DatabaseError(context={"operation": "create_user"}) from e

        session = await self.sessions.create(db, user.id)
        logger.info("Registered user %s", user.id)
        return user, session

    async def login(
        self, db: AsyncSession, payload: LoginRequest
    ) -> Tuple[User, AuthSession]:
        """
        Verify credentials and open a new session.

        Raises:
            AuthenticationError: Unknown email or wrong password (→ 401).
                The message is the same for both so emails can't be probed.
        """
        user = await self._find_by_email(db, payload.email)
        if user is None or not self.hasher.verify(payload.password, user.password):
            logger.info("Failed login attempt")
            raise AuthenticationError("Invalid credentials")

        if self.hasher.needs_rehash(user.password):
            user.password = self.hasher.hash(payload.password)
            logger.info("Upgraded stored credential for user %s", user.id)

        await self.sessions.purge_expired(db)
        session = await self.sessions.create(db, user.id)
        logger.info("User %s logged in", user.id)
        return user, session

    async def logout(self, db: AsyncSession, token: Optional[str]) -> None:
        await self.sessions.revoke(db, token)
        logger.info("Session revoked")


auth_service = AuthService()
