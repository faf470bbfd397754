"""
Daily Pause Backend — FastAPI Auth Dependencies
================================================

What:  `get_session_token` and `get_current_user` for protected routes.
How:   The token is read from the session cookie (and from a bearer header
       when ACCEPT_BEARER_TOKENS is enabled), then resolved by SessionService.
       Resolution failures raise AuthenticationError, which the global
       handler turns into a 401.

Example:
    @router.get("/api/auth/me")
    async def me(user: User = Depends(get_current_user)):
        ...
"""

from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from daily_pause.config import settings
from daily_pause.database import get_db_session
from daily_pause.models.user import User
from daily_pause.security.tokens import extract_token
from daily_pause.services.session_service import session_service


def get_session_token(request: Request) -> Optional[str]:
    return extract_token(
        request.headers,
        allow_bearer=settings.accept_bearer_tokens,
        cookie_name=settings.session_cookie_name,
    )


async def get_current_user(
    request: Request,
    token: Optional[str] = Depends(get_session_token),
    db: AsyncSession = Depends(get_db_session),
) -> User:
    user = await session_service.resolve(db, token)
    # Handy for request logging further down the chain
    request.state.user_id = user.id
    return user
