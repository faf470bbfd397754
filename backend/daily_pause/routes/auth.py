"""
Daily Pause Backend — Auth Route Handlers
==========================================

What:  POST /api/auth/register, POST /api/auth/login, GET /api/auth/me,
       POST /api/auth/logout.
How:   Delegates to AuthService; the only HTTP concern handled here is the
       session cookie.

Cookie:
    session=<token>; HttpOnly; SameSite=Strict; Path=/; Max-Age=604800
    plus Secure when SESSION_COOKIE_SECURE is enabled (the default).
    Logout sends the same cookie with Max-Age=0.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from daily_pause.config import settings
from daily_pause.database import get_db_session
from daily_pause.dependencies import get_current_user, get_session_token
from daily_pause.models.user import User
from daily_pause.schemas.auth import (
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserResponse,
)
from daily_pause.schemas.common import ErrorResponse
from daily_pause.services.auth_service import auth_service
from daily_pause.services.session_service import session_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=session_service.max_age_seconds,
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="strict",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="strict",
    )


@router.post(
    "/register",
    response_model=UserResponse,
    responses={
        400: {"description": "Malformed body or email already registered", "model": ErrorResponse},
    },
    summary="Create an account and start a session",
)
async def register(
    payload: RegisterRequest,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    user, session = await auth_service.register(db, payload)
    set_session_cookie(response, session.id)
    return UserResponse.model_validate(user)


@router.post(
    "/login",
    response_model=UserResponse,
    responses={
        401: {"description": "Invalid credentials", "model": ErrorResponse},
    },
    summary="Start a session with email and password",
)
async def login(
    payload: LoginRequest,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    user, session = await auth_service.login(db, payload)
    set_session_cookie(response, session.id)
    return UserResponse.model_validate(user)


@router.get(
    "/me",
    response_model=UserResponse,
    responses={401: {"description": "Not authenticated or session expired", "model": ErrorResponse}},
    summary="Current user",
)
async def me(user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(user)


@router.post(
    "/logout",
    response_model=MessageResponse,
    responses={401: {"description": "Not authenticated or session expired", "model": ErrorResponse}},
    summary="End the current session",
)
async def logout(
    response: Response,
    user: User = Depends(get_current_user),
    token: Optional[str] = Depends(get_session_token),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await auth_service.logout(db, token)
    clear_session_cookie(response)
    return MessageResponse(message="Logged out successfully")
