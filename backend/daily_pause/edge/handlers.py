"""
Daily Pause Backend — Edge Route Handlers
==========================================

What:  The eight API endpoints of the edge variant, registered on a RouteTable.
How:   Each handler parses its input with the shared Pydantic schemas and
       calls the shared services; only the HTTP shape differs from the
       server variant:

    - Token: `Authorization: Bearer` first, then the session cookie
    - Login/register bodies include `token` for clients without cookies
"""

import datetime as dt
import logging
from typing import Any, Dict, Optional, Type, TypeVar

import pydantic

from daily_pause.config import settings
from daily_pause.edge.router import RequestContext, ResponseBuilder, RouteTable
from daily_pause.exceptions import ValidationError
from daily_pause.models.user import User
from daily_pause.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from daily_pause.schemas.journal import JournalDateIn, JournalEntryIn
from daily_pause.security.tokens import extract_token
from daily_pause.services.auth_service import auth_service
from daily_pause.services.journal_service import journal_service
from daily_pause.services.session_service import session_service

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


def parse_body(
    ctx: RequestContext, model: Type[ModelT], allow_null: bool = False
) -> ModelT:
    """Validate the JSON body against `model`; failures become 400s."""
    data = ctx.json(allow_null=allow_null)
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        errors = [
            {"loc": [str(part) for part in err["loc"]], "msg": err["msg"]}
            for err in e.errors()
        ]
        raise ValidationError("Malformed request", context={"errors": errors}) from e


def parse_day(value: Optional[str]) -> Optional[dt.date]:
    if not value:
        return None
    try:
        return dt.date.fromisoformat(value)
    except ValueError as e:
        raise ValidationError("Invalid date, expected YYYY-MM-DD", field="date") from e


def session_token(ctx: RequestContext) -> Optional[str]:
    return extract_token(
        ctx.headers,
        allow_bearer=True,
        cookie_name=settings.session_cookie_name,
    )


async def require_user(ctx: RequestContext) -> User:
    user = await session_service.resolve(ctx.db, session_token(ctx))
    ctx.state["user_id"] = user.id
    return user


def _auth_payload(user: User, token: str) -> Dict[str, Any]:
    return AuthResponse(id=user.id, email=user.email, name=user.name, token=token).model_dump()


def _with_session_cookie(builder: ResponseBuilder, token: str) -> ResponseBuilder:
    return builder.set_cookie(
        settings.session_cookie_name,
        token,
        max_age=session_service.max_age_seconds,
        secure=settings.session_cookie_secure,
    )


# ── Auth ──────────────────────────────────────────────────────────────────

async def register(ctx: RequestContext) -> ResponseBuilder:
    payload = parse_body(ctx, RegisterRequest)
    user, session = await auth_service.register(ctx.db, payload)
    return _with_session_cookie(ResponseBuilder.json(_auth_payload(user, session.id)), session.id)


async def login(ctx: RequestContext) -> ResponseBuilder:
    payload = parse_body(ctx, LoginRequest)
    user, session = await auth_service.login(ctx.db, payload)
    return _with_session_cookie(ResponseBuilder.json(_auth_payload(user, session.id)), session.id)


async def me(ctx: RequestContext) -> ResponseBuilder:
    user = await require_user(ctx)
    return ResponseBuilder.json({"id": user.id, "email": user.email, "name": user.name})


async def logout(ctx: RequestContext) -> ResponseBuilder:
    await require_user(ctx)
    await auth_service.logout(ctx.db, session_token(ctx))
    builder = ResponseBuilder.json({"message": "Logged out successfully"})
    return builder.clear_cookie(settings.session_cookie_name, secure=settings.session_cookie_secure)


# ── Journal ───────────────────────────────────────────────────────────────

async def save_entry(ctx: RequestContext) -> ResponseBuilder:
    user = await require_user(ctx)
    payload = parse_body(ctx, JournalEntryIn)
    await journal_service.save_entry(ctx.db, user.id, payload)
    return ResponseBuilder.json({"success": True})


async def get_entry(ctx: RequestContext) -> ResponseBuilder:
    user = await require_user(ctx)
    entry = await journal_service.get_entry(ctx.db, user.id, parse_day(ctx.query.get("date")))
    if entry is None:
        return ResponseBuilder.json({})
    return ResponseBuilder.json(entry.model_dump(by_alias=True, mode="json"))


async def delete_entry(ctx: RequestContext) -> ResponseBuilder:
    user = await require_user(ctx)
    # Body is optional: missing, empty or null all mean today
    payload = parse_body(ctx, JournalDateIn, allow_null=True)
    await journal_service.delete_entry(ctx.db, user.id, payload.date)
    return ResponseBuilder.json({"success": True})


async def list_dates(ctx: RequestContext) -> ResponseBuilder:
    user = await require_user(ctx)
    days = await journal_service.list_dates(ctx.db, user.id)
    return ResponseBuilder.json([{"date": day.isoformat()} for day in days])


def build_route_table() -> RouteTable:
    """Construct the edge API's route table. Called once per app instance."""
    table = RouteTable()
    table.add("POST", "/api/auth/register", register)
    table.add("POST", "/api/auth/login", login)
    table.add("GET", "/api/auth/me", me)
    table.add("POST", "/api/auth/logout", logout)
    table.add("POST", "/api/journal", save_entry)
    table.add("GET", "/api/journal", get_entry)
    table.add("POST", "/api/journal/delete", delete_entry)
    table.add("GET", "/api/journal/dates", list_dates)
    return table
