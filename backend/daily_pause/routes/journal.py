"""
Daily Pause Backend — Journal Route Handlers
=============================================

What:  Read, save, delete and list the authenticated user's journal entries.
Why:   The journal page loads today's entry, autosaves as the user types, and
       the calendar view needs the list of days that have an entry.
How:   Every route depends on get_current_user, then hands the user id and the
       (optional) date to JournalService.

Route Inventory:
    POST /api/journal          save (insert or overwrite) → {"success": true}
    GET  /api/journal?date=    entry or {}
    POST /api/journal/delete   delete (no-op if absent)   → {"success": true}
    GET  /api/journal/dates    [{"date": "YYYY-MM-DD"}, ...] newest first
"""

import datetime as dt
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from daily_pause.database import get_db_session
from daily_pause.dependencies import get_current_user
from daily_pause.models.user import User
from daily_pause.schemas.common import ErrorResponse
from daily_pause.schemas.journal import (
    EntryDate,
    JournalDateIn,
    JournalEntryIn,
    JournalEntryOut,
    SuccessResponse,
)
from daily_pause.services.journal_service import journal_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/journal",
    tags=["Journal"],
    responses={401: {"description": "Not authenticated or session expired", "model": ErrorResponse}},
)


@router.post("", response_model=SuccessResponse, summary="Save the entry for a day")
async def save_entry(
    payload: JournalEntryIn,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    await journal_service.save_entry(db, user.id, payload)
    return SuccessResponse()


@router.get(
    "",
    responses={200: {"description": "The entry, or {} when none exists", "model": JournalEntryOut}},
    summary="Get the entry for a day",
)
async def get_entry(
    response: Response,
    date: Optional[dt.date] = Query(default=None, description="Entry day (YYYY-MM-DD); defaults to today"),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> Dict[str, Any]:
    entry = await journal_service.get_entry(db, user.id, date)
    # Entries change on every autosave; never let a shared cache keep one
    response.headers["Cache-Control"] = "private, no-store"
    if entry is None:
        return {}
    return entry.model_dump(by_alias=True, mode="json")


@router.post("/delete", response_model=SuccessResponse, summary="Delete the entry for a day")
async def delete_entry(
    payload: Optional[JournalDateIn] = Body(default=None),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    day = payload.date if payload else None
    await journal_service.delete_entry(db, user.id, day)
    return SuccessResponse()


@router.get("/dates", response_model=List[EntryDate], summary="Days that have an entry")
async def list_dates(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> List[EntryDate]:
    days = await journal_service.list_dates(db, user.id)
    return [EntryDate(date=day) for day in days]
