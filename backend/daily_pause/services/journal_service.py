"""
Daily Pause Backend — Journal Service
======================================

What:  Read, save, delete and list-dates for a user's daily journal entries.
Why:   The handlers in both app variants are thin parameter-passing wrappers;
       the one-entry-per-day rule is enforced here.
How:   Entries are addressed by (user_id, date). Saving is a single
       INSERT ... ON CONFLICT (user_id, date) DO UPDATE on PostgreSQL and
       SQLite, so a second save for the same day overwrites every prompt
       while keeping the row's original id.

Date handling:
    Any operation given date=None works on "today" in JOURNAL_TIMEZONE.

Absence is not an error:
    get_entry()    → None (route returns {})
    delete_entry() → no-op when nothing matches
"""

import datetime as dt
import logging
import uuid
from typing import List, Optional
from zoneinfo import ZoneInfo

from sqlalchemy import delete, desc, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from daily_pause.config import settings
from daily_pause.exceptions import DatabaseError
from daily_pause.models.journal_entry import PROMPT_FIELDS, JournalEntry
from daily_pause.schemas.journal import JournalEntryIn, JournalEntryOut

logger = logging.getLogger(__name__)

# Dialects with a native insert-or-update; others fall back to ORM merge
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class JournalService:
    """
    Business logic for journal entries.

    Stateless: receives the request's AsyncSession on every call.
    """

    def __init__(self, timezone_name: str = "UTC"):
        if timezone_name.upper() == "UTC":
            self.tz = dt.timezone.utc
        else:
            self.tz = ZoneInfo(timezone_name)

    def today(self) -> dt.date:
        return dt.datetime.now(self.tz).date()

    def resolve_date(self, day: Optional[dt.date]) -> dt.date:
        return day or self.today()

    async def save_entry(
        self, db: AsyncSession, user_id: str, payload: JournalEntryIn
    ) -> str:
        """
        Create or overwrite the entry for (user, payload.date or today).

        Prompts missing from the payload are stored as NULL. Returns the id
        of the stored row.
        """
        day = self.resolve_date(payload.date)
        try:
            existing_id = await db.scalar(
                select(JournalEntry.id).where(
                    JournalEntry.user_id == user_id,
                    JournalEntry.date == day,
                )
            )
            values = {
                "id": existing_id or str(uuid.uuid4()),
                "user_id": user_id,
                "date": day,
                "updated_at": dt.datetime.now(dt.timezone.utc),
            }
            for field in PROMPT_FIELDS:
                values[field] = getattr(payload, field)

            insert = _UPSERT_INSERTS.get(_dialect_name(db))
            if insert is not None:
                stmt = insert(JournalEntry).values(**values)
                stmt = stmt.on_conflict_do_update(
                    index_elements=[JournalEntry.user_id, JournalEntry.date],
                    set_={
                        name: stmt.excluded[name]
                        for name in PROMPT_FIELDS + ("updated_at",)
                    },
                )
                await db.execute(stmt)
            else:
                await db.merge(JournalEntry(**values))
                await db.flush()
        except SQLAlchemyError as e:
            logger.error("Journal save failed for user %s: %s", user_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to save journal entry",
                context={"user_id": user_id, "date": day.isoformat()},
            ) from e

        logger.info(
            "Journal entry %s for user %s on %s",
            "updated" if existing_id else "created",
            user_id,
            day.isoformat(),
        )
        return values["id"]

    async def get_entry(
        self, db: AsyncSession, user_id: str, day: Optional[dt.date] = None
    ) -> Optional[JournalEntryOut]:
        day = self.resolve_date(day)
        try:
            result = await db.execute(
                select(JournalEntry)
                .where(
                    JournalEntry.user_id == user_id,
                    JournalEntry.date == day,
                )
                # Upserts bypass the identity map
                .execution_options(populate_existing=True)
            )
            entry = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Journal fetch failed for user %s: %s", user_id, str(e))
            raise DatabaseError(
                message="Failed to fetch journal entry",
                context={"user_id": user_id, "date": day.isoformat()},
            ) from e

        if entry is None:
            return None
        return JournalEntryOut.model_validate(entry)

    async def delete_entry(
        self, db: AsyncSession, user_id: str, day: Optional[dt.date] = None
    ) -> None:
        """Delete the entry for the day if there is one; silent otherwise."""
        day = self.resolve_date(day)
        try:
            await db.execute(
                delete(JournalEntry).where(
                    JournalEntry.user_id == user_id,
                    JournalEntry.date == day,
                )
            )
        except SQLAlchemyError as e:
            logger.error("Journal delete failed for user %s: %s", user_id, str(e))
            raise DatabaseError(
                message="Failed to delete journal entry",
                context={"user_id": user_id, "date": day.isoformat()},
            ) from e
        logger.info("Journal entry for user %s on %s deleted", user_id, day.isoformat())

    async def list_dates(self, db: AsyncSession, user_id: str) -> List[dt.date]:
        """All days with an entry for the user, newest first."""
        try:
            result = await db.execute(
                select(JournalEntry.date)
                .where(JournalEntry.user_id == user_id)
                .order_by(desc(JournalEntry.date))
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Journal date listing failed for user %s: %s", user_id, str(e))
            raise DatabaseError(
                message="Failed to list journal dates",
                context={"user_id": user_id},
            ) from e


def _dialect_name(db: AsyncSession) -> str:
    bind = db.bind
    return getattr(getattr(bind, "dialect", None), "name", "")


journal_service = JournalService(timezone_name=settings.journal_timezone)
