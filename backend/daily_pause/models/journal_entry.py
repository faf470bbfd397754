"""
Daily Pause Backend — JournalEntry SQLAlchemy Model
====================================================

What:  ORM model representing the `journal_entries` table.
Why:   One row per (user, calendar date) holding the morning and evening prompts.
How:   The UNIQUE (user_id, date) constraint is the conflict target for the
       insert-or-update performed by JournalService.save_entry().

Prompt Columns:
    Morning: gratitude 1-3, intention, prayer
    Evening: reflection 1-3, learning, gratitude
    All ten are nullable TEXT: an unanswered prompt is stored as NULL.
"""

import datetime as dt
import uuid

from sqlalchemy import Date, DateTime, ForeignKey, Text, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from daily_pause.database import Base

# Column names in display order; shared by the schema layer and the upsert
PROMPT_FIELDS = (
    "morning_gratitude1",
    "morning_gratitude2",
    "morning_gratitude3",
    "morning_intention",
    "morning_prayer",
    "evening_reflection1",
    "evening_reflection2",
    "evening_reflection3",
    "evening_learning",
    "evening_gratitude",
)


class JournalEntry(Base):
    """
    A user's journal page for a single day.

    Query Patterns:
        - Get by day: WHERE user_id = :u AND date = :d   → unique index
        - List days:  WHERE user_id = :u ORDER BY date DESC → same index
    """

    __tablename__ = "journal_entries"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )

    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    date: Mapped[dt.date] = mapped_column(Date, nullable=False)

    morning_gratitude1: Mapped[str | None] = mapped_column(Text, nullable=True)
    morning_gratitude2: Mapped[str | None] = mapped_column(Text, nullable=True)
    morning_gratitude3: Mapped[str | None] = mapped_column(Text, nullable=True)
    morning_intention: Mapped[str | None] = mapped_column(Text, nullable=True)
    morning_prayer: Mapped[str | None] = mapped_column(Text, nullable=True)
    evening_reflection1: Mapped[str | None] = mapped_column(Text, nullable=True)
    evening_reflection2: Mapped[str | None] = mapped_column(Text, nullable=True)
    evening_reflection3: Mapped[str | None] = mapped_column(Text, nullable=True)
    evening_learning: Mapped[str | None] = mapped_column(Text, nullable=True)
    evening_gratitude: Mapped[str | None] = mapped_column(Text, nullable=True)

    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: dt.datetime.now(dt.timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_journal_entries_user_date"),
    )

    def __repr__(self) -> str:
        return f"<JournalEntry(id={self.id}, user_id={self.user_id}, date='{self.date}')>"
