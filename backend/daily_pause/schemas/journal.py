"""
Daily Pause Backend — Journal Request/Response Schemas
=======================================================

What:  Pydantic models defining the journal API contract.
Why:   The frontend speaks camelCase (`morningGratitude1`); the database speaks
       snake_case (`morning_gratitude1`). An alias generator bridges the two
       so field names are declared once.
How:   `populate_by_name=True` lets services build models from ORM attributes
       while `model_dump(by_alias=True)` produces the wire format.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class JournalPrompts(_CamelModel):
    """The ten free-text prompts. Every one is optional; omitted means NULL."""

    morning_gratitude1: Optional[str] = None
    morning_gratitude2: Optional[str] = None
    morning_gratitude3: Optional[str] = None
    morning_intention: Optional[str] = None
    morning_prayer: Optional[str] = None
    evening_reflection1: Optional[str] = None
    evening_reflection2: Optional[str] = None
    evening_reflection3: Optional[str] = None
    evening_learning: Optional[str] = None
    evening_gratitude: Optional[str] = None


class JournalEntryIn(JournalPrompts):
    """
    Body of POST /api/journal.

    `date` defaults to today (in JOURNAL_TIMEZONE) when omitted.
    Unknown keys are ignored so older clients keep working.
    """

    date: Optional[dt.date] = Field(default=None, description="Entry day, YYYY-MM-DD")


class JournalEntryOut(JournalPrompts):
    """A stored entry as returned by GET /api/journal."""

    id: str
    date: dt.date
    updated_at: Optional[dt.datetime] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class JournalDateIn(_CamelModel):
    """Body of POST /api/journal/delete."""

    date: Optional[dt.date] = None


class EntryDate(BaseModel):
    """One item of GET /api/journal/dates."""

    date: dt.date


class SuccessResponse(BaseModel):
    success: bool = True
