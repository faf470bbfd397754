"""
Daily Pause Backend — Application Package Initializer
=====================================================

What: Marks the `daily_pause` directory as a Python package.
Why:  Enables module imports like `from daily_pause.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend follows a layered architecture shared by two deployment variants:

    ┌──────────────────────────┐   ┌──────────────────────────┐
    │  FastAPI routes (server) │   │  Route table (edge)      │  ← HTTP concerns only
    ├──────────────────────────┴───┴──────────────────────────┤
    │        Services (auth, sessions, journal)               │  ← Business rules
    ├─────────────────────────────────────────────────────────┤
    │        Security helpers (passwords, tokens, CORS)       │  ← Pure functions
    ├─────────────────────────────────────────────────────────┤
    │        Models & Schemas (SQLAlchemy + Pydantic)         │
    ├─────────────────────────────────────────────────────────┤
    │        Database (async SQLAlchemy sessions)             │
    └─────────────────────────────────────────────────────────┘

    Both front doors call the same services, so a journal entry saved through
    one variant is readable through the other.
"""

__version__ = "1.0.0"
