"""
Daily Pause Backend — Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (mocked DB, real SQLite DB,
       API clients for both app variants).
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── db_schema:       Creates all tables in the SQLite test DB, drops after
    ├── db_session:      A real AsyncSession on the test DB
    ├── test_user:       Registration body for the default account
    ├── test_client:     HTTPX AsyncClient for the FastAPI app
    ├── auth_client:     test_client already registered and logged in
    └── edge_client:     HTTPX AsyncClient for the edge Starlette app
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Override settings for testing BEFORE any daily_pause imports
_test_dir = tempfile.mkdtemp(prefix="dailypause_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/test.db"
os.environ["SESSION_COOKIE_SECURE"] = "false"  # httpx test client talks plain http
os.environ["PASSWORD_BCRYPT_ROUNDS"] = "4"  # keep bcrypt fast in tests
os.environ["CORS_ORIGINS"] = "http://localhost:3000"
os.environ["CORS_ORIGIN_SUFFIXES"] = ".pages.dev"
os.environ["CORS_DEFAULT_ORIGIN"] = "https://dailypause.app"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

TEST_USER = {"email": "a@x.com", "password": "secret1", "name": "Ann"}


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    What:    An AsyncMock that simulates AsyncSession behavior.
    How:     Mocks execute, scalar, flush, merge, commit, rollback and close.
             `bind.dialect.name` is empty, so the journal service takes its
             portable (merge) save path unless a test sets it.

    Usage:
        async def test_get_entry(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = entry
            result = await journal_service.get_entry(mock_db_session, user_id)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.scalar = AsyncMock(return_value=None)
    session.flush = AsyncMock()
    session.merge = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    session.bind = MagicMock()
    session.bind.dialect.name = ""
    return session


@pytest_asyncio.fixture
async def db_schema():
    """
    Creates the schema on the SQLite test database and drops it afterwards.

    ASGITransport does not run the app lifespan, so nothing else creates the
    tables. The engine is disposed after each test because pooled aiosqlite
    connections belong to the event loop that opened them.
    """
    from daily_pause.database import Base, engine
    from daily_pause.models import journal_entry, user  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_schema):
    """A real AsyncSession; committed work is visible to later sessions."""
    from daily_pause.database import async_session_factory

    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(db_schema):
    """
    Provides an async HTTP test client for the FastAPI (server) app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from daily_pause.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def test_user():
    """Credentials registered by auth_client."""
    return dict(TEST_USER)


@pytest_asyncio.fixture
async def auth_client(test_client):
    """test_client whose cookie jar holds a live session for TEST_USER."""
    response = await test_client.post("/api/auth/register", json=TEST_USER)
    assert response.status_code == 200, response.text
    return test_client


@pytest_asyncio.fixture
async def edge_client(db_schema):
    """HTTPX AsyncClient for the edge variant (daily_pause.edge.app)."""
    from daily_pause.edge.app import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
