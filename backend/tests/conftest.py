"""
Noteful Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: Mock AsyncSession for store unit tests (no DB)
    ├── db_engine: Fresh in-memory SQLite database (foreign keys ON)
    ├── session_factory: Sessions bound to that database
    ├── seed: Inserts folders/notes directly, bypassing the API
    ├── app_factory: Builds an app whose get_db_session uses the test database
    ├── test_client: HTTPX AsyncClient against app_factory() (test environment)
    └── folders_array / notes_array / malicious_*: Fixture data
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["API_TOKEN"] = "test-api-token"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.config import Settings
from app.database import Base, get_db_session
from app.main import create_app
from app.models.folder import Folder
from app.models.note import Note

API_TOKEN = "test-api-token"
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ══════════════════════════════════════════════════════════════════════════
# Store Unit Test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_folder(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = folder
            result = await folder_service.get_by_id(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.refresh = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    A fresh in-memory database per test.

    StaticPool keeps the single in-memory connection alive across sessions;
    the connect hook turns on SQLite's foreign key enforcement so folder_id
    integrity and ON DELETE CASCADE behave like PostgreSQL.
    """
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def seed(session_factory):
    """Insert folder and note dicts straight into the database."""

    async def _seed(folders=(), notes=()):
        async with session_factory() as session:
            session.add_all([Folder(**folder) for folder in folders])
            await session.flush()
            session.add_all([Note(**note) for note in notes])
            await session.commit()

    return _seed


# ══════════════════════════════════════════════════════════════════════════
# Application Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def app_factory(session_factory):
    """
    Build an app bound to the test database.

    Keyword arguments override Settings fields, e.g. app_factory(environment="production").
    """

    async def _session_override():
        async with session_factory() as session:
            yield session

    def _build(**overrides):
        values = {
            "api_token": API_TOKEN,
            "environment": "test",
            "database_url": TEST_DATABASE_URL,
        }
        values.update(overrides)
        app = create_app(Settings(**values))
        app.dependency_overrides[get_db_session] = _session_override
        return app

    return _build


@pytest_asyncio.fixture
async def test_client(app_factory):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_list(test_client, auth_headers):
            response = await test_client.get("/api/folders", headers=auth_headers)
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app_factory())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {API_TOKEN}"}


# ══════════════════════════════════════════════════════════════════════════
# Fixture Data
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def folders_array():
    return [
        {"id": 1, "name": "Important"},
        {"id": 2, "name": "Super"},
        {"id": 3, "name": "Spangley"},
    ]


@pytest.fixture
def notes_array():
    modified = datetime(2019, 1, 3, 0, 0, tzinfo=timezone.utc)
    return [
        {"id": 1, "name": "Dogs", "folder_id": 1, "content": "Corgis are short.", "modified": modified},
        {"id": 2, "name": "Cats", "folder_id": 2, "content": "Cats sleep a lot.", "modified": modified},
        {"id": 3, "name": "Pigs", "folder_id": 3, "content": "", "modified": modified},
        {"id": 4, "name": "Birds", "folder_id": 1, "content": "Birds fly.", "modified": modified},
    ]


@pytest.fixture
def malicious_folder():
    return {
        "id": 1,
        "name": "<script>alert('xss');</script>",
    }


@pytest.fixture
def malicious_note():
    return {
        "id": 1,
        "name": "<script>alert('xss');</script>",
        "folder_id": 1,
        "content": 'Bad image <img src="https://x.invalid/a.png" onerror="alert(1);">. '
                   "But not <strong>all</strong> bad.",
    }


@pytest.fixture
def expected_malicious_note():
    return {
        "name": "&lt;script&gt;alert('xss');&lt;/script&gt;",
        "content": "Bad image &lt;img src=&quot;https://x.invalid/a.png&quot; "
                   "onerror=&quot;alert(1);&quot;&gt;. "
                   "But not &lt;strong&gt;all&lt;/strong&gt; bad.",
    }
