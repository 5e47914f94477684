"""
Test configuration and fixtures for the waitlist API.

Every test gets its own SQLite file database (aiosqlite) with the tables
created from the models, so ids start at 1 and nothing leaks between tests.
"""

import os
import tempfile

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

load_dotenv()

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{tempfile.mktemp(suffix='.db')}"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="waitlist-logs-")
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["DEBUG"] = "false"

from app.platform.db.session import build_engine, build_sessionmaker, get_db, init_models  # noqa: E402


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'waitlist.db'}")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_sessionmaker(engine)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def broken_engine(tmp_path):
    """An engine whose database file can never be opened."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'waitlist.db'}")
    yield engine
    await engine.dispose()


def _override_db(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    return override_get_db


@pytest.fixture
def test_app(session_factory):
    """FastAPI application wired to the per-test database."""
    from app.main import app

    app.dependency_overrides[get_db] = _override_db(session_factory)
    yield app
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def broken_app(broken_engine):
    """FastAPI application whose database is unreachable."""
    from app.main import app

    app.dependency_overrides[get_db] = _override_db(build_sessionmaker(broken_engine))
    yield app
    app.dependency_overrides.pop(get_db, None)


@pytest_asyncio.fixture
async def client(test_app):
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://testserver") as ac:
        yield ac
