"""
Bloglist Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    ├── database: fresh sqlite collections per test (created, then dropped)
    ├── db_session: session on that database for seeding and counting
    ├── initial_blogs / seeded_blogs: the two blogs every API test starts with
    ├── existing_user: one registered user ("bananica")
    ├── mock_store: AsyncMock DocumentStore for handler unit tests
    └── test_client: HTTPX AsyncClient wired to the real app
"""

import os
import tempfile

# Environment must be set BEFORE any bloglist import: the settings singleton
# and the engine are built at import time.
_test_dir = tempfile.mkdtemp(prefix="bloglist_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_test_dir, 'test.db')}"
os.environ["BCRYPT_ROUNDS"] = "4"  # bcrypt minimum; keeps hashing fast
os.environ["LOG_LEVEL"] = "WARNING"

from typing import List
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from bloglist.database import async_session_factory, dispose_engine, drop_models, init_models
from bloglist.models.blog import Blog
from bloglist.models.user import User
from bloglist.security import PasswordHasher
from bloglist.store import DocumentStore


INITIAL_BLOGS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
]


@pytest.fixture
def initial_blogs() -> List[dict]:
    return [dict(blog) for blog in INITIAL_BLOGS]


@pytest_asyncio.fixture
async def database():
    """Creates the collections for one test and drops them afterwards."""
    await init_models()
    yield
    await drop_models()
    await dispose_engine()


@pytest_asyncio.fixture
async def db_session(database):
    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_blogs(db_session, initial_blogs):
    """Inserts INITIAL_BLOGS and returns the stored documents."""
    store = DocumentStore(db_session, Blog)
    blogs = [await store.insert(**blog) for blog in initial_blogs]
    await db_session.commit()
    return blogs


@pytest_asyncio.fixture
async def existing_user(db_session):
    password_hash = await PasswordHasher(rounds=4).hash("123456789")
    store = DocumentStore(db_session, User)
    user = await store.insert(
        username="bananica",
        name="Ana Banana",
        password_hash=password_hash,
    )
    await db_session.commit()
    return user


async def _documents_in_db(model) -> list:
    """Reads a whole collection through a fresh session (sees committed data only)."""
    async with async_session_factory() as session:
        result = await session.execute(select(model).order_by(model.doc_id))
        return list(result.scalars().all())


async def _count(model) -> int:
    async with async_session_factory() as session:
        result = await session.execute(select(func.count()).select_from(model))
        return result.scalar()


@pytest.fixture
def blogs_in_db():
    return lambda: _documents_in_db(Blog)


@pytest.fixture
def users_in_db():
    return lambda: _documents_in_db(User)


@pytest.fixture
def count_blogs():
    return lambda: _count(Blog)


@pytest.fixture
def count_users():
    return lambda: _count(User)


@pytest.fixture
def mock_store():
    """
    Provides a mock DocumentStore.

    Usage:
        async def test_create(mock_store):
            mock_store.insert.return_value = Blog(...)
            await BlogService(mock_store).create_blog(payload)
    """
    store = AsyncMock(spec=DocumentStore)
    store.find_all = AsyncMock(return_value=[])
    store.find_by_id = AsyncMock(return_value=None)
    store.find_one = AsyncMock(return_value=None)
    store.insert = AsyncMock()
    store.update_by_id = AsyncMock(return_value=None)
    store.delete_by_id = AsyncMock(return_value=False)
    return store


@pytest_asyncio.fixture
async def test_client(database):
    """
    Provides an async HTTP test client for endpoint testing.

    ASGITransport does not run the lifespan; the `database` fixture creates
    the collections instead.
    """
    from bloglist.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
