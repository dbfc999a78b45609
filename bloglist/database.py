"""
Bloglist Backend — Database Session Management
===============================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   Creates an async engine with connection pooling, provides a session
       dependency that auto-commits on success and auto-rolls-back on error.
Who:   The session dependency feeds the DocumentStore built for each request.
When:  Engine is created at module import; sessions are created per-request.

Lifecycle:
    The engine is the single long-lived store connection of the process.
    It is opened at import, the tables are created during the app lifespan
    startup (init_models), and it is disposed at shutdown (dispose_engine).
    It is never reopened per request.

Connection Pooling Strategy:
    PostgreSQL: pool_size + max_overflow persistent connections,
                pre-ping before use, recycle every hour.
    SQLite:     NullPool, each session opens its own aiosqlite connection.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from bloglist.config import settings


def _engine_options() -> Dict[str, Any]:
    """Pool configuration for the configured database backend."""
    options: Dict[str, Any] = {
        # Echo SQL queries in DEBUG mode for development visibility
        "echo": settings.log_level == "DEBUG",
    }
    if settings.is_sqlite:
        options["poolclass"] = NullPool
    else:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: documents stay readable for serialization after commit
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Each subclass is one document collection; `Base.metadata` is used by
    init_models() to create the collections at startup.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the handler (through its DocumentStore)
        3. On success: commits the transaction
        4. On error: rolls back the transaction
        5. Always: closes the session (returns connection to pool)

    Raises:
        Any database exceptions are propagated to the global error handler,
        which returns appropriate HTTP status codes.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def init_models() -> None:
    """
    What:  Creates the `blogs` and `users` collections if they do not exist.
    When:  Called during application startup (lifespan handler).
    """
    # Registers the models on Base.metadata
    from bloglist import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_models() -> None:
    """Drops every collection. Used by the test suite between tests."""
    from bloglist import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
