"""Async engine, session factory and transaction helpers."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.config import Settings, get_settings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, settings: Settings | None = None, **kwargs) -> AsyncEngine:
    """Create an AsyncEngine for ``url``.

    PostgreSQL gets a sized pool and optional TLS; SQLite gets foreign key
    enforcement so ON DELETE CASCADE behaves the same as in production.
    """
    settings = settings or get_settings()
    backend = make_url(url).get_backend_name()
    if backend == "postgresql":
        kwargs.setdefault("pool_size", settings.DATABASE_POOL_SIZE)
        kwargs.setdefault("pool_pre_ping", True)
        if settings.DATABASE_SSL:
            kwargs.setdefault("connect_args", {"ssl": "verify-full"})

    engine = create_async_engine(url, echo=False, **kwargs)
    if backend == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_sessionmaker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=bind, class_=AsyncSession, expire_on_commit=False)


# The pool is created lazily: no connection is opened until the first checkout.
engine = build_engine(get_settings().DATABASE_URL)
AsyncSessionLocal = build_sessionmaker(engine)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield one session per request; roll back whatever the handler left open."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


@asynccontextmanager
async def transaction(db: AsyncSession) -> AsyncIterator[AsyncSession]:
    """Commit the work done in the block, or roll all of it back on error.

    Works whether or not the session already autobegan a transaction, unlike
    ``AsyncSession.begin()``.
    """
    try:
        yield db
        await db.commit()
    except Exception:
        await db.rollback()
        raise
