"""Pytest fixtures for unit and integration tests."""
from typing import AsyncGenerator

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import NullPool

from app.database import build_engine, build_sessionmaker, get_db
from app.main import app
from app.models import Base, Report, School, User

# One SQLite file per test (asyncpg requires PostgreSQL). NullPool gives every
# session its own connection, so commits and rollbacks behave like production.


@pytest_asyncio.fixture
async def test_engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine):
    return build_sessionmaker(test_engine)


@pytest_asyncio.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP test client; each request gets a fresh session like get_db."""

    async def _get_test_db():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_test_db
    # Unhandled errors must come back as 500 responses, not raise in the test
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def account(db) -> User:
    school = School(npsn="20100001", satuan_pendidikan="SD Negeri 1")
    user = User(nip="198001012005011001", name="Bu Sari", password="unused", npsn=school.npsn)
    db.add_all([school, user])
    await db.commit()
    # Detached copies keep their loaded ids through later rollbacks and expunges
    db.expunge_all()
    return user


@pytest_asyncio.fixture
async def report(db, account) -> Report:
    r = Report(nip=account.nip, school_year="2024/2025", semester="1", class_="4A", phase="B")
    db.add(r)
    await db.commit()
    db.expunge(r)
    return r
