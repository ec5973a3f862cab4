# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# These must be set before bloglist is imported anywhere
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["SECRET_KEY"] = "test-secret-key-with-enough-length-for-hs256"
os.environ["LOG_TO_FILE"] = "false"

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from bloglist.db import enable_sqlite_foreign_keys, get_session
from bloglist.main import app
from bloglist.managers.rate_limiter import limiter
from bloglist.models import BlogDB, CommentDB, UserDB  # noqa: F401

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create a fresh in-memory database with every table."""
    test_engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    enable_sqlite_foreign_keys(test_engine)
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def session(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    """Database session for repository tests."""
    async with session_maker() as db_session:
        yield db_session


@pytest.fixture
async def client(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client backed by the test database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession]:
        async with session_maker() as db_session:
            try:
                yield db_session
                await db_session.commit()
            except Exception:
                await db_session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    limiter.enabled = False
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    limiter.enabled = True
    app.dependency_overrides.clear()
