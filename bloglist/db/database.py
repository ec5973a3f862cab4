"""Async engine, per-request sessions and schema setup."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import ConnectionPoolEntry
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from bloglist.configs import settings
from bloglist.monitoring import get_logger

logger = get_logger(__name__)

STATEMENT_TIMEOUT_MS = 30000


def is_sqlite(database_url: str) -> bool:
    return make_url(database_url).get_backend_name() == "sqlite"


def engine_kwargs(database_url: str) -> dict[str, Any]:
    """
    Engine options for the configured backend.

    aiosqlite gets the defaults; asyncpg gets a sized pool and server side
    statement and lock timeouts.
    """
    options: dict[str, Any] = {"echo": settings.DATABASE_ECHO}
    if is_sqlite(database_url):
        return options

    timeout = str(STATEMENT_TIMEOUT_MS)
    options.update(
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_timeout=settings.POOL_TIMEOUT,
        pool_recycle=settings.POOL_RECYCLE,
        pool_pre_ping=True,
        connect_args={
            "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
            "server_settings": {"statement_timeout": timeout, "lock_timeout": timeout},
        },
    )
    return options


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """
    Turn on foreign key enforcement for every new SQLite connection.

    SQLite ignores ``ON DELETE`` clauses unless the pragma is set per
    connection, so comments would outlive their blog without it.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection: Any, connection_record: ConnectionPoolEntry) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    **engine_kwargs(settings.DATABASE_URL),
)
if is_sqlite(settings.DATABASE_URL):
    enable_sqlite_foreign_keys(engine)

async_session_maker: async_sessionmaker[SQLModelAsyncSession] = async_sessionmaker(
    engine,
    class_=SQLModelAsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


@asynccontextmanager
async def transaction() -> AsyncGenerator[AsyncSession]:
    """
    Session that commits on a clean exit and rolls back on any exception.

    ```python
    async with transaction() as session:
        await BlogRepository(session).create(blog, user_id=user.id)
    ```
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            logger.exception("Transaction rolled back")
            raise


async def get_session() -> AsyncGenerator[AsyncSession]:
    """FastAPI dependency: one transaction per request."""
    async with transaction() as session:
        yield session


async def ping_db(session: AsyncSession) -> bool:
    """``True`` when the database answers ``SELECT 1``."""
    try:
        await session.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Database ping failed")
        return False
    return True


async def init_db() -> None:
    """Create the users, blogs and comments tables if they are missing."""
    # Registers the tables on SQLModel.metadata
    from bloglist import models  # noqa: F401, PLC0415

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info(f"Schema ready: {', '.join(sorted(SQLModel.metadata.tables))}")


async def close_db() -> None:
    await engine.dispose()
    logger.info("Database connections closed")
