# tests/main/conftest.py
"""Pytest configuration and fixtures for main tests."""

from collections.abc import AsyncGenerator, Generator
from unittest.mock import AsyncMock

from pytest import fixture
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.db import get_session
from bloglist.main import app


@fixture
def broken_database() -> Generator[None]:
    """Make the database probe fail for the duration of a test."""

    async def override_get_session() -> AsyncGenerator[AsyncSession]:
        session = AsyncMock(spec=AsyncSession)
        session.execute.side_effect = ConnectionRefusedError("database is down")
        yield session

    previous = app.dependency_overrides.get(get_session)
    app.dependency_overrides[get_session] = override_get_session
    yield
    if previous is None:
        app.dependency_overrides.pop(get_session, None)
    else:
        app.dependency_overrides[get_session] = previous
