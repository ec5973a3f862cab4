# tests/errors/test_app_errors.py
"""Tests for the application error families and their handlers."""

from unittest.mock import MagicMock

import orjson
import pytest

from bloglist.errors import (
    BlogOwnershipError,
    DatabaseConnectionError,
    DuplicateEntryError,
    InvalidCredentialsError,
    InvalidTokenError,
    MalformedBlogError,
    PasswordHashingError,
    RecordNotFoundError,
    UserAuthenticationError,
    stats_exception_handler,
)


@pytest.mark.parametrize(
    ("error", "status_code", "detail"),
    [
        (DuplicateEntryError(), 409, "a record with this value already exists"),
        (RecordNotFoundError(), 404, "record not found"),
        (DatabaseConnectionError(), 500, "database unavailable"),
        (InvalidCredentialsError(), 401, "invalid username or password"),
        (InvalidTokenError(), 401, "token missing or invalid"),
        (BlogOwnershipError(), 403, "only the creator of the blog may delete it"),
        (PasswordHashingError(), 500, "password hashing failed"),
        (RecordNotFoundError("Blog", 7), 404, "Blog with ID 7 not found"),
    ],
)
def test_error_defaults(error: Exception, status_code: int, detail: str) -> None:
    assert error.status_code == status_code
    assert error.detail == detail


def test_auth_errors_share_base() -> None:
    assert issubclass(InvalidTokenError, UserAuthenticationError)
    assert issubclass(BlogOwnershipError, UserAuthenticationError)


class TestMalformedBlogError:
    """Tests for MalformedBlogError."""

    def test_attributes(self) -> None:
        error = MalformedBlogError("likes", 3, None)
        assert error.status_code == 422
        assert error.field == "likes"
        assert error.position == 3
        assert error.detail == "blog at position 3 has an invalid 'likes': None"

    @pytest.mark.asyncio
    async def test_handler_body(self) -> None:
        request = MagicMock()
        request.client.host = "127.0.0.1"
        request.url.path = "/api/stats/total-likes"

        response = await stats_exception_handler(request, MalformedBlogError("likes", 0, "x"))

        assert response.status_code == 422
        assert orjson.loads(response.body) == {
            "detail": "blog at position 0 has an invalid 'likes': 'x'",
            "field": "likes",
            "position": 0,
        }
