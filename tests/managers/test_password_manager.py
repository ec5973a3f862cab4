# tests/managers/test_password_manager.py
"""Tests for bloglist/managers/password_manager.py module."""

from unittest.mock import patch

import pytest
from passlib.exc import InternalBackendError

from bloglist.errors import PasswordHashingError
from bloglist.managers.password_manager import PasswordHasher, hash_password, verify_password


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(level="low")


class TestPasswordHasher:
    """Tests for the PasswordHasher class."""

    def test_hash_is_argon2(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("salainen")
        assert hashed.startswith("$argon2id$")
        assert "salainen" not in hashed

    def test_verify(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("salainen")
        assert hasher.verify("salainen", hashed) is True
        assert hasher.verify("wrong", hashed) is False

    def test_empty_password_rejected(self, hasher: PasswordHasher) -> None:
        with pytest.raises(ValueError, match="Password cannot be empty"):
            hasher.hash("")

    @pytest.mark.parametrize("hashed", [None, "", "   "])
    def test_missing_hash_never_verifies(self, hasher: PasswordHasher, hashed: str | None) -> None:
        assert hasher.verify("salainen", hashed) is False

    def test_corrupt_hash_never_verifies(self, hasher: PasswordHasher) -> None:
        assert hasher.verify("salainen", "not-a-hash") is False

    def test_backend_failure_raises_hashing_error(self, hasher: PasswordHasher) -> None:
        with (
            patch.object(hasher.pwd_context, "hash", side_effect=InternalBackendError("boom")),
            pytest.raises(PasswordHashingError),
        ):
            hasher.hash("salainen")


class TestAsyncHelpers:
    """Tests for the executor backed helpers."""

    @pytest.mark.asyncio
    async def test_hash_and_verify(self) -> None:
        hashed = await hash_password("salainen")
        assert await verify_password("salainen", hashed) is True
        assert await verify_password("wrong", hashed) is False
