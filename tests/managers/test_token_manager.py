# tests/managers/test_token_manager.py
"""Tests for bloglist/managers/token_manager.py module."""

from datetime import timedelta
from uuid import uuid4

from jose import jwt

from bloglist.configs import settings
from bloglist.managers.token_manager import create_access_token, decode_access_token


class TestAccessTokens:
    """Round trip and rejection cases for access tokens."""

    def test_decode_returns_claims(self) -> None:
        user_id = uuid4()
        token = create_access_token(user_id=user_id, username="mluukkai")

        token_data = decode_access_token(token)

        assert token_data is not None
        assert token_data.username == "mluukkai"
        assert token_data.user_id == user_id
        assert token_data.jti

    def test_each_token_has_unique_jti(self) -> None:
        user_id = uuid4()
        first = decode_access_token(create_access_token(user_id, "mluukkai"))
        second = decode_access_token(create_access_token(user_id, "mluukkai"))
        assert first is not None
        assert second is not None
        assert first.jti != second.jti

    def test_expired_token_rejected(self) -> None:
        token = create_access_token(uuid4(), "mluukkai", expires_delta=timedelta(seconds=-10))
        assert decode_access_token(token) is None

    def test_garbage_rejected(self) -> None:
        assert decode_access_token("not-a-jwt") is None

    def test_wrong_signature_rejected(self) -> None:
        token = jwt.encode(
            {
                "sub": "mluukkai",
                "user_id": str(uuid4()),
                "jti": "x",
                "iss": settings.JWT_ISSUER,
                "aud": settings.JWT_AUDIENCE,
            },
            "another-secret",
            algorithm=settings.ALGORITHM,
        )
        assert decode_access_token(token) is None

    def test_missing_claim_rejected(self) -> None:
        token = jwt.encode(
            {"sub": "mluukkai", "iss": settings.JWT_ISSUER, "aud": settings.JWT_AUDIENCE},
            settings.SECRET_KEY.get_secret_value(),
            algorithm=settings.ALGORITHM,
        )
        assert decode_access_token(token) is None

    def test_malformed_user_id_rejected(self) -> None:
        token = jwt.encode(
            {
                "sub": "mluukkai",
                "user_id": "not-a-uuid",
                "jti": "x",
                "iss": settings.JWT_ISSUER,
                "aud": settings.JWT_AUDIENCE,
            },
            settings.SECRET_KEY.get_secret_value(),
            algorithm=settings.ALGORITHM,
        )
        assert decode_access_token(token) is None
