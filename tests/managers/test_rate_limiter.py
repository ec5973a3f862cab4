# tests/managers/test_rate_limiter.py
"""Tests for bloglist/managers/rate_limiter.py module."""

from unittest.mock import MagicMock, patch

import orjson
import pytest
from slowapi.errors import RateLimitExceeded

from bloglist.managers.rate_limiter import (
    LOGIN_LIMIT,
    READ_LIMIT,
    get_identifier,
    limiter,
    rate_limit_exceeded_handler,
    tiered,
)


class TestGetIdentifier:
    """Tests for get_identifier function."""

    def test_returns_api_key_when_present(self) -> None:
        request = MagicMock()
        request.headers.get.return_value = "test-api-key-123"

        assert get_identifier(request) == "apikey:test-api-key-123"

    def test_returns_ip_when_no_api_key(self) -> None:
        request = MagicMock()
        request.headers.get.return_value = None

        with patch(
            "bloglist.managers.rate_limiter.get_remote_address",
            return_value="192.168.1.100",
        ):
            assert get_identifier(request) == "ip:192.168.1.100"


class TestTiers:
    """Tests for the dynamic limit providers."""

    def test_keyed_clients_get_the_larger_limit(self) -> None:
        provider = tiered("1/minute", "5/minute")

        assert provider("apikey:abc") == "5/minute"
        assert provider("ip:10.0.0.1") == "1/minute"

    def test_read_tier(self) -> None:
        assert READ_LIMIT("ip:127.0.0.1") == "60/minute"
        assert READ_LIMIT("apikey:abc") == "120/minute"

    def test_limiter_uses_identifier(self) -> None:
        assert limiter._key_func is get_identifier


class TestRateLimitExceededHandler:
    """Tests for the 429 handler."""

    @pytest.mark.asyncio
    async def test_body_and_retry_header(self) -> None:
        limit = MagicMock()
        limit.error_message = None
        limit.limit.get_expiry.return_value = 60
        limit.limit.__str__.return_value = LOGIN_LIMIT
        exc = RateLimitExceeded(limit)
        request = MagicMock()
        request.headers.get.return_value = None
        request.url.path = "/api/login"

        with patch(
            "bloglist.managers.rate_limiter.get_remote_address",
            return_value="127.0.0.1",
        ):
            response = await rate_limit_exceeded_handler(request, exc)

        assert response.status_code == 429
        assert response.headers["retry-after"] == "60"
        body = orjson.loads(response.body)
        assert body["detail"] == "Rate limit exceeded"
        assert body["retry_after"] == 60
