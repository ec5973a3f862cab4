"""Request rate limiting with slowapi, keyed by API key or client IP."""

from collections.abc import Callable

from fastapi import Request
from fastapi.responses import ORJSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.status import HTTP_429_TOO_MANY_REQUESTS

from bloglist.configs import LimiterConfig
from bloglist.monitoring import get_logger

logger = get_logger(__name__)

API_KEY_PREFIX = "apikey:"


def get_identifier(request: Request) -> str:
    """
    Rate limit bucket for a request.

    Clients sending ``X-API-Key`` get a bucket per key, everyone else a
    bucket per remote address.
    """
    if api_key := request.headers.get("X-API-Key"):
        return f"{API_KEY_PREFIX}{api_key}"
    return f"ip:{get_remote_address(request)}"


def tiered(anonymous: str, keyed: str) -> Callable[[str], str]:
    """
    Dynamic limit that grants identified clients a larger allowance.

    slowapi passes the bucket key to the provider only when its parameter
    is named ``key``.
    """

    def provider(key: str) -> str:
        return keyed if key.startswith(API_KEY_PREFIX) else anonymous

    return provider


# Route tiers
READ_LIMIT = tiered("60/minute", "120/minute")
EDIT_LIMIT = tiered("30/minute", "60/minute")
WRITE_LIMIT = tiered("10/minute", "30/minute")
SIGNUP_LIMIT = tiered("10/hour", "30/hour")
LOGIN_LIMIT = "5/minute"

limiter = Limiter(key_func=get_identifier, **LimiterConfig().model_dump())


async def rate_limit_exceeded_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Answer with ``429`` and the number of seconds until the window resets."""
    if not isinstance(exc, RateLimitExceeded):
        raise exc
    retry_after = exc.limit.limit.get_expiry()
    logger.warning(f"429 {exc.detail} for {get_identifier(request)} at {request.url.path}")
    return ORJSONResponse(
        status_code=HTTP_429_TOO_MANY_REQUESTS,
        content={"detail": "Rate limit exceeded", "limit": exc.detail, "retry_after": retry_after},
        headers={"Retry-After": str(retry_after)},
    )
