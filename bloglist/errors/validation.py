"""Request validation errors rendered as a flat ``400 Bad Request``."""

from collections.abc import Mapping
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from bloglist.monitoring import get_logger
from bloglist.utils.helpers import host

logger = get_logger(__name__)


def flatten_error(error: Mapping[str, Any]) -> dict[str, str]:
    """
    Reduce one pydantic error to ``field``, ``message`` and ``type``.

    The first ``loc`` entry names the request part (``body``, ``query``,
    ``path``) and is dropped unless it is the only one.
    """
    loc = [str(part) for part in error.get("loc", ())]
    message = str(error.get("msg", "invalid value"))
    return {
        "field": ".".join(loc[1:] or loc),
        # pydantic prefixes messages raised from validators
        "message": message.removeprefix("Value error, "),
        "type": str(error.get("type", "validation_error")),
    }


async def validation_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    if not isinstance(exc, RequestValidationError):
        raise exc
    errors = [flatten_error(error) for error in exc.errors()]
    logger.warning(f"400 invalid request for ip: {host(request)} at {request.url.path}: {errors}")
    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": errors},
    )
