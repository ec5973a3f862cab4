"""Root error type and the handler factory shared by every error family."""

from collections.abc import Awaitable, Callable
from logging import Logger
from typing import Any

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR
from structlog.stdlib import BoundLogger

from bloglist.utils.helpers import host

type ErrorHandler = Callable[[Request, Exception], Awaitable[ORJSONResponse]]


class BaseAppError(Exception):
    """
    Root of the bloglist error tree.

    Subclasses set ``status_code`` and ``detail`` as class attributes and
    return anything else the client should see from ``extra()``. Both can
    still be overridden per instance.
    """

    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "Internal Server Error"

    def __init__(self, detail: str | None = None, status_code: int | None = None) -> None:
        if detail is not None:
            self.detail = detail
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.detail)

    def __str__(self) -> str:
        return self.detail

    def extra(self) -> dict[str, Any]:
        """Fields rendered next to ``detail`` in the response body."""
        return {}

    def to_body(self) -> dict[str, Any]:
        return {"detail": self.detail, **self.extra()}


def create_exception_handler(logger: Logger | BoundLogger) -> ErrorHandler:
    """
    Build an exception handler that logs the failure and renders it as JSON.

    Client errors are logged as warnings, server errors as errors. Anything
    that is not a ``BaseAppError`` is answered with a bare 500.

    Args:
        logger: Logger of the module that owns the error family.

    Returns:
        A handler suitable for ``app.add_exception_handler``.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        error = exc if isinstance(exc, BaseAppError) else BaseAppError()
        server_fault = error.status_code >= HTTP_500_INTERNAL_SERVER_ERROR
        log = logger.error if server_fault else logger.warning
        log(f"{error.status_code} {error.detail} for ip: {host(request)} at {request.url.path}")
        return ORJSONResponse(content=error.to_body(), status_code=error.status_code)

    return handler
