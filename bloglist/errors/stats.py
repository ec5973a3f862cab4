"""Errors raised by the blog statistics helpers."""

from typing import Any

from starlette.status import HTTP_422_UNPROCESSABLE_CONTENT

from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


class MalformedBlogError(BaseAppError):
    """Raised when a blog record lacks a usable ``likes`` or ``author`` value."""

    status_code = HTTP_422_UNPROCESSABLE_CONTENT

    def __init__(self, field: str, position: int, value: object = None) -> None:
        super().__init__(f"blog at position {position} has an invalid '{field}': {value!r}")
        self.field = field
        self.position = position

    def extra(self) -> dict[str, Any]:
        return {"field": self.field, "position": self.position}


stats_exception_handler = create_exception_handler(logger)
