"""Errors raised while hashing or verifying passwords."""

from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


class PasswordHashingError(BaseAppError):
    detail = "password hashing failed"


password_hashing_exception_handler = create_exception_handler(logger)
