"""Authentication and ownership errors."""

from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN

from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


class UserAuthenticationError(BaseAppError):
    """Base class for authentication errors."""

    status_code = HTTP_401_UNAUTHORIZED
    detail = "authentication failed"


class InvalidCredentialsError(UserAuthenticationError):
    """Username unknown or password wrong. The two cases are not told apart."""

    detail = "invalid username or password"


class InvalidTokenError(UserAuthenticationError):
    """Bearer token missing, malformed, expired, or naming a deleted user."""

    detail = "token missing or invalid"


class BlogOwnershipError(UserAuthenticationError):
    """A user tried to delete a blog someone else created."""

    status_code = HTTP_403_FORBIDDEN
    detail = "only the creator of the blog may delete it"


auth_exception_handler = create_exception_handler(logger)
