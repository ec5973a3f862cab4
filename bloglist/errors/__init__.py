from bloglist.errors.auth import (
    BlogOwnershipError,
    InvalidCredentialsError,
    InvalidTokenError,
    UserAuthenticationError,
    auth_exception_handler,
)
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)
from bloglist.errors.password_hasher import (
    PasswordHashingError,
    password_hashing_exception_handler,
)
from bloglist.errors.stats import MalformedBlogError, stats_exception_handler
from bloglist.errors.validation import validation_exception_handler

__all__ = [
    "BaseAppError",
    "BlogOwnershipError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DuplicateEntryError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MalformedBlogError",
    "PasswordHashingError",
    "RecordNotFoundError",
    "UserAuthenticationError",
    "auth_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "password_hashing_exception_handler",
    "stats_exception_handler",
    "validation_exception_handler",
]
