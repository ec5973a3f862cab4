from bloglist.managers.password_manager import (
    PasswordHasher,
    get_password_hasher,
    hash_password,
    verify_password,
)
from bloglist.managers.rate_limiter import (
    EDIT_LIMIT,
    LOGIN_LIMIT,
    READ_LIMIT,
    SIGNUP_LIMIT,
    WRITE_LIMIT,
    limiter,
    rate_limit_exceeded_handler,
)
from bloglist.managers.token_manager import create_access_token, decode_access_token

__all__ = [
    "EDIT_LIMIT",
    "LOGIN_LIMIT",
    "READ_LIMIT",
    "SIGNUP_LIMIT",
    "WRITE_LIMIT",
    "PasswordHasher",
    "create_access_token",
    "decode_access_token",
    "get_password_hasher",
    "hash_password",
    "limiter",
    "rate_limit_exceeded_handler",
    "verify_password",
]
