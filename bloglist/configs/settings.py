"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the bloglist backend application.
"""

from pathlib import Path
from typing import Literal, NamedTuple

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 50
MIN_PASSWORD_LENGTH = 3
MAX_TITLE_LENGTH = 200
MAX_URL_LENGTH = 500
MAX_COMMENT_LENGTH = 2000

# Response constants
DEFAULT_ERROR_MESSAGE = "An unexpected server error occurred."
EMPTY_BLOGS_MESSAGE = "the list of blogs is empty"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Bloglist Backend"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: Literal["development", "test", "staging", "production"] = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/bloglist.log"
    PRODUCTION_FRONTEND_URL: str | None = None

    # Database Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./bloglist.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30  # seconds
    POOL_RECYCLE: int = 1800  # seconds

    # Token Configuration
    SECRET_KEY: SecretStr = SecretStr("change-this-secret-key-in-production")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    JWT_ISSUER: str = "bloglist-backend"
    JWT_AUDIENCE: str = "bloglist-clients"

    # Password hashing cost preset
    PASSWORD_SECURITY_LEVEL: Literal["low", "medium", "high"] = "medium"


settings = Settings()


class Argon2Config(NamedTuple):
    """Argon2id cost parameters."""

    memory_cost: int  # KiB
    time_cost: int
    parallelism: int


CONFIG_MAP: dict[str, Argon2Config] = {
    "low": Argon2Config(memory_cost=8 * 1024, time_cost=1, parallelism=1),
    "medium": Argon2Config(memory_cost=64 * 1024, time_cost=3, parallelism=4),
    "high": Argon2Config(memory_cost=512 * 1024, time_cost=2, parallelism=2),
}


class LimiterConfig(BaseSettings):
    """Rate limiter configuration passed straight to slowapi's ``Limiter``."""

    model_config = SettingsConfigDict(env_prefix="LIMITER_", case_sensitive=False)

    default_limits: list[str] = ["100/hour"]
    storage_uri: str = "memory://"
    headers_enabled: bool = False
    enabled: bool = True
