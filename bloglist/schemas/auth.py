from uuid import UUID

from pydantic import BaseModel, Field, SecretStr


class LoginRequest(BaseModel):
    """Credentials posted to the login endpoint."""

    username: str = Field(..., min_length=1)
    password: SecretStr


class Token(BaseModel):
    """Token schema for JWT access tokens."""

    access_token: str
    token_type: str = "bearer"
    username: str
    name: str | None = None


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    username: str
    user_id: UUID
    jti: str
