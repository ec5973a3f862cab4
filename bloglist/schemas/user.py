"""
User models for registration and listing.

Password rules are checked here rather than in the database so that a
missing or short password yields a readable ``400`` message.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from bloglist.configs.settings import (
    MAX_USERNAME_LENGTH,
    MIN_PASSWORD_LENGTH,
    MIN_USERNAME_LENGTH,
)


class UserCreate(BaseModel):
    """User creation model (request body)."""

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "username": "mluukkai",
                "name": "Matti Luukkainen",
                "password": "salainen",
            },
        },
    )

    username: str = Field(
        ...,
        min_length=MIN_USERNAME_LENGTH,
        max_length=MAX_USERNAME_LENGTH,
        description="Username (unique)",
    )
    name: str | None = Field(default=None, max_length=100, description="Display name")
    password: SecretStr | None = Field(
        default=None,
        validate_default=True,
        description="Password",
    )

    @field_validator("password", mode="after")
    @classmethod
    def validate_password(cls, v: SecretStr | None) -> SecretStr:
        """Require a password of at least ``MIN_PASSWORD_LENGTH`` characters."""
        if v is None or not v.get_secret_value():
            mssg = "password missing"
            raise ValueError(mssg)
        if len(v.get_secret_value()) < MIN_PASSWORD_LENGTH:
            mssg = f"password must be at least {MIN_PASSWORD_LENGTH} characters long"
            raise ValueError(mssg)
        return v


class UserResponse(BaseModel):
    """User response model (no password hash)."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    username: str
    name: str | None = None
    blog_count: int = Field(default=0, alias="blogCount")
    created_at: str = Field(alias="createdAt")
