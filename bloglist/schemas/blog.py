"""
Blog models for the bloglist application.

Request bodies keep the field names the frontend sends (``title``,
``author``, ``url``, ``likes``); responses add identifiers and timestamps
under camelCase aliases.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bloglist.configs.settings import MAX_TITLE_LENGTH, MAX_URL_LENGTH


class BlogCreate(BaseModel):
    """Blog creation model (request body)."""

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "title": "Canonical string reduction",
                "author": "Edsger W. Dijkstra",
                "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
                "likes": 12,
            },
        },
    )

    title: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TITLE_LENGTH,
        description="Blog title",
    )
    author: str = Field(
        default="",
        max_length=100,
        description="Author of the blog",
    )
    url: str = Field(
        ...,
        min_length=1,
        max_length=MAX_URL_LENGTH,
        description="Blog URL",
    )
    likes: int = Field(
        default=0,
        ge=0,
        description="Like count (0 when omitted)",
    )

    @field_validator("likes", mode="before")
    @classmethod
    def default_missing_likes(cls, v: int | None) -> int:
        """Treat an explicit ``null`` like an omitted like count."""
        return 0 if v is None else v


class BlogUpdate(BaseModel):
    """Blog update model (all fields optional)."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "likes": 13,
            },
        },
    )

    title: str | None = Field(default=None, min_length=1, max_length=MAX_TITLE_LENGTH)
    author: str | None = Field(default=None, max_length=100)
    url: str | None = Field(default=None, min_length=1, max_length=MAX_URL_LENGTH)
    likes: int | None = Field(default=None, ge=0)


class BlogCreator(BaseModel):
    """Public view of the user who posted a blog."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None


class BlogResponse(BaseModel):
    """Blog response model, with the creator embedded when one is known."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    user_id: UUID | None = Field(default=None, alias="userId")
    user: BlogCreator | None = None
    title: str
    author: str
    url: str
    likes: int
    created_at: str = Field(alias="createdAt")
    updated_at: str = Field(alias="updatedAt")
