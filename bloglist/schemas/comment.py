"""Comment request and response models."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from bloglist.configs.settings import MAX_COMMENT_LENGTH


class CommentCreate(BaseModel):
    """Comment creation model (request body)."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={"example": {"content": "Great read, thanks!"}},
    )

    content: str = Field(..., min_length=1, max_length=MAX_COMMENT_LENGTH)


class CommentResponse(BaseModel):
    """Comment response model."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    blog_id: UUID = Field(alias="blogId")
    content: str
    created_at: str = Field(alias="createdAt")
