"""Response models for blog statistics."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from bloglist.configs.settings import EMPTY_BLOGS_MESSAGE


class EmptyInput(Enum):
    """Sentinel returned by the statistics helpers when there are no blogs."""

    EMPTY = EMPTY_BLOGS_MESSAGE


class FavoriteBlog(BaseModel):
    """The most liked blog."""

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    author: str | None = None
    likes: int = Field(ge=0)


class AuthorBlogs(BaseModel):
    """The author with the most blogs and how many they wrote."""

    model_config = ConfigDict(frozen=True)

    author: str
    blogs: int = Field(ge=1)


class AuthorLikes(BaseModel):
    """The author with the most likes summed over their blogs."""

    model_config = ConfigDict(frozen=True)

    author: str
    likes: int = Field(ge=0)


class TotalLikesResponse(BaseModel):
    """Sum of likes over every stored blog."""

    model_config = ConfigDict(populate_by_name=True)

    total_likes: int = Field(alias="totalLikes", ge=0)


class EmptyStatsResponse(BaseModel):
    """Body served when there are no blogs to aggregate."""

    detail: str = EMPTY_BLOGS_MESSAGE
