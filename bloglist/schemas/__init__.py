from bloglist.schemas.auth import LoginRequest, Token, TokenData
from bloglist.schemas.blog import BlogCreate, BlogCreator, BlogResponse, BlogUpdate
from bloglist.schemas.comment import CommentCreate, CommentResponse
from bloglist.schemas.health import HealthCheckResponse
from bloglist.schemas.stats import (
    AuthorBlogs,
    AuthorLikes,
    EmptyInput,
    EmptyStatsResponse,
    FavoriteBlog,
    TotalLikesResponse,
)
from bloglist.schemas.user import UserCreate, UserResponse

__all__ = [
    "AuthorBlogs",
    "AuthorLikes",
    "BlogCreate",
    "BlogCreator",
    "BlogResponse",
    "BlogUpdate",
    "CommentCreate",
    "CommentResponse",
    "EmptyInput",
    "EmptyStatsResponse",
    "FavoriteBlog",
    "HealthCheckResponse",
    "LoginRequest",
    "Token",
    "TokenData",
    "TotalLikesResponse",
    "UserCreate",
    "UserResponse",
]
