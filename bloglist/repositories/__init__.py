"""Repository layer for database operations."""

from bloglist.repositories.blog import BlogRepository
from bloglist.repositories.comment import CommentRepository
from bloglist.repositories.user import UserRepository

__all__ = ["BlogRepository", "CommentRepository", "UserRepository"]
