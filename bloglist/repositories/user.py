"""User repository for database operations."""

from typing import cast

from sqlalchemy import func, select
from sqlalchemy.sql.expression import ColumnElement

from bloglist.errors.database import DuplicateEntryError
from bloglist.managers.password_manager import hash_password
from bloglist.models.blog import BlogDB
from bloglist.models.user import UserDB
from bloglist.repositories.base import BaseRepository
from bloglist.schemas.user import UserCreate

USERNAME_TAKEN = "expected username to be unique"


class UserRepository(BaseRepository[UserDB]):
    """Repository for User database operations."""

    model = UserDB
    resource = "User"

    async def create(self, user: UserCreate) -> UserDB:
        """
        Create a new user with a hashed password.

        Args:
            user: Validated registration data

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If the username is already taken
        """
        if await self._exists(username=user.username):
            raise DuplicateEntryError(USERNAME_TAKEN)

        # UserCreate guarantees a password is present
        password = user.password.get_secret_value() if user.password else ""
        db_user = UserDB(
            username=user.username,
            name=user.name,
            password_hash=await hash_password(password),
        )
        return await self._save(db_user, unique={"username": USERNAME_TAKEN})

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username.

        Args:
            username: Username to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB).where(cast(ColumnElement[bool], UserDB.username == username)),
        )
        return result.scalar_one_or_none()

    async def get_all_with_blog_counts(self) -> list[tuple[UserDB, int]]:
        """Get every user with the number of blogs they created."""
        statement = (
            select(UserDB, func.count(BlogDB.id))
            # pyrefly: ignore [bad-argument-type]
            .outerjoin(BlogDB, BlogDB.user_id == UserDB.id)
            .group_by(UserDB.id)
            .order_by(UserDB.created_at, UserDB.id)
        )
        result = await self.session.execute(statement)
        return [(user, count) for user, count in result.all()]
