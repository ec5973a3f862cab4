"""Blog repository for database operations."""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import Select, select

from bloglist.models.blog import BlogDB
from bloglist.models.user import UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories.base import BaseRepository
from bloglist.schemas.blog import BlogCreate, BlogUpdate

logger = get_logger(__name__)


class BlogRepository(BaseRepository[BlogDB]):
    """Repository for Blog database operations."""

    model = BlogDB
    resource = "Blog"

    async def create(self, blog: BlogCreate, user_id: UUID) -> BlogDB:
        """
        Create a new blog owned by ``user_id``.

        Args:
            blog: Blog schema with blog data
            user_id: UUID of the creating user

        Returns:
            BlogDB: Created blog database model
        """
        db_blog = BlogDB(
            user_id=user_id,
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
        )
        db_blog = await self._save(db_blog)
        logger.info(f"Blog {db_blog.id} created by user {user_id}")
        return db_blog

    async def get_by_user(self, user_id: UUID) -> list[BlogDB]:
        """Get the blogs created by a user, oldest first."""
        result = await self.session.execute(
            # pyrefly: ignore [bad-argument-type]
            select(BlogDB)
            .where(BlogDB.user_id == user_id)
            .order_by(BlogDB.created_at, BlogDB.id),
        )
        return list(result.scalars().all())

    def _with_creators(self) -> Select[tuple[BlogDB, UserDB]]:
        return (
            select(BlogDB, UserDB)
            # pyrefly: ignore [bad-argument-type]
            .outerjoin(UserDB, BlogDB.user_id == UserDB.id)
            .order_by(BlogDB.created_at, BlogDB.id)
        )

    async def get_all_with_creators(self) -> list[tuple[BlogDB, UserDB | None]]:
        """Every blog, oldest first, paired with the user who posted it."""
        result = await self.session.execute(self._with_creators())
        return [(blog, creator) for blog, creator in result.all()]

    async def get_creator(self, blog: BlogDB) -> UserDB | None:
        """User who posted ``blog``; None once that user is removed."""
        if blog.user_id is None:
            return None
        return await self.session.get(UserDB, blog.user_id)

    async def update(self, blog_id: UUID, blog_update: BlogUpdate) -> BlogDB | None:
        """
        Update blog fields.

        Args:
            blog_id: Blog UUID
            blog_update: Fields to update; unset and null fields are left alone

        Returns:
            BlogDB | None: Updated blog if found, None otherwise
        """
        db_blog = await self.get_by_id(blog_id)
        if not db_blog:
            return None

        update_data = blog_update.model_dump(exclude_unset=True, exclude_none=True)
        update_data["updated_at"] = datetime.now(tz=UTC)

        for key, value in update_data.items():
            setattr(db_blog, key, value)

        return await self._save(db_blog)
