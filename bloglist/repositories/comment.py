"""Comment repository for database operations."""

from uuid import UUID

from sqlalchemy import select

from bloglist.models.comment import CommentDB
from bloglist.repositories.base import BaseRepository
from bloglist.schemas.comment import CommentCreate


class CommentRepository(BaseRepository[CommentDB]):
    """Repository for Comment database operations."""

    model = CommentDB
    resource = "Comment"

    async def create(self, comment: CommentCreate, blog_id: UUID) -> CommentDB:
        """Attach a new comment to ``blog_id``."""
        db_comment = CommentDB(blog_id=blog_id, content=comment.content)
        return await self._save(db_comment)

    async def get_by_blog(self, blog_id: UUID) -> list[CommentDB]:
        """Get a blog's comments, oldest first."""
        result = await self.session.execute(
            select(CommentDB)
            # pyrefly: ignore [bad-argument-type]
            .where(CommentDB.blog_id == blog_id)
            .order_by(CommentDB.created_at, CommentDB.id),
        )
        return list(result.scalars().all())
