# tests/repositories/test_repositories.py
"""Tests for the repository layer against an in-memory SQLite database."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest
from pydantic import SecretStr
from sqlmodel.ext.asyncio.session import AsyncSession

from bloglist.errors import DuplicateEntryError, RecordNotFoundError
from bloglist.managers.password_manager import verify_password
from bloglist.models import BlogDB
from bloglist.repositories import BlogRepository, CommentRepository, UserRepository
from bloglist.schemas import BlogCreate, BlogUpdate, CommentCreate, UserCreate


def new_user(username: str = "mluukkai") -> UserCreate:
    return UserCreate(username=username, name="Matti Luukkainen", password=SecretStr("salainen"))


class TestUserRepository:
    """Tests for UserRepository."""

    @pytest.mark.asyncio
    async def test_create_hashes_password(self, session: AsyncSession) -> None:
        repo = UserRepository(session)

        user = await repo.create(new_user())

        assert user.id is not None
        assert user.password_hash != "salainen"
        assert await verify_password("salainen", user.password_hash)

    @pytest.mark.asyncio
    async def test_duplicate_username(self, session: AsyncSession) -> None:
        repo = UserRepository(session)
        await repo.create(new_user())

        with pytest.raises(DuplicateEntryError) as exc_info:
            await repo.create(new_user())

        assert exc_info.value.detail == "expected username to be unique"

    @pytest.mark.asyncio
    async def test_get_by_username(self, session: AsyncSession) -> None:
        repo = UserRepository(session)
        created = await repo.create(new_user())

        found = await repo.get_by_username("mluukkai")

        assert found is not None
        assert found.id == created.id
        assert await repo.get_by_username("nobody") is None

    @pytest.mark.asyncio
    async def test_blog_counts(self, session: AsyncSession) -> None:
        users = UserRepository(session)
        blogs = BlogRepository(session)
        writer = await users.create(new_user("writer"))
        await users.create(new_user("reader"))
        for title in ("one", "two"):
            await blogs.create(BlogCreate(title=title, url="http://example.com"), user_id=writer.id)

        rows = await users.get_all_with_blog_counts()

        assert {user.username: count for user, count in rows} == {"writer": 2, "reader": 0}


class TestBlogRepository:
    """Tests for BlogRepository."""

    @pytest.mark.asyncio
    async def test_create_and_list_in_order(self, session: AsyncSession) -> None:
        user = await UserRepository(session).create(new_user())
        repo = BlogRepository(session)
        for title in ("first", "second", "third"):
            await repo.create(BlogCreate(title=title, url="http://example.com"), user_id=user.id)

        blogs = await repo.get_all()

        assert [blog.title for blog in blogs] == ["first", "second", "third"]
        assert all(blog.likes == 0 for blog in blogs)
        assert await repo.count() == 3

    @pytest.mark.asyncio
    async def test_get_by_user(self, session: AsyncSession) -> None:
        users = UserRepository(session)
        repo = BlogRepository(session)
        first = await users.create(new_user("first"))
        second = await users.create(new_user("second"))
        await repo.create(BlogCreate(title="mine", url="http://a"), user_id=first.id)
        await repo.create(BlogCreate(title="theirs", url="http://b"), user_id=second.id)

        assert [blog.title for blog in await repo.get_by_user(first.id)] == ["mine"]

    @pytest.mark.asyncio
    async def test_update_only_given_fields(self, session: AsyncSession) -> None:
        user = await UserRepository(session).create(new_user())
        repo = BlogRepository(session)
        blog = await repo.create(
            BlogCreate(title="Type wars", author="Robert C. Martin", url="http://a", likes=2),
            user_id=user.id,
        )

        updated = await repo.update(blog.id, BlogUpdate(likes=3))

        assert updated is not None
        assert updated.likes == 3
        assert updated.title == "Type wars"
        assert updated.updated_at is not None

    @pytest.mark.asyncio
    async def test_update_missing(self, session: AsyncSession) -> None:
        assert await BlogRepository(session).update(uuid4(), BlogUpdate(likes=1)) is None

    @pytest.mark.asyncio
    async def test_delete(self, session: AsyncSession) -> None:
        user = await UserRepository(session).create(new_user())
        repo = BlogRepository(session)
        blog = await repo.create(BlogCreate(title="gone", url="http://a"), user_id=user.id)

        assert await repo.delete(blog.id) is True
        assert await repo.get_by_id(blog.id) is None
        assert await repo.delete(blog.id) is False

    @pytest.mark.asyncio
    async def test_get_or_raise(self, session: AsyncSession) -> None:
        with pytest.raises(RecordNotFoundError):
            await BlogRepository(session).get_or_raise(uuid4())

    @pytest.mark.asyncio
    async def test_equal_timestamps_have_a_fixed_order(self, session: AsyncSession) -> None:
        created = datetime(2025, 1, 1, 10, 0, tzinfo=UTC)
        for number, title in ((3, "third id"), (1, "first id"), (2, "second id")):
            session.add(
                BlogDB(id=UUID(int=number), title=title, url="http://a", created_at=created),
            )
        await session.flush()
        repo = BlogRepository(session)

        first = [blog.title for blog in await repo.get_all()]
        second = [blog.title for blog in await repo.get_all()]

        assert first == ["first id", "second id", "third id"]
        assert second == first

    @pytest.mark.asyncio
    async def test_blogs_with_creators(self, session: AsyncSession) -> None:
        user = await UserRepository(session).create(new_user())
        repo = BlogRepository(session)
        await repo.create(BlogCreate(title="owned", url="http://a"), user_id=user.id)
        session.add(BlogDB(title="orphan", url="http://b"))
        await session.flush()

        rows = await repo.get_all_with_creators()

        assert [(blog.title, creator.username if creator else None) for blog, creator in rows] == [
            ("owned", "mluukkai"),
            ("orphan", None),
        ]
        assert await repo.get_creator(rows[0][0]) is user
        assert await repo.get_creator(rows[1][0]) is None


class TestCommentRepository:
    """Tests for CommentRepository."""

    @pytest.mark.asyncio
    async def test_comments_by_blog(self, session: AsyncSession) -> None:
        user = await UserRepository(session).create(new_user())
        blogs = BlogRepository(session)
        blog = await blogs.create(BlogCreate(title="t", url="http://a"), user_id=user.id)
        other = await blogs.create(BlogCreate(title="u", url="http://b"), user_id=user.id)
        comments = CommentRepository(session)

        await comments.create(CommentCreate(content="first"), blog_id=blog.id)
        await comments.create(CommentCreate(content="second"), blog_id=blog.id)
        await comments.create(CommentCreate(content="elsewhere"), blog_id=other.id)

        assert [c.content for c in await comments.get_by_blog(blog.id)] == ["first", "second"]


class TestBaseRepository:
    """Tests for the shared repository behaviour."""

    @pytest.mark.asyncio
    async def test_not_found_message_names_resource(self, session: AsyncSession) -> None:
        missing = uuid4()

        with pytest.raises(RecordNotFoundError) as exc_info:
            await UserRepository(session).get_or_raise(missing)

        assert exc_info.value.detail == f"User with ID {missing} not found"
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_paging(self, session: AsyncSession) -> None:
        users = UserRepository(session)
        for username in ("aaa", "bbb", "ccc", "ddd"):
            await users.create(new_user(username))

        page = await users.get_all(skip=1, limit=2)

        assert [user.username for user in page] == ["bbb", "ccc"]

    @pytest.mark.asyncio
    async def test_deleting_blog_removes_comments(self, session: AsyncSession) -> None:
        user = await UserRepository(session).create(new_user())
        blogs = BlogRepository(session)
        blog = await blogs.create(BlogCreate(title="t", url="http://a"), user_id=user.id)
        comments = CommentRepository(session)
        await comments.create(CommentCreate(content="soon gone"), blog_id=blog.id)

        await blogs.delete(blog.id)

        assert await comments.get_by_blog(blog.id) == []
        assert await comments.count() == 0
