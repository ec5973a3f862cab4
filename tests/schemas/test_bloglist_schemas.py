# tests/schemas/test_bloglist_schemas.py
"""Tests for request and response schemas."""

import pytest
from pydantic import ValidationError

from bloglist.schemas import (
    BlogCreate,
    EmptyStatsResponse,
    FavoriteBlog,
    TotalLikesResponse,
    UserCreate,
)


class TestUserCreate:
    """Registration validation."""

    def test_valid(self) -> None:
        user = UserCreate(username="  root  ", password="salainen")
        assert user.username == "root"
        assert user.password is not None
        assert user.password.get_secret_value() == "salainen"

    @pytest.mark.parametrize(
        ("payload", "message"),
        [
            ({"username": "root"}, "password missing"),
            ({"username": "root", "password": ""}, "password missing"),
            ({"username": "root", "password": "ab"}, "password must be at least 3 characters long"),
        ],
    )
    def test_password_rules(self, payload: dict, message: str) -> None:
        with pytest.raises(ValidationError, match=message):
            UserCreate(**payload)

    @pytest.mark.parametrize("username", ["ab", "x" * 51])
    def test_username_length(self, username: str) -> None:
        with pytest.raises(ValidationError):
            UserCreate(username=username, password="salainen")


class TestBlogCreate:
    """Blog payload validation."""

    def test_defaults(self) -> None:
        blog = BlogCreate(title="Type wars", url="http://blog.cleancoder.com/")
        assert blog.author == ""
        assert blog.likes == 0

    def test_null_likes(self) -> None:
        assert BlogCreate(title="t", url="http://a", likes=None).likes == 0

    @pytest.mark.parametrize("missing", ["title", "url"])
    def test_required(self, missing: str) -> None:
        payload = {"title": "t", "url": "http://a"}
        del payload[missing]
        with pytest.raises(ValidationError):
            BlogCreate(**payload)


class TestStatsSchemas:
    """Statistics response models."""

    def test_total_likes_alias(self) -> None:
        assert TotalLikesResponse(total_likes=3).model_dump(by_alias=True) == {"totalLikes": 3}

    def test_empty_response_message(self) -> None:
        assert EmptyStatsResponse().detail == "the list of blogs is empty"

    def test_favorite_is_frozen(self) -> None:
        favorite = FavoriteBlog(title="A", author="X", likes=1)
        with pytest.raises(ValidationError):
            favorite.likes = 2
