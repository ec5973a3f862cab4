"""
Aggregate statistics over a list of blogs.

Every function reads the blogs in the order given and never mutates them.
Records may be mappings (``{"title": ..., "author": ..., "likes": ...}``) or
objects exposing the same attributes, such as ``BlogDB`` rows or pydantic
models.

A ``likes`` value that is ``None``, not an integer or negative is rejected
with ``MalformedBlogError`` by every statistic; nothing is coerced to ``0``.
A missing ``likes`` is rejected wherever likes are read, which is everywhere
except ``most_blogs``. Operations that group by author reject a missing or
non-text ``author``. ``favorite_blog`` accepts a missing ``title`` or
``author`` (reported as ``None``) but rejects a present non-text one on any
blog, not only on the winner.

Ties are always broken in favour of whatever appears first in the input:
the first blog for ``favorite_blog`` and the first author to appear for
``most_blogs`` / ``most_likes``.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol

from bloglist.errors.stats import MalformedBlogError
from bloglist.schemas.stats import AuthorBlogs, AuthorLikes, EmptyInput, FavoriteBlog


class BlogLike(Protocol):
    """Attribute view of a blog as read by the statistics."""

    title: str
    author: str
    likes: int


type BlogRecord = Mapping[str, Any] | BlogLike

_MISSING = object()


def _field(blog: BlogRecord, name: str) -> Any:
    if isinstance(blog, Mapping):
        return blog.get(name, _MISSING)
    return getattr(blog, name, _MISSING)


def _likes(blog: BlogRecord, position: int) -> int:
    value = _field(blog, "likes")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise MalformedBlogError("likes", position, None if value is _MISSING else value)
    return value


def _text(blog: BlogRecord, name: str, position: int) -> str:
    value = _field(blog, name)
    if not isinstance(value, str):
        raise MalformedBlogError(name, position, None if value is _MISSING else value)
    return value


def _optional_text(blog: BlogRecord, name: str, position: int) -> str | None:
    if _field(blog, name) is _MISSING:
        return None
    return _text(blog, name, position)


def _count_one(blog: BlogRecord, position: int) -> int:
    # likes are not needed to count, but a present one must still be valid
    if _field(blog, "likes") is not _MISSING:
        _likes(blog, position)
    return 1


def _group_by_author(
    blogs: Sequence[BlogRecord],
    amount: Callable[[BlogRecord, int], int],
) -> tuple[list[str], dict[str, int]]:
    """
    Sum ``amount`` per author in a single pass.

    Returns:
        The authors in first-seen order and their totals.
    """
    authors: list[str] = []
    totals: dict[str, int] = {}
    for position, blog in enumerate(blogs):
        author = _text(blog, "author", position)
        value = amount(blog, position)
        if author not in totals:
            authors.append(author)
            totals[author] = 0
        totals[author] += value
    return authors, totals


def _leader(authors: list[str], totals: dict[str, int]) -> str:
    leader = authors[0]
    for author in authors[1:]:
        # strict comparison keeps the earlier author on ties
        if totals[author] > totals[leader]:
            leader = author
    return leader


def dummy(blogs: Sequence[BlogRecord]) -> int:
    """Return ``1`` for any input."""
    return 1


def total_likes(blogs: Sequence[BlogRecord]) -> int:
    """
    Sum the likes of all blogs.

    Args:
        blogs: Blogs to sum over

    Returns:
        int: Total likes, ``0`` for an empty list

    Raises:
        MalformedBlogError: If a blog has no valid ``likes``
    """
    return sum(_likes(blog, position) for position, blog in enumerate(blogs))


def favorite_blog(blogs: Sequence[BlogRecord]) -> FavoriteBlog | EmptyInput:
    """
    Find the blog with the most likes.

    Args:
        blogs: Blogs to search

    Returns:
        FavoriteBlog | EmptyInput: Title, author and likes of the first blog
        with the highest like count, or ``EmptyInput.EMPTY`` for no blogs

    Raises:
        MalformedBlogError: If any blog has no valid ``likes`` or a
        non-text ``title`` or ``author``
    """
    if not blogs:
        return EmptyInput.EMPTY

    candidates = [
        FavoriteBlog(
            title=_optional_text(blog, "title", position),
            author=_optional_text(blog, "author", position),
            likes=_likes(blog, position),
        )
        for position, blog in enumerate(blogs)
    ]
    # max() returns the first of several equal keys
    return max(candidates, key=lambda candidate: candidate.likes)


def most_blogs(blogs: Sequence[BlogRecord]) -> AuthorBlogs | EmptyInput:
    """
    Find the author who wrote the most blogs.

    Returns:
        AuthorBlogs | EmptyInput: Author and blog count, or
        ``EmptyInput.EMPTY`` for no blogs

    Raises:
        MalformedBlogError: If a blog has an invalid ``likes`` or no text ``author``
    """
    if not blogs:
        return EmptyInput.EMPTY

    authors, counts = _group_by_author(blogs, _count_one)
    author = _leader(authors, counts)
    return AuthorBlogs(author=author, blogs=counts[author])


def most_likes(blogs: Sequence[BlogRecord]) -> AuthorLikes | EmptyInput:
    """
    Find the author whose blogs have the most likes in total.

    Returns:
        AuthorLikes | EmptyInput: Author and summed likes, or
        ``EmptyInput.EMPTY`` for no blogs

    Raises:
        MalformedBlogError: If a blog has no valid ``likes`` or ``author``
    """
    if not blogs:
        return EmptyInput.EMPTY

    authors, totals = _group_by_author(blogs, _likes)
    author = _leader(authors, totals)
    return AuthorLikes(author=author, likes=totals[author])
