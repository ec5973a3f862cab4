# bloglist/routes/stats.py

"""
Statistics Routes.

Serves the list helper aggregates computed over every stored blog. When no
blog exists the favourite and author endpoints answer ``200`` with
``{"detail": "the list of blogs is empty"}``.
"""

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response

from bloglist.dependencies import BlogRepoDep
from bloglist.managers import READ_LIMIT, limiter
from bloglist.schemas import (
    AuthorBlogs,
    AuthorLikes,
    EmptyInput,
    EmptyStatsResponse,
    FavoriteBlog,
    TotalLikesResponse,
)
from bloglist.utils import list_helper

router = APIRouter(prefix="/api/stats", tags=["📊 Statistics"])

EMPTY_EXAMPLE = {"detail": "the list of blogs is empty"}
MALFORMED_EXAMPLE = {
    "description": "Malformed blog",
    "content": {
        "application/json": {
            "example": {
                "detail": "blog at position 2 has an invalid 'likes': None",
                "field": "likes",
                "position": 2,
            },
        },
    },
}


def _or_empty[T](result: T | EmptyInput) -> T | EmptyStatsResponse:
    if result is EmptyInput.EMPTY:
        return EmptyStatsResponse(detail=EmptyInput.EMPTY.value)
    return result


@router.get(
    "/total-likes",
    response_class=ORJSONResponse,
    response_model=TotalLikesResponse,
    summary="Total likes",
    description="Sum of likes over every stored blog.",
    responses={
        200: {"content": {"application/json": {"example": {"totalLikes": 36}}}},
        422: MALFORMED_EXAMPLE,
    },
    operation_id="stats_total_likes",
)
@limiter.limit(READ_LIMIT)
async def get_total_likes(
    request: Request,
    response: Response,
    repo: BlogRepoDep,
) -> TotalLikesResponse:
    blogs = await repo.get_all()
    return TotalLikesResponse(total_likes=list_helper.total_likes(blogs))


@router.get(
    "/favorite-blog",
    response_class=ORJSONResponse,
    response_model=FavoriteBlog | EmptyStatsResponse,
    summary="Favorite blog",
    description="The first stored blog with the highest like count.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "examples": {
                        "found": {
                            "value": {
                                "title": "Canonical string reduction",
                                "author": "Edsger W. Dijkstra",
                                "likes": 12,
                            },
                        },
                        "empty": {"value": EMPTY_EXAMPLE},
                    },
                },
            },
        },
        422: MALFORMED_EXAMPLE,
    },
    operation_id="stats_favorite_blog",
)
@limiter.limit(READ_LIMIT)
async def get_favorite_blog(
    request: Request,
    response: Response,
    repo: BlogRepoDep,
) -> FavoriteBlog | EmptyStatsResponse:
    """
    Get the favourite blog.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    FavoriteBlog | EmptyStatsResponse
        Title, author and likes of the winner, or the empty message.
    """
    blogs = await repo.get_all()
    return _or_empty(list_helper.favorite_blog(blogs))


@router.get(
    "/most-blogs",
    response_class=ORJSONResponse,
    response_model=AuthorBlogs | EmptyStatsResponse,
    summary="Most blogs",
    description="The author with the most stored blogs.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "examples": {
                        "found": {"value": {"author": "Robert C. Martin", "blogs": 3}},
                        "empty": {"value": EMPTY_EXAMPLE},
                    },
                },
            },
        },
        422: MALFORMED_EXAMPLE,
    },
    operation_id="stats_most_blogs",
)
@limiter.limit(READ_LIMIT)
async def get_most_blogs(
    request: Request,
    response: Response,
    repo: BlogRepoDep,
) -> AuthorBlogs | EmptyStatsResponse:
    blogs = await repo.get_all()
    return _or_empty(list_helper.most_blogs(blogs))


@router.get(
    "/most-likes",
    response_class=ORJSONResponse,
    response_model=AuthorLikes | EmptyStatsResponse,
    summary="Most likes",
    description="The author whose stored blogs have the most likes in total.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "examples": {
                        "found": {"value": {"author": "Edsger W. Dijkstra", "likes": 17}},
                        "empty": {"value": EMPTY_EXAMPLE},
                    },
                },
            },
        },
        422: MALFORMED_EXAMPLE,
    },
    operation_id="stats_most_likes",
)
@limiter.limit(READ_LIMIT)
async def get_most_likes(
    request: Request,
    response: Response,
    repo: BlogRepoDep,
) -> AuthorLikes | EmptyStatsResponse:
    blogs = await repo.get_all()
    return _or_empty(list_helper.most_likes(blogs))
