# bloglist/routes/blog.py

"""
Blog Routes.

Provides CRUD endpoints for blogs and their comments.

Summary
-------
Endpoints include:
  - List blogs
  - Get blog by id
  - Create blog (bearer token)
  - Update blog
  - Delete blog (bearer token, creator only)
  - List and add comments

Rate Limiting
-------------
Every endpoint defines an explicit limit. Tiered limits apply when
`X-API-Key` is present, offering higher throughput for identified clients.
"""

from uuid import UUID

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from pydantic import ValidationError
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from bloglist.dependencies import BlogRepoDep, CommentRepoDep, CurrentUserDep
from bloglist.errors.auth import BlogOwnershipError
from bloglist.errors.database import RecordNotFoundError
from bloglist.managers import EDIT_LIMIT, READ_LIMIT, WRITE_LIMIT, limiter
from bloglist.models import BlogDB, CommentDB, UserDB
from bloglist.monitoring import get_logger
from bloglist.schemas import (
    BlogCreate,
    BlogCreator,
    BlogResponse,
    BlogUpdate,
    CommentCreate,
    CommentResponse,
)
from bloglist.utils import response_datetime

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

logger = get_logger(__name__)

NOT_FOUND_EXAMPLE = {
    "description": "Not found",
    "content": {"application/json": {"example": {"detail": "Blog with ID <uuid> not found"}}},
}
RATE_LIMIT_EXAMPLE = {
    "description": "Rate limit exceeded",
    "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
}
TOKEN_EXAMPLE = {
    "description": "Unauthorized",
    "content": {"application/json": {"example": {"detail": "token missing or invalid"}}},
}


def db_blog_to_response(db_blog: BlogDB, creator: UserDB | None = None) -> BlogResponse:
    """
    Convert a `BlogDB` instance to `BlogResponse` with datetime serialization.

    Parameters
    ----------
    db_blog : BlogDB
        Database blog entity.
    creator : UserDB | None
        User who posted the blog, embedded as `user` without the password hash.

    Returns
    -------
    BlogResponse
        Validated response model.
    """

    blog_dict = response_datetime(db_blog)
    blog_dict["user"] = BlogCreator.model_validate(creator) if creator else None

    try:
        response = BlogResponse.model_validate(blog_dict)
    except ValidationError as e:
        mssg = f"Validation error converting blog to response model: {e}"
        logger.exception("Validation error converting blog to response model")
        raise ValueError(mssg) from e

    return response


def db_comment_to_response(db_comment: CommentDB) -> CommentResponse:
    return CommentResponse.model_validate(response_datetime(db_comment))


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="List blogs",
    description="Retrieve every blog in creation order.",
    responses={429: RATE_LIMIT_EXAMPLE},
    operation_id="blogs_list",
)
@limiter.limit(READ_LIMIT)
async def get_blogs(
    request: Request,
    response: Response,
    repo: BlogRepoDep,
) -> list[BlogResponse]:
    """
    List blogs.

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
    list[BlogResponse]
        Every stored blog, oldest first.
    """
    rows = await repo.get_all_with_creators()
    return [db_blog_to_response(db_blog, creator) for db_blog, creator in rows]


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    description="Retrieve a blog by its UUID.",
    responses={404: NOT_FOUND_EXAMPLE, 429: RATE_LIMIT_EXAMPLE},
    operation_id="blogs_get_by_id",
)
@limiter.limit(READ_LIMIT)
async def get_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    repo: BlogRepoDep,
) -> BlogResponse:
    """
    Get blog by ID.

    Raises
    ------
    RecordNotFoundError
        If blog not found.
    """
    db_blog = await repo.get_or_raise(blog_id)
    return db_blog_to_response(db_blog, await repo.get_creator(db_blog))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog",
    description="Create a blog owned by the user of the bearer token.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "id": "123e4567-e89b-12d3-a456-426614174000",
                        "userId": "123e4567-e89b-12d3-a456-426614174111",
                        "user": {
                            "id": "123e4567-e89b-12d3-a456-426614174111",
                            "username": "mluukkai",
                            "name": "Matti Luukkainen",
                        },
                        "title": "Canonical string reduction",
                        "author": "Edsger W. Dijkstra",
                        "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
                        "likes": 12,
                        "createdAt": "2025-01-01 10:00:00",
                        "updatedAt": "No updates",
                    },
                },
            },
        },
        400: {
            "description": "Bad request",
            "content": {"application/json": {"example": {"detail": "Validation failed"}}},
        },
        401: TOKEN_EXAMPLE,
        429: RATE_LIMIT_EXAMPLE,
    },
    operation_id="blogs_create",
)
@limiter.limit(WRITE_LIMIT)
async def create_blog(
    request: Request,
    response: Response,
    blog: BlogCreate,
    repo: BlogRepoDep,
    current_user: CurrentUserDep,
) -> BlogResponse:
    """
    Create a new blog.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    blog : BlogCreate
        Blog input payload.
    repo : BlogRepository
        Repository dependency.
    current_user : UserDB
        User resolved from the bearer token.

    Returns
    -------
    BlogResponse
        Created blog data.
    """
    db_blog = await repo.create(blog, user_id=current_user.id)
    return db_blog_to_response(db_blog, current_user)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Update blog",
    description="Update a blog's title, author, url or likes.",
    responses={404: NOT_FOUND_EXAMPLE, 429: RATE_LIMIT_EXAMPLE},
    operation_id="blogs_update",
)
@limiter.limit(EDIT_LIMIT)
async def update_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    blog_update: BlogUpdate,
    repo: BlogRepoDep,
) -> BlogResponse:
    """
    Update a blog.

    Raises
    ------
    RecordNotFoundError
        If blog not found.
    """
    db_blog = await repo.update(blog_id, blog_update)
    if db_blog is None:
        raise RecordNotFoundError("Blog", blog_id)
    return db_blog_to_response(db_blog, await repo.get_creator(db_blog))


@router.delete(
    "/{blog_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete blog",
    description="Delete a blog. Only the user who created it may do so.",
    responses={
        401: TOKEN_EXAMPLE,
        403: {
            "description": "Forbidden",
            "content": {
                "application/json": {
                    "example": {"detail": "only the creator of the blog may delete it"},
                },
            },
        },
        404: NOT_FOUND_EXAMPLE,
        429: RATE_LIMIT_EXAMPLE,
    },
    operation_id="blogs_delete",
)
@limiter.limit(WRITE_LIMIT)
async def delete_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    repo: BlogRepoDep,
    current_user: CurrentUserDep,
) -> None:
    """
    Delete a blog created by the current user.

    Raises
    ------
    RecordNotFoundError
        If blog not found.
    BlogOwnershipError
        If the current user did not create the blog.
    """
    db_blog = await repo.get_or_raise(blog_id)
    if db_blog.user_id != current_user.id:
        raise BlogOwnershipError

    await repo.delete(blog_id)
    logger.info(f"Blog {blog_id} deleted by user {current_user.id}")


@router.get(
    "/{blog_id}/comments",
    response_class=ORJSONResponse,
    response_model=list[CommentResponse],
    summary="List comments",
    description="Retrieve a blog's comments, oldest first.",
    responses={404: NOT_FOUND_EXAMPLE, 429: RATE_LIMIT_EXAMPLE},
    operation_id="blogs_comments_list",
)
@limiter.limit(READ_LIMIT)
async def get_comments(
    request: Request,
    response: Response,
    blog_id: UUID,
    repo: BlogRepoDep,
    comment_repo: CommentRepoDep,
) -> list[CommentResponse]:
    await repo.get_or_raise(blog_id)
    db_comments = await comment_repo.get_by_blog(blog_id)
    return [db_comment_to_response(db_comment) for db_comment in db_comments]


@router.post(
    "/{blog_id}/comments",
    response_class=ORJSONResponse,
    response_model=CommentResponse,
    status_code=HTTP_201_CREATED,
    summary="Add comment",
    description="Attach an anonymous comment to a blog.",
    responses={404: NOT_FOUND_EXAMPLE, 429: RATE_LIMIT_EXAMPLE},
    operation_id="blogs_comments_create",
)
@limiter.limit(WRITE_LIMIT)
async def create_comment(
    request: Request,
    response: Response,
    blog_id: UUID,
    comment: CommentCreate,
    repo: BlogRepoDep,
    comment_repo: CommentRepoDep,
) -> CommentResponse:
    """
    Add a comment to a blog.

    Raises
    ------
    RecordNotFoundError
        If blog not found.
    """
    await repo.get_or_raise(blog_id)
    db_comment = await comment_repo.create(comment, blog_id=blog_id)
    return db_comment_to_response(db_comment)
