# bloglist/routes/user.py

"""
User Routes.

Provides registration and listing of user accounts.

Summary
-------
Endpoints include:
  - Create user
  - Get all users (with blog counts)

Rate Limiting
-------------
All endpoints define explicit limits and include `429` response examples.
"""

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import ORJSONResponse
from pydantic import ValidationError
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_400_BAD_REQUEST

from bloglist.dependencies import UserRepoDep
from bloglist.errors.database import DuplicateEntryError
from bloglist.managers import READ_LIMIT, SIGNUP_LIMIT, limiter
from bloglist.models import UserDB
from bloglist.monitoring import get_logger
from bloglist.schemas import UserCreate, UserResponse
from bloglist.utils import response_datetime

router = APIRouter(prefix="/api/users", tags=["👤 Users"])

logger = get_logger(__name__)


def db_user_to_response(db_user: UserDB, blog_count: int = 0) -> UserResponse:
    """
    Convert a `UserDB` instance to `UserResponse` with datetime serialization.

    Parameters
    ----------
    db_user : UserDB
        Database user entity.
    blog_count : int
        Number of blogs the user created.

    Returns
    -------
    UserResponse
        Validated response model, without the password hash.
    """

    user_dict = response_datetime(db_user)
    user_dict["blog_count"] = blog_count

    try:
        response = UserResponse.model_validate(user_dict)
    except ValidationError as e:
        mssg = f"Validation error converting user to response model: {e}"
        logger.exception("Validation error converting user to response model")
        raise ValueError(mssg) from e

    return response


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new user",
    description="Register a user account. Passwords are stored as Argon2 hashes.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "id": "123e4567-e89b-12d3-a456-426614174000",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                        "blogCount": 0,
                        "createdAt": "2025-01-01 10:00:00",
                    },
                },
            },
        },
        400: {
            "description": "Bad request",
            "content": {
                "application/json": {"example": {"detail": "expected username to be unique"}},
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="users_create",
)
@limiter.limit(SIGNUP_LIMIT)
async def create_user(
    request: Request,
    response: Response,
    user: UserCreate,
    repo: UserRepoDep,
) -> UserResponse:
    """
    Create a new user and return the safe response model.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    user : UserCreate
        User input payload.
    repo : UserRepository
        Repository dependency.

    Returns
    -------
    UserResponse
        Created user (without password).

    Raises
    ------
    HTTPException
        If the username already exists.
    """
    try:
        db_user = await repo.create(user)
    except DuplicateEntryError as e:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=e.detail) from e

    logger.info(f"User {db_user.username} registered")
    return db_user_to_response(db_user)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserResponse],
    summary="Get all users",
    description="Retrieve every user with the number of blogs they created.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": [
                        {
                            "id": "123e4567-e89b-12d3-a456-426614174000",
                            "username": "mluukkai",
                            "name": "Matti Luukkainen",
                            "blogCount": 2,
                            "createdAt": "2025-01-01 10:00:00",
                        },
                    ],
                },
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="users_get_all",
)
@limiter.limit(READ_LIMIT)
async def get_users(
    request: Request,
    response: Response,
    repo: UserRepoDep,
) -> list[UserResponse]:
    rows = await repo.get_all_with_blog_counts()
    return [db_user_to_response(db_user, blog_count) for db_user, blog_count in rows]
