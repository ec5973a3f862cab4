# bloglist/dependencies/dependencies.py

"""Application dependencies: repositories, services and bearer authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.db import get_session
from bloglist.errors.auth import InvalidTokenError
from bloglist.managers.token_manager import decode_access_token
from bloglist.models import UserDB
from bloglist.repositories import BlogRepository, CommentRepository, UserRepository
from bloglist.services import AuthService

# auto_error is off so a missing header yields the same 401 body as a bad token
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_user_repository(session: SessionDep) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


def get_blog_repository(session: SessionDep) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


def get_comment_repository(session: SessionDep) -> CommentRepository:
    return CommentRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]
CommentRepoDep = Annotated[CommentRepository, Depends(get_comment_repository)]


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    """Dependency to get the AuthService."""
    return AuthService(user_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


async def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    user_repo: UserRepoDep,
) -> UserDB:
    """
    Get the authenticated user from the bearer token's ``user_id`` claim.

    Parameters
    ----------
    token : str | None
        Bearer token, ``None`` when the Authorization header is absent.
    user_repo : UserRepository
        Repository used to load the token's user.

    Returns
    -------
    UserDB
        Current authenticated user.

    Raises
    ------
    InvalidTokenError
        If the token is missing, invalid, expired or names a deleted user.
    """
    if not token:
        raise InvalidTokenError

    token_data = decode_access_token(token)
    if not token_data:
        raise InvalidTokenError

    user = await user_repo.get_by_id(token_data.user_id)
    if not user:
        raise InvalidTokenError

    return user


CurrentUserDep = Annotated[UserDB, Depends(get_current_user)]
