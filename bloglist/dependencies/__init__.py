# bloglist/dependencies/__init__.py

from bloglist.dependencies.dependencies import (
    AuthServiceDep,
    BlogRepoDep,
    CommentRepoDep,
    CurrentUserDep,
    SessionDep,
    UserRepoDep,
    get_current_user,
    oauth2_scheme,
)

__all__ = [
    "AuthServiceDep",
    "BlogRepoDep",
    "CommentRepoDep",
    "CurrentUserDep",
    "SessionDep",
    "UserRepoDep",
    "get_current_user",
    "oauth2_scheme",
]
