"""Authentication routes for password login."""

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response

from bloglist.dependencies import AuthServiceDep
from bloglist.managers import LOGIN_LIMIT, limiter
from bloglist.schemas.auth import LoginRequest, Token

router = APIRouter(prefix="/api", tags=["🔐 Auth"])


@router.post(
    "/login",
    response_class=ORJSONResponse,
    response_model=Token,
    summary="Login for access token",
    description="Authenticate with username and password to obtain a bearer token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "token_type": "bearer",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                    },
                },
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {"example": {"detail": "invalid username or password"}},
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="auth_login",
)
@limiter.limit(LOGIN_LIMIT)
async def login(
    request: Request,
    response: Response,
    credentials: LoginRequest,
    auth_service: AuthServiceDep,
) -> Token:
    """
    Login with username and password.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    credentials : LoginRequest
        JSON body containing username and password.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    Token
        Access token plus the user's username and name.

    Raises
    ------
    InvalidCredentialsError
        If authentication fails.
    """
    user = await auth_service.authenticate_user(
        credentials.username,
        credentials.password.get_secret_value(),
    )
    return auth_service.create_token_for_user(user)
