# bloglist/main.py

"""Bloglist Backend - blogs, users and blog statistics over FastAPI."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse, Response
from slowapi.errors import RateLimitExceeded
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from bloglist.configs import settings
from bloglist.db import ping_db
from bloglist.dependencies import SessionDep
from bloglist.errors import (
    DatabaseError,
    MalformedBlogError,
    PasswordHashingError,
    UserAuthenticationError,
    auth_exception_handler,
    database_exception_handler,
    password_hashing_exception_handler,
    stats_exception_handler,
    validation_exception_handler,
)
from bloglist.managers import limiter, rate_limit_exceeded_handler
from bloglist.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from bloglist.routes import auth_router, blog_router, stats_router, user_router
from bloglist.schemas import HealthCheckResponse
from bloglist.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Bloglist Backend API",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

for router in (auth_router, user_router, blog_router, stats_router):
    app.include_router(router)

ERROR_HANDLERS = [
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (DatabaseError, database_exception_handler),
    (UserAuthenticationError, auth_exception_handler),
    (MalformedBlogError, stats_exception_handler),
    (RequestValidationError, validation_exception_handler),
]

for exc_type, handler in ERROR_HANDLERS:
    app.add_exception_handler(exc_type, handler)

# slowapi looks the limiter up on app.state
app.state.limiter = limiter


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 10:00:00",
                        "database": "ok",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request, session: SessionDep) -> HealthCheckResponse:
    """
    Health check endpoint with a database probe.

    Parameters
    ----------
    request : Request
        Current request context.
    session : AsyncSession
        Database session used for the probe.

    Returns
    -------
    HealthCheckResponse
        Version, overall status, timestamp and database status.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"version": "1.0.0", "status": "ok", "timestamp": "2025-01-01 10:00:00", "database": "ok"}
    """
    database_ok = await ping_db(session)

    return HealthCheckResponse(
        version=app.version,
        status="ok" if database_ok else "degraded",
        timestamp=today_str(),
        database="ok" if database_ok else "unavailable",
    )


@app.get(
    "/",
    tags=["🏠 Root"],
    summary="Root access",
    response_model=dict[str, str],
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"message": "Welcome to Bloglist Backend"},
                },
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="root_access",
)
@limiter.limit("30/minute")
async def root(request: Request, response: Response) -> dict[str, str]:
    """Welcome message naming the service."""
    return {"message": f"Welcome to {app.title}"}
