# bloglist/middleware/middleware.py
"""
Middleware and lifespan for the bloglist backend.

Startup configures logging and creates the tables; shutdown disposes of
the engine. Every request is logged under an ``X-Request-ID`` and every
response carries a fixed set of security headers.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import make_url
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from bloglist.configs import settings
from bloglist.db import close_db, init_db
from bloglist.monitoring import bind_request_id, clear_context, configure_logging, get_logger
from bloglist.utils.helpers import get_summary, host

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

DEV_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Create the schema before serving and dispose of the engine afterwards."""
    configure_logging()
    backend = make_url(settings.DATABASE_URL).get_backend_name()
    logger.info(f"Starting {app.title} {app.version} ({settings.ENVIRONMENT}, {backend})")
    if settings.LOG_TO_FILE:
        logger.info(f"Writing logs to {settings.LOG_FILE}")

    try:
        await init_db()
    except Exception:
        logger.exception("Database initialization failed")
        raise
    logger.info("Blogs, users and comments tables ready")

    yield

    logger.info(f"Shutting down {app.title}")
    await close_db()


def configure_cors(app: FastAPI) -> None:
    """Allow the local frontends and, when set, the production frontend."""
    origins = list(DEV_ORIGINS)
    if settings.PRODUCTION_FRONTEND_URL:
        origins.append(settings.PRODUCTION_FRONTEND_URL)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-API-Key", REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    """Bind a request id to the log context and log each request and its outcome."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        bind_request_id(request_id)
        route = get_summary(request) or f"{request.method} {request.url.path}"
        started = perf_counter()
        try:
            logger.info(f"-> {route} from {host(request)}")
            response = await call_next(request)
            elapsed_ms = (perf_counter() - started) * 1000
            logger.info(f"<- {response.status_code} {route} in {elapsed_ms:.1f}ms")
        finally:
            clear_context()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        response.headers.update(SECURITY_HEADERS)
        return response
