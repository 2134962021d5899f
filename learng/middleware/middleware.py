# learng/middleware/middleware.py
"""
Middleware components and the application lifespan.

This module contains request logging with request-id correlation, security
headers, CORS configuration and the lifespan handler that prepares logging
and the database.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from time import perf_counter

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from learng.configs import Settings
from learng.db import close_db, init_db
from learng.monitoring import bind_request_id, clear_context, configure_logging, get_logger
from learng.utils.helpers import host, new_id, time_taken

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown."""
    configure_logging()
    logger.info("Starting application", app=app.title, version=app.version)

    try:
        await init_db()
    except Exception:
        logger.exception("Failed to initialize services")
        raise

    logger.info("Services initialized successfully")

    yield

    logger.info("Shutting down application", app=app.title)
    await close_db()


def configure_cors(app: FastAPI, app_settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Tag the request with an id and log its outcome and timing."""
        clear_context()
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_id()
        bind_request_id(request_id)

        start_time = perf_counter()
        logger.info(
            "Request started",
            method=request.method,
            path=request.url.path,
            ip=host(request),
        )

        response = await call_next(request)

        logger.info(
            "Request finished",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration=time_taken(start_time),
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Add security headers to all responses."""

        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store"
        return response
