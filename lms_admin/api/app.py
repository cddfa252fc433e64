# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI Application Factory.

This module provides the main application factory for the LMS admin API.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator
from uuid import uuid4

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lms_admin import __version__
from lms_admin.api.dependencies import close_db, init_db
from lms_admin.api.routes import health
from lms_admin.api.rpc import router as rpc_router
from lms_admin.core.config import get_settings
from lms_admin.infrastructure.database.connection import DatabaseError
from lms_admin.utils.logging import bind_context, clear_context, setup_logging

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Sets up logging, opens the database engine on startup and disposes
    it on shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    settings = get_settings()
    setup_logging(settings)
    logger.info(
        "Starting LMS admin API (environment=%s, debug=%s)",
        settings.environment,
        settings.debug,
    )

    await init_db()
    logger.info("Database connection initialized")

    yield

    try:
        await close_db()
        logger.info("Database connection closed")
    except Exception as e:
        logger.warning("Error closing database connection: %s", str(e))

    logger.info("Shutting down LMS admin API")


async def request_context_middleware(request: Request, call_next) -> Response:
    """Bind a request id to the log context and echo it in the response."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
    clear_context()
    bind_context(request_id=request_id, method=request.method, path=request.url.path)
    try:
        response = await call_next(request)
    finally:
        clear_context()
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    """Answer 503 when no database session can be opened."""
    logger.error("Database unavailable: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"error": {"code": "SERVICE_UNAVAILABLE", "message": exc.message}},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="LMS Admin API",
        description="Multi-tenant LMS administration backend",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    app.add_exception_handler(DatabaseError, database_error_handler)

    # Last added runs first: CORS wraps the request context middleware
    app.middleware("http")(request_context_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origins_list,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allow_methods,
        allow_headers=settings.cors.allow_headers,
        expose_headers=[REQUEST_ID_HEADER],
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(rpc_router)

    return app
