# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI dependency injection definitions.

Example:
    @router.get("/health/ready")
    async def readiness_check(db: DbSession) -> ReadinessResponse:
        ...
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lms_admin.core.config import get_settings
from lms_admin.infrastructure.database.connection import (
    close_database,
    create_all,
    get_session,
    init_database,
)

logger = logging.getLogger(__name__)


async def init_db() -> None:
    """Initialize the database engine, creating tables if configured to."""
    settings = get_settings()

    await init_database(settings)

    if settings.db.create_all:
        await create_all()
        logger.info("Database tables created")


async def close_db() -> None:
    """Dispose the database engine."""
    await close_database()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session for one request.

    Yields:
        AsyncSession that is committed on success and rolled back on error.
    """
    async with get_session() as session:
        yield session


DbSession = Annotated[AsyncSession, Depends(get_db)]
