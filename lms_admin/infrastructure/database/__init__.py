# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Database infrastructure.

This package provides the SQLAlchemy async engine and sessions, the ORM
models and the Alembic migrations.

Example:
    from lms_admin.infrastructure.database import get_session

    async with get_session() as session:
        result = await session.execute(select(Organization))
"""

from lms_admin.infrastructure.database.connection import (
    DatabaseError,
    build_engine,
    check_database_connection,
    close_database,
    create_all,
    get_engine,
    get_session,
    get_sessionmaker,
    init_database,
)

__all__ = [
    "DatabaseError",
    "build_engine",
    "check_database_connection",
    "close_database",
    "create_all",
    "get_engine",
    "get_session",
    "get_sessionmaker",
    "init_database",
]
