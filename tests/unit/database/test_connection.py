# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for engine construction and connection state."""

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool

from lms_admin.infrastructure.database import connection
from lms_admin.infrastructure.database.connection import (
    DatabaseError,
    build_engine,
    check_database_connection,
    get_engine,
    get_sessionmaker,
)


class TestBuildEngine:
    def test_memory_sqlite_uses_static_pool(self):
        engine = build_engine("sqlite+aiosqlite:///:memory:")

        assert isinstance(engine.sync_engine.pool, StaticPool)

    def test_sqlite_ignores_pool_sizing(self):
        engine = build_engine("sqlite+aiosqlite:///./lms.db", pool_size=5, max_overflow=10)

        assert engine.dialect.name == "sqlite"
        assert not isinstance(engine.sync_engine.pool, StaticPool)

    def test_postgres_url(self):
        engine = build_engine("postgresql+asyncpg://u:p@localhost/lms", pool_size=3)

        assert engine.dialect.name == "postgresql"
        assert engine.sync_engine.pool.size() == 3


class TestUninitialized:
    """Accessors fail clearly before init_database()."""

    @pytest.fixture(autouse=True)
    def no_engine(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(connection, "_engine", None)
        monkeypatch.setattr(connection, "_sessionmaker", None)

    def test_get_engine_raises(self):
        with pytest.raises(DatabaseError, match="not initialized"):
            get_engine()

    def test_get_sessionmaker_raises(self):
        with pytest.raises(DatabaseError, match="not initialized"):
            get_sessionmaker()

    @pytest.mark.asyncio
    async def test_check_connection_false(self):
        assert await check_database_connection() is False


def test_database_error_keeps_original():
    original = OperationalError("SELECT 1", {}, Exception("connection refused"))

    error = DatabaseError("Database operation failed", original)

    assert error.original_error is original
    assert str(error).startswith("Database operation failed: ")
