# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest fixtures for integration tests.

Every test gets a fresh in-memory SQLite database with foreign keys
enforced, plus a few parent rows created through the services.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from lms_admin.domains.auth.password import PasswordHasher
from lms_admin.domains.course import CourseService
from lms_admin.domains.lms import LMSService
from lms_admin.domains.organization import OrganizationService
from lms_admin.domains.user import UserService
from lms_admin.infrastructure.database.connection import build_engine, create_all
from lms_admin.models import (
    CourseCreateRequest,
    CourseResponse,
    LMSCreateRequest,
    LMSResponse,
    OrganizationCreateRequest,
    OrganizationResponse,
    UserCreateRequest,
    UserResponse,
)

MEMORY_DB_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory database with all tables."""
    engine = build_engine(MEMORY_DB_URL)
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a session bound to the in-memory database."""
    sessionmaker = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    async with sessionmaker() as session:
        yield session


@pytest.fixture
def password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest_asyncio.fixture
async def organization(db_session: AsyncSession, sample_organization_data) -> OrganizationResponse:
    service = OrganizationService(db_session)
    return await service.create_organization(
        OrganizationCreateRequest(**sample_organization_data)
    )


@pytest_asyncio.fixture
async def lms(db_session: AsyncSession, organization: OrganizationResponse) -> LMSResponse:
    service = LMSService(db_session)
    return await service.create_lms(
        LMSCreateRequest(organization_id=organization.id, name="Main campus")
    )


@pytest_asyncio.fixture
async def user(
    db_session: AsyncSession,
    organization: OrganizationResponse,
    password_hasher: PasswordHasher,
    sample_user_data,
) -> UserResponse:
    service = UserService(db_session, password_hasher=password_hasher)
    return await service.create_user(
        UserCreateRequest(organization_id=organization.id, **sample_user_data)
    )


@pytest_asyncio.fixture
async def course(db_session: AsyncSession, lms: LMSResponse, sample_course_data) -> CourseResponse:
    service = CourseService(db_session)
    return await service.create_course(
        CourseCreateRequest(lms_id=lms.id, **sample_course_data)
    )
