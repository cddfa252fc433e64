# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""User service.

Emails are unique per organization, not globally: the same address may
exist in two tenants.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lms_admin.domains.auth.password import PasswordHasher
from lms_admin.domains.base import BaseService
from lms_admin.infrastructure.database.models import Organization, User
from lms_admin.models.user import UserCreateRequest, UserResponse

logger = logging.getLogger(__name__)


class UserService(BaseService):
    """Service for users of an organization.

    Attributes:
        db: Async database session.
        password_hasher: Hasher used for new passwords.
    """

    def __init__(
        self,
        db: AsyncSession,
        password_hasher: PasswordHasher | None = None,
    ) -> None:
        """Initialize user service.

        Args:
            db: Async database session.
            password_hasher: Optional hasher; defaults to one built from settings.
        """
        super().__init__(db)
        self.password_hasher = password_hasher or PasswordHasher()

    async def create_user(self, request: UserCreateRequest) -> UserResponse:
        """Create a user with a bcrypt-hashed password.

        Args:
            request: User creation data including the plaintext password.

        Returns:
            The stored user. Carries the hash, never the plaintext.

        Raises:
            EntityNotFoundError: If the organization does not exist.
            IntegrityError: If the email is already used in the organization.
        """
        await self._require(Organization, request.organization_id, "Organization")

        user = User(
            organization_id=request.organization_id,
            name=request.name,
            email=request.email,
            password_hash=self.password_hasher.hash(request.password),
        )
        user = await self._save(user, "User")

        logger.info("Created user: id=%s, organization=%s", user.id, user.organization_id)

        return UserResponse.model_validate(user)

    async def list_by_organization(self, organization_id: int) -> list[UserResponse]:
        """List users of an organization ordered by id."""
        rows = await self._list(
            select(User).where(User.organization_id == organization_id).order_by(User.id)
        )
        return [UserResponse.model_validate(row) for row in rows]
