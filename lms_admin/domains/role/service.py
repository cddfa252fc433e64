# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Role grant service.

Grants are recorded for the admin UI; nothing in this service enforces
them on other operations.
"""

import logging

from sqlalchemy import select

from lms_admin.domains.base import BaseService
from lms_admin.domains.errors import OrganizationMismatchError
from lms_admin.infrastructure.database.models import (
    LMSInstance,
    Organization,
    User,
    UserLMSRole,
    UserOrganizationRole,
)
from lms_admin.models.role import (
    UserLMSRoleCreateRequest,
    UserLMSRoleResponse,
    UserOrganizationRoleCreateRequest,
    UserOrganizationRoleResponse,
)

logger = logging.getLogger(__name__)


class RoleService(BaseService):
    """Service for organization- and LMS-scoped role grants."""

    async def create_organization_role(
        self,
        request: UserOrganizationRoleCreateRequest,
    ) -> UserOrganizationRoleResponse:
        """Grant an organization role to a member of that organization.

        Args:
            request: Role grant data.

        Returns:
            The stored grant.

        Raises:
            EntityNotFoundError: If the organization or the user does not exist.
            OrganizationMismatchError: If the user belongs to another organization.
            IntegrityError: If the same grant already exists.
        """
        await self._require(Organization, request.organization_id, "Organization")
        user = await self._require(User, request.user_id, "User")

        if user.organization_id != request.organization_id:
            logger.warning(
                "Rejected organization role: user=%s belongs to organization=%s, not %s",
                user.id,
                user.organization_id,
                request.organization_id,
            )
            raise OrganizationMismatchError(request.user_id, request.organization_id)

        grant = UserOrganizationRole(
            user_id=request.user_id,
            organization_id=request.organization_id,
            role=request.role,
        )
        grant = await self._save(grant, "UserOrganizationRole")

        logger.info(
            "Granted organization role: id=%s, user=%s, role=%s",
            grant.id,
            grant.user_id,
            grant.role.value,
        )

        return UserOrganizationRoleResponse.model_validate(grant)

    async def create_lms_role(self, request: UserLMSRoleCreateRequest) -> UserLMSRoleResponse:
        """Grant an LMS role to a user.

        Raises:
            EntityNotFoundError: If the user or the LMS instance does not exist.
            IntegrityError: If the same grant already exists.
        """
        await self._require(User, request.user_id, "User")
        await self._require(LMSInstance, request.lms_id, "LMS")

        grant = UserLMSRole(
            user_id=request.user_id,
            lms_id=request.lms_id,
            role=request.role,
        )
        grant = await self._save(grant, "UserLMSRole")

        logger.info(
            "Granted LMS role: id=%s, user=%s, lms=%s, role=%s",
            grant.id,
            grant.user_id,
            grant.lms_id,
            grant.role.value,
        )

        return UserLMSRoleResponse.model_validate(grant)

    async def list_organization_roles(self, user_id: int) -> list[UserOrganizationRoleResponse]:
        rows = await self._list(
            select(UserOrganizationRole)
            .where(UserOrganizationRole.user_id == user_id)
            .order_by(UserOrganizationRole.id)
        )
        return [UserOrganizationRoleResponse.model_validate(row) for row in rows]

    async def list_lms_roles(self, user_id: int) -> list[UserLMSRoleResponse]:
        rows = await self._list(
            select(UserLMSRole).where(UserLMSRole.user_id == user_id).order_by(UserLMSRole.id)
        )
        return [UserLMSRoleResponse.model_validate(row) for row in rows]
