# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Organization service.

Organizations are the tenant root: every LMS instance and user belongs
to exactly one.
"""

import logging

from sqlalchemy import select

from lms_admin.domains.base import BaseService
from lms_admin.infrastructure.database.models import Organization
from lms_admin.models.organization import OrganizationCreateRequest, OrganizationResponse

logger = logging.getLogger(__name__)


class OrganizationService(BaseService):
    """Service for creating and listing organizations."""

    async def create_organization(
        self,
        request: OrganizationCreateRequest,
    ) -> OrganizationResponse:
        """Create a new organization.

        Args:
            request: Organization creation data.

        Returns:
            The stored organization.
        """
        organization = Organization(
            name=request.name,
            description=request.description,
        )
        organization = await self._save(organization, "Organization")

        logger.info("Created organization: id=%s, name=%s", organization.id, organization.name)

        return OrganizationResponse.model_validate(organization)

    async def list_organizations(self) -> list[OrganizationResponse]:
        """List every organization ordered by id."""
        rows = await self._list(select(Organization).order_by(Organization.id))
        return [OrganizationResponse.model_validate(row) for row in rows]
