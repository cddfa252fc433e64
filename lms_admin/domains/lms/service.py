# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""LMS instance service."""

import logging

from sqlalchemy import select

from lms_admin.domains.base import BaseService
from lms_admin.infrastructure.database.models import LMSInstance, Organization
from lms_admin.models.lms import LMSCreateRequest, LMSResponse

logger = logging.getLogger(__name__)


class LMSService(BaseService):
    """Service for LMS instances within an organization."""

    async def create_lms(self, request: LMSCreateRequest) -> LMSResponse:
        """Create an LMS instance under an existing organization.

        Args:
            request: LMS creation data.

        Returns:
            The stored LMS instance.

        Raises:
            EntityNotFoundError: If the organization does not exist.
        """
        await self._require(Organization, request.organization_id, "Organization")

        lms = LMSInstance(
            organization_id=request.organization_id,
            name=request.name,
            description=request.description,
        )
        lms = await self._save(lms, "LMS")

        logger.info(
            "Created LMS: id=%s, organization=%s",
            lms.id,
            lms.organization_id,
        )

        return LMSResponse.model_validate(lms)

    async def list_by_organization(self, organization_id: int) -> list[LMSResponse]:
        """List LMS instances of an organization; empty if it has none or is unknown."""
        rows = await self._list(
            select(LMSInstance)
            .where(LMSInstance.organization_id == organization_id)
            .order_by(LMSInstance.id)
        )
        return [LMSResponse.model_validate(row) for row in rows]
