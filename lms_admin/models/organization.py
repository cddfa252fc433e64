# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Organization request/response models."""

from pydantic import BaseModel, Field

from lms_admin.models.common import ORMResponse, UTCDateTime


class OrganizationCreateRequest(BaseModel):
    """Input for createOrganization."""

    name: str = Field(..., min_length=1, description="Organization name")
    description: str | None = Field(None, description="Optional description")


class OrganizationResponse(ORMResponse):
    """Organization as stored."""

    id: int
    name: str
    description: str | None
    created_at: UTCDateTime
    updated_at: UTCDateTime
