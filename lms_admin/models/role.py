# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Role grant request/response models.

Roles are recorded only; no operation checks them.
"""

from pydantic import BaseModel, Field

from lms_admin.models.common import LMSRole, ORMResponse, OrganizationRole, UTCDateTime


class UserOrganizationRoleCreateRequest(BaseModel):
    """Input for createUserOrganizationRole."""

    user_id: int = Field(..., description="User receiving the role")
    organization_id: int = Field(..., description="Organization scope; must be the user's own")
    role: OrganizationRole = Field(..., description="Role name")


class UserOrganizationRoleResponse(ORMResponse):
    """Organization-scoped role grant."""

    id: int
    user_id: int
    organization_id: int
    role: OrganizationRole
    created_at: UTCDateTime


class UserLMSRoleCreateRequest(BaseModel):
    """Input for createUserLMSRole."""

    user_id: int = Field(..., description="User receiving the role")
    lms_id: int = Field(..., description="LMS instance scope")
    role: LMSRole = Field(..., description="Role name")


class UserLMSRoleResponse(ORMResponse):
    """LMS-scoped role grant."""

    id: int
    user_id: int
    lms_id: int
    role: LMSRole
    created_at: UTCDateTime
