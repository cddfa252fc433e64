# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""LMS instance request/response models."""

from pydantic import BaseModel, Field

from lms_admin.models.common import ORMResponse, UTCDateTime


class LMSCreateRequest(BaseModel):
    """Input for createLMS."""

    organization_id: int = Field(..., description="Owning organization")
    name: str = Field(..., min_length=1, description="LMS instance name")
    description: str | None = Field(None, description="Optional description")


class LMSResponse(ORMResponse):
    """LMS instance as stored."""

    id: int
    organization_id: int
    name: str
    description: str | None
    created_at: UTCDateTime
    updated_at: UTCDateTime
