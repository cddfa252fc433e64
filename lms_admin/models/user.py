# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""User request/response models."""

from pydantic import BaseModel, Field

from lms_admin.models.common import EmailString, ORMResponse, UTCDateTime

MIN_PASSWORD_LENGTH = 6


class UserCreateRequest(BaseModel):
    """Input for createUser. The plaintext password is hashed before storage."""

    organization_id: int = Field(..., description="Owning organization")
    name: str = Field(..., min_length=1, description="Display name")
    email: EmailString = Field(..., description="Email, unique within the organization")
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH, description="Plaintext password")


class UserResponse(ORMResponse):
    """User as stored. Carries the bcrypt hash, never the plaintext."""

    id: int
    organization_id: int
    name: str
    email: str
    password_hash: str
    created_at: UTCDateTime
    updated_at: UTCDateTime
