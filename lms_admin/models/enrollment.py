# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment request/response models."""

from datetime import datetime

from pydantic import BaseModel, Field

from lms_admin.models.common import EnrollmentStatus, ORMResponse, UTCDateTime


class EnrollmentCreateRequest(BaseModel):
    """Input for createEnrollment."""

    user_id: int = Field(..., description="Enrolling user")
    course_id: int = Field(..., description="Course")
    status: EnrollmentStatus = Field(EnrollmentStatus.ENROLLED, description="Initial status")


class EnrollmentUpdateRequest(BaseModel):
    """Input for updateEnrollment.

    Only fields present in the payload are written; an explicit
    ``completion_date: null`` clears the stored date. Use
    ``model_fields_set`` to tell absent from null.
    """

    id: int = Field(..., description="Enrollment to update")
    status: EnrollmentStatus | None = Field(None, description="New status")
    completion_date: datetime | None = Field(None, description="Completion timestamp")


class EnrollmentResponse(ORMResponse):
    """Enrollment as stored."""

    id: int
    user_id: int
    course_id: int
    status: EnrollmentStatus
    enrollment_date: UTCDateTime
    completion_date: UTCDateTime | None
    created_at: UTCDateTime
    updated_at: UTCDateTime
