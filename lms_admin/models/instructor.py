# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course instructor request/response models."""

from pydantic import BaseModel, Field

from lms_admin.models.common import ORMResponse, UTCDateTime


class CourseInstructorCreateRequest(BaseModel):
    """Input for createCourseInstructor."""

    course_id: int = Field(..., description="Course being taught")
    user_id: int = Field(..., description="Instructor")


class CourseInstructorResponse(ORMResponse):
    """Course/instructor link."""

    id: int
    course_id: int
    user_id: int
    created_at: UTCDateTime
