# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""ORM models for the LMS administration schema."""

from lms_admin.infrastructure.database.models.base import (
    Base,
    CreatedAtMixin,
    TimestampMixin,
)
from lms_admin.infrastructure.database.models.lms import (
    Course,
    CourseInstructor,
    Enrollment,
    Lesson,
    LMSInstance,
    Module,
    Organization,
    User,
    UserLMSRole,
    UserOrganizationRole,
)

__all__ = [
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    "Organization",
    "LMSInstance",
    "User",
    "Course",
    "Module",
    "Lesson",
    "UserOrganizationRole",
    "UserLMSRole",
    "CourseInstructor",
    "Enrollment",
]
