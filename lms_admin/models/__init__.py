# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Request/response models (Pydantic).

Pure data: every entity response model and every create/update input
model, plus the shared enums.
"""

from lms_admin.models.common import (
    CourseStatus,
    EnrollmentStatus,
    LessonType,
    LMSRole,
    OrganizationRole,
)
from lms_admin.models.content import (
    LessonCreateRequest,
    LessonResponse,
    ModuleCreateRequest,
    ModuleResponse,
)
from lms_admin.models.course import CourseCreateRequest, CourseResponse
from lms_admin.models.enrollment import (
    EnrollmentCreateRequest,
    EnrollmentResponse,
    EnrollmentUpdateRequest,
)
from lms_admin.models.instructor import (
    CourseInstructorCreateRequest,
    CourseInstructorResponse,
)
from lms_admin.models.lms import LMSCreateRequest, LMSResponse
from lms_admin.models.lookup import (
    CourseIdInput,
    LMSIdInput,
    ModuleIdInput,
    OrganizationIdInput,
    UserIdInput,
)
from lms_admin.models.organization import OrganizationCreateRequest, OrganizationResponse
from lms_admin.models.role import (
    UserLMSRoleCreateRequest,
    UserLMSRoleResponse,
    UserOrganizationRoleCreateRequest,
    UserOrganizationRoleResponse,
)
from lms_admin.models.user import UserCreateRequest, UserResponse

__all__ = [
    # Enums
    "CourseStatus",
    "LessonType",
    "EnrollmentStatus",
    "OrganizationRole",
    "LMSRole",
    # Organization
    "OrganizationCreateRequest",
    "OrganizationResponse",
    # LMS
    "LMSCreateRequest",
    "LMSResponse",
    # User
    "UserCreateRequest",
    "UserResponse",
    # Course
    "CourseCreateRequest",
    "CourseResponse",
    # Content
    "ModuleCreateRequest",
    "ModuleResponse",
    "LessonCreateRequest",
    "LessonResponse",
    # Roles
    "UserOrganizationRoleCreateRequest",
    "UserOrganizationRoleResponse",
    "UserLMSRoleCreateRequest",
    "UserLMSRoleResponse",
    # Instructors
    "CourseInstructorCreateRequest",
    "CourseInstructorResponse",
    # Enrollment
    "EnrollmentCreateRequest",
    "EnrollmentUpdateRequest",
    "EnrollmentResponse",
    # Lookups
    "OrganizationIdInput",
    "LMSIdInput",
    "CourseIdInput",
    "ModuleIdInput",
    "UserIdInput",
]
