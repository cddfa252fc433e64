# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain services.

One service per aggregate, each wrapping an AsyncSession. Services
raise the exceptions in lms_admin.domains.errors and let SQLAlchemy
constraint errors propagate.
"""

from lms_admin.domains.content import LessonService, ModuleService
from lms_admin.domains.course import CourseService
from lms_admin.domains.enrollment import EnrollmentService
from lms_admin.domains.errors import (
    AlreadyEnrolledError,
    EntityNotFoundError,
    OrganizationMismatchError,
    ServiceError,
)
from lms_admin.domains.instructor import InstructorService
from lms_admin.domains.lms import LMSService
from lms_admin.domains.organization import OrganizationService
from lms_admin.domains.role import RoleService
from lms_admin.domains.user import UserService

__all__ = [
    "ServiceError",
    "EntityNotFoundError",
    "AlreadyEnrolledError",
    "OrganizationMismatchError",
    "OrganizationService",
    "LMSService",
    "UserService",
    "CourseService",
    "ModuleService",
    "LessonService",
    "RoleService",
    "InstructorService",
    "EnrollmentService",
]
