# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""RPC procedure table.

Every callable procedure is registered here with its kind and input
model. Queries are read-only and travel over GET; mutations travel over
POST. Handlers receive the request's session and the validated input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Literal

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from lms_admin.domains.content import LessonService, ModuleService
from lms_admin.domains.course import CourseService
from lms_admin.domains.enrollment import EnrollmentService
from lms_admin.domains.instructor import InstructorService
from lms_admin.domains.lms import LMSService
from lms_admin.domains.organization import OrganizationService
from lms_admin.domains.role import RoleService
from lms_admin.domains.user import UserService
from lms_admin.models import (
    CourseCreateRequest,
    CourseIdInput,
    CourseInstructorCreateRequest,
    EnrollmentCreateRequest,
    EnrollmentUpdateRequest,
    LessonCreateRequest,
    LMSCreateRequest,
    LMSIdInput,
    ModuleCreateRequest,
    ModuleIdInput,
    OrganizationCreateRequest,
    OrganizationIdInput,
    UserCreateRequest,
    UserIdInput,
    UserLMSRoleCreateRequest,
    UserOrganizationRoleCreateRequest,
)
from lms_admin.utils.datetime import format_iso, utc_now

ProcedureKind = Literal["query", "mutation"]
Handler = Callable[[AsyncSession, Any], Awaitable[Any]]


@dataclass(frozen=True)
class Procedure:
    """A named RPC entry point.

    Attributes:
        name: Public procedure name, e.g. "createCourse".
        kind: "query" or "mutation".
        handler: Coroutine called with (session, validated input).
        input_model: Pydantic model for the input, or None if it takes none.
    """

    name: str
    kind: ProcedureKind
    handler: Handler
    input_model: type[BaseModel] | None = None


PROCEDURES: dict[str, Procedure] = {}


def procedure(
    name: str,
    kind: ProcedureKind,
    input_model: type[BaseModel] | None = None,
) -> Callable[[Handler], Handler]:
    """Register a handler under a procedure name."""

    def decorator(handler: Handler) -> Handler:
        if name in PROCEDURES:
            raise ValueError(f"Procedure {name} is already registered")
        PROCEDURES[name] = Procedure(name=name, kind=kind, handler=handler, input_model=input_model)
        return handler

    return decorator


def get_procedure(name: str) -> Procedure | None:
    return PROCEDURES.get(name)


@procedure("healthcheck", "query")
async def healthcheck(db: AsyncSession, data: None) -> dict[str, str]:
    return {"status": "ok", "timestamp": format_iso(utc_now())}


# Organizations
@procedure("createOrganization", "mutation", OrganizationCreateRequest)
async def create_organization(db: AsyncSession, data: OrganizationCreateRequest):
    return await OrganizationService(db).create_organization(data)


@procedure("getOrganizations", "query")
async def get_organizations(db: AsyncSession, data: None):
    return await OrganizationService(db).list_organizations()


# LMS instances
@procedure("createLMS", "mutation", LMSCreateRequest)
async def create_lms(db: AsyncSession, data: LMSCreateRequest):
    return await LMSService(db).create_lms(data)


@procedure("getLMSByOrganization", "query", OrganizationIdInput)
async def get_lms_by_organization(db: AsyncSession, data: OrganizationIdInput):
    return await LMSService(db).list_by_organization(data.organization_id)


# Users
@procedure("createUser", "mutation", UserCreateRequest)
async def create_user(db: AsyncSession, data: UserCreateRequest):
    return await UserService(db).create_user(data)


@procedure("getUsersByOrganization", "query", OrganizationIdInput)
async def get_users_by_organization(db: AsyncSession, data: OrganizationIdInput):
    return await UserService(db).list_by_organization(data.organization_id)


# Courses
@procedure("createCourse", "mutation", CourseCreateRequest)
async def create_course(db: AsyncSession, data: CourseCreateRequest):
    return await CourseService(db).create_course(data)


@procedure("getCoursesByLMS", "query", LMSIdInput)
async def get_courses_by_lms(db: AsyncSession, data: LMSIdInput):
    return await CourseService(db).list_by_lms(data.lms_id)


# Modules and lessons
@procedure("createModule", "mutation", ModuleCreateRequest)
async def create_module(db: AsyncSession, data: ModuleCreateRequest):
    return await ModuleService(db).create_module(data)


@procedure("getModulesByCourse", "query", CourseIdInput)
async def get_modules_by_course(db: AsyncSession, data: CourseIdInput):
    return await ModuleService(db).list_by_course(data.course_id)


@procedure("createLesson", "mutation", LessonCreateRequest)
async def create_lesson(db: AsyncSession, data: LessonCreateRequest):
    return await LessonService(db).create_lesson(data)


@procedure("getLessonsByModule", "query", ModuleIdInput)
async def get_lessons_by_module(db: AsyncSession, data: ModuleIdInput):
    return await LessonService(db).list_by_module(data.module_id)


# Role grants
@procedure("createUserOrganizationRole", "mutation", UserOrganizationRoleCreateRequest)
async def create_user_organization_role(
    db: AsyncSession, data: UserOrganizationRoleCreateRequest
):
    return await RoleService(db).create_organization_role(data)


@procedure("createUserLMSRole", "mutation", UserLMSRoleCreateRequest)
async def create_user_lms_role(db: AsyncSession, data: UserLMSRoleCreateRequest):
    return await RoleService(db).create_lms_role(data)


@procedure("getUserOrganizationRoles", "query", UserIdInput)
async def get_user_organization_roles(db: AsyncSession, data: UserIdInput):
    return await RoleService(db).list_organization_roles(data.user_id)


@procedure("getUserLMSRoles", "query", UserIdInput)
async def get_user_lms_roles(db: AsyncSession, data: UserIdInput):
    return await RoleService(db).list_lms_roles(data.user_id)


# Instructors
@procedure("createCourseInstructor", "mutation", CourseInstructorCreateRequest)
async def create_course_instructor(db: AsyncSession, data: CourseInstructorCreateRequest):
    return await InstructorService(db).create_course_instructor(data)


@procedure("getCourseInstructors", "query", CourseIdInput)
async def get_course_instructors(db: AsyncSession, data: CourseIdInput):
    return await InstructorService(db).list_by_course(data.course_id)


# Enrollments
@procedure("createEnrollment", "mutation", EnrollmentCreateRequest)
async def create_enrollment(db: AsyncSession, data: EnrollmentCreateRequest):
    return await EnrollmentService(db).create_enrollment(data)


@procedure("getEnrollmentsByUser", "query", UserIdInput)
async def get_enrollments_by_user(db: AsyncSession, data: UserIdInput):
    return await EnrollmentService(db).list_by_user(data.user_id)


@procedure("getEnrollmentsByCourse", "query", CourseIdInput)
async def get_enrollments_by_course(db: AsyncSession, data: CourseIdInput):
    return await EnrollmentService(db).list_by_course(data.course_id)


@procedure("updateEnrollment", "mutation", EnrollmentUpdateRequest)
async def update_enrollment(db: AsyncSession, data: EnrollmentUpdateRequest):
    return await EnrollmentService(db).update_enrollment(data)
