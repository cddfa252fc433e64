# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for the domain services against SQLite.

Covers creation, parent pre-checks, scoped uniqueness, ordering and the
list contract for organizations, LMS instances, users, courses, modules,
lessons, role grants and instructors.
"""

import pytest
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from lms_admin.domains.content import LessonService, ModuleService
from lms_admin.domains.course import CourseService
from lms_admin.domains.errors import EntityNotFoundError, OrganizationMismatchError
from lms_admin.domains.instructor import InstructorService
from lms_admin.domains.lms import LMSService
from lms_admin.domains.organization import OrganizationService
from lms_admin.domains.role import RoleService
from lms_admin.domains.user import UserService
from lms_admin.infrastructure.database.models import User
from lms_admin.models import (
    CourseCreateRequest,
    CourseInstructorCreateRequest,
    CourseStatus,
    LessonCreateRequest,
    LessonType,
    LMSCreateRequest,
    LMSRole,
    ModuleCreateRequest,
    OrganizationCreateRequest,
    OrganizationRole,
    UserCreateRequest,
    UserLMSRoleCreateRequest,
    UserOrganizationRoleCreateRequest,
)

pytestmark = pytest.mark.integration


class TestOrganizations:
    """Tests for OrganizationService."""

    @pytest.mark.asyncio
    async def test_create_returns_stored_fields(self, db_session):
        service = OrganizationService(db_session)

        created = await service.create_organization(
            OrganizationCreateRequest(name="Acme", description=None)
        )

        assert created.id > 0
        assert created.name == "Acme"
        assert created.description is None
        assert created.created_at.tzinfo is not None
        assert created.updated_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_ids_increase(self, db_session):
        service = OrganizationService(db_session)

        first = await service.create_organization(OrganizationCreateRequest(name="One"))
        second = await service.create_organization(OrganizationCreateRequest(name="Two"))

        assert second.id > first.id

    @pytest.mark.asyncio
    async def test_list_ordered_by_id(self, db_session):
        service = OrganizationService(db_session)
        for name in ("B", "A", "C"):
            await service.create_organization(OrganizationCreateRequest(name=name))

        organizations = await service.list_organizations()

        assert [o.name for o in organizations] == ["B", "A", "C"]

    @pytest.mark.asyncio
    async def test_list_empty(self, db_session):
        assert await OrganizationService(db_session).list_organizations() == []


class TestLMS:
    """Tests for LMSService."""

    @pytest.mark.asyncio
    async def test_create_under_organization(self, db_session, organization):
        service = LMSService(db_session)

        lms = await service.create_lms(
            LMSCreateRequest(organization_id=organization.id, name="Campus", description="Main")
        )

        assert lms.organization_id == organization.id
        assert lms.description == "Main"

    @pytest.mark.asyncio
    async def test_unknown_organization(self, db_session):
        service = LMSService(db_session)

        with pytest.raises(EntityNotFoundError, match="Organization with id 999 does not exist"):
            await service.create_lms(LMSCreateRequest(organization_id=999, name="Orphan"))

        assert await service.list_by_organization(999) == []

    @pytest.mark.asyncio
    async def test_list_filters_by_organization(self, db_session, organization):
        other = await OrganizationService(db_session).create_organization(
            OrganizationCreateRequest(name="Other")
        )
        service = LMSService(db_session)
        await service.create_lms(LMSCreateRequest(organization_id=organization.id, name="A"))
        await service.create_lms(LMSCreateRequest(organization_id=other.id, name="B"))

        result = await service.list_by_organization(organization.id)

        assert [lms.name for lms in result] == ["A"]


class TestUsers:
    """Tests for UserService."""

    @pytest.mark.asyncio
    async def test_password_is_hashed(self, db_session, user, password_hasher):
        assert user.password_hash != "analytical"
        assert password_hasher.verify("analytical", user.password_hash)

        stored = (await db_session.execute(select(User).where(User.id == user.id))).scalar_one()
        assert stored.password_hash == user.password_hash

    @pytest.mark.asyncio
    async def test_email_unique_within_organization(
        self, db_session, organization, user, password_hasher
    ):
        service = UserService(db_session, password_hasher=password_hasher)

        with pytest.raises(IntegrityError):
            await service.create_user(
                UserCreateRequest(
                    organization_id=organization.id,
                    name="Duplicate",
                    email=user.email,
                    password="another1",
                )
            )

        # The session was rolled back and is still usable
        users = await service.list_by_organization(organization.id)
        assert [u.id for u in users] == [user.id]

    @pytest.mark.asyncio
    async def test_same_email_in_other_organization(
        self, db_session, user, password_hasher
    ):
        other = await OrganizationService(db_session).create_organization(
            OrganizationCreateRequest(name="Other")
        )
        service = UserService(db_session, password_hasher=password_hasher)

        created = await service.create_user(
            UserCreateRequest(
                organization_id=other.id, name="Ada", email=user.email, password="analytical"
            )
        )

        assert created.organization_id == other.id
        assert created.email == user.email

    @pytest.mark.asyncio
    async def test_mixed_case_email_stored_verbatim(
        self, db_session, organization, password_hasher
    ):
        service = UserService(db_session, password_hasher=password_hasher)

        created = await service.create_user(
            UserCreateRequest(
                organization_id=organization.id,
                name="Ada",
                email="Ada@Example.COM",
                password="analytical",
            )
        )

        assert created.email == "Ada@Example.COM"
        stored = (await db_session.execute(select(User).where(User.id == created.id))).scalar_one()
        assert stored.email == "Ada@Example.COM"

    @pytest.mark.asyncio
    async def test_unknown_organization(self, db_session, password_hasher):
        service = UserService(db_session, password_hasher=password_hasher)

        with pytest.raises(EntityNotFoundError, match="Organization with id 42"):
            await service.create_user(
                UserCreateRequest(
                    organization_id=42, name="Nobody", email="n@example.com", password="secret"
                )
            )


class TestCourses:
    """Tests for CourseService."""

    @pytest.mark.asyncio
    async def test_create_round_trips_fields(self, course, lms, sample_course_data):
        assert course.lms_id == lms.id
        assert course.duration_hours == 12.5
        assert isinstance(course.duration_hours, float)
        assert course.status == CourseStatus.DRAFT
        for key in ("title", "description", "slug", "meta_title", "meta_description", "keywords"):
            assert getattr(course, key) == sample_course_data[key]
        assert course.thumbnail_url == sample_course_data["thumbnail_url"]

    @pytest.mark.asyncio
    async def test_duration_precision(self, db_session, lms):
        service = CourseService(db_session)

        created = await service.create_course(
            CourseCreateRequest(
                lms_id=lms.id, title="Long", slug="long", duration_hours=999.99, status="draft"
            )
        )
        listed = await service.list_by_lms(lms.id)

        assert created.duration_hours == 999.99
        assert listed[0].duration_hours == 999.99

    @pytest.mark.asyncio
    async def test_smallest_duration_stays_positive(self, db_session, lms):
        service = CourseService(db_session)

        created = await service.create_course(
            CourseCreateRequest(
                lms_id=lms.id, title="Short", slug="short", duration_hours=0.005, status="draft"
            )
        )

        assert created.duration_hours == 0.01

    def test_duration_rounding_to_zero_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CourseCreateRequest(
                lms_id=1, title="Blink", slug="blink", duration_hours=0.004, status="draft"
            )

        assert exc_info.value.errors()[0]["loc"] == ("duration_hours",)

    @pytest.mark.asyncio
    async def test_null_duration(self, db_session, lms):
        service = CourseService(db_session)

        created = await service.create_course(
            CourseCreateRequest(lms_id=lms.id, title="Open", slug="open", status="published")
        )

        assert created.duration_hours is None
        assert created.status == CourseStatus.PUBLISHED

    @pytest.mark.asyncio
    async def test_slug_unique_within_lms(self, db_session, course, lms):
        service = CourseService(db_session)

        with pytest.raises(IntegrityError):
            await service.create_course(
                CourseCreateRequest(lms_id=lms.id, title="Again", slug=course.slug, status="draft")
            )

    @pytest.mark.asyncio
    async def test_same_slug_in_other_lms(self, db_session, course, organization):
        other_lms = await LMSService(db_session).create_lms(
            LMSCreateRequest(organization_id=organization.id, name="Second")
        )

        created = await CourseService(db_session).create_course(
            CourseCreateRequest(
                lms_id=other_lms.id, title="Again", slug=course.slug, status="archived"
            )
        )

        assert created.slug == course.slug

    @pytest.mark.asyncio
    async def test_unknown_lms(self, db_session):
        with pytest.raises(EntityNotFoundError, match="LMS with id 7 does not exist"):
            await CourseService(db_session).create_course(
                CourseCreateRequest(lms_id=7, title="Lost", slug="lost", status="draft")
            )


class TestContent:
    """Tests for ModuleService and LessonService."""

    @pytest.mark.asyncio
    async def test_modules_listed_by_order(self, db_session, course):
        service = ModuleService(db_session)
        for order in (2, 0, 1):
            await service.create_module(
                ModuleCreateRequest(course_id=course.id, title=f"Module {order}", order=order)
            )

        modules = await service.list_by_course(course.id)

        assert [m.order for m in modules] == [0, 1, 2]
        assert [m.title for m in modules] == ["Module 0", "Module 1", "Module 2"]

    @pytest.mark.asyncio
    async def test_module_order_unique_per_course(self, db_session, course):
        service = ModuleService(db_session)
        await service.create_module(ModuleCreateRequest(course_id=course.id, title="A", order=0))

        with pytest.raises(IntegrityError):
            await service.create_module(
                ModuleCreateRequest(course_id=course.id, title="B", order=0)
            )

    @pytest.mark.asyncio
    async def test_module_unknown_course(self, db_session):
        with pytest.raises(EntityNotFoundError, match="Course with id 3 does not exist"):
            await ModuleService(db_session).create_module(
                ModuleCreateRequest(course_id=3, title="A", order=0)
            )

    @pytest.mark.asyncio
    async def test_lessons_listed_by_order(self, db_session, course):
        module = await ModuleService(db_session).create_module(
            ModuleCreateRequest(course_id=course.id, title="Basics", order=0)
        )
        service = LessonService(db_session)
        await service.create_lesson(
            LessonCreateRequest(module_id=module.id, title="Quiz", type=LessonType.QUIZ, order=1)
        )
        await service.create_lesson(
            LessonCreateRequest(
                module_id=module.id,
                title="Video",
                type=LessonType.VIDEO,
                content="https://video.example.com/1",
                order=0,
            )
        )

        lessons = await service.list_by_module(module.id)

        assert [(lesson.order, lesson.type) for lesson in lessons] == [
            (0, LessonType.VIDEO),
            (1, LessonType.QUIZ),
        ]
        assert await service.list_by_module(module.id + 100) == []

    @pytest.mark.asyncio
    async def test_lesson_order_unique_per_module(self, db_session, course):
        module = await ModuleService(db_session).create_module(
            ModuleCreateRequest(course_id=course.id, title="Basics", order=0)
        )
        service = LessonService(db_session)
        await service.create_lesson(
            LessonCreateRequest(module_id=module.id, title="A", type="text", order=0)
        )

        with pytest.raises(IntegrityError):
            await service.create_lesson(
                LessonCreateRequest(module_id=module.id, title="B", type="file", order=0)
            )

    @pytest.mark.asyncio
    async def test_lesson_unknown_module(self, db_session):
        with pytest.raises(EntityNotFoundError, match="Module with id 8 does not exist"):
            await LessonService(db_session).create_lesson(
                LessonCreateRequest(module_id=8, title="A", type="text", order=0)
            )


class TestRoles:
    """Tests for RoleService."""

    @pytest.mark.asyncio
    async def test_grant_organization_role(self, db_session, organization, user):
        service = RoleService(db_session)

        grant = await service.create_organization_role(
            UserOrganizationRoleCreateRequest(
                user_id=user.id, organization_id=organization.id, role=OrganizationRole.ORG_ADMIN
            )
        )

        assert grant.role == OrganizationRole.ORG_ADMIN
        assert [g.id for g in await service.list_organization_roles(user.id)] == [grant.id]

    @pytest.mark.asyncio
    async def test_organization_role_requires_membership(self, db_session, user):
        other = await OrganizationService(db_session).create_organization(
            OrganizationCreateRequest(name="Other")
        )

        with pytest.raises(OrganizationMismatchError) as exc_info:
            await RoleService(db_session).create_organization_role(
                UserOrganizationRoleCreateRequest(
                    user_id=user.id, organization_id=other.id, role="org_admin"
                )
            )

        assert str(exc_info.value) == f"User {user.id} does not belong to organization {other.id}"
        assert await RoleService(db_session).list_organization_roles(user.id) == []

    @pytest.mark.asyncio
    async def test_duplicate_organization_role(self, db_session, organization, user):
        service = RoleService(db_session)
        request = UserOrganizationRoleCreateRequest(
            user_id=user.id, organization_id=organization.id, role="org_admin"
        )
        await service.create_organization_role(request)

        with pytest.raises(IntegrityError):
            await service.create_organization_role(request)

    @pytest.mark.asyncio
    async def test_lms_roles(self, db_session, lms, user):
        service = RoleService(db_session)

        student = await service.create_lms_role(
            UserLMSRoleCreateRequest(user_id=user.id, lms_id=lms.id, role=LMSRole.LMS_STUDENT)
        )
        instructor = await service.create_lms_role(
            UserLMSRoleCreateRequest(user_id=user.id, lms_id=lms.id, role=LMSRole.LMS_INSTRUCTOR)
        )

        roles = await service.list_lms_roles(user.id)
        assert [r.id for r in roles] == [student.id, instructor.id]
        assert await service.list_lms_roles(user.id + 1) == []

    @pytest.mark.asyncio
    async def test_lms_role_unknown_user(self, db_session, lms):
        with pytest.raises(EntityNotFoundError, match="User with id 55 does not exist"):
            await RoleService(db_session).create_lms_role(
                UserLMSRoleCreateRequest(user_id=55, lms_id=lms.id, role="lms_admin")
            )


class TestInstructors:
    """Tests for InstructorService."""

    @pytest.mark.asyncio
    async def test_assign_and_list(self, db_session, course, user):
        service = InstructorService(db_session)

        link = await service.create_course_instructor(
            CourseInstructorCreateRequest(course_id=course.id, user_id=user.id)
        )

        assert (link.course_id, link.user_id) == (course.id, user.id)
        assert [i.id for i in await service.list_by_course(course.id)] == [link.id]

    @pytest.mark.asyncio
    async def test_duplicate_assignment(self, db_session, course, user):
        service = InstructorService(db_session)
        request = CourseInstructorCreateRequest(course_id=course.id, user_id=user.id)
        await service.create_course_instructor(request)

        with pytest.raises(IntegrityError):
            await service.create_course_instructor(request)

    @pytest.mark.asyncio
    async def test_unknown_course_checked_first(self, db_session):
        with pytest.raises(EntityNotFoundError, match="Course with id 1 does not exist"):
            await InstructorService(db_session).create_course_instructor(
                CourseInstructorCreateRequest(course_id=1, user_id=1)
            )
