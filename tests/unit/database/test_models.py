# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for database models.

Tests table names, constraints and column defaults.
"""

from sqlalchemy import UniqueConstraint

from lms_admin.infrastructure.database.models import (
    Base,
    Course,
    CourseInstructor,
    CreatedAtMixin,
    Enrollment,
    Lesson,
    LMSInstance,
    Module,
    Organization,
    TimestampMixin,
    User,
    UserLMSRole,
    UserOrganizationRole,
)
from lms_admin.models import CourseStatus, EnrollmentStatus


def _unique_column_sets(model) -> set[frozenset[str]]:
    return {
        frozenset(column.name for column in constraint.columns)
        for constraint in model.__table__.constraints
        if isinstance(constraint, UniqueConstraint)
    }


class TestBase:
    """Test base model functionality."""

    def test_base_inherits_declarative_base(self):
        assert hasattr(Base, "metadata")
        assert hasattr(Base, "registry")

    def test_timestamp_mixins(self):
        assert hasattr(CreatedAtMixin, "created_at")
        assert hasattr(TimestampMixin, "created_at")
        assert hasattr(TimestampMixin, "updated_at")

    def test_all_tables_registered(self):
        assert set(Base.metadata.tables) == {
            "organizations",
            "lms",
            "users",
            "courses",
            "modules",
            "lessons",
            "user_organization_roles",
            "user_lms_roles",
            "course_instructors",
            "enrollments",
        }

    def test_repr_includes_id(self):
        organization = Organization(id=7, name="Acme")

        assert repr(organization) == "<Organization id=7>"


class TestUniqueConstraints:
    """Scoped uniqueness rules."""

    def test_user_email_unique_per_organization(self):
        assert frozenset({"email", "organization_id"}) in _unique_column_sets(User)

    def test_course_slug_unique_per_lms(self):
        assert frozenset({"slug", "lms_id"}) in _unique_column_sets(Course)

    def test_module_order_unique_per_course(self):
        assert frozenset({"course_id", "order"}) in _unique_column_sets(Module)

    def test_lesson_order_unique_per_module(self):
        assert frozenset({"module_id", "order"}) in _unique_column_sets(Lesson)

    def test_role_grants_unique(self):
        assert frozenset({"user_id", "organization_id", "role"}) in _unique_column_sets(
            UserOrganizationRole
        )
        assert frozenset({"user_id", "lms_id", "role"}) in _unique_column_sets(UserLMSRole)

    def test_instructor_and_enrollment_pairs_unique(self):
        assert frozenset({"course_id", "user_id"}) in _unique_column_sets(CourseInstructor)
        assert frozenset({"user_id", "course_id"}) in _unique_column_sets(Enrollment)


class TestForeignKeys:
    def test_parent_references(self):
        def targets(model):
            return {fk.target_fullname for fk in model.__table__.foreign_keys}

        assert targets(LMSInstance) == {"organizations.id"}
        assert targets(User) == {"organizations.id"}
        assert targets(Course) == {"lms.id"}
        assert targets(Module) == {"courses.id"}
        assert targets(Lesson) == {"modules.id"}
        assert targets(Enrollment) == {"users.id", "courses.id"}


class TestColumns:
    def test_course_duration_is_numeric_5_2(self):
        column = Course.__table__.c.duration_hours

        assert column.type.precision == 5
        assert column.type.scale == 2
        assert column.nullable is True

    def test_status_defaults(self):
        assert Course.__table__.c.status.default.arg == CourseStatus.DRAFT
        assert Enrollment.__table__.c.status.default.arg == EnrollmentStatus.ENROLLED

    def test_enum_columns_store_values(self):
        assert Course.__table__.c.status.type.enums == ["draft", "published", "archived"]

    def test_completion_date_nullable(self):
        assert Enrollment.__table__.c.completion_date.nullable is True
        assert Enrollment.__table__.c.enrollment_date.nullable is False
