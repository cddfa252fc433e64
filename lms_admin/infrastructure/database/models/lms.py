# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""ORM models for the LMS administration schema.

Ten tables in referential order:

    organizations
    ├── lms
    │   └── courses
    │       ├── modules
    │       │   └── lessons
    │       ├── course_instructors  (courses x users)
    │       └── enrollments         (users x courses)
    ├── users
    ├── user_organization_roles     (users x organizations)
    └── user_lms_roles              (users x lms)

Uniqueness tuples are declared here and enforced by the database.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lms_admin.infrastructure.database.models.base import (
    Base,
    CreatedAtMixin,
    TimestampMixin,
)
from lms_admin.models.common import (
    CourseStatus,
    EnrollmentStatus,
    LessonType,
    LMSRole,
    OrganizationRole,
)
from lms_admin.utils.datetime import utc_now


def _enum(enum_cls: type, name: str) -> Enum:
    """Build a named database enum storing the member values."""
    return Enum(
        enum_cls,
        name=name,
        values_callable=lambda members: [member.value for member in members],
        validate_strings=True,
    )


class Organization(Base, TimestampMixin):
    """Top-level tenant owning LMS instances and users."""

    __tablename__ = "organizations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    lms_instances: Mapped[list["LMSInstance"]] = relationship(back_populates="organization")
    users: Mapped[list["User"]] = relationship(back_populates="organization")


class LMSInstance(Base, TimestampMixin):
    """A named scope within an organization that owns courses."""

    __tablename__ = "lms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    organization_id: Mapped[int] = mapped_column(
        ForeignKey("organizations.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    organization: Mapped[Organization] = relationship(back_populates="lms_instances")
    courses: Mapped[list["Course"]] = relationship(back_populates="lms")


class User(Base, TimestampMixin):
    """An organization member. Email is unique per organization."""

    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("email", "organization_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    organization_id: Mapped[int] = mapped_column(
        ForeignKey("organizations.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)

    organization: Mapped[Organization] = relationship(back_populates="users")


class Course(Base, TimestampMixin):
    """A course inside an LMS instance, with SEO metadata."""

    __tablename__ = "courses"
    __table_args__ = (UniqueConstraint("slug", "lms_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    lms_id: Mapped[int] = mapped_column(ForeignKey("lms.id"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    slug: Mapped[str] = mapped_column(Text, nullable=False)
    meta_title: Mapped[str | None] = mapped_column(Text, nullable=True)
    meta_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    keywords: Mapped[str | None] = mapped_column(Text, nullable=True)
    thumbnail_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    duration_hours: Mapped[Decimal | None] = mapped_column(
        Numeric(precision=5, scale=2, asdecimal=True), nullable=True
    )
    status: Mapped[CourseStatus] = mapped_column(
        _enum(CourseStatus, "course_status"),
        nullable=False,
        default=CourseStatus.DRAFT,
        server_default=CourseStatus.DRAFT.value,
    )

    lms: Mapped[LMSInstance] = relationship(back_populates="courses")
    modules: Mapped[list["Module"]] = relationship(
        back_populates="course", order_by="Module.order"
    )


class Module(Base, TimestampMixin):
    """An ordered content unit of a course."""

    __tablename__ = "modules"
    __table_args__ = (UniqueConstraint("course_id", "order"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    course_id: Mapped[int] = mapped_column(ForeignKey("courses.id"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    order: Mapped[int] = mapped_column("order", Integer, nullable=False)

    course: Mapped[Course] = relationship(back_populates="modules")
    lessons: Mapped[list["Lesson"]] = relationship(
        back_populates="module", order_by="Lesson.order"
    )


class Lesson(Base, TimestampMixin):
    """An ordered content unit of a module."""

    __tablename__ = "lessons"
    __table_args__ = (UniqueConstraint("module_id", "order"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    module_id: Mapped[int] = mapped_column(ForeignKey("modules.id"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    type: Mapped[LessonType] = mapped_column(_enum(LessonType, "lesson_type"), nullable=False)
    order: Mapped[int] = mapped_column("order", Integer, nullable=False)

    module: Mapped[Module] = relationship(back_populates="lessons")


class UserOrganizationRole(Base, CreatedAtMixin):
    """An organization-scoped role grant."""

    __tablename__ = "user_organization_roles"
    __table_args__ = (UniqueConstraint("user_id", "organization_id", "role"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    organization_id: Mapped[int] = mapped_column(
        ForeignKey("organizations.id"), nullable=False, index=True
    )
    role: Mapped[OrganizationRole] = mapped_column(
        _enum(OrganizationRole, "organization_role"), nullable=False
    )


class UserLMSRole(Base, CreatedAtMixin):
    """An LMS-scoped role grant."""

    __tablename__ = "user_lms_roles"
    __table_args__ = (UniqueConstraint("user_id", "lms_id", "role"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    lms_id: Mapped[int] = mapped_column(ForeignKey("lms.id"), nullable=False, index=True)
    role: Mapped[LMSRole] = mapped_column(_enum(LMSRole, "lms_role"), nullable=False)


class CourseInstructor(Base, CreatedAtMixin):
    """Many-to-many link between courses and the users teaching them."""

    __tablename__ = "course_instructors"
    __table_args__ = (UniqueConstraint("course_id", "user_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    course_id: Mapped[int] = mapped_column(ForeignKey("courses.id"), nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)


class Enrollment(Base, TimestampMixin):
    """A user's enrollment in a course.

    completion_date is independent of status; nothing ties the two.
    """

    __tablename__ = "enrollments"
    __table_args__ = (UniqueConstraint("user_id", "course_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    course_id: Mapped[int] = mapped_column(ForeignKey("courses.id"), nullable=False, index=True)
    status: Mapped[EnrollmentStatus] = mapped_column(
        _enum(EnrollmentStatus, "enrollment_status"),
        nullable=False,
        default=EnrollmentStatus.ENROLLED,
        server_default=EnrollmentStatus.ENROLLED.value,
    )
    enrollment_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=func.now(),
    )
    completion_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
