# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Initial LMS administration schema.

Revision ID: 001_initial
Revises: None
Create Date: 2025-01-06
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

course_status = sa.Enum("draft", "published", "archived", name="course_status")
lesson_type = sa.Enum("video", "text", "quiz", "file", name="lesson_type")
enrollment_status = sa.Enum("enrolled", "completed", "dropped", name="enrollment_status")
organization_role = sa.Enum("org_admin", name="organization_role")
lms_role = sa.Enum("lms_admin", "lms_instructor", "lms_student", name="lms_role")


def _timestamps(updated: bool = True) -> list[sa.Column]:
    columns = [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    ]
    if updated:
        columns.append(
            sa.Column(
                "updated_at",
                sa.DateTime(timezone=True),
                nullable=False,
                server_default=sa.func.now(),
            )
        )
    return columns


def upgrade() -> None:
    """Create the ten LMS tables and their enum types."""
    op.create_table(
        "organizations",
        sa.Column("id", sa.Integer, nullable=False, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_organizations"),
    )

    op.create_table(
        "lms",
        sa.Column("id", sa.Integer, nullable=False, autoincrement=True),
        sa.Column(
            "organization_id",
            sa.Integer,
            sa.ForeignKey("organizations.id", name="fk_lms_organization_id_organizations"),
            nullable=False,
        ),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_lms"),
    )
    op.create_index("ix_lms_organization_id", "lms", ["organization_id"])

    op.create_table(
        "users",
        sa.Column("id", sa.Integer, nullable=False, autoincrement=True),
        sa.Column(
            "organization_id",
            sa.Integer,
            sa.ForeignKey("organizations.id", name="fk_users_organization_id_organizations"),
            nullable=False,
        ),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("email", sa.Text, nullable=False),
        sa.Column("password_hash", sa.Text, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("email", "organization_id", name="uq_users_email_organization_id"),
    )
    op.create_index("ix_users_organization_id", "users", ["organization_id"])

    op.create_table(
        "courses",
        sa.Column("id", sa.Integer, nullable=False, autoincrement=True),
        sa.Column(
            "lms_id",
            sa.Integer,
            sa.ForeignKey("lms.id", name="fk_courses_lms_id_lms"),
            nullable=False,
        ),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("slug", sa.Text, nullable=False),
        sa.Column("meta_title", sa.Text, nullable=True),
        sa.Column("meta_description", sa.Text, nullable=True),
        sa.Column("keywords", sa.Text, nullable=True),
        sa.Column("thumbnail_url", sa.Text, nullable=True),
        sa.Column("duration_hours", sa.Numeric(5, 2), nullable=True),
        sa.Column("status", course_status, nullable=False, server_default="draft"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_courses"),
        sa.UniqueConstraint("slug", "lms_id", name="uq_courses_slug_lms_id"),
    )
    op.create_index("ix_courses_lms_id", "courses", ["lms_id"])

    op.create_table(
        "modules",
        sa.Column("id", sa.Integer, nullable=False, autoincrement=True),
        sa.Column(
            "course_id",
            sa.Integer,
            sa.ForeignKey("courses.id", name="fk_modules_course_id_courses"),
            nullable=False,
        ),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("order", sa.Integer, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_modules"),
        sa.UniqueConstraint("course_id", "order", name="uq_modules_course_id_order"),
    )
    op.create_index("ix_modules_course_id", "modules", ["course_id"])

    op.create_table(
        "lessons",
        sa.Column("id", sa.Integer, nullable=False, autoincrement=True),
        sa.Column(
            "module_id",
            sa.Integer,
            sa.ForeignKey("modules.id", name="fk_lessons_module_id_modules"),
            nullable=False,
        ),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("content", sa.Text, nullable=True),
        sa.Column("type", lesson_type, nullable=False),
        sa.Column("order", sa.Integer, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_lessons"),
        sa.UniqueConstraint("module_id", "order", name="uq_lessons_module_id_order"),
    )
    op.create_index("ix_lessons_module_id", "lessons", ["module_id"])

    op.create_table(
        "user_organization_roles",
        sa.Column("id", sa.Integer, nullable=False, autoincrement=True),
        sa.Column(
            "user_id",
            sa.Integer,
            sa.ForeignKey("users.id", name="fk_user_organization_roles_user_id_users"),
            nullable=False,
        ),
        sa.Column(
            "organization_id",
            sa.Integer,
            sa.ForeignKey(
                "organizations.id",
                name="fk_user_organization_roles_organization_id_organizations",
            ),
            nullable=False,
        ),
        sa.Column("role", organization_role, nullable=False),
        *_timestamps(updated=False),
        sa.PrimaryKeyConstraint("id", name="pk_user_organization_roles"),
        sa.UniqueConstraint(
            "user_id",
            "organization_id",
            "role",
            name="uq_user_organization_roles_user_id_organization_id_role",
        ),
    )
    op.create_index("ix_user_organization_roles_user_id", "user_organization_roles", ["user_id"])
    op.create_index(
        "ix_user_organization_roles_organization_id",
        "user_organization_roles",
        ["organization_id"],
    )

    op.create_table(
        "user_lms_roles",
        sa.Column("id", sa.Integer, nullable=False, autoincrement=True),
        sa.Column(
            "user_id",
            sa.Integer,
            sa.ForeignKey("users.id", name="fk_user_lms_roles_user_id_users"),
            nullable=False,
        ),
        sa.Column(
            "lms_id",
            sa.Integer,
            sa.ForeignKey("lms.id", name="fk_user_lms_roles_lms_id_lms"),
            nullable=False,
        ),
        sa.Column("role", lms_role, nullable=False),
        *_timestamps(updated=False),
        sa.PrimaryKeyConstraint("id", name="pk_user_lms_roles"),
        sa.UniqueConstraint(
            "user_id", "lms_id", "role", name="uq_user_lms_roles_user_id_lms_id_role"
        ),
    )
    op.create_index("ix_user_lms_roles_user_id", "user_lms_roles", ["user_id"])
    op.create_index("ix_user_lms_roles_lms_id", "user_lms_roles", ["lms_id"])

    op.create_table(
        "course_instructors",
        sa.Column("id", sa.Integer, nullable=False, autoincrement=True),
        sa.Column(
            "course_id",
            sa.Integer,
            sa.ForeignKey("courses.id", name="fk_course_instructors_course_id_courses"),
            nullable=False,
        ),
        sa.Column(
            "user_id",
            sa.Integer,
            sa.ForeignKey("users.id", name="fk_course_instructors_user_id_users"),
            nullable=False,
        ),
        *_timestamps(updated=False),
        sa.PrimaryKeyConstraint("id", name="pk_course_instructors"),
        sa.UniqueConstraint(
            "course_id", "user_id", name="uq_course_instructors_course_id_user_id"
        ),
    )
    op.create_index("ix_course_instructors_course_id", "course_instructors", ["course_id"])
    op.create_index("ix_course_instructors_user_id", "course_instructors", ["user_id"])

    op.create_table(
        "enrollments",
        sa.Column("id", sa.Integer, nullable=False, autoincrement=True),
        sa.Column(
            "user_id",
            sa.Integer,
            sa.ForeignKey("users.id", name="fk_enrollments_user_id_users"),
            nullable=False,
        ),
        sa.Column(
            "course_id",
            sa.Integer,
            sa.ForeignKey("courses.id", name="fk_enrollments_course_id_courses"),
            nullable=False,
        ),
        sa.Column("status", enrollment_status, nullable=False, server_default="enrolled"),
        sa.Column(
            "enrollment_date",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column("completion_date", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_enrollments"),
        sa.UniqueConstraint("user_id", "course_id", name="uq_enrollments_user_id_course_id"),
    )
    op.create_index("ix_enrollments_user_id", "enrollments", ["user_id"])
    op.create_index("ix_enrollments_course_id", "enrollments", ["course_id"])


def downgrade() -> None:
    """Drop all LMS tables and enum types."""
    for table in (
        "enrollments",
        "course_instructors",
        "user_lms_roles",
        "user_organization_roles",
        "lessons",
        "modules",
        "courses",
        "users",
        "lms",
        "organizations",
    ):
        op.drop_table(table)

    bind = op.get_bind()
    for enum_type in (lms_role, organization_role, enrollment_status, lesson_type, course_status):
        enum_type.drop(bind, checkfirst=True)
