# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment service for managing user course enrollments.

This module provides the EnrollmentService class for:
- Enrolling a user in a course
- Listing enrollments by user or by course
- Partial updates of status and completion date

Status changes are unrestricted: any status may be set from any other,
and completion_date is not tied to the status.
"""

from __future__ import annotations

import logging

from sqlalchemy import select

from lms_admin.domains.base import BaseService
from lms_admin.domains.errors import AlreadyEnrolledError
from lms_admin.infrastructure.database.models import Course, Enrollment, User
from lms_admin.models.enrollment import (
    EnrollmentCreateRequest,
    EnrollmentResponse,
    EnrollmentUpdateRequest,
)
from lms_admin.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class EnrollmentService(BaseService):
    """Service for managing enrollments.

    Attributes:
        db: Async database session.
    """

    async def create_enrollment(self, request: EnrollmentCreateRequest) -> EnrollmentResponse:
        """Enroll a user in a course.

        The duplicate check here only produces a clearer error; the
        unique (user_id, course_id) constraint still rejects a concurrent
        duplicate with IntegrityError.

        Args:
            request: Enrollment data.

        Returns:
            The stored enrollment.

        Raises:
            EntityNotFoundError: If the user or the course does not exist.
            AlreadyEnrolledError: If the user is already enrolled in the course.
        """
        await self._require(User, request.user_id, "User")
        await self._require(Course, request.course_id, "Course")

        existing = await self._get_enrollment(request.user_id, request.course_id)
        if existing is not None:
            logger.warning(
                "Duplicate enrollment: user=%s, course=%s, existing=%s",
                request.user_id,
                request.course_id,
                existing.id,
            )
            raise AlreadyEnrolledError(request.user_id, request.course_id)

        now = utc_now()
        enrollment = Enrollment(
            user_id=request.user_id,
            course_id=request.course_id,
            status=request.status,
            enrollment_date=now,
            completion_date=None,
        )
        enrollment = await self._save(enrollment, "Enrollment")

        logger.info(
            "Enrolled user: id=%s, user=%s, course=%s",
            enrollment.id,
            enrollment.user_id,
            enrollment.course_id,
        )

        return EnrollmentResponse.model_validate(enrollment)

    async def list_by_user(self, user_id: int) -> list[EnrollmentResponse]:
        """List enrollments of a user ordered by id."""
        rows = await self._list(
            select(Enrollment).where(Enrollment.user_id == user_id).order_by(Enrollment.id)
        )
        return [EnrollmentResponse.model_validate(row) for row in rows]

    async def list_by_course(self, course_id: int) -> list[EnrollmentResponse]:
        """List enrollments of a course ordered by id."""
        rows = await self._list(
            select(Enrollment).where(Enrollment.course_id == course_id).order_by(Enrollment.id)
        )
        return [EnrollmentResponse.model_validate(row) for row in rows]

    async def update_enrollment(self, request: EnrollmentUpdateRequest) -> EnrollmentResponse:
        """Apply a partial update to an enrollment.

        Only fields present in the request are written. An explicit
        ``completion_date=None`` clears the date. updated_at is always
        refreshed, even when nothing else changes.

        Args:
            request: Update data.

        Returns:
            The updated enrollment.

        Raises:
            EntityNotFoundError: If no enrollment has the given id.
        """
        enrollment = await self._require(
            Enrollment, request.id, "Enrollment", is_target=True
        )

        provided = request.model_fields_set
        if "status" in provided and request.status is not None:
            enrollment.status = request.status
        if "completion_date" in provided:
            enrollment.completion_date = request.completion_date
        enrollment.updated_at = utc_now()

        enrollment = await self._save(enrollment, "Enrollment")

        logger.info(
            "Updated enrollment: id=%s, status=%s, fields=%s",
            enrollment.id,
            enrollment.status.value,
            sorted(provided - {"id"}),
        )

        return EnrollmentResponse.model_validate(enrollment)

    async def _get_enrollment(self, user_id: int, course_id: int) -> Enrollment | None:
        result = await self.db.execute(
            select(Enrollment).where(
                Enrollment.user_id == user_id,
                Enrollment.course_id == course_id,
            )
        )
        return result.scalar_one_or_none()
