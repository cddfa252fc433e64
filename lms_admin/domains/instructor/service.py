# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course instructor service."""

import logging

from sqlalchemy import select

from lms_admin.domains.base import BaseService
from lms_admin.infrastructure.database.models import Course, CourseInstructor, User
from lms_admin.models.instructor import (
    CourseInstructorCreateRequest,
    CourseInstructorResponse,
)

logger = logging.getLogger(__name__)


class InstructorService(BaseService):
    """Service for assigning instructors to courses."""

    async def create_course_instructor(
        self,
        request: CourseInstructorCreateRequest,
    ) -> CourseInstructorResponse:
        """Assign a user as instructor of a course.

        Args:
            request: Assignment data.

        Returns:
            The stored assignment.

        Raises:
            EntityNotFoundError: If the course or the user does not exist.
            IntegrityError: If the user already teaches the course.
        """
        await self._require(Course, request.course_id, "Course")
        await self._require(User, request.user_id, "User")

        link = CourseInstructor(course_id=request.course_id, user_id=request.user_id)
        link = await self._save(link, "CourseInstructor")

        logger.info(
            "Assigned instructor: id=%s, course=%s, user=%s",
            link.id,
            link.course_id,
            link.user_id,
        )

        return CourseInstructorResponse.model_validate(link)

    async def list_by_course(self, course_id: int) -> list[CourseInstructorResponse]:
        """List instructor assignments of a course ordered by id."""
        rows = await self._list(
            select(CourseInstructor)
            .where(CourseInstructor.course_id == course_id)
            .order_by(CourseInstructor.id)
        )
        return [CourseInstructorResponse.model_validate(row) for row in rows]
