# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course service.

duration_hours is a float at the API boundary and NUMERIC(5, 2) in the
store. Values are quantized to cents on write and converted back to
float on every read.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import select

from lms_admin.domains.base import BaseService
from lms_admin.infrastructure.database.models import Course, LMSInstance
from lms_admin.models.course import CourseCreateRequest, CourseResponse, quantize_hours

logger = logging.getLogger(__name__)


def hours_to_storage(value: float | None) -> Decimal | None:
    """Convert API hours to the stored decimal, rounded to two places."""
    if value is None:
        return None
    return quantize_hours(value)


def hours_from_storage(value: Decimal | None) -> float | None:
    """Convert stored decimal hours back to a float."""
    if value is None:
        return None
    return float(value)


class CourseService(BaseService):
    """Service for courses of an LMS instance."""

    async def create_course(self, request: CourseCreateRequest) -> CourseResponse:
        """Create a course in an existing LMS instance.

        Args:
            request: Course creation data.

        Returns:
            The stored course with duration_hours as a float.

        Raises:
            EntityNotFoundError: If the LMS instance does not exist.
            IntegrityError: If the slug is already used in the LMS instance.
        """
        await self._require(LMSInstance, request.lms_id, "LMS")

        course = Course(
            lms_id=request.lms_id,
            title=request.title,
            description=request.description,
            slug=request.slug,
            meta_title=request.meta_title,
            meta_description=request.meta_description,
            keywords=request.keywords,
            thumbnail_url=request.thumbnail_url,
            duration_hours=hours_to_storage(request.duration_hours),
            status=request.status,
        )
        course = await self._save(course, "Course")

        logger.info("Created course: id=%s, lms=%s, slug=%s", course.id, course.lms_id, course.slug)

        return self._to_response(course)

    async def list_by_lms(self, lms_id: int) -> list[CourseResponse]:
        """List courses of an LMS instance ordered by id."""
        rows = await self._list(
            select(Course).where(Course.lms_id == lms_id).order_by(Course.id)
        )
        return [self._to_response(row) for row in rows]

    def _to_response(self, course: Course) -> CourseResponse:
        return CourseResponse(
            id=course.id,
            lms_id=course.lms_id,
            title=course.title,
            description=course.description,
            slug=course.slug,
            meta_title=course.meta_title,
            meta_description=course.meta_description,
            keywords=course.keywords,
            thumbnail_url=course.thumbnail_url,
            duration_hours=hours_from_storage(course.duration_hours),
            status=course.status,
            created_at=course.created_at,
            updated_at=course.updated_at,
        )
