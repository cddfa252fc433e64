# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course content services: modules and lessons.

A course is split into ordered modules, and a module into ordered
lessons. The order value is unique within the parent and lists are
always returned in ascending order.
"""

import logging

from sqlalchemy import select

from lms_admin.domains.base import BaseService
from lms_admin.infrastructure.database.models import Course, Lesson, Module
from lms_admin.models.content import (
    LessonCreateRequest,
    LessonResponse,
    ModuleCreateRequest,
    ModuleResponse,
)

logger = logging.getLogger(__name__)


class ModuleService(BaseService):
    """Service for the modules of a course."""

    async def create_module(self, request: ModuleCreateRequest) -> ModuleResponse:
        """Create a module in an existing course.

        Raises:
            EntityNotFoundError: If the course does not exist.
            IntegrityError: If the order is already taken in the course.
        """
        await self._require(Course, request.course_id, "Course")

        module = Module(
            course_id=request.course_id,
            title=request.title,
            description=request.description,
            order=request.order,
        )
        module = await self._save(module, "Module")

        logger.info(
            "Created module: id=%s, course=%s, order=%s",
            module.id,
            module.course_id,
            module.order,
        )

        return ModuleResponse.model_validate(module)

    async def list_by_course(self, course_id: int) -> list[ModuleResponse]:
        """List modules of a course by ascending order."""
        rows = await self._list(
            select(Module).where(Module.course_id == course_id).order_by(Module.order)
        )
        return [ModuleResponse.model_validate(row) for row in rows]


class LessonService(BaseService):
    """Service for the lessons of a module."""

    async def create_lesson(self, request: LessonCreateRequest) -> LessonResponse:
        """Create a lesson in an existing module.

        Raises:
            EntityNotFoundError: If the module does not exist.
            IntegrityError: If the order is already taken in the module.
        """
        await self._require(Module, request.module_id, "Module")

        lesson = Lesson(
            module_id=request.module_id,
            title=request.title,
            description=request.description,
            content=request.content,
            type=request.type,
            order=request.order,
        )
        lesson = await self._save(lesson, "Lesson")

        logger.info(
            "Created lesson: id=%s, module=%s, type=%s",
            lesson.id,
            lesson.module_id,
            lesson.type.value,
        )

        return LessonResponse.model_validate(lesson)

    async def list_by_module(self, module_id: int) -> list[LessonResponse]:
        """List lessons of a module by ascending order."""
        rows = await self._list(
            select(Lesson).where(Lesson.module_id == module_id).order_by(Lesson.order)
        )
        return [LessonResponse.model_validate(row) for row in rows]
