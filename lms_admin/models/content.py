# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Module and lesson request/response models.

Both are ordered within their parent by a non-negative integer that is
unique per parent.
"""

from pydantic import BaseModel, Field

from lms_admin.models.common import LessonType, ORMResponse, UTCDateTime


class ModuleCreateRequest(BaseModel):
    """Input for createModule."""

    course_id: int = Field(..., description="Owning course")
    title: str = Field(..., min_length=1, description="Module title")
    description: str | None = Field(None, description="Optional description")
    order: int = Field(..., ge=0, description="Position within the course")


class ModuleResponse(ORMResponse):
    """Module as stored."""

    id: int
    course_id: int
    title: str
    description: str | None
    order: int
    created_at: UTCDateTime
    updated_at: UTCDateTime


class LessonCreateRequest(BaseModel):
    """Input for createLesson."""

    module_id: int = Field(..., description="Owning module")
    title: str = Field(..., min_length=1, description="Lesson title")
    description: str | None = Field(None, description="Optional description")
    content: str | None = Field(None, description="Lesson body")
    type: LessonType = Field(..., description="Content type")
    order: int = Field(..., ge=0, description="Position within the module")


class LessonResponse(ORMResponse):
    """Lesson as stored."""

    id: int
    module_id: int
    title: str
    description: str | None
    content: str | None
    type: LessonType
    order: int
    created_at: UTCDateTime
    updated_at: UTCDateTime
