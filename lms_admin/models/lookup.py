# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Parent-id inputs for the list operations.

Each accepts the snake_case field name as well as the camelCase key the
admin UI sends (``{"organizationId": 1}``).
"""

from pydantic import AliasChoices, BaseModel, Field


class OrganizationIdInput(BaseModel):
    organization_id: int = Field(
        ..., validation_alias=AliasChoices("organization_id", "organizationId")
    )


class LMSIdInput(BaseModel):
    lms_id: int = Field(..., validation_alias=AliasChoices("lms_id", "lmsId"))


class CourseIdInput(BaseModel):
    course_id: int = Field(..., validation_alias=AliasChoices("course_id", "courseId"))


class ModuleIdInput(BaseModel):
    module_id: int = Field(..., validation_alias=AliasChoices("module_id", "moduleId"))


class UserIdInput(BaseModel):
    user_id: int = Field(..., validation_alias=AliasChoices("user_id", "userId"))
