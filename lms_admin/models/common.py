# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Shared enums and base types for request/response models."""

from datetime import datetime
from enum import Enum
from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, HttpUrl, TypeAdapter

from lms_admin.utils.datetime import ensure_utc


class CourseStatus(str, Enum):
    """Publication status of a course."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class LessonType(str, Enum):
    """Kind of lesson content."""

    VIDEO = "video"
    TEXT = "text"
    QUIZ = "quiz"
    FILE = "file"


class EnrollmentStatus(str, Enum):
    """Enrollment lifecycle status. Any status may move to any other."""

    ENROLLED = "enrolled"
    COMPLETED = "completed"
    DROPPED = "dropped"


class OrganizationRole(str, Enum):
    """Roles grantable at organization scope."""

    ORG_ADMIN = "org_admin"


class LMSRole(str, Enum):
    """Roles grantable at LMS-instance scope."""

    LMS_ADMIN = "lms_admin"
    LMS_INSTRUCTOR = "lms_instructor"
    LMS_STUDENT = "lms_student"


_http_url = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    # Validate only; the caller's spelling is what gets stored.
    _http_url.validate_python(value)
    return value


def _check_email(value: str) -> str:
    # Validate only; email-validator's normalized form is discarded.
    try:
        validate_email(value, check_deliverability=False, test_environment=True)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}") from e
    return value


# Timezone-aware UTC datetime; SQLite returns naive values
UTCDateTime = Annotated[datetime, AfterValidator(ensure_utc)]

# A URL that is validated as http(s) but kept verbatim
URLString = Annotated[str, AfterValidator(_check_url)]

# An email address that is validated but kept exactly as given
EmailString = Annotated[str, AfterValidator(_check_email)]


class ORMResponse(BaseModel):
    """Base for response models built from ORM rows."""

    model_config = ConfigDict(from_attributes=True)
