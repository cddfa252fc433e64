# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course request/response models.

duration_hours travels as a float and is stored as NUMERIC(5, 2), so the
largest accepted value is 999.99 and the smallest is whatever still rounds
to 0.01.
"""

from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, Field, field_validator

from lms_admin.models.common import CourseStatus, ORMResponse, URLString, UTCDateTime

MAX_DURATION_HOURS = 999.99

_CENTS = Decimal("0.01")


def quantize_hours(value: float) -> Decimal:
    """Round hours to the two decimal places the store keeps."""
    return Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP)


class CourseCreateRequest(BaseModel):
    """Input for createCourse."""

    lms_id: int = Field(..., description="Owning LMS instance")
    title: str = Field(..., min_length=1, description="Course title")
    description: str | None = Field(None, description="Optional description")
    slug: str = Field(..., min_length=1, description="URL slug, unique within the LMS")
    meta_title: str | None = Field(None, description="SEO title")
    meta_description: str | None = Field(None, description="SEO description")
    keywords: str | None = Field(None, description="SEO keywords")
    thumbnail_url: URLString | None = Field(None, description="Thumbnail image URL")
    duration_hours: float | None = Field(
        None,
        gt=0,
        le=MAX_DURATION_HOURS,
        description="Estimated duration in hours",
    )
    status: CourseStatus = Field(..., description="Publication status")

    @field_validator("duration_hours")
    @classmethod
    def duration_positive_when_stored(cls, v: float | None) -> float | None:
        if v is not None and quantize_hours(v) <= 0:
            raise ValueError("duration_hours rounds to 0 at two decimal places")
        return v


class CourseResponse(ORMResponse):
    """Course as stored, with duration converted back to a float."""

    id: int
    lms_id: int
    title: str
    description: str | None
    slug: str
    meta_title: str | None
    meta_description: str | None
    keywords: str | None
    thumbnail_url: str | None
    duration_hours: float | None
    status: CourseStatus
    created_at: UTCDateTime
    updated_at: UTCDateTime
