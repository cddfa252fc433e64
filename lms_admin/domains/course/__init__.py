# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course domain."""

from lms_admin.domains.course.service import (
    CourseService,
    hours_from_storage,
    hours_to_storage,
)

__all__ = ["CourseService", "hours_from_storage", "hours_to_storage"]
