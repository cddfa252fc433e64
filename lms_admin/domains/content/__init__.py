# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course content domain (modules and lessons)."""

from lms_admin.domains.content.service import LessonService, ModuleService

__all__ = ["LessonService", "ModuleService"]
