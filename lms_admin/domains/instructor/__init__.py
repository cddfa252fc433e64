# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course instructor domain."""

from lms_admin.domains.instructor.service import InstructorService

__all__ = ["InstructorService"]
