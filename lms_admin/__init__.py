# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""LMS admin service.

Multi-tenant Learning Management System administration API:
organizations, LMS instances, users, courses, modules, lessons,
roles, course instructors and enrollments.
"""

__version__ = "1.0.0"
