# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Role grant domain."""

from lms_admin.domains.role.service import RoleService

__all__ = ["RoleService"]
