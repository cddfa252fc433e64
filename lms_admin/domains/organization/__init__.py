# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Organization domain."""

from lms_admin.domains.organization.service import OrganizationService

__all__ = ["OrganizationService"]
