# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""LMS instance domain."""

from lms_admin.domains.lms.service import LMSService

__all__ = ["LMSService"]
