# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Plain HTTP routes outside the RPC endpoint."""

from lms_admin.api.routes import health

__all__ = ["health"]
