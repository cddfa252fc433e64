# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""JSON-over-HTTP RPC endpoint for the admin UI."""

from lms_admin.api.rpc.procedures import PROCEDURES, Procedure, get_procedure
from lms_admin.api.rpc.router import router

__all__ = ["PROCEDURES", "Procedure", "get_procedure", "router"]
