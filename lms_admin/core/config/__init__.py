# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package for the LMS admin service.

Settings are Pydantic-based and loaded from environment variables.

Example:
    >>> from lms_admin.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.environment)
    'development'
"""

from lms_admin.core.config.settings import (
    APISettings,
    CORSSettings,
    DatabaseSettings,
    SecuritySettings,
    Settings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Subsettings
    "DatabaseSettings",
    "SecuritySettings",
    "CORSSettings",
    "APISettings",
]
