# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application entry point.

Run with ``lms-admin`` or ``uvicorn lms_admin.main:app``.
"""

import uvicorn

from lms_admin.api.app import create_app
from lms_admin.core.config import get_settings

app = create_app()


def run() -> None:
    """Start the API server with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "lms_admin.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
