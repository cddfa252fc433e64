# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test types:
- Unit tests
- Integration tests
"""

from collections.abc import Generator
from typing import Any

import pytest

from lms_admin.core.config import clear_settings_cache


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def test_environment() -> dict[str, str]:
    """Provide test environment variables.

    Returns:
        Dictionary of environment variables for testing.
    """
    return {
        "ENVIRONMENT": "test",
        "DEBUG": "false",
        "LOG_LEVEL": "DEBUG",
        # Minimum cost so user creation stays fast
        "SECURITY_BCRYPT_ROUNDS": "4",
    }


@pytest.fixture(autouse=True)
def test_settings(
    monkeypatch: pytest.MonkeyPatch,
    test_environment: dict[str, str],
) -> Generator[None, None, None]:
    """Apply the test environment and reset the settings cache around each test."""
    for key, value in test_environment.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (uses in-memory SQLite)"
    )


# =============================================================================
# Helper Fixtures
# =============================================================================


@pytest.fixture
def sample_organization_data() -> dict[str, Any]:
    """Provide sample organization data for testing."""
    return {"name": "Acme Learning", "description": "Corporate training"}


@pytest.fixture
def sample_user_data() -> dict[str, Any]:
    """Provide sample user data for testing (without organization_id)."""
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "password": "analytical",
    }


@pytest.fixture
def sample_course_data() -> dict[str, Any]:
    """Provide sample course data for testing (without lms_id)."""
    return {
        "title": "Intro to Python",
        "description": "Basics of the language",
        "slug": "intro-to-python",
        "meta_title": "Intro to Python",
        "meta_description": "Learn Python from scratch",
        "keywords": "python,programming",
        "thumbnail_url": "https://cdn.example.com/python.png",
        "duration_hours": 12.5,
        "status": "draft",
    }
