# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Password hashing utilities using bcrypt.

Users are stored with a bcrypt hash only; the plaintext never reaches
the database.

Example:
    >>> hasher = PasswordHasher(rounds=4)
    >>> hashed = hasher.hash("my_password")
    >>> hasher.verify("my_password", hashed)
    True
"""

import logging

import bcrypt

from lms_admin.core.config import get_settings

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Salted password hashing using bcrypt.

    Attributes:
        _rounds: bcrypt cost factor.
    """

    def __init__(self, rounds: int | None = None) -> None:
        """Initialize the password hasher.

        Args:
            rounds: bcrypt cost factor. Defaults to SECURITY_BCRYPT_ROUNDS.
        """
        if rounds is None:
            rounds = get_settings().security.bcrypt_rounds
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Hash a password using bcrypt.

        Args:
            password: Plain text password to hash.

        Returns:
            Bcrypt hash string with salt embedded.

        Raises:
            ValueError: If password is empty.
        """
        if not password:
            raise ValueError("Password cannot be empty")

        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a password against a stored hash.

        Returns:
            True on match; False on mismatch, empty input or a malformed hash.
        """
        if not password or not password_hash:
            return False

        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError as e:
            logger.warning("Password verification failed: %s", str(e))
            return False
