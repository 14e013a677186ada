"""Port for password hashing and verification."""

from __future__ import annotations

from typing import Protocol


class PasswordHasherPort(Protocol):
    """Password hashing/verification contract.

    Implementations raise `HashError` for every failure; a wrong password is
    reported as `False`, never as an error.
    """

    def hash_password(self, password: str) -> str:
        """Hash plaintext password for storage."""

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        """Verify plaintext password against stored hash."""

    def needs_rehash(self, password_hash: str) -> bool:
        """Return whether a stored hash was built with outdated parameters."""
