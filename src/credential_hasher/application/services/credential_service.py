"""Application service for hashing and verifying credentials."""

from __future__ import annotations

import asyncio
import logging

from credential_hasher.application.ports.password_hasher_port import PasswordHasherPort
from credential_hasher.domain.credentials import validate_password
from credential_hasher.domain.errors import HashError, HashErrorKind

logger = logging.getLogger(__name__)


class CredentialService:
    """Run password hashing off the event loop and log infrastructure faults.

    Callers that look up a stored hash by an external key must use
    `verify_stored_credential` (or call `hash_password` on a decoy themselves)
    when the lookup misses, so a missing account costs the same time as a
    wrong password.
    """

    def __init__(self, *, password_hasher: PasswordHasherPort, decoy_password: str) -> None:
        if not decoy_password:
            raise ValueError("decoy_password cannot be blank")
        self._password_hasher = password_hasher
        self._decoy_password = decoy_password

    async def hash_password(self, password: str) -> str:
        """Hash one plaintext password into a PHC string."""

        try:
            return await asyncio.to_thread(self._password_hasher.hash_password, password)
        except HashError as exc:
            _log_hash_error("password_hash_failed", exc)
            raise

    async def verify_password(self, *, password: str, password_hash: str) -> bool:
        """Check one plaintext password against a stored PHC string."""

        try:
            return await asyncio.to_thread(
                self._password_hasher.verify_password,
                password=password,
                password_hash=password_hash,
            )
        except HashError as exc:
            _log_hash_error("password_verify_failed", exc)
            raise

    async def verify_stored_credential(
        self,
        *,
        password: str,
        password_hash: str | None,
    ) -> bool:
        """Verify against a looked-up hash, burning one decoy hash on a lookup miss."""

        # Same input errors whether or not the account exists.
        try:
            validate_password(password=password)
        except HashError as exc:
            _log_hash_error("password_verify_failed", exc)
            raise
        if password_hash is None:
            await self.hash_password(self._decoy_password)
            return False
        return await self.verify_password(password=password, password_hash=password_hash)

    def needs_rehash(self, password_hash: str) -> bool:
        """Return whether a stored hash should be replaced after a successful login."""

        return self._password_hasher.needs_rehash(password_hash)


def _log_hash_error(event: str, exc: HashError) -> None:
    if exc.kind is HashErrorKind.HASHING_FAILED:
        logger.exception("%s kind=%s", event, exc.code)
    else:
        logger.info("%s kind=%s", event, exc.code)
