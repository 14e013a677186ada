"""Argon2 password hasher adapter."""

from __future__ import annotations

import argon2
from argon2.exceptions import (
    HashingError,
    InvalidHashError,
    VerificationError,
    VerifyMismatchError,
)

from credential_hasher.application.ports.password_hasher_port import PasswordHasherPort
from credential_hasher.domain.credentials import validate_encoded_hash, validate_password
from credential_hasher.domain.errors import HashError, HashErrorKind
from credential_hasher.domain.hash_parameters import HashParameters


class Argon2PasswordHasher(PasswordHasherPort):
    """Password hashing adapter producing Argon2id PHC strings."""

    def __init__(self, parameters: HashParameters) -> None:
        self._parameters = parameters
        self._hasher = argon2.PasswordHasher(
            time_cost=parameters.time_cost,
            memory_cost=parameters.memory_cost_kib,
            parallelism=parameters.parallelism,
            hash_len=parameters.hash_length,
            salt_len=parameters.salt_length,
            type=argon2.Type.ID,
        )

    @property
    def parameters(self) -> HashParameters:
        return self._parameters

    def hash_password(self, password: str) -> str:
        secret = validate_password(password=password)
        try:
            return self._hasher.hash(secret)
        except (HashingError, OSError) as exc:
            raise HashError(HashErrorKind.HASHING_FAILED, f"argon2 failed: {exc}") from exc

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        secret = validate_password(password=password)
        password_hash = validate_encoded_hash(password_hash=password_hash)
        self._check_embedded_costs(password_hash)
        try:
            return self._hasher.verify(password_hash, secret)
        except VerifyMismatchError:
            return False
        except (InvalidHashError, VerificationError) as exc:
            raise HashError(HashErrorKind.INVALID_HASH, str(exc)) from exc

    def needs_rehash(self, password_hash: str) -> bool:
        password_hash = validate_encoded_hash(password_hash=password_hash)
        self._check_embedded_costs(password_hash)
        return self._hasher.check_needs_rehash(password_hash)

    def _check_embedded_costs(self, password_hash: str) -> None:
        try:
            embedded = argon2.extract_parameters(password_hash)
        except (InvalidHashError, ValueError, KeyError) as exc:
            raise HashError(HashErrorKind.INVALID_HASH, "malformed hash") from exc
        if not self._parameters.admits(
            memory_cost_kib=embedded.memory_cost,
            time_cost=embedded.time_cost,
            parallelism=embedded.parallelism,
        ):
            raise HashError(HashErrorKind.INVALID_HASH, "embedded cost above ceiling")
