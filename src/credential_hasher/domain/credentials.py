"""Input checks applied before any cryptographic work runs."""

from __future__ import annotations

from credential_hasher.domain.errors import HashError, HashErrorKind

MAX_INPUT_BYTES = 2048


def encode_input(value: str) -> bytes:
    """Encode one input to UTF-8 exactly as received, without normalization."""

    return value.encode("utf-8", "surrogatepass")


def validate_password(*, password: str) -> bytes:
    """Reject empty or oversized passwords and return their UTF-8 bytes."""

    encoded = encode_input(password)
    if not encoded:
        raise HashError(HashErrorKind.EMPTY_INPUT)
    if len(encoded) > MAX_INPUT_BYTES:
        raise HashError(HashErrorKind.INPUT_TOO_LONG)
    return encoded


def validate_encoded_hash(*, password_hash: str) -> str:
    """Reject empty or oversized stored hashes."""

    if not password_hash:
        raise HashError(HashErrorKind.EMPTY_HASH)
    if len(encode_input(password_hash)) > MAX_INPUT_BYTES:
        raise HashError(HashErrorKind.HASH_TOO_LONG)
    return password_hash
