"""Closed error taxonomy for credential hashing and verification."""

from __future__ import annotations

from enum import StrEnum


class ErrorSeverity(StrEnum):
    """Coarse failure class used for boundary mapping."""

    CLIENT = "client"
    SERVER = "server"


class HashErrorKind(StrEnum):
    """Every failure the hasher can report; the value is the stable code."""

    EMPTY_INPUT = "empty_password"
    INPUT_TOO_LONG = "password_too_long"
    EMPTY_HASH = "empty_hash"
    HASH_TOO_LONG = "hash_too_long"
    INVALID_HASH = "invalid_hash"
    HASHING_FAILED = "hashing_failed"

    @property
    def code(self) -> str:
        """Return the stable machine-readable code."""

        return self.value

    @property
    def severity(self) -> ErrorSeverity:
        """Return whether the caller or the server is at fault."""

        if self is HashErrorKind.HASHING_FAILED:
            return ErrorSeverity.SERVER
        return ErrorSeverity.CLIENT


_HTTP_STATUS_BY_SEVERITY = {
    ErrorSeverity.CLIENT: 400,
    ErrorSeverity.SERVER: 500,
}


def http_status_for(severity: ErrorSeverity) -> int:
    """Map one severity class to its HTTP status code."""

    return _HTTP_STATUS_BY_SEVERITY[severity]


class HashError(Exception):
    """Raised when hashing or verification cannot produce a result."""

    def __init__(self, kind: HashErrorKind, detail: str | None = None) -> None:
        super().__init__(detail or kind.code)
        self.kind = kind
        self.detail = detail

    @property
    def code(self) -> str:
        """Return the stable machine-readable code of the underlying kind."""

        return self.kind.code

    @property
    def severity(self) -> ErrorSeverity:
        """Return whether the caller or the server is at fault."""

        return self.kind.severity
