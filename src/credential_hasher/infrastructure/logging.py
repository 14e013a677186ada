"""Process logging setup for the hashing service."""

from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(level: str) -> int:
    """Translate a configured level name, falling back to INFO for unknown names."""

    name = level.strip().upper() or "INFO"
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(*, level: str) -> None:
    """Configure root logging once with the shared format."""

    logging.basicConfig(level=resolve_log_level(level), format=_LOG_FORMAT)
