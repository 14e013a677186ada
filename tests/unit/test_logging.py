from __future__ import annotations

import logging

import pytest

from credential_hasher.infrastructure.logging import resolve_log_level


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        ("DEBUG", logging.DEBUG),
        (" warning ", logging.WARNING),
        ("error", logging.ERROR),
        ("", logging.INFO),
        ("not-a-level", logging.INFO),
    ],
)
def test_resolve_log_level(level: str, expected: int) -> None:
    assert resolve_log_level(level) == expected
