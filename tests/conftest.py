from __future__ import annotations

import pytest

from credential_hasher.domain.hash_parameters import HashParameters
from credential_hasher.infrastructure.security.password_hasher import Argon2PasswordHasher

FAST_PARAMETERS = HashParameters(memory_cost_kib=1024, time_cost=1, parallelism=1)


@pytest.fixture
def fast_hasher() -> Argon2PasswordHasher:
    return Argon2PasswordHasher(FAST_PARAMETERS)


@pytest.fixture(scope="session")
def default_hasher() -> Argon2PasswordHasher:
    return Argon2PasswordHasher(HashParameters())
