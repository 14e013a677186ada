"""Immutable Argon2 parameter set shared by every hash produced in a process."""

from __future__ import annotations

from dataclasses import dataclass

MIN_DIGEST_LENGTH = 4
MAX_DIGEST_LENGTH = 64
MIN_SALT_LENGTH = 16
MAX_SALT_LENGTH = 64


@dataclass(frozen=True)
class HashParameters:
    """Cost parameters for new hashes, plus ceilings for hashes being verified.

    Existing hashes verify with the parameters embedded in them, so the costs
    can be raised over time without invalidating stored hashes. Embedded costs
    above the `max_*` ceilings are refused before any derivation runs.
    """

    memory_cost_kib: int = 19_456
    time_cost: int = 2
    parallelism: int = 1
    hash_length: int = 32
    salt_length: int = 16
    max_memory_cost_kib: int = 77_824
    max_time_cost: int = 8
    max_parallelism: int = 4

    def __post_init__(self) -> None:
        if self.parallelism < 1:
            raise ValueError("parallelism must be at least 1")
        if self.memory_cost_kib < 8 * self.parallelism:
            raise ValueError("memory_cost_kib must be at least 8 * parallelism")
        if self.time_cost < 1:
            raise ValueError("time_cost must be at least 1")
        if not MIN_DIGEST_LENGTH <= self.hash_length <= MAX_DIGEST_LENGTH:
            raise ValueError(
                f"hash_length must be between {MIN_DIGEST_LENGTH} and {MAX_DIGEST_LENGTH}"
            )
        if not MIN_SALT_LENGTH <= self.salt_length <= MAX_SALT_LENGTH:
            raise ValueError(
                f"salt_length must be between {MIN_SALT_LENGTH} and {MAX_SALT_LENGTH}"
            )
        if self.memory_cost_kib > self.max_memory_cost_kib:
            raise ValueError("memory_cost_kib cannot exceed max_memory_cost_kib")
        if self.time_cost > self.max_time_cost:
            raise ValueError("time_cost cannot exceed max_time_cost")
        if self.parallelism > self.max_parallelism:
            raise ValueError("parallelism cannot exceed max_parallelism")

    def admits(self, *, memory_cost_kib: int, time_cost: int, parallelism: int) -> bool:
        """Return whether embedded costs are within the verification ceilings."""

        return (
            memory_cost_kib <= self.max_memory_cost_kib
            and time_cost <= self.max_time_cost
            and parallelism <= self.max_parallelism
        )
