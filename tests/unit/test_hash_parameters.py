from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from credential_hasher.domain.hash_parameters import HashParameters


def test_defaults_follow_owasp_argon2id_minimums() -> None:
    parameters = HashParameters()

    assert parameters.memory_cost_kib == 19_456
    assert parameters.time_cost == 2
    assert parameters.parallelism == 1
    assert parameters.hash_length == 32
    assert parameters.salt_length == 16


def test_verification_ceilings_default_to_four_times_costs() -> None:
    parameters = HashParameters()

    assert parameters.max_memory_cost_kib == 4 * parameters.memory_cost_kib
    assert parameters.max_time_cost == 4 * parameters.time_cost
    assert parameters.max_parallelism == 4 * parameters.parallelism


def test_parameters_are_immutable() -> None:
    parameters = HashParameters()

    with pytest.raises(FrozenInstanceError):
        parameters.time_cost = 10  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [
        {"parallelism": 0},
        {"parallelism": 4, "memory_cost_kib": 31},
        {"time_cost": 0},
        {"hash_length": 3},
        {"hash_length": 65},
        {"salt_length": 8},
        {"salt_length": 65},
        {"memory_cost_kib": 100_000},
        {"time_cost": 9},
        {"parallelism": 5},
    ],
)
def test_out_of_range_parameters_are_rejected(overrides: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        HashParameters(**overrides)  # type: ignore[arg-type]


def test_minimum_memory_scales_with_parallelism() -> None:
    parameters = HashParameters(memory_cost_kib=32, parallelism=4)

    assert parameters.memory_cost_kib == 32


@pytest.mark.parametrize(
    ("costs", "admitted"),
    [
        ({"memory_cost_kib": 77_824, "time_cost": 8, "parallelism": 4}, True),
        ({"memory_cost_kib": 77_825, "time_cost": 2, "parallelism": 1}, False),
        ({"memory_cost_kib": 19_456, "time_cost": 9, "parallelism": 1}, False),
        ({"memory_cost_kib": 19_456, "time_cost": 2, "parallelism": 5}, False),
    ],
)
def test_admits_enforces_each_ceiling(costs: dict[str, int], admitted: bool) -> None:
    assert HashParameters().admits(**costs) is admitted
