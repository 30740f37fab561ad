"""Testing fixtures – ``populator`` fixture and ``--populator-seed`` option.

The session seed comes from ``--populator-seed``, then ``MP_POPULATOR_SEED``,
and is otherwise drawn at random. It is printed in the report header so a
failing run can be replayed with the same data.
"""
from __future__ import annotations

import os
import random

import pytest

from mp_populator.config import EnvParametersLoader
from mp_populator.engine import Populator, PopulatorBuilder

SEED_ENV_VAR = "MP_POPULATOR_SEED"

_SEED_KEY = pytest.StashKey[int]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("mp-populator")
    group.addoption(
        "--populator-seed",
        action="store",
        type=int,
        default=None,
        help="Seed used by the 'populator' fixture (default: $MP_POPULATOR_SEED or random).",
    )


def pytest_configure(config: pytest.Config) -> None:
    seed = config.getoption("--populator-seed")
    if seed is None:
        raw = os.environ.get(SEED_ENV_VAR, "").strip()
        seed = int(raw) if raw else random.SystemRandom().randrange(2**32)
    config.stash[_SEED_KEY] = seed


def pytest_report_header(config: pytest.Config) -> str:
    return f"mp-populator seed: {config.stash[_SEED_KEY]}"


@pytest.fixture
def populator_seed(request: pytest.FixtureRequest) -> int:
    """The session-wide populator seed."""
    return request.config.stash[_SEED_KEY]


@pytest.fixture
def populator(populator_seed: int) -> Populator:
    """Pytest fixture: a populator built from ``MP_POPULATOR_*`` variables and the session seed."""
    parameters = EnvParametersLoader().load().replace(seed=populator_seed)
    return PopulatorBuilder().parameters(parameters).build()


__all__ = ["populator", "populator_seed"]
