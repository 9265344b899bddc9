"""Shared fixtures for the Antdefense test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import numpy as np
import pytest
from numpy.random import Generator

from antdefense.colony.colony import Colony
from antdefense.simulation.config import GameConfig
from antdefense.simulation.engine import Game
from antdefense.world.hive import Hive


class FixedRoll:
    """Stand-in generator whose ``random()`` always returns one value."""

    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value

    def integers(self, high: int) -> int:
        return 0


@pytest.fixture
def fixed_roll() -> type[FixedRoll]:
    """The FixedRoll class, for tests that need to pin a random draw."""
    return FixedRoll


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def colony(rng: Generator) -> Colony:
    """A single 8-place tunnel with plenty of food."""
    return Colony(food=20, num_tunnels=1, tunnel_length=8, rng=rng)


@pytest.fixture
def wide_colony(rng: Generator) -> Colony:
    """Three dry tunnels of length 5."""
    return Colony(food=20, num_tunnels=3, tunnel_length=5, rng=rng)


@pytest.fixture
def empty_hive() -> Hive:
    """A hive with no waves scheduled."""
    return Hive(bee_armor=3, bee_damage=1)


@pytest.fixture
def game(colony: Colony, empty_hive: Hive) -> Game:
    """A game over the single-tunnel colony with an empty hive."""
    return Game(colony=colony, hive=empty_hive)


@pytest.fixture
def default_config() -> GameConfig:
    """Default game config (no YAML file needed)."""
    return GameConfig()


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Undo setup_logging's changes to the root logger."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
