"""Game -- the turn loop and the player command surface.

Owns the colony and hive for one game and advances them in the fixed
turn order:

1. Ants act (growers harvest, throwers throw, eaters eat)
2. Bees act (sting a blocker or advance toward the queen)
3. Places act (flooded places wash out non-swimmers)
4. Hive releases the wave scheduled for this turn
5. Turn counter increments

Player commands take plain strings (an ant type or boost name and a
``"row,col"`` coordinate) and return None on success or a
:class:`~antdefense.colony.colony.Failure` describing the refusal.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

import numpy as np

from antdefense.colony.ant import ANT_TYPES
from antdefense.colony.colony import Colony, Failure
from antdefense.world.hive import Hive

if TYPE_CHECKING:
    from antdefense.simulation.config import GameConfig
    from antdefense.world.place import Place

logger = logging.getLogger(__name__)

_COORDINATES = re.compile(r"\s*(\d+)\s*,\s*(\d+)\s*", re.ASCII)


class GameStatus(Enum):
    """Where the game stands after the latest turn."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


@dataclass
class Game:
    """Drives one game of ants versus bees.

    Attributes:
        colony: The defending colony.
        hive: The hive supplying bees.
        turn: Number of completed turns.
    """

    colony: Colony
    hive: Hive
    turn: int = 0

    @classmethod
    def from_config(cls, config: GameConfig) -> Game:
        """Build a seeded colony and hive from a scenario config.

        Args:
            config: Loaded game configuration.

        Returns:
            A new Game at turn 0.
        """
        colony = Colony(
            food=config.starting_food,
            num_tunnels=config.num_tunnels,
            tunnel_length=config.tunnel_length,
            moat_frequency=config.moat_frequency,
            rng=np.random.default_rng(config.seed),
        )
        inventory = config.boost_inventory()
        if inventory is not None:
            colony.boosts = inventory

        hive = Hive(bee_armor=config.bee_armor, bee_damage=config.bee_damage)
        for wave in config.waves:
            hive.add_wave(wave.turn, wave.count)
        return cls(colony=colony, hive=hive)

    def take_turn(self) -> None:
        """Resolve one full turn."""
        logger.info("--- Turn %d ---", self.turn)
        self.colony.ants_act()
        self.colony.bees_act()
        self.colony.places_act()
        self.hive.invade(self.colony, self.turn)
        self.turn += 1

    def run(self, turns: int) -> GameStatus:
        """Take turns until the game ends or ``turns`` have been played.

        Returns:
            The status after the last turn taken.
        """
        for _ in range(turns):
            if self.status is not GameStatus.IN_PROGRESS:
                break
            self.take_turn()
        return self.status

    def game_is_won(self) -> bool | None:
        """Return False if lost, True if won, None while still going.

        A bee at the queen loses the game even if no others remain.
        """
        if self.colony.queen_has_bees():
            return False
        if not self.colony.get_all_bees() and not self.hive.bees:
            return True
        return None

    @property
    def status(self) -> GameStatus:
        """The result of :meth:`game_is_won` as a GameStatus."""
        won = self.game_is_won()
        if won is None:
            return GameStatus.IN_PROGRESS
        return GameStatus.WON if won else GameStatus.LOST

    # -- Player commands --

    def deploy_ant(self, ant_type: str, coordinates: str) -> Failure | None:
        """Deploy a new ant of the named type at ``"row,col"``."""
        ant_cls = ANT_TYPES.get(ant_type.strip().lower())
        if ant_cls is None:
            return Failure.UNKNOWN_ANT_TYPE
        place = self._place_at(coordinates)
        if place is None:
            return Failure.ILLEGAL_LOCATION
        return self.colony.deploy_ant(ant_cls(), place)

    def remove_ant(self, coordinates: str) -> Failure | None:
        """Remove the effective ant at ``"row,col"``, if there is one."""
        place = self._place_at(coordinates)
        if place is None:
            return Failure.ILLEGAL_LOCATION
        removed = self.colony.remove_ant(place)
        if removed is not None:
            logger.info("Removed %s from %s", removed.name, place.name)
        return None

    def boost_ant(self, boost_name: str, coordinates: str) -> Failure | None:
        """Give the named boost to the ant at ``"row,col"``."""
        place = self._place_at(coordinates)
        if place is None:
            return Failure.ILLEGAL_LOCATION
        return self.colony.apply_boost(boost_name, place)

    # -- Queries --

    @property
    def food(self) -> int:
        """Food currently available to the colony."""
        return self.colony.food

    @property
    def places(self) -> list[list[Place]]:
        """A snapshot of the tunnel grid.

        The rows are copies; the places in them are the live ones.
        """
        return [list(row) for row in self.colony.places]

    @property
    def hive_bee_count(self) -> int:
        """Bees still waiting in the hive."""
        return len(self.hive.bees)

    @property
    def boost_names(self) -> list[str]:
        """Boosts with at least one in stock."""
        return self.colony.boost_names

    def _place_at(self, coordinates: str) -> Place | None:
        """Parse ``"row,col"`` into a grid place, or None if invalid."""
        match = _COORDINATES.fullmatch(coordinates)
        if match is None:
            return None
        row, col = int(match[1]), int(match[2])
        places = self.colony.places
        if not (0 <= row < len(places) and 0 <= col < len(places[row])):
            return None
        return places[row][col]
