"""Hive -- where bees wait for their scheduled wave.

Bees are built up front when a wave is defined and sit in the hive until
their turn comes, at which point each one flies to a randomly chosen
tunnel entrance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from antdefense.colony.insect import Bee
from antdefense.world.place import Place

if TYPE_CHECKING:
    from antdefense.colony.colony import Colony

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Hive(Place):
    """A Place that manufactures bees and releases them in waves.

    Attributes:
        bee_armor: Armor given to every bee this hive builds.
        bee_damage: Sting damage given to every bee this hive builds.
        waves: Bees scheduled per turn number.
    """

    name: str = "Hive"
    bee_armor: int = 3
    bee_damage: int = 1
    waves: dict[int, list[Bee]] = field(default_factory=dict, repr=False)

    def add_wave(self, attack_turn: int, num_bees: int) -> Hive:
        """Build ``num_bees`` bees to be released on ``attack_turn``.

        The new bees wait in the hive until released.  A second wave on
        the same turn joins the first one.

        Returns:
            This hive, so wave definitions can be chained.
        """
        wave = self.waves.setdefault(attack_turn, [])
        for _ in range(num_bees):
            bee = Bee(self.bee_armor, self.bee_damage)
            self.add_bee(bee)
            wave.append(bee)
        return self

    def invade(self, colony: Colony, current_turn: int) -> list[Bee]:
        """Release the wave scheduled for ``current_turn``, if any.

        Each bee picks an entrance independently and uniformly at random
        using the colony's generator.

        Args:
            colony: The colony under attack.
            current_turn: Turn number being resolved.

        Returns:
            The bees released this turn (empty if none were scheduled).
        """
        wave = self.waves.pop(current_turn, None)
        if wave is None:
            return []
        entrances = colony.entrances
        for bee in wave:
            self.remove_bee(bee)
            entrance = entrances[int(colony.rng.integers(len(entrances)))]
            entrance.add_bee(bee)
        logger.info("Turn %d: %d bees leave the hive", current_turn, len(wave))
        return wave
