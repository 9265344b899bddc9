"""Colony -- the tunnel network, its resources, and per-phase updates.

A Colony owns a grid of Places (one row per tunnel, one column per step
away from the queen), the food supply, and the boost inventory.  All
tunnels share a single queen place at their inner end.  The colony is
updated once per turn in three phases driven by the game: ants act,
bees act, then places resolve flooding.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

import numpy as np
from numpy.random import Generator

from antdefense.colony.insect import Ant, Bee, Boost
from antdefense.world.place import Place

logger = logging.getLogger(__name__)


class Failure(Enum):
    """Reasons a player command can be refused.

    The value is the message shown to the player.
    """

    UNKNOWN_ANT_TYPE = "unknown ant type"
    ILLEGAL_LOCATION = "illegal location"
    INSUFFICIENT_FOOD = "not enough food"
    LOCATION_OCCUPIED = "tunnel already occupied"
    BOOST_UNAVAILABLE = "no such boost"
    NO_DEFENDER = "no Ant at location"


def _default_boosts() -> dict[Boost, int]:
    return {
        Boost.FLYING_LEAF: 1,
        Boost.STICKY_LEAF: 1,
        Boost.ICY_LEAF: 1,
        Boost.BUG_SPRAY: 0,
    }


@dataclass
class Colony:
    """Top-level state for the defending colony.

    Attributes:
        food: Food available for deploying ants (never negative).
        num_tunnels: Number of independent tunnels (grid rows).
        tunnel_length: Places per tunnel (grid columns).
        moat_frequency: Every ``moat_frequency``-th step of each tunnel
            is flooded; 0 disables water.
        rng: Seeded generator for grower rolls and bee entrance choice.
        boosts: Boost inventory, counts never negative.
        places: Grid indexed as ``places[tunnel][step]``; step 0 is next
            to the queen.
        entrances: Hive-facing end of each tunnel.
        queen_place: The place every tunnel leads to.
    """

    food: int
    num_tunnels: int
    tunnel_length: int
    moat_frequency: int = 0
    rng: Generator = field(default_factory=np.random.default_rng, repr=False)
    boosts: dict[Boost, int] = field(default_factory=_default_boosts)
    places: list[list[Place]] = field(init=False, repr=False)
    entrances: list[Place] = field(init=False, repr=False)
    queen_place: Place = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Dig the tunnels from the queen outward."""
        self.queen_place = Place("Ant Queen")
        self.places = []
        self.entrances = []
        for tunnel in range(self.num_tunnels):
            row: list[Place] = []
            curr = self.queen_place
            for step in range(self.tunnel_length):
                water = (
                    self.moat_frequency != 0 and (step + 1) % self.moat_frequency == 0
                )
                kind = "water" if water else "tunnel"
                prev = curr
                curr = Place(f"{kind}[{tunnel},{step}]", water=water, exit=prev)
                prev.entrance = curr
                row.append(curr)
            self.places.append(row)
            self.entrances.append(curr)

    # -- Resources --

    def increase_food(self, amount: int) -> None:
        """Add food to the colony's stores."""
        self.food += amount
        logger.debug("Food increased by %d to %d", amount, self.food)

    def add_boost(self, boost: Boost) -> None:
        """Add one boost of the given kind to the inventory."""
        self.boosts[boost] = self.boosts.get(boost, 0) + 1
        logger.info("Found a %s!", boost.value)

    def spend_boost(self, boost: Boost) -> bool:
        """Take one boost out of the inventory as an ant uses it.

        Returns:
            False if none were left, in which case nothing changes.
        """
        if self.boosts.get(boost, 0) < 1:
            logger.info("No %s left to use", boost.value)
            return False
        self.boosts[boost] -= 1
        return True

    @property
    def boost_names(self) -> list[str]:
        """Names of the boosts with at least one in stock."""
        return [boost.value for boost, count in self.boosts.items() if count > 0]

    # -- Player commands --

    def deploy_ant(self, ant: Ant, place: Place) -> Failure | None:
        """Pay for and place an ant.

        Food is only deducted when the ant actually lands.

        Returns:
            None on success, otherwise the reason for refusal.
        """
        if self.food < ant.food_cost:
            return Failure.INSUFFICIENT_FOOD
        if not place.add_ant(ant):
            return Failure.LOCATION_OCCUPIED
        self.food -= ant.food_cost
        logger.info("Deployed %s for %d food", ant, ant.food_cost)
        return None

    def remove_ant(self, place: Place) -> Ant | None:
        """Take the effective ant out of a place (no refund)."""
        return place.remove_ant()

    def apply_boost(self, boost: Boost | str, place: Place) -> Failure | None:
        """Hand a boost from the inventory to the ant at ``place``.

        The inventory is not charged here; the ant pays when it uses the
        boost.  Boosting an ant twice before it acts replaces the first
        boost.

        Args:
            boost: A Boost or its display name.
            place: Where the receiving ant stands.

        Returns:
            None on success, otherwise the reason for refusal.
        """
        if isinstance(boost, str):
            boost = Boost.from_name(boost)
        if boost is None or self.boosts.get(boost, 0) < 1:
            return Failure.BOOST_UNAVAILABLE
        ant = place.get_ant()
        if ant is None:
            return Failure.NO_DEFENDER
        ant.set_boost(boost)
        return None

    # -- Queries --

    def queen_has_bees(self) -> bool:
        """Return True once any bee has reached the queen."""
        return len(self.queen_place.bees) > 0

    def get_all_ants(self) -> list[Ant]:
        """Effective ant of every occupied place, in row-major order."""
        return [
            place.get_ant()
            for row in self.places
            for place in row
            if place.get_ant() is not None
        ]

    def get_all_bees(self) -> list[Bee]:
        """Every bee in the tunnels, in row-major order."""
        return [bee for row in self.places for place in row for bee in place.bees]

    # -- Turn phases --

    def ants_act(self) -> None:
        """Let every ant act; a guarded ant acts before its guard."""
        for ant in self.get_all_ants():
            if ant.is_guard:
                guarded = ant.place.get_guarded_ant() if ant.place else None
                if guarded is not None:
                    guarded.act(self)
            if ant.place is not None:
                ant.act(self)

    def bees_act(self) -> None:
        """Let every bee in the tunnels act once."""
        for bee in self.get_all_bees():
            if bee.place is not None:
                bee.act()

    def places_act(self) -> None:
        """Resolve flooding in every place."""
        for row in self.places:
            for place in row:
                place.act()
