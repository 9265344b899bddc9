"""Ant types -- the defenders a player can deploy.

Each type is a thin subclass of :class:`Ant` that fixes its armor, food
cost and per-turn behaviour:

- **Grower**: produces food or finds boosts.
- **Thrower**: throws leaves at the nearest bee up the tunnel.
- **Scuba**: a thrower that survives in water.
- **Eater**: swallows a bee in its own place and digests it over turns.
- **Guard**: shares a place with another ant and soaks up stings for it.

Boosts change a throw: FlyingLeaf extends the range, StickyLeaf and
IcyLeaf apply a one-turn status, and BugSpray wipes out every bee in the
thrower's place at the cost of the thrower itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from antdefense.colony.insect import Ant, Bee, Boost, Status

if TYPE_CHECKING:
    from antdefense.colony.colony import Colony

logger = logging.getLogger(__name__)

# -- Constants ---------------------------------------------------------------

# Cumulative upper bounds of the grower's outcome bands; a draw at or
# above the last threshold produces nothing.
_GROWER_BANDS: tuple[tuple[float, Boost | None], ...] = (
    (0.60, None),  # food
    (0.70, Boost.FLYING_LEAF),
    (0.80, Boost.STICKY_LEAF),
    (0.90, Boost.ICY_LEAF),
    (0.95, Boost.BUG_SPRAY),
)
_GROWER_FOOD = 1

_THROW_RANGE = 3
_FLYING_THROW_RANGE = 5
_SPRAY_DAMAGE = 10

_EATER_DIGEST_TURNS = 3  # counter must exceed this before the bee is gone
_EATER_COUGH_SKIP = 3  # counter value after coughing up on a hit


@dataclass(eq=False)
class GrowerAnt(Ant):
    """Gathers one unit of food or finds a boost each turn."""

    name: ClassVar[str] = "Grower"
    food_cost: ClassVar[int] = 1

    armor: int = 1

    def act(self, colony: Colony | None = None) -> None:
        """Roll once and add either food or one boost to the colony.

        Outcome bands: 60% food, 10% FlyingLeaf, 10% StickyLeaf,
        10% IcyLeaf, 5% BugSpray, 5% nothing.

        Args:
            colony: The colony that receives the harvest.
        """
        if colony is None:
            return
        roll = float(colony.rng.random())
        for threshold, boost in _GROWER_BANDS:
            if roll < threshold:
                if boost is None:
                    colony.increase_food(_GROWER_FOOD)
                else:
                    colony.add_boost(boost)
                return
        logger.debug("%s found nothing (roll=%.3f)", self, roll)


@dataclass(eq=False)
class ThrowerAnt(Ant):
    """Throws a leaf at the closest bee within range.

    Attributes:
        damage: Armor removed per leaf (ClassVar, fixed per type).
    """

    name: ClassVar[str] = "Thrower"
    food_cost: ClassVar[int] = 4
    damage: ClassVar[int] = 1

    armor: int = 1

    def act(self, colony: Colony | None = None) -> None:
        """Throw at the nearest bee, applying and spending any boost.

        With BugSpray the ant instead kills every bee in its own place
        and then destroys itself.  Any other boost is spent on the first
        throw that finds a target and is kept while nothing is in range.
        A BugSpray whose stock is already gone is dropped and the ant
        throws as usual.
        """
        if self.boost is Boost.BUG_SPRAY and self._spray(colony):
            return

        max_distance = (
            _FLYING_THROW_RANGE if self.boost is Boost.FLYING_LEAF else _THROW_RANGE
        )
        target = self.place.get_closest_bee(max_distance) if self.place else None
        if target is None:
            return

        boost = self.boost
        if boost is not None and colony is not None and not colony.spend_boost(boost):
            # Another ant already used the last one.
            boost = None
        self.boost = None

        logger.info("%s throws a leaf at %s", self, target)
        target.reduce_armor(self.damage)
        self._apply_status(target, boost)

    def _apply_status(self, target: Bee, boost: Boost | None) -> None:
        if boost is Boost.STICKY_LEAF:
            target.status = Status.STUCK
            logger.info("%s is stuck!", target)
        elif boost is Boost.ICY_LEAF:
            target.status = Status.COLD
            logger.info("%s is cold!", target)

    def _spray(self, colony: Colony | None) -> bool:
        """Spray this place, or return False if the spray was already used."""
        if colony is not None and not colony.spend_boost(Boost.BUG_SPRAY):
            self.boost = None
            return False
        logger.info("%s sprays bug repellant everywhere!", self)
        place = self.place
        target = place.get_closest_bee(0)
        while target is not None:
            target.reduce_armor(_SPRAY_DAMAGE)
            target = place.get_closest_bee(0)
        self.reduce_armor(_SPRAY_DAMAGE)
        return True


@dataclass(eq=False)
class ScubaAnt(ThrowerAnt):
    """A thrower that can stand in flooded tunnel segments."""

    name: ClassVar[str] = "Scuba"
    food_cost: ClassVar[int] = 5
    is_watersafe: ClassVar[bool] = True


@dataclass(eq=False)
class EaterAnt(Ant):
    """Swallows the frontmost bee in its place and digests it.

    Digestion phases are tracked by ``turns_eating``:

    - 0: not eating, will try to swallow on its next action.
    - 1: just swallowed; a surviving hit makes it cough the bee back up.
    - 2-3: digesting; death at 2 still releases the bee.
    - above 3 on an action: the bee is gone for good.

    Attributes:
        turns_eating: Digestion counter.
        stomach: The swallowed bee, held off the board.
    """

    name: ClassVar[str] = "Eater"
    food_cost: ClassVar[int] = 4

    armor: int = 2
    turns_eating: int = 0
    stomach: Bee | None = None

    @property
    def is_full(self) -> bool:
        """Return True while a bee is held in the stomach."""
        return self.stomach is not None

    def act(self, colony: Colony | None = None) -> None:
        """Swallow a bee when idle, otherwise keep digesting."""
        logger.debug("%s eating: %d", self, self.turns_eating)
        if self.turns_eating == 0:
            target = self.place.get_closest_bee(0) if self.place else None
            if target is not None:
                logger.info("%s eats %s!", self, target)
                self.place.remove_bee(target)
                self.stomach = target
                self.turns_eating = 1
        elif self.turns_eating > _EATER_DIGEST_TURNS:
            logger.info("%s finished digesting", self)
            self.stomach = None
            self.turns_eating = 0
        else:
            self.turns_eating += 1

    def reduce_armor(self, amount: int) -> bool:
        """Take damage, possibly coughing the swallowed bee back up.

        A hit right after swallowing releases the bee and skips ahead in
        digestion so the same hit cannot release it twice.  A fatal hit
        during early digestion releases the bee before the eater leaves
        play.

        Returns:
            True if the eater expired.
        """
        self.armor -= amount
        logger.debug("%s armor reduced to %d", self, self.armor)
        if self.armor > 0:
            if self.turns_eating == 1:
                self._cough_up()
                self.turns_eating = _EATER_COUGH_SKIP
            return False
        if 0 < self.turns_eating <= 2:
            self._cough_up()
        self._expire()
        return True

    def _cough_up(self) -> None:
        eaten = self.stomach
        if eaten is None or self.place is None:
            return
        self.stomach = None
        self.place.add_bee(eaten)
        logger.info("%s coughs up %s!", self, eaten)


@dataclass(eq=False)
class GuardAnt(Ant):
    """Shares a place with another ant and takes the stings meant for it."""

    name: ClassVar[str] = "Guard"
    food_cost: ClassVar[int] = 4
    is_guard: ClassVar[bool] = True

    armor: int = 2

    def get_guarded(self) -> Ant | None:
        """Return the ant this guard is shielding, if any."""
        return self.place.get_guarded_ant() if self.place else None

    def act(self, colony: Colony | None = None) -> None:
        """Guards do nothing on their own."""


ANT_TYPES: dict[str, type[Ant]] = {
    "grower": GrowerAnt,
    "thrower": ThrowerAnt,
    "eater": EaterAnt,
    "scuba": ScubaAnt,
    "guard": GuardAnt,
}
