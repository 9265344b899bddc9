"""Insect -- shared unit contract for ants and bees.

Every unit on the board is an Insect: it has armor, knows which Place it
currently occupies, and acts once per turn.  The Place owns membership;
the insect only holds a back reference that the Place sets and clears.

Armor is the single source of truth for death: ``reduce_armor`` is the
only path by which a unit leaves play through damage.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from antdefense.colony.colony import Colony
    from antdefense.world.place import Place

logger = logging.getLogger(__name__)


class Status(Enum):
    """One-turn condition applied to a bee by a boosted throw."""

    NONE = auto()
    STUCK = auto()
    COLD = auto()


class Boost(Enum):
    """Boost tokens a colony can collect and hand to its ants."""

    FLYING_LEAF = "FlyingLeaf"
    STICKY_LEAF = "StickyLeaf"
    ICY_LEAF = "IcyLeaf"
    BUG_SPRAY = "BugSpray"

    @classmethod
    def from_name(cls, name: str) -> Boost | None:
        """Look up a boost by its display name, ignoring case.

        Returns:
            The matching Boost, or None if the name is not a boost.
        """
        wanted = name.strip().lower()
        for boost in cls:
            if boost.value.lower() == wanted:
                return boost
        return None


@dataclass(eq=False)
class Insect:
    """Base unit with armor and a back reference to its Place.

    Insects compare by identity: two bees with equal armor are still
    different bees.

    Attributes:
        armor: Remaining armor; the unit expires at 0 or below.
        place: The Place currently holding this unit, or None when the
            unit is off the board (in the hive's stock counts as placed).
    """

    name: ClassVar[str] = "Insect"

    armor: int = 1
    place: Place | None = field(default=None, kw_only=True, repr=False)

    def reduce_armor(self, amount: int) -> bool:
        """Apply damage and remove the unit once its armor runs out.

        Args:
            amount: Armor to subtract.

        Returns:
            True if the unit expired, False if it survived.
        """
        self.armor -= amount
        if self.armor <= 0:
            self._expire()
            return True
        return False

    def act(self, colony: Colony | None = None) -> None:
        """Take this unit's action for the current turn."""
        raise NotImplementedError

    def _expire(self) -> None:
        logger.info("%s ran out of armor and expired", self)
        if self.place is not None:
            self.place.remove_insect(self)

    def __str__(self) -> str:
        where = self.place.name if self.place is not None else ""
        return f"{self.name}({where})"


@dataclass(eq=False)
class Bee(Insect):
    """An attacker that stings blockers and otherwise walks toward the queen.

    Attributes:
        damage: Armor removed from an ant per sting.
        status: Condition suppressing exactly one action; reset after
            every action whether or not it was consulted.
    """

    name: ClassVar[str] = "Bee"

    damage: int = 1
    status: Status = Status.NONE

    def sting(self, ant: Ant) -> bool:
        """Sting an ant.

        Returns:
            True if the ant expired from the sting.
        """
        logger.info("%s stings %s!", self, ant)
        return ant.reduce_armor(self.damage)

    def is_blocked(self) -> bool:
        """Return True if a defender stands in this bee's place."""
        return self.place is not None and self.place.get_ant() is not None

    def act(self, colony: Colony | None = None) -> None:
        """Sting the blocker, or advance one place toward the queen.

        A COLD bee skips its sting and a STUCK bee skips its advance.
        The status is cleared afterwards either way.
        """
        if self.is_blocked():
            if self.status is not Status.COLD:
                self.sting(self.place.get_ant())
        elif self.armor > 0 and self.place is not None:
            if self.status is not Status.STUCK:
                self.place.exit_bee(self)
        self.status = Status.NONE


@dataclass(eq=False)
class Ant(Insect):
    """A stationary defender deployed by the colony.

    Attributes:
        boost: Pending boost token, or None.
    """

    name: ClassVar[str] = "Ant"
    food_cost: ClassVar[int] = 0
    is_guard: ClassVar[bool] = False
    is_watersafe: ClassVar[bool] = False

    boost: Boost | None = None

    def set_boost(self, boost: Boost) -> None:
        """Hand this ant a boost, replacing any unspent one."""
        self.boost = boost
        logger.info("%s is given a %s", self, boost.value)
