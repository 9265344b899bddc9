"""Place -- a single node in a tunnel.

Places are chained from the queen outward: ``exit`` points one step
closer to the queen and ``entrance`` one step closer to the hive.  A
place holds at most one ordinary ant, at most one guard, and any number
of bees in arrival order.

Distances used for targeting are hop counts along the entrance chain,
so a thrower "sees" up the tunnel toward the hive.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from antdefense.colony.insect import Ant, Bee

if TYPE_CHECKING:
    from antdefense.colony.insect import Insect

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Place:
    """A tunnel segment that ants and bees can occupy.

    Attributes:
        name: Display name, e.g. ``tunnel[0,3]``.
        water: Whether the segment is flooded (fixed at creation).
        exit: Neighbour toward the queen, or None at the end of the line.
        entrance: Neighbour toward the hive, set once the next segment
            has been built.
        ant: The primary occupant.
        guard: The guard occupant, independent of the primary slot.
        bees: Bees present, frontmost (longest resident) first.
    """

    name: str
    water: bool = False
    exit: Place | None = field(default=None, repr=False)
    entrance: Place | None = field(default=None, repr=False)
    ant: Ant | None = field(default=None, repr=False)
    guard: Ant | None = field(default=None, repr=False)
    bees: list[Bee] = field(default_factory=list, repr=False)

    # -- Ant occupancy --

    def add_ant(self, ant: Ant) -> bool:
        """Put an ant in its slot here.

        Guards take the guard slot, every other ant the primary slot.

        Returns:
            True if the slot was free and the ant now lives here.
        """
        if ant.is_guard:
            if self.guard is not None:
                return False
            self.guard = ant
        else:
            if self.ant is not None:
                return False
            self.ant = ant
        ant.place = self
        return True

    def remove_ant(self) -> Ant | None:
        """Remove the guard if there is one, otherwise the primary ant.

        Returns:
            The removed ant, or None if the place had no ant.
        """
        if self.guard is not None:
            removed, self.guard = self.guard, None
        else:
            removed, self.ant = self.ant, None
        if removed is not None:
            removed.place = None
        return removed

    def get_ant(self) -> Ant | None:
        """Return the ant a bee here would run into (guard first)."""
        if self.guard is not None:
            return self.guard
        return self.ant

    def get_guarded_ant(self) -> Ant | None:
        """Return the primary occupant, whether or not it is guarded."""
        return self.ant

    # -- Bee occupancy --

    def add_bee(self, bee: Bee) -> None:
        """Append a bee behind the ones already here."""
        self.bees.append(bee)
        bee.place = self

    def remove_bee(self, bee: Bee) -> None:
        """Remove one bee, keeping the order of the others."""
        if bee in self.bees:
            self.bees.remove(bee)
            bee.place = None

    def remove_all_bees(self) -> None:
        """Clear every bee from this place."""
        for bee in self.bees:
            bee.place = None
        self.bees = []

    def exit_bee(self, bee: Bee) -> None:
        """Move a bee one step toward the queen."""
        self.remove_bee(bee)
        self.exit.add_bee(bee)

    def remove_insect(self, insect: Insect) -> None:
        """Remove an ant or a bee from this place.

        An ant is taken out of whichever slot actually holds it, so a
        guarded ant can leave without dragging its guard along.
        """
        if isinstance(insect, Ant):
            if insect is self.guard:
                self.guard = None
            elif insect is self.ant:
                self.ant = None
            else:
                return
            insect.place = None
        elif isinstance(insect, Bee):
            self.remove_bee(insect)

    # -- Targeting --

    def get_closest_bee(
        self,
        max_distance: int,
        min_distance: int = 0,
    ) -> Bee | None:
        """Return the frontmost bee at the nearest in-range distance.

        Walks the entrance chain from this place (distance 0) out to
        ``max_distance`` inclusive, ignoring places closer than
        ``min_distance``.

        Args:
            max_distance: Furthest hop count to look at.
            min_distance: Nearest hop count to look at.

        Returns:
            The first bee found, or None if the window holds no bees.
        """
        place: Place | None = self
        distance = 0
        while place is not None and distance <= max_distance:
            if distance >= min_distance and place.bees:
                return place.bees[0]
            place = place.entrance
            distance += 1
        return None

    # -- Turn resolution --

    def act(self) -> None:
        """Flood out any ant here that cannot survive water."""
        if not self.water:
            return
        if self.guard is not None:
            logger.info("%s drowns", self.guard)
            self.remove_ant()
        if self.ant is not None and not self.ant.is_watersafe:
            logger.info("%s drowns", self.ant)
            self.remove_ant()
