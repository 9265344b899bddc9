"""Tests for antdefense.colony.insect -- armor, bees, boosts."""

from antdefense.colony.ant import GuardAnt, ThrowerAnt
from antdefense.colony.colony import Colony
from antdefense.colony.insect import Bee, Boost, Status


class TestReduceArmor:
    """Tests for the shared damage path."""

    def test_survives_with_armor_left(self, colony: Colony) -> None:
        bee = Bee(3, 1)
        colony.places[0][2].add_bee(bee)
        assert bee.reduce_armor(2) is False
        assert bee.armor == 1
        assert bee.place is colony.places[0][2]

    def test_expires_at_zero(self, colony: Colony) -> None:
        bee = Bee(3, 1)
        colony.places[0][2].add_bee(bee)
        assert bee.reduce_armor(3) is True
        assert bee.place is None
        assert colony.places[0][2].bees == []

    def test_ant_expires(self, colony: Colony) -> None:
        ant = ThrowerAnt()
        colony.places[0][1].add_ant(ant)
        assert ant.reduce_armor(5)
        assert colony.places[0][1].get_ant() is None

    def test_str_shows_place(self, colony: Colony) -> None:
        bee = Bee(3, 1)
        assert str(bee) == "Bee()"
        colony.places[0][1].add_bee(bee)
        assert str(bee) == "Bee(tunnel[0,1])"


class TestBee:
    """Tests for bee actions and status handling."""

    def test_unblocked_bee_advances(self, colony: Colony) -> None:
        bee = Bee(3, 1)
        colony.places[0][3].add_bee(bee)
        bee.act()
        assert bee.place is colony.places[0][2]

    def test_blocked_bee_stings(self, colony: Colony) -> None:
        ant = GuardAnt()
        colony.places[0][3].add_ant(ant)
        bee = Bee(3, 1)
        colony.places[0][3].add_bee(bee)
        bee.act()
        assert ant.armor == 1
        assert bee.place is colony.places[0][3]

    def test_sting_kills_weak_ant(self, colony: Colony) -> None:
        ant = ThrowerAnt()
        colony.places[0][3].add_ant(ant)
        bee = Bee(3, 1)
        colony.places[0][3].add_bee(bee)
        bee.act()
        assert colony.places[0][3].get_ant() is None
        assert ant.place is None

    def test_stung_guard_shields_primary(self, colony: Colony) -> None:
        thrower = ThrowerAnt()
        guard = GuardAnt()
        place = colony.places[0][3]
        place.add_ant(thrower)
        place.add_ant(guard)
        place.add_bee(Bee(3, 1))
        place.bees[0].act()
        assert guard.armor == 1
        assert thrower.armor == 1

    def test_cold_bee_does_not_sting(self, colony: Colony) -> None:
        ant = GuardAnt()
        colony.places[0][3].add_ant(ant)
        bee = Bee(3, 1, status=Status.COLD)
        colony.places[0][3].add_bee(bee)
        bee.act()
        assert ant.armor == 2
        assert bee.status is Status.NONE

    def test_stuck_bee_does_not_advance(self, colony: Colony) -> None:
        bee = Bee(3, 1, status=Status.STUCK)
        colony.places[0][3].add_bee(bee)
        bee.act()
        assert bee.place is colony.places[0][3]
        assert bee.status is Status.NONE
        # Status lasts one action only
        bee.act()
        assert bee.place is colony.places[0][2]

    def test_stuck_status_cleared_when_blocked(self, colony: Colony) -> None:
        ant = GuardAnt()
        colony.places[0][3].add_ant(ant)
        bee = Bee(3, 1, status=Status.STUCK)
        colony.places[0][3].add_bee(bee)
        bee.act()
        # Stuck does not stop a sting
        assert ant.armor == 1
        assert bee.status is Status.NONE

    def test_cold_bee_still_advances(self, colony: Colony) -> None:
        bee = Bee(3, 1, status=Status.COLD)
        colony.places[0][3].add_bee(bee)
        bee.act()
        assert bee.place is colony.places[0][2]
        assert bee.status is Status.NONE

    def test_is_blocked(self, colony: Colony) -> None:
        bee = Bee(3, 1)
        colony.places[0][3].add_bee(bee)
        assert not bee.is_blocked()
        colony.places[0][3].add_ant(ThrowerAnt())
        assert bee.is_blocked()


class TestBoost:
    """Tests for the Boost enum."""

    def test_from_name_ignores_case(self) -> None:
        assert Boost.from_name("flyingleaf") is Boost.FLYING_LEAF
        assert Boost.from_name("BugSpray") is Boost.BUG_SPRAY
        assert Boost.from_name(" IcyLeaf ") is Boost.ICY_LEAF

    def test_from_name_unknown(self) -> None:
        assert Boost.from_name("Glitter") is None

    def test_set_boost_overwrites(self) -> None:
        ant = ThrowerAnt()
        ant.set_boost(Boost.ICY_LEAF)
        ant.set_boost(Boost.STICKY_LEAF)
        assert ant.boost is Boost.STICKY_LEAF
