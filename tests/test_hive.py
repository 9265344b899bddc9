"""Tests for antdefense.world.hive -- wave scheduling and release."""

import numpy as np

from antdefense.colony.colony import Colony
from antdefense.world.hive import Hive


class TestAddWave:
    """Tests for building waves."""

    def test_bees_wait_in_hive(self) -> None:
        hive = Hive(bee_armor=4, bee_damage=2)
        hive.add_wave(3, 2)
        assert len(hive.bees) == 2
        assert all(bee.place is hive for bee in hive.bees)
        assert all(bee.armor == 4 and bee.damage == 2 for bee in hive.bees)
        assert hive.waves[3] == hive.bees

    def test_chaining(self) -> None:
        hive = Hive()
        assert hive.add_wave(1, 1).add_wave(2, 3) is hive
        assert len(hive.bees) == 4
        assert hive.name == "Hive"

    def test_same_turn_waves_merge(self) -> None:
        hive = Hive()
        hive.add_wave(2, 1).add_wave(2, 2)
        assert len(hive.waves[2]) == 3


class TestInvade:
    """Tests for releasing bees into the tunnels."""

    def test_nothing_scheduled(self, wide_colony: Colony) -> None:
        hive = Hive().add_wave(5, 2)
        assert hive.invade(wide_colony, 4) == []
        assert len(hive.bees) == 2
        assert wide_colony.get_all_bees() == []

    def test_wave_goes_to_entrances(self, wide_colony: Colony) -> None:
        hive = Hive().add_wave(1, 6)
        released = hive.invade(wide_colony, 1)
        assert len(released) == 6
        assert hive.bees == []
        for bee in released:
            assert bee.place in wide_colony.entrances
        assert len(wide_colony.get_all_bees()) == 6

    def test_wave_released_once(self, wide_colony: Colony) -> None:
        hive = Hive().add_wave(1, 2)
        hive.invade(wide_colony, 1)
        assert hive.invade(wide_colony, 1) == []
        assert len(wide_colony.get_all_bees()) == 2

    def test_only_that_turns_wave(self, wide_colony: Colony) -> None:
        hive = Hive().add_wave(1, 2).add_wave(3, 4)
        hive.invade(wide_colony, 1)
        assert len(hive.bees) == 4
        assert all(bee.place is hive for bee in hive.waves[3])

    def test_entrance_choice_is_seeded(self) -> None:
        def entrances_for(seed: int) -> list[str]:
            colony = Colony(
                food=0,
                num_tunnels=4,
                tunnel_length=3,
                rng=np.random.default_rng(seed),
            )
            bees = Hive().add_wave(0, 12).invade(colony, 0)
            return [bee.place.name for bee in bees]

        assert entrances_for(7) == entrances_for(7)
