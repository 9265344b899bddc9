"""Config -- load game scenarios from YAML files.

Tunnel layout, starting resources, bee stats and the wave schedule live
in YAML and are parsed into typed dataclasses here, so scenarios can be
tweaked without touching the rules.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from antdefense.colony.insect import Boost


@dataclass
class WaveConfig:
    """One scheduled bee wave.

    Attributes:
        turn: Turn on which the wave leaves the hive.
        count: Number of bees in the wave.
    """

    turn: int
    count: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WaveConfig:
        """Build a wave from a ``{turn, count}`` mapping.

        Raises:
            ValueError: If either key is missing.
        """
        try:
            return cls(turn=int(data["turn"]), count=int(data["count"]))
        except (KeyError, TypeError) as exc:
            msg = f"wave entry needs 'turn' and 'count': {data!r}"
            raise ValueError(msg) from exc


def _default_waves() -> list[WaveConfig]:
    return [
        WaveConfig(turn=2, count=1),
        WaveConfig(turn=4, count=2),
        WaveConfig(turn=6, count=3),
        WaveConfig(turn=8, count=4),
    ]


@dataclass
class GameConfig:
    """Top-level game configuration.

    Attributes:
        seed: RNG seed for deterministic replay.
        starting_food: Food available before the first turn.
        num_tunnels: Number of tunnels (grid rows).
        tunnel_length: Places per tunnel (grid columns).
        moat_frequency: Flood every n-th step of each tunnel; 0 for none.
        bee_armor: Armor of every bee the hive builds.
        bee_damage: Sting damage of every bee the hive builds.
        waves: Bee waves to schedule.
        starting_boosts: Boost name to count; overrides the colony's
            default inventory when non-empty.
        max_turns: Turn limit for headless runs.
        log_level: Logging level name for headless runs.
    """

    seed: int = 42
    starting_food: int = 2
    num_tunnels: int = 3
    tunnel_length: int = 8
    moat_frequency: int = 0
    bee_armor: int = 3
    bee_damage: int = 1
    waves: list[WaveConfig] = field(default_factory=_default_waves)
    starting_boosts: dict[str, int] = field(default_factory=dict)
    max_turns: int = 100
    log_level: str = "INFO"

    def boost_inventory(self) -> dict[Boost, int] | None:
        """Convert ``starting_boosts`` into a colony inventory.

        Returns:
            The inventory, or None to keep the colony default.

        Raises:
            ValueError: If a boost name is not recognised.
        """
        if not self.starting_boosts:
            return None
        inventory = {boost: 0 for boost in Boost}
        for name, count in self.starting_boosts.items():
            boost = Boost.from_name(name)
            if boost is None:
                msg = f"unknown boost in config: {name!r}"
                raise ValueError(msg)
            inventory[boost] = int(count)
        return inventory

    @classmethod
    def from_yaml(cls, path: str | Path) -> GameConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated GameConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If a wave entry is malformed.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        waves_data = data.get("waves")
        waves = (
            [WaveConfig.from_dict(w) for w in waves_data]
            if waves_data is not None
            else _default_waves()
        )

        return cls(
            seed=data.get("seed", cls.seed),
            starting_food=data.get("starting_food", cls.starting_food),
            num_tunnels=data.get("num_tunnels", cls.num_tunnels),
            tunnel_length=data.get("tunnel_length", cls.tunnel_length),
            moat_frequency=data.get("moat_frequency", cls.moat_frequency),
            bee_armor=data.get("bee_armor", cls.bee_armor),
            bee_damage=data.get("bee_damage", cls.bee_damage),
            waves=waves,
            starting_boosts=data.get("starting_boosts") or {},
            max_turns=data.get("max_turns", cls.max_turns),
            log_level=data.get("log_level", cls.log_level),
        )
