"""Entry point for ``python -m antdefense``.

Loads a YAML scenario, places the opening ants given on the command
line, and plays turns headlessly until the bees are beaten, the queen
falls, or the turn limit is reached.  The turn log goes to stdout.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from antdefense.simulation.config import GameConfig
from antdefense.simulation.engine import Game
from antdefense.utils.logging import setup_logging

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def _parse_deployment(value: str) -> tuple[str, str]:
    """Split ``TYPE@ROW,COL`` into its ant type and coordinates."""
    ant_type, sep, coordinates = value.partition("@")
    if not sep or not ant_type or not coordinates:
        msg = f"expected TYPE@ROW,COL, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return ant_type, coordinates


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, build the game, and play it out."""
    parser = argparse.ArgumentParser(
        prog="antdefense",
        description="Antdefense - ants versus bees tunnel defense",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "-d",
        "--deploy",
        type=_parse_deployment,
        action="append",
        default=[],
        metavar="TYPE@ROW,COL",
        help="Deploy an ant before the first turn (repeatable)",
    )
    parser.add_argument(
        "--turns",
        type=int,
        default=None,
        help="Maximum turns to play (default: max_turns from config)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING"],
        help="Logging level (default: log_level from config)",
    )
    args = parser.parse_args(argv)

    config = GameConfig.from_yaml(args.config)
    setup_logging(args.log_level or config.log_level)
    game = Game.from_config(config)

    for ant_type, coordinates in args.deploy:
        failure = game.deploy_ant(ant_type, coordinates)
        if failure is not None:
            logger.warning(
                "Could not deploy %s at %s: %s",
                ant_type,
                coordinates,
                failure.value,
            )

    turns = args.turns if args.turns is not None else config.max_turns
    status = game.run(turns)
    logger.info(
        "Game over after %d turns: %s (food=%d, hive=%d)",
        game.turn,
        status.name,
        game.food,
        game.hive_bee_count,
    )


if __name__ == "__main__":
    main()
