"""Logging setup for headless games.

Game modules log through ``logging.getLogger(__name__)``; this module
only decides where that narration goes and how a line looks.  At INFO a
line reads like a play-by-play (``INFO  place  | Thrower(tunnel[0,0])
throws a leaf at Bee(tunnel[0,3])``); at DEBUG the source line is added.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

NARRATION_FORMAT = "%(levelname)-5s %(unit)-7s | %(message)s"
DEBUG_FORMAT = "%(levelname)-5s %(unit)-7s | %(message)s  [%(name)s:%(lineno)d]"


class _UnitFilter(logging.Filter):
    """Expose the last component of the logger name as ``unit``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.unit = record.name.rpartition(".")[2]
        return True


class _NarrationHandler(logging.StreamHandler):
    """Marker type so repeated setup replaces only our own handler."""


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> logging.Handler:
    """Route game narration to ``stream`` (stdout by default).

    Calling this again swaps the previous narration handler for a new
    one and leaves any other root handlers alone.

    Args:
        level: Logging level name, case-insensitive.
        stream: Where to write; defaults to ``sys.stdout``.

    Returns:
        The installed handler.

    Raises:
        ValueError: If ``level`` is not a known level name.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        msg = f"unknown log level: {level!r}"
        raise ValueError(msg)

    handler = _NarrationHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(numeric_level)
    handler.addFilter(_UnitFilter())
    fmt = DEBUG_FORMAT if numeric_level <= logging.DEBUG else NARRATION_FORMAT
    handler.setFormatter(logging.Formatter(fmt))

    root = logging.getLogger()
    for old in [h for h in root.handlers if isinstance(h, _NarrationHandler)]:
        root.removeHandler(old)
    root.setLevel(numeric_level)
    root.addHandler(handler)
    return handler
