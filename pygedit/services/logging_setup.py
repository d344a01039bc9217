from __future__ import annotations

import logging

from pygedit.utils.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT


def configure_logging(level_name: str = DEFAULT_LOG_LEVEL) -> int:
    """Configure root logging once at startup and return the numeric level used."""
    level = logging.getLevelName(level_name.strip().upper())
    if not isinstance(level, int):
        level = logging.getLevelName(DEFAULT_LOG_LEVEL)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger(__name__).debug("Logging configured at %s", logging.getLevelName(level))
    return level
