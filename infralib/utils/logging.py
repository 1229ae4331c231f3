"""Root logger setup for the catalog browser.

The level comes from the ``debug_logging`` setting (``INFRALIB_DEBUG``)
unless ``INFRALIB_LOG_LEVEL`` pins one explicitly, by name or number.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_ENV_VAR = "INFRALIB_LOG_LEVEL"


def parse_level(value: Any) -> Optional[int]:
    """Return a numeric level for ``"debug"``, ``"WARNING"``, ``"15"``; ``None`` if unknown."""
    text = str(value or "").strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else None


def resolve_level(debug: bool, environ: Optional[Mapping[str, str]] = None) -> int:
    env = os.environ if environ is None else environ
    pinned = parse_level(env.get(LEVEL_ENV_VAR))
    if pinned is not None:
        return pinned
    return logging.DEBUG if debug else logging.INFO


def configure_root(debug: bool = False, environ: Optional[Mapping[str, str]] = None) -> int:
    """Install the compact console format once and set the root level.

    Returns the level that was applied.
    """
    level = resolve_level(debug, environ)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(level)
    # urllib3 logs every connection at DEBUG; keep it out of normal runs.
    logging.getLogger("urllib3").setLevel(level if level <= logging.DEBUG else logging.WARNING)
    return level


__all__ = ["configure_root", "parse_level", "resolve_level"]
