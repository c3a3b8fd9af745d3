"""Logging setup for applications using jsonfs.

The library itself only creates module level loggers. Applications (and
the test-suite) call :func:`configure` to route those records somewhere
useful. The level can be overridden via the ``LOG_LEVEL`` environment
variable or by passing an explicit level.
"""

from __future__ import annotations

import logging
import os
from typing import Union

DEFAULT_FORMAT = "%(asctime)s %(levelname)s:%(name)s:%(message)s"
LIBRARY_LOGGER = "jsonfs"


def resolve_level(level: Union[str, int, None] = None) -> int:
    """Return a numeric logging level for ``level``.

    ``None`` consults ``LOG_LEVEL`` and defaults to ``INFO``. Unknown names
    also map to ``INFO``.
    """

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(level, int):
        return logging.INFO
    return level


def configure(level: Union[str, int, None] = None) -> None:
    """Configure the root logger and the ``jsonfs`` logger.

    Parameters
    ----------
    level:
        Logging level to apply. If ``None``, the ``LOG_LEVEL`` environment
        variable is consulted and defaults to ``INFO`` if unset.
    """

    numeric = resolve_level(level)
    logging.basicConfig(level=numeric, format=DEFAULT_FORMAT, force=True)
    logging.getLogger(LIBRARY_LOGGER).setLevel(numeric)
