"""Log output for the ``haikuforge`` logger tree."""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "haikuforge"
_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_ENV_VAR = "HAIKUFORGE_LOG_LEVEL"
_HANDLER_FLAG = "_haikuforge_handler"


def _level(value: str | int | None) -> int:
    """Numeric level for an int, a digit string or a level name; INFO otherwise."""
    if isinstance(value, int):
        return value
    name = (value or "").strip().upper()
    if name.isdigit():
        return int(name)
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    level: str | int | None = None, *, force: bool = False
) -> logging.Logger:
    """Attach a stream handler to the ``haikuforge`` logger and set its level.

    The level comes from ``level``, then ``HAIKUFORGE_LOG_LEVEL``, then INFO.
    The root logger is left alone. Once a handler is installed, later calls
    are no-ops unless ``force`` replaces it. The library itself never calls
    this.
    """
    logger = logging.getLogger(LOGGER_NAME)
    installed = [h for h in logger.handlers if getattr(h, _HANDLER_FLAG, False)]
    if installed and not force:
        return logger

    for handler in installed:
        logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    setattr(handler, _HANDLER_FLAG, True)
    logger.addHandler(handler)
    logger.setLevel(_level(level if level is not None else os.environ.get(_ENV_VAR)))
    return logger
