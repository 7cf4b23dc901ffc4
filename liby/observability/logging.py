"""Centralised logging helpers for liby."""

from __future__ import annotations

import logging
from typing import Dict, Union

_LOGGER_CACHE: Dict[str, logging.Logger] = {}

LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def get_logger(name: str = "liby") -> logging.Logger:
    """Return a cached :class:`logging.Logger` instance."""

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = logging.getLogger(name)
    return _LOGGER_CACHE[name]


def configure_logging(level: Union[str, int] = "warning") -> logging.Logger:
    """Set the ``liby`` logger level and attach a console handler once."""

    numeric_level = level if isinstance(level, int) else LEVEL_MAP.get(str(level).lower(), logging.WARNING)

    logger = get_logger("liby")
    logger.setLevel(numeric_level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        # Prevent propagation to root logger to avoid duplicate messages
        logger.propagate = False
    return logger
