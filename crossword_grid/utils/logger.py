"""Logging utilities for the crossword grid model."""

from __future__ import annotations

import logging
from typing import IO, Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def level_from_name(name: str, default: int = logging.WARNING) -> int:
    """Map a level name such as ``"debug"`` to its numeric value."""

    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else default


def configure_logging(level: int = logging.INFO, stream: Optional[IO[str]] = None) -> None:
    """Install a single compact handler on the root logger.

    The grid only logs wall toggles (INFO), word-start refreshes (DEBUG) and
    best-effort fallbacks (WARNING), so INFO keeps navigation silent.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "crossword_grid")
