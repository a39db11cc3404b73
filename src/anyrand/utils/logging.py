"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``anyrand`` namespace.
    - Allow optional verbose/debug modes for the command line.

Notes/Edge cases:
    - Library modules only call :func:`get_logger`; handlers are installed by
      :func:`configure_logging`, which the CLI calls once.
    - Logging configuration is idempotent.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "anyrand"
_FORMAT = "%(levelname)s %(name)s: %(message)s"

__all__ = ["ROOT_LOGGER", "get_logger", "configure_logging"]


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` nested under the package logger."""

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Install a single stderr handler on the package logger and set ``level``.

    Repeated calls replace the previous handler so it always writes to the
    current ``sys.stderr``.
    """

    logger = logging.getLogger(ROOT_LOGGER)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    for old in [h for h in logger.handlers if getattr(h, "_anyrand", False)]:
        logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._anyrand = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
