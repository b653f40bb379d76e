"""Logging utilities.

All package loggers live under the ``threadpress`` namespace.  Modules call
:func:`get_logger` with their ``__name__``; the CLI calls
:func:`configure_logging` once to attach a stderr handler.  Calling it again
only adjusts the level.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "threadpress"
_FORMAT = "%(levelname)s %(name)s: %(message)s"

__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]


class _StderrHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler writing to whatever ``sys.stderr`` is at emit time."""

    @property  # type: ignore[override]
    def stream(self) -> object:
        return sys.stderr

    @stream.setter
    def stream(self, value: object) -> None:
        pass


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package namespace."""

    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger."""

    logger = logging.getLogger(ROOT_LOGGER)
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)
    if not any(isinstance(h, _StderrHandler) for h in logger.handlers):
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    return logger
