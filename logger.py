"""
Centralised logging configuration.

Usage:
    from logger import get_logger
    logger = get_logger(__name__)
    logger.info("Calendar shown")

Library modules only ask for loggers; the application entry point calls
:func:`configure_logging` once to attach the handler and set the level.
"""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def configure_logging(level: str = "INFO") -> None:
    """Attach a stdout handler to the root logger; later calls only update the level."""
    global _handler

    root = logging.getLogger()
    resolved = logging.getLevelName(level.upper())
    root.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
    if _handler is not None:
        return

    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    root.addHandler(_handler)

    # Pillow logs every plugin import at DEBUG
    logging.getLogger("PIL").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger with the given *name*."""
    return logging.getLogger(name)
