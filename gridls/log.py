"""Logging setup for the ``gridls`` logger hierarchy.

Listing diagnostics meant for users are written to stderr directly; this
logger only carries debug detail about degraded entries and skipped paths.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "gridls"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(verbose: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Attach one stderr handler to the package logger and set its level.

    Repeated calls replace the level but never stack handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)
    logger.propagate = False
    return logger


__all__ = ["LOGGER_NAME", "configure_logging"]
