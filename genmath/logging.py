"""Logging utilities for genmath runs."""

from __future__ import annotations

import logging

_LOGGER_NAME = "genmath"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the genmath hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Send genmath diagnostics to stderr; DEBUG adds per-declaration detail."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # One handler only, however many generations run in this process.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("[genmath] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)
    return logger


__all__ = ["configure_logging", "get_logger"]
