"""Logging setup utilities for dinoshell.

Configures logging for the whole application based on the logging
configuration settings.
"""

from __future__ import annotations

import logging
import sys

from dinoshell.config.settings import LoggingConfig

CONFIGURED_LOGGERS = ("dinoshell", "uvicorn")

# Handlers installed by the last setup_logging() call.
_installed: list[logging.Handler] = []


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure logging for the dinoshell application.

    Attaches a stderr handler, plus an optional file handler, to the
    ``dinoshell`` and ``uvicorn`` loggers; uvicorn runs with
    ``log_config=None`` so it logs through the same handlers. Calling this
    again replaces the handlers from the previous call.

    Args:
        config: Logging configuration. If None, uses defaults
                (INFO level, stderr output).
    """
    if config is None:
        config = LoggingConfig()

    reset_logging()

    level = getattr(logging, config.level.upper(), logging.INFO)
    formatter = logging.Formatter(config.format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    _installed.append(console_handler)

    if config.file:
        file_handler = logging.FileHandler(config.file)
        file_handler.setFormatter(formatter)
        _installed.append(file_handler)

    for name in CONFIGURED_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in _installed:
            logger.addHandler(handler)

    logging.getLogger("dinoshell").info("Logging initialized at %s level", config.level)


def reset_logging() -> None:
    """Detach and close the handlers added by setup_logging()."""
    for name in CONFIGURED_LOGGERS:
        logger = logging.getLogger(name)
        for handler in _installed:
            logger.removeHandler(handler)
    for handler in _installed:
        handler.close()
    _installed.clear()
