"""Logging setup for the DevMatch CLI.

Everything under ``devmatch.*`` logs through one stderr handler attached to
the ``devmatch`` logger. The HTTP and LLM libraries DevMatch drives are
chatty at INFO (one line per request), so they are held at WARNING unless
the CLI runs with ``--log-level DEBUG``.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "devmatch"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

HANDLER_NAME = "devmatch-console"

# Loggers of the GitHub/Jooble HTTP stack, litellm and the SQLite driver
LIBRARY_LOGGERS: tuple[str, ...] = (
    "httpx",
    "httpcore",
    "LiteLLM",
    "LiteLLM Router",
    "LiteLLM Proxy",
    "aiosqlite",
)


def _resolve_level(level: str | None) -> int:
    resolved = logging.getLevelName((level or "INFO").upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _console_handler(logger: logging.Logger) -> logging.Handler | None:
    for handler in logger.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler
    return None


def configure_logging(
    level: str | None = None,
    *,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the ``devmatch`` logger and quiet third-party loggers.

    Safe to call repeatedly; later calls only change levels.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL (default INFO).
        stream: Where to write records (default stderr).

    Returns:
        The ``devmatch`` logger.
    """
    log_level = _resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    handler = _console_handler(logger)
    if handler is None:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    handler.setLevel(log_level)

    library_level = logging.DEBUG if log_level <= logging.DEBUG else logging.WARNING
    for name in LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(max(library_level, log_level))

    return logger


def reset_logging() -> None:
    """Undo configure_logging (used by tests)."""
    logger = logging.getLogger(LOGGER_NAME)
    handler = _console_handler(logger)
    if handler is not None:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True

    for name in LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)
