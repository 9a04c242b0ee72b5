"""Logging utilities for forestgraph.

Every module asks for its logger through `get_logger(__name__)`; all loggers
live under the ``forestgraph`` namespace and write to stderr.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO

LOG_LEVEL_ENV_VAR = "FORESTGRAPH_LOG_LEVEL"


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        value = getattr(logging, level.strip().upper(), logging.WARNING)
        return value if isinstance(value, int) else logging.WARNING
    return level


# Unknown level names fall back to WARNING.
_DEFAULT_LEVEL = _coerce_level(os.getenv(LOG_LEVEL_ENV_VAR, "WARNING"))
_DEFAULT_FORMAT = '[%(levelname)s] %(name)s: %(message)s'
# None means sys.stderr at the time a handler is built.
_DEFAULT_STREAM: Optional[TextIO] = None

_loggers: dict[str, logging.Logger] = {}


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached so handlers are attached only once. Names outside the
    ``forestgraph`` namespace are prefixed with ``forestgraph.``.

    Args:
        name: Logger name (typically `__name__`). If None, returns the
            package logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from forestgraph.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Built BFS forest")
    """
    if name is None:
        name = "forestgraph"

    if name == "forestgraph" or name.startswith("forestgraph."):
        logger_name = name
    else:
        logger_name = f"forestgraph.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)

        handler = logging.StreamHandler(_DEFAULT_STREAM or sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))

        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the logging level for all forestgraph loggers.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or string
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').
    """
    global _DEFAULT_LEVEL

    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure logging for forestgraph.

    Replaces the handler of every existing forestgraph logger. The level,
    format and stream also become the defaults for loggers created
    afterwards.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, keeps the current
            default format.
        stream: Output stream (default: sys.stderr).

    Example:
        >>> from forestgraph.logging import configure_logging
        >>> import logging
        >>> configure_logging(level=logging.DEBUG)
    """
    global _DEFAULT_LEVEL, _DEFAULT_FORMAT, _DEFAULT_STREAM

    level = _coerce_level(level)

    if format_string is None:
        format_string = _DEFAULT_FORMAT

    formatter = logging.Formatter(format_string)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _DEFAULT_LEVEL = level
    _DEFAULT_FORMAT = format_string
    _DEFAULT_STREAM = stream
