"""Logging setup shared by every wordladder module.

All module loggers are children of the ``wordladder`` logger, which owns the
only handler. Child loggers never get handlers of their own.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "wordladder"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single formatted handler to the ``wordladder`` logger.

    Subsequent calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Initial level (default: INFO).
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Handler to install; defaults to a stdout stream handler.
    """
    global _configured

    if _configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    root.handlers.clear()

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)

    # Keep propagation so pytest's caplog sees the records
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, usually ``__name__`` of the caller.

    The returned logger inherits level and handler from the root
    ``wordladder`` logger.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Change the level of the root logger and its handlers."""
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the installed handler so the next setup starts clean (for tests)."""
    global _configured
    _configured = False

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
