"""Logging for graphsolve.

Every package logger is a child of the ``graphsolve`` logger, which owns the
single handler. Records are written to standard error so that standard output
carries only results (tables or JSON).
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "graphsolve"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


class _StderrHandler(logging.StreamHandler):
    """Stream handler that writes to whatever ``sys.stderr`` is at emit time.

    A plain ``StreamHandler(sys.stderr)`` keeps the stream it was created
    with, which goes stale when the stream is swapped after import.
    """

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the package handler to the ``graphsolve`` logger.

    Does nothing once the logger is configured; call ``reset_logging`` first
    to install a different handler or format.

    Args:
        level: Initial level for the logger and its handler.
        format_string: Record format, ``DEFAULT_FORMAT`` if omitted.
        handler: Handler to install instead of the standard-error one.
    """
    global _configured
    if _configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(level)

    handler = handler or _StderrHandler()
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)
    # pytest's caplog listens on the stdlib root logger
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (normally ``__name__``).

    The logger has no handler or level of its own and defers to the
    ``graphsolve`` logger.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``graphsolve`` logger and of its handlers."""
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def apply_verbosity(verbose: bool = False, quiet: bool = False) -> int:
    """Map command-line verbosity flags to a level and apply it.

    ``verbose`` wins over ``quiet``. Without either flag the level is INFO.

    Returns:
        The level that was applied.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    set_global_log_level(level)
    return level


def reset_logging() -> None:
    """Remove the package handler so the next call reconfigures from scratch."""
    global _configured
    _configured = False
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
