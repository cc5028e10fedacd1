"""Package logging for gridflow.

Every module logs through ``get_logger(__name__)``; records propagate to the
``gridflow`` logger, which owns the only handler. The handler writes to
stderr so that results printed on stdout (``gridflow run --stdout``) stay
machine-readable.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "gridflow"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: str = DEFAULT_FORMAT,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``gridflow`` logger.

    Only the first call has an effect until ``reset_logging()`` runs.

    Args:
        level: Initial level of the ``gridflow`` logger.
        format_string: Record format for the handler.
        handler: Handler to install; defaults to a stderr ``StreamHandler``.
    """
    global _configured
    if _configured:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = handler or logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(handler)
    # pytest's caplog listens on the Python root logger
    root_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, leaving its level to the ``gridflow`` logger."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``gridflow`` logger and its handlers."""
    setup_root_logger()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def level_for_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map the command-line ``--verbose``/``--quiet`` flags to a log level.

    ``--verbose`` wins when both are given.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def reset_logging() -> None:
    """Drop the handler so the next ``setup_root_logger()`` call reconfigures."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
