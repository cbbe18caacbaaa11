"""
Logging — Diagnostics for f itself

Every module logs through logging.getLogger(__name__), so everything sits
under the "fcli" logger. configure_logging() gives that logger one stderr
handler. User-facing output (help, prompts, errors) is printed, not logged.
"""

import logging
import sys
from typing import Optional, TextIO

ROOT_LOGGER = "fcli"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

# Handler installed by the last configure_logging() call
_handler: Optional[logging.Handler] = None


def parse_level(name: Optional[str]) -> int:
    """Map a level name to a logging level; unknown names mean WARNING."""
    return LEVELS.get((name or "").strip().lower(), logging.WARNING)


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Point the fcli logger at stderr.

    Safe to call more than once: the previous handler is replaced, not stacked.

    Args:
        level: Level name (debug, info, warning, error)
        stream: Output stream (default: sys.stderr)

    Returns:
        The configured fcli logger
    """
    global _handler

    logger = logging.getLogger(ROOT_LOGGER)
    numeric = parse_level(level)

    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    _handler.setLevel(numeric)

    logger.addHandler(_handler)
    logger.setLevel(numeric)
    logger.propagate = False
    return logger


def reset_logging() -> None:
    """Detach the handler configure_logging() installed and restore defaults."""
    global _handler

    logger = logging.getLogger(ROOT_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
