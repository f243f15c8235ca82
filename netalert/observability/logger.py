"""Structured logging for provider/subscriber events (register, broadcast, receive)."""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "netalert"


def configure_logging(level: Optional[int] = None) -> logging.Logger:
    """Set up the shared netalert logger. Child loggers inherit its handler and level.

    Diagnostics go to stderr; stdout is kept for notifications. When level is None it is
    read from NETALERT_LOG_LEVEL.
    """
    if level is None:
        from netalert.config import load_settings
        level = load_settings().log_level
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
            )
        )
        root.addHandler(handler)
    else:
        for handler in root.handlers:
            if isinstance(handler, logging.StreamHandler):
                handler.setStream(sys.stderr)
    root.setLevel(level)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the netalert hierarchy; its level is inherited, not set here."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        configure_logging()
    return logging.getLogger(name)
