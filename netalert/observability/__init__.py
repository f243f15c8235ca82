"""Observability: logging for the notification system."""

from netalert.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
