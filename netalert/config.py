"""Environment-based settings (NETALERT_*). Load a .env first with python-dotenv if needed."""

import logging
import os
from dataclasses import dataclass

DEFAULT_LOG_LEVEL = logging.WARNING
DEFAULT_OUTAGE_MESSAGE = (
    "We are experiencing a temporary outage. We apologize for the inconvenience."
)


@dataclass(frozen=True)
class Settings:
    log_level: int = DEFAULT_LOG_LEVEL
    outage_message: str = DEFAULT_OUTAGE_MESSAGE


def _parse_log_level(raw: str | None) -> int:
    if not raw:
        return DEFAULT_LOG_LEVEL
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    # getLevelName returns "Level X" for unknown names
    if isinstance(level, int):
        return level
    return DEFAULT_LOG_LEVEL


def load_settings() -> Settings:
    """Read settings from the environment; unset or invalid values fall back to defaults."""
    message = (os.environ.get("NETALERT_OUTAGE_MESSAGE") or "").strip()
    return Settings(
        log_level=_parse_log_level(os.environ.get("NETALERT_LOG_LEVEL")),
        outage_message=message or DEFAULT_OUTAGE_MESSAGE,
    )
