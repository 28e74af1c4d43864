"""
Environment configuration for EasyCal
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from easycal.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_SLOT_INTERVAL_MINUTES,
    DEFAULT_TIMEZONE,
)


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: str = ""
    slot_interval: int = DEFAULT_SLOT_INTERVAL_MINUTES
    timezone: str = DEFAULT_TIMEZONE


def _parse_slot_interval(raw: str) -> int:
    try:
        interval = int(raw)
    except ValueError as e:
        raise ValueError(f"Invalid EASYCAL_SLOT_INTERVAL value: {raw!r}. Expected minutes.") from e

    if interval <= 0:
        raise ValueError(f"Invalid EASYCAL_SLOT_INTERVAL value: {raw!r}. Must be positive.")
    return interval


def load_settings(environ: Optional[Mapping[str, str]] = None, dotenv_path: Optional[str] = None) -> Settings:
    """
    Loads settings from the environment.

    Args:
        environ: Variables to read instead of os.environ (.env is not loaded then)
        dotenv_path: Path to a .env file, defaults to one in the working directory

    Returns:
        Settings: Parsed configuration
    """
    if environ is None:
        load_dotenv(dotenv_path=dotenv_path, override=False)
        environ = os.environ

    log_level = environ.get("EASYCAL_LOG_LEVEL") or environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL

    return Settings(
        log_level=log_level.strip().upper(),
        log_file=environ.get("EASYCAL_LOG_FILE", "").strip(),
        slot_interval=_parse_slot_interval(environ.get("EASYCAL_SLOT_INTERVAL", str(DEFAULT_SLOT_INTERVAL_MINUTES))),
        timezone=environ.get("EASYCAL_TIMEZONE", "").strip() or DEFAULT_TIMEZONE,
    )
