"""Centralized application settings.

Runtime configuration is read from the environment (optionally seeded from a
``.env`` file) into an immutable :class:`AppSettings` snapshot. Callers use
:func:`get_settings` for the cached process-wide snapshot or
:func:`load_settings` with an explicit mapping in tests.
"""

from __future__ import annotations
from tracking import t

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Callable, Mapping, Optional

import pytz
from dotenv import load_dotenv

from . import constants


def _to_bool(value: Optional[str], default: bool = False) -> bool:
    """Normalize environment strings such as "true"/"1" into booleans."""
    t('infrastructure.settings._to_bool')

    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _to_capacity(value: Optional[str]) -> int:
    """Parse the train capacity, falling back to the default for bad values."""
    t('infrastructure.settings._to_capacity')

    if value is None or not value.strip():
        return constants.DEFAULT_TRAIN_CAPACITY
    try:
        capacity = int(value)
    except ValueError:
        logging.getLogger('Settings').warning(
            "Invalid TRAIN_CAPACITY %r; using default %s",
            value,
            constants.DEFAULT_TRAIN_CAPACITY,
        )
        return constants.DEFAULT_TRAIN_CAPACITY
    if capacity <= 0:
        logging.getLogger('Settings').warning(
            "TRAIN_CAPACITY must be positive, got %s; using default %s",
            capacity,
            constants.DEFAULT_TRAIN_CAPACITY,
        )
        return constants.DEFAULT_TRAIN_CAPACITY
    return capacity


@dataclass(frozen=True)
class AppSettings:
    """Immutable snapshot of high-level configuration values."""

    production_mode: bool
    train_capacity: int
    data_directory: str
    confirmed_file: str
    waiting_file: str
    autosave: bool
    timezone: str
    log_directory: str


def load_settings(env: Optional[Mapping[str, str]] = None) -> AppSettings:
    """Load configuration from the environment and fall back to defaults."""
    t('infrastructure.settings.load_settings')

    if env is None:
        load_dotenv(override=False)
        env = os.environ

    production_mode = _to_bool(env.get("PRODUCTION_MODE", "false"), default=False)
    train_capacity = _to_capacity(env.get("TRAIN_CAPACITY"))

    data_directory = env.get("DATA_DIRECTORY", constants.DEFAULT_DATA_DIRECTORY)
    confirmed_file = env.get(
        "CONFIRMED_FILE",
        str(Path(data_directory) / constants.CONFIRMED_FILE_NAME),
    )
    waiting_file = env.get(
        "WAITING_FILE",
        str(Path(data_directory) / constants.WAITING_FILE_NAME),
    )

    autosave = _to_bool(env.get("AUTOSAVE", "true"), default=True)
    timezone = env.get("BOOKING_TIMEZONE", "").strip()
    log_directory = env.get("LOG_DIRECTORY", constants.DEFAULT_LOG_DIRECTORY)

    return AppSettings(
        production_mode=production_mode,
        train_capacity=train_capacity,
        data_directory=data_directory,
        confirmed_file=confirmed_file,
        waiting_file=waiting_file,
        autosave=autosave,
        timezone=timezone,
        log_directory=log_directory,
    )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return a cached :class:`AppSettings` instance."""
    t('infrastructure.settings.get_settings')

    return load_settings()


def make_clock(timezone: str = "") -> Callable[[], str]:
    """
    Build the timestamp source used for booking and promotion times.

    Args:
        timezone: pytz zone name. Empty means the machine's local time.

    Returns:
        Zero-argument callable returning ``YYYY-MM-DD HH:MM:SS`` strings
    """
    t('infrastructure.settings.make_clock')

    tz = pytz.timezone(timezone) if timezone else None

    def clock() -> str:
        now = datetime.now(tz) if tz is not None else datetime.now()
        return now.strftime(constants.TIMESTAMP_FORMAT)

    return clock
