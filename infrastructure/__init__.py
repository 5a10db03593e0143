"""Infrastructure helpers."""

from .settings import get_settings, load_settings, make_clock, AppSettings
from .constants import *  # noqa: F401,F403

__all__ = ["get_settings", "load_settings", "make_clock", "AppSettings"]
