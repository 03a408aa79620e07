"""Environment variables configuration."""

import os
from pathlib import Path

from ..constants.config_keys import ConfigDefaults, ConfigKeys
from ..domain.query import OverlayMode


def get_db_path() -> Path:
    """Returns the SQLite database path."""
    return Path(os.getenv(ConfigKeys.DB_PATH) or ConfigDefaults.DB_PATH)


def get_log_level() -> str:
    return os.getenv(ConfigKeys.LOG_LEVEL, ConfigDefaults.LOG_LEVEL).lower()


def get_overlay_mode() -> OverlayMode:
    """Returns how locale variants replace ids: first occurrence or all of them.

    Raises:
        ValueError: If the variable holds anything but "first" or "all".
    """
    value = os.getenv(ConfigKeys.OVERLAY_MODE, ConfigDefaults.OVERLAY_MODE)
    return OverlayMode(value.strip().lower())


def get_max_descendants() -> int:
    """Returns the cap on ids gathered by one descendant expansion."""
    return int(os.getenv(ConfigKeys.MAX_DESCENDANTS, ConfigDefaults.MAX_DESCENDANTS))


def get_locale() -> int:
    return int(os.getenv(ConfigKeys.LOCALE, ConfigDefaults.LOCALE))
