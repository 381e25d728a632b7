"""Process-wide configuration helper functions.

Module-level functions mirroring ConfigAccessor, bound to a default accessor
built from the environment-sourced settings:

    from toolshed import configuration_helper as config

    timeout = config.get_setting_as_int("RequestTimeout", 30)
    dsn = config.get_connection_string("Primary", "Default")

Tests and embedding applications can install their own accessor with
set_config_accessor().
"""

import logging
from datetime import datetime
from typing import List, Optional

from toolshed.config.app_settings import get_settings
from toolshed.constants import DEFAULT_ARRAY_DELIMITER
from toolshed.service.config_accessor import ConfigAccessor
from toolshed.store import SettingsAppSettingsStore, SettingsConnectionStringStore

logger = logging.getLogger(__name__)

_accessor: Optional[ConfigAccessor] = None


def get_config_accessor() -> ConfigAccessor:
    """Get the process-wide accessor, building it from get_settings() on first use.

    Returns:
        ConfigAccessor instance
    """
    global _accessor

    if _accessor is None:
        settings = get_settings()
        _accessor = ConfigAccessor(
            app_settings=SettingsAppSettingsStore(settings),
            connection_strings=SettingsConnectionStringStore(settings),
        )
        logger.debug(
            f"Loaded {len(settings.app_settings)} app settings and "
            f"{len(settings.connection_strings)} connection strings"
        )

    return _accessor


def set_config_accessor(accessor: ConfigAccessor) -> None:
    """Install the accessor used by the module-level functions."""
    global _accessor
    _accessor = accessor


def reset_config_accessor() -> None:
    """Drop the installed accessor; the next lookup rebuilds it from settings."""
    global _accessor
    _accessor = None


def get_setting(key: str) -> str:
    return get_config_accessor().get_setting(key)


def get_setting_or_default(key: str, default: Optional[str]) -> Optional[str]:
    return get_config_accessor().get_setting_or_default(key, default)


def get_setting_as_bool(key: str, default: Optional[bool] = None) -> bool:
    return get_config_accessor().get_setting_as_bool(key, default)


def get_setting_as_int(key: str, default: Optional[int] = None) -> int:
    return get_config_accessor().get_setting_as_int(key, default)


def get_setting_as_long(key: str, default: Optional[int] = None) -> int:
    return get_config_accessor().get_setting_as_long(key, default)


def get_setting_as_float(key: str, default: Optional[float] = None) -> float:
    return get_config_accessor().get_setting_as_float(key, default)


def get_setting_as_datetime(
    key: str, default: Optional[datetime] = None
) -> datetime:
    return get_config_accessor().get_setting_as_datetime(key, default)


def get_setting_array(
    key: str,
    delimiter: str = DEFAULT_ARRAY_DELIMITER,
    remove_empty_entries: bool = True,
) -> List[str]:
    return get_config_accessor().get_setting_array(
        key, delimiter, remove_empty_entries
    )


def get_connection_string(key: str, fallback_key: Optional[str] = None) -> str:
    return get_config_accessor().get_connection_string(key, fallback_key)
