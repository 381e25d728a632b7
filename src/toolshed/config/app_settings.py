"""Process-wide configuration source loaded from environment variables.

This module provides the ToolshedSettings class which loads app settings and
connection strings once, from TOOLSHED_-prefixed environment variables and an
optional .env file. The settings-backed stores read from it and the
process-wide helper functions build their default accessor on top of it.

Values can be supplied as JSON objects or one entry per variable:

    TOOLSHED_APP_SETTINGS='{"Mode": "fast", "Retries": "3"}'
    TOOLSHED_APP_SETTINGS__RETRIES=3
    TOOLSHED_CONNECTION_STRINGS='{"Primary": {"connection_string": "...", "provider_name": "postgresql"}}'
"""

from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from toolshed.constants import DEFAULT_LOG_FORMAT, DEFAULT_LOG_LEVEL
from toolshed.store.models import ConnectionStringEntry


class ToolshedSettings(BaseSettings):
    """Static configuration loaded from environment variables.

    All settings can be overridden via environment variables with the
    TOOLSHED_ prefix. For example, log_level can be set via TOOLSHED_LOG_LEVEL.

    Attributes:
        app_settings: Named string settings
        connection_strings: Named connection strings with optional provider
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Format string passed to logging.basicConfig
    """

    model_config = SettingsConfigDict(
        env_prefix="TOOLSHED_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_settings: dict[str, str] = Field(default_factory=dict)
    connection_strings: dict[str, ConnectionStringEntry] = Field(
        default_factory=dict
    )

    log_level: str = Field(default=DEFAULT_LOG_LEVEL)
    log_format: str = Field(default=DEFAULT_LOG_FORMAT)

    @field_validator("connection_strings", mode="before")
    @classmethod
    def _normalize_connection_strings(cls, value: Any) -> Any:
        """Accept plain strings as entries and name every entry after its key."""
        if not isinstance(value, dict):
            return value

        normalized = {}
        for name, entry in value.items():
            if isinstance(entry, str):
                entry = {"connection_string": entry}
            elif isinstance(entry, ConnectionStringEntry):
                entry = entry.model_dump()
            if isinstance(entry, dict):
                entry = {**entry, "name": name}
            normalized[name] = entry
        return normalized


_settings: Optional[ToolshedSettings] = None


def get_settings() -> ToolshedSettings:
    """Get singleton instance of static settings.

    Settings are loaded once and cached for application lifetime.

    Returns:
        ToolshedSettings instance
    """
    global _settings

    if _settings is None:
        _settings = ToolshedSettings()

    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
