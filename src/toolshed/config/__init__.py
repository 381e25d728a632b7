"""Configuration management for Toolshed.

Provides the process-wide configuration source (ToolshedSettings) loaded from
environment variables and .env, plus logging setup.
"""

from .app_settings import ToolshedSettings, get_settings, reset_settings
from .log_setup import configure_logging

__all__ = [
    "ToolshedSettings",
    "configure_logging",
    "get_settings",
    "reset_settings",
]
