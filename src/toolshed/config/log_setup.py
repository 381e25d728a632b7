"""Logging setup driven by ToolshedSettings."""

import logging
from typing import Optional

from toolshed.config.app_settings import ToolshedSettings, get_settings


def configure_logging(settings: Optional[ToolshedSettings] = None) -> None:
    """Configure root logging from the log_level and log_format settings.

    Args:
        settings: Settings to read; defaults to the process-wide settings

    Raises:
        ValueError: If log_level is not a known logging level name
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {settings.log_level}")

    logging.basicConfig(level=level, format=settings.log_format)
