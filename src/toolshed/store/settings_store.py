"""Stores backed by the environment-sourced ToolshedSettings.

Environment variable names are case-insensitive, so lookups here are too.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional, TypeVar

from toolshed.store.base import AppSettingsStore, ConnectionStringStore
from toolshed.store.models import ConnectionStringEntry

if TYPE_CHECKING:
    from toolshed.config.app_settings import ToolshedSettings

T = TypeVar("T")


def _casefold_index(values: Dict[str, T]) -> Dict[str, T]:
    return {key.casefold(): value for key, value in values.items()}


class SettingsAppSettingsStore(AppSettingsStore):
    """App settings read from ToolshedSettings.app_settings.

    Attributes:
        settings: Loaded settings the store reads from
    """

    def __init__(self, settings: ToolshedSettings):
        self.settings = settings
        self._index = _casefold_index(settings.app_settings)

    def get(self, key: str) -> Optional[str]:
        return self._index.get(key.casefold())

    def keys(self) -> List[str]:
        return list(self.settings.app_settings)


class SettingsConnectionStringStore(ConnectionStringStore):
    """Connection strings read from ToolshedSettings.connection_strings.

    Attributes:
        settings: Loaded settings the store reads from
    """

    def __init__(self, settings: ToolshedSettings):
        self.settings = settings
        self._index = _casefold_index(settings.connection_strings)

    def get(self, name: str) -> Optional[ConnectionStringEntry]:
        return self._index.get(name.casefold())

    def names(self) -> List[str]:
        return list(self.settings.connection_strings)
