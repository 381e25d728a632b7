"""Configuration stores.

Read-only interfaces for app settings and connection strings, with in-memory
implementations and implementations backed by ToolshedSettings.
"""

from toolshed.store.base import AppSettingsStore, ConnectionStringStore
from toolshed.store.memory_store import (
    InMemoryAppSettingsStore,
    InMemoryConnectionStringStore,
)
from toolshed.store.models import ConnectionStringEntry
from toolshed.store.settings_store import (
    SettingsAppSettingsStore,
    SettingsConnectionStringStore,
)

__all__ = [
    "AppSettingsStore",
    "ConnectionStringEntry",
    "ConnectionStringStore",
    "InMemoryAppSettingsStore",
    "InMemoryConnectionStringStore",
    "SettingsAppSettingsStore",
    "SettingsConnectionStringStore",
]
