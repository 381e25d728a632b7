"""Unit tests for the configuration stores.

Verifies the in-memory stores used as test doubles and for programmatic
configuration, and the stores backed by ToolshedSettings.
"""

import pytest

from toolshed.config.app_settings import ToolshedSettings
from toolshed.store import (
    AppSettingsStore,
    ConnectionStringEntry,
    ConnectionStringStore,
    InMemoryAppSettingsStore,
    InMemoryConnectionStringStore,
    SettingsAppSettingsStore,
    SettingsConnectionStringStore,
)

# ---------------------------------------------------------------------------
# In-memory stores
# ---------------------------------------------------------------------------


class TestInMemoryAppSettingsStore:
    """Tests for InMemoryAppSettingsStore."""

    def test_get_returns_value(self) -> None:
        """get returns the stored value."""
        store = InMemoryAppSettingsStore({"Mode": "fast"})

        assert store.get("Mode") == "fast"

    def test_get_returns_none_for_missing(self) -> None:
        """get returns None for an absent key."""
        assert InMemoryAppSettingsStore().get("Mode") is None

    def test_case_sensitive_by_default(self) -> None:
        """Lookups are case-sensitive unless configured otherwise."""
        store = InMemoryAppSettingsStore({"Mode": "fast"})

        assert store.get("mode") is None

    def test_case_insensitive_when_configured(self) -> None:
        """case_sensitive=False matches keys regardless of case."""
        store = InMemoryAppSettingsStore({"Mode": "fast"}, case_sensitive=False)

        assert store.get("MODE") == "fast"

    def test_copies_input_mapping(self) -> None:
        """Later changes to the caller's dict are not observed."""
        values = {"Mode": "fast"}
        store = InMemoryAppSettingsStore(values)
        values["Mode"] = "slow"

        assert store.get("Mode") == "fast"

    def test_keys_and_contains(self) -> None:
        """keys lists stored keys and `in` checks presence."""
        store = InMemoryAppSettingsStore({"A": "1", "B": ""})

        assert store.keys() == ["A", "B"]
        assert "A" in store
        assert "B" in store
        assert "C" not in store

    def test_is_app_settings_store(self) -> None:
        """InMemoryAppSettingsStore implements AppSettingsStore."""
        assert isinstance(InMemoryAppSettingsStore(), AppSettingsStore)


class TestInMemoryConnectionStringStore:
    """Tests for InMemoryConnectionStringStore."""

    def test_wraps_plain_strings_in_entries(self) -> None:
        """Plain strings become entries named after their key."""
        store = InMemoryConnectionStringStore({"main": "Server=db;"})

        assert store.get("main") == ConnectionStringEntry(
            name="main", connection_string="Server=db;"
        )

    def test_keeps_entries(self) -> None:
        """ConnectionStringEntry values are stored as given."""
        entry = ConnectionStringEntry(
            name="main", connection_string="Server=db;", provider_name="mssql"
        )
        store = InMemoryConnectionStringStore({"main": entry})

        assert store.get("main").provider_name == "mssql"

    def test_get_returns_none_for_missing(self) -> None:
        """get returns None for an absent name."""
        assert InMemoryConnectionStringStore().get("main") is None

    def test_names_and_contains(self) -> None:
        """names lists entries and `in` checks presence."""
        store = InMemoryConnectionStringStore({"main": "", "audit": "x"})

        assert store.names() == ["main", "audit"]
        assert "main" in store
        assert "other" not in store
        assert isinstance(store, ConnectionStringStore)


# ---------------------------------------------------------------------------
# Settings-backed stores
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> ToolshedSettings:
    """Provide ToolshedSettings built from keyword arguments."""
    return ToolshedSettings(
        app_settings={"SiteName": "Toolshed", "Retries": "3"},
        connection_strings={
            "Primary": {"connection_string": "Server=db;", "provider_name": "mssql"},
            "Audit": "Server=audit;",
        },
    )


class TestSettingsAppSettingsStore:
    """Tests for SettingsAppSettingsStore."""

    def test_get_returns_value(self, settings: ToolshedSettings) -> None:
        """get reads from ToolshedSettings.app_settings."""
        assert SettingsAppSettingsStore(settings).get("Retries") == "3"

    def test_lookup_is_case_insensitive(self, settings: ToolshedSettings) -> None:
        """Keys match regardless of case."""
        assert SettingsAppSettingsStore(settings).get("sitename") == "Toolshed"

    def test_keys(self, settings: ToolshedSettings) -> None:
        """keys lists the configured app settings."""
        assert sorted(SettingsAppSettingsStore(settings).keys()) == ["Retries", "SiteName"]


class TestSettingsConnectionStringStore:
    """Tests for SettingsConnectionStringStore."""

    def test_get_returns_entry(self, settings: ToolshedSettings) -> None:
        """get returns the entry with its provider name."""
        entry = SettingsConnectionStringStore(settings).get("Primary")

        assert entry.connection_string == "Server=db;"
        assert entry.provider_name == "mssql"
        assert entry.name == "Primary"

    def test_lookup_is_case_insensitive(self, settings: ToolshedSettings) -> None:
        """Names match regardless of case."""
        entry = SettingsConnectionStringStore(settings).get("AUDIT")

        assert entry.connection_string == "Server=audit;"
        assert entry.provider_name is None

    def test_missing_name_returns_none(self, settings: ToolshedSettings) -> None:
        """get returns None for an unknown name."""
        assert SettingsConnectionStringStore(settings).get("Reporting") is None
