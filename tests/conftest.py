"""Root-level pytest configuration and shared fixtures.

Adds the src/ directory to sys.path so toolshed can be imported without installation.
Provides in-memory stores and accessors used across all test suites.

Key exports:
    - Sample settings and connection strings
    - Pytest fixtures for stores and a fully wired ConfigAccessor
"""

import sys
from pathlib import Path
from typing import Dict

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from toolshed import configuration_helper  # noqa: E402
from toolshed.config import app_settings  # noqa: E402
from toolshed.service.config_accessor import ConfigAccessor  # noqa: E402
from toolshed.store import (  # noqa: E402
    ConnectionStringEntry,
    InMemoryAppSettingsStore,
    InMemoryConnectionStringStore,
)

# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------


SAMPLE_APP_SETTINGS: Dict[str, str] = {
    "SiteName": "Toolshed",
    "Whitespace": "   ",
    "Empty": "",
    "FeatureEnabled": "True",
    "FeatureDisabled": "false",
    "Retries": "7",
    "NegativeOffset": "-12",
    "BigCounter": "9000000000",
    "Ratio": "0.75",
    "LaunchDate": "2024-01-15T10:30:00",
    "Hosts": "a,b,c",
    "SparseHosts": "a,,b,",
    "PipeHosts": "x|y",
    "SoloHost": "solo",
    "NotANumber": "abc",
}

SAMPLE_CONNECTION_STRINGS = {
    "primary": ConnectionStringEntry(
        name="primary",
        connection_string="postgresql://db-primary/app",
        provider_name="postgresql",
    ),
    "fallback": "postgresql://db-fallback/app",
    "blank": "",
}


# ---------------------------------------------------------------------------
# Singleton isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_singletons():
    """Ensure no cached settings or accessor leak between tests."""
    app_settings.reset_settings()
    configuration_helper.reset_config_accessor()
    yield
    app_settings.reset_settings()
    configuration_helper.reset_config_accessor()


# ---------------------------------------------------------------------------
# Store and accessor fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings_store() -> InMemoryAppSettingsStore:
    """Provide an app settings store holding SAMPLE_APP_SETTINGS."""
    return InMemoryAppSettingsStore(SAMPLE_APP_SETTINGS)


@pytest.fixture
def connection_store() -> InMemoryConnectionStringStore:
    """Provide a connection string store holding SAMPLE_CONNECTION_STRINGS."""
    return InMemoryConnectionStringStore(SAMPLE_CONNECTION_STRINGS)


@pytest.fixture
def accessor(
    settings_store: InMemoryAppSettingsStore,
    connection_store: InMemoryConnectionStringStore,
) -> ConfigAccessor:
    """Provide a ConfigAccessor wired to the sample stores."""
    return ConfigAccessor(
        app_settings=settings_store, connection_strings=connection_store
    )
