"""Read-only store interfaces consumed by ConfigAccessor."""

from abc import ABC, abstractmethod
from typing import List, Optional

from toolshed.store.models import ConnectionStringEntry


class AppSettingsStore(ABC):
    """Provides read-only access to named string settings."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get a setting value by key. Returns None if not found."""
        ...

    @abstractmethod
    def keys(self) -> List[str]:
        """List the keys held by the store."""
        ...

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None


class ConnectionStringStore(ABC):
    """Provides read-only access to named connection strings."""

    @abstractmethod
    def get(self, name: str) -> Optional[ConnectionStringEntry]:
        """Get a connection string entry by name. Returns None if not found."""
        ...

    @abstractmethod
    def names(self) -> List[str]:
        """List the connection string names held by the store."""
        ...

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None
