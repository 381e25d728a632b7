from __future__ import annotations

from typing import List, Mapping, Optional, Union

from toolshed.store.base import AppSettingsStore, ConnectionStringStore
from toolshed.store.models import ConnectionStringEntry


class InMemoryAppSettingsStore(AppSettingsStore):
    """Dict-backed settings store for tests and programmatic configuration.

    The input mapping is copied, so later changes by the caller are not seen.
    """

    def __init__(
        self,
        values: Mapping[str, str] | None = None,
        case_sensitive: bool = True,
    ) -> None:
        self._values = dict(values or {})
        self._case_sensitive = case_sensitive
        self._folded = {key.casefold(): key for key in self._values}

    def get(self, key: str) -> Optional[str]:
        if self._case_sensitive:
            return self._values.get(key)
        original = self._folded.get(key.casefold())
        return self._values[original] if original is not None else None

    def keys(self) -> List[str]:
        return list(self._values)

    def __repr__(self) -> str:
        return f"InMemoryAppSettingsStore(keys={self.keys()})"


class InMemoryConnectionStringStore(ConnectionStringStore):
    """Dict-backed connection string store.

    Values may be ConnectionStringEntry objects or plain connection strings.
    """

    def __init__(
        self,
        entries: Mapping[str, Union[ConnectionStringEntry, str]] | None = None,
    ) -> None:
        self._entries: dict[str, ConnectionStringEntry] = {}
        for name, entry in (entries or {}).items():
            if isinstance(entry, str):
                entry = ConnectionStringEntry(name=name, connection_string=entry)
            self._entries[name] = entry

    def get(self, name: str) -> Optional[ConnectionStringEntry]:
        return self._entries.get(name)

    def names(self) -> List[str]:
        return list(self._entries)

    def __repr__(self) -> str:
        return f"InMemoryConnectionStringStore(names={self.names()})"
