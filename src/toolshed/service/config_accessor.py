"""Typed access to app settings and connection strings.

This module provides ConfigAccessor, which reads string values from an
injected AppSettingsStore / ConnectionStringStore and converts them to the
requested type, falling back to caller-supplied defaults.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional, TypeVar

from toolshed.constants import (
    DEFAULT_ARRAY_DELIMITER,
    MSG_CONNECTION_STRING_EMPTY,
    MSG_CONNECTION_STRING_NOT_FOUND,
    MSG_INVALID_APP_SETTING,
    MSG_MISSING_APP_SETTING,
    MSG_MISSING_APP_SETTING_NO_DEFAULT,
    TYPE_BOOL,
    TYPE_DATETIME,
    TYPE_FLOAT,
    TYPE_INT,
    TYPE_LONG,
)
from toolshed.exception import MissingValueError, ParseError
from toolshed.store import AppSettingsStore, ConnectionStringStore
from toolshed.utils.converters import (
    to_bool,
    to_datetime,
    to_float,
    to_int32,
    to_int64,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConfigAccessor:
    """Typed lookups over the app settings and connection string stores.

    Every typed getter follows the same rule: a stored, non-empty value is
    converted (and must convert), otherwise the default is returned, and
    without a default the lookup fails with MissingValueError.

    Attributes:
        app_settings: Store of named string settings
        connection_strings: Store of named connection strings
    """

    def __init__(
        self,
        app_settings: AppSettingsStore,
        connection_strings: ConnectionStringStore,
    ):
        self.app_settings = app_settings
        self.connection_strings = connection_strings

    def find_setting(self, key: str) -> Optional[str]:
        """Get the raw stored value without validating it.

        Args:
            key: Setting key

        Returns:
            Stored value, or None if the key is absent
        """
        return self.app_settings.get(key)

    def get_setting(self, key: str) -> str:
        """Get a required setting.

        Args:
            key: Setting key

        Returns:
            Stored value

        Raises:
            MissingValueError: If the key is absent or its value is empty or whitespace
        """
        value = self.find_setting(key)
        if value is None or not value.strip():
            raise MissingValueError(MSG_MISSING_APP_SETTING, field=key)
        return value

    def get_setting_or_default(
        self, key: str, default: Optional[str]
    ) -> Optional[str]:
        """Get a setting, or the default when it is absent or empty.

        A whitespace-only value is returned as stored.

        Args:
            key: Setting key
            default: Value returned when nothing is stored; may be None

        Returns:
            Stored value or default
        """
        value = self.find_setting(key)
        if not value:
            logger.debug(f"AppSetting {key} not set, using default")
            return default
        return value

    def get_setting_as_bool(self, key: str, default: Optional[bool] = None) -> bool:
        """Get a setting as a boolean (``true``/``false``, any case).

        Raises:
            MissingValueError: If nothing is stored and no default was given
            ParseError: If the stored value is not a boolean
        """
        return self._get_typed(key, default, to_bool, TYPE_BOOL)

    def get_setting_as_int(self, key: str, default: Optional[int] = None) -> int:
        """Get a setting as a signed 32-bit integer.

        Raises:
            MissingValueError: If nothing is stored and no default was given
            ParseError: If the stored value is not an integer or overflows
        """
        return self._get_typed(key, default, to_int32, TYPE_INT)

    def get_setting_as_long(self, key: str, default: Optional[int] = None) -> int:
        """Get a setting as a signed 64-bit integer.

        Raises:
            MissingValueError: If nothing is stored and no default was given
            ParseError: If the stored value is not an integer or overflows
        """
        return self._get_typed(key, default, to_int64, TYPE_LONG)

    def get_setting_as_float(
        self, key: str, default: Optional[float] = None
    ) -> float:
        """Get a setting as a float.

        Raises:
            MissingValueError: If nothing is stored and no default was given
            ParseError: If the stored value is not a number
        """
        return self._get_typed(key, default, to_float, TYPE_FLOAT)

    def get_setting_as_datetime(
        self, key: str, default: Optional[datetime] = None
    ) -> datetime:
        """Get a setting as a datetime.

        Raises:
            MissingValueError: If nothing is stored and no default was given
            ParseError: If the stored value is not a date/time
        """
        return self._get_typed(key, default, to_datetime, TYPE_DATETIME)

    def get_setting_array(
        self,
        key: str,
        delimiter: str = DEFAULT_ARRAY_DELIMITER,
        remove_empty_entries: bool = True,
    ) -> List[str]:
        """Get a delimited setting as a list of strings.

        Args:
            key: Setting key
            delimiter: Separator between items
            remove_empty_entries: Drop empty items produced by the split

        Returns:
            The split items, or a single-item list when the value holds no delimiter

        Raises:
            MissingValueError: If the key is absent or its value is empty or whitespace
            ValueError: If delimiter is empty
        """
        if not delimiter:
            raise ValueError("delimiter must not be empty")

        value = self.get_setting(key)
        if delimiter not in value:
            return [value]

        items = value.split(delimiter)
        if remove_empty_entries:
            items = [item for item in items if item]
        return items

    def get_connection_string(
        self, key: str, fallback_key: Optional[str] = None
    ) -> str:
        """Get a connection string, trying fallback_key once if key is not registered.

        Args:
            key: Connection string name
            fallback_key: Name to look up when key has no entry

        Returns:
            Connection string text

        Raises:
            MissingValueError: If no entry is found, or the entry's connection string is empty
        """
        entry = self.connection_strings.get(key)
        if entry is None:
            if fallback_key:
                logger.debug(
                    f"Connection string {key} not found, trying {fallback_key}"
                )
                return self.get_connection_string(fallback_key)

            raise MissingValueError(MSG_CONNECTION_STRING_NOT_FOUND, field=key)

        if not entry.connection_string:
            raise MissingValueError(MSG_CONNECTION_STRING_EMPTY, field=key)

        return entry.connection_string

    def _require_or_default(self, key: str, has_default: bool) -> Optional[str]:
        """Return the stored value, or None when empty and a default may be used."""
        value = self.find_setting(key)
        if not value and not has_default:
            raise MissingValueError(
                MSG_MISSING_APP_SETTING_NO_DEFAULT.format(key=key), field=key
            )
        return value

    def _get_typed(
        self,
        key: str,
        default: Optional[T],
        convert: Callable[[str], T],
        target_type: str,
    ) -> T:
        value = self._require_or_default(key, default is not None)
        if not value:
            logger.debug(f"AppSetting {key} not set, using default {default!r}")
            return default

        try:
            return convert(value)
        except ValueError as e:
            raise ParseError(
                MSG_INVALID_APP_SETTING.format(key=key, target_type=target_type),
                target_type=target_type,
                field=key,
                details={"value": value},
            ) from e
