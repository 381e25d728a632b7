"""Validated lookups in caller-supplied key/value sections.

This module provides CollectionAccessor, used to read typed values from a
mapping such as a plugin or provider configuration section, rather than from
the process-wide stores.
"""

from typing import Mapping, Optional

from toolshed.constants import (
    INT32_MAX,
    MSG_MUST_BE_BOOLEAN,
    MSG_MUST_BE_NUMBER,
    MSG_NAME_REQUIRED,
    MSG_OUT_OF_RANGE,
    TYPE_BOOL,
    TYPE_INT,
)
from toolshed.exception import (
    InvalidBooleanError,
    InvalidNumberError,
    MissingNameError,
    ValueOutOfRangeError,
)
from toolshed.utils.converters import try_parse_bool, try_parse_int32


class CollectionAccessor:
    """Strict, typed reads from a key/value mapping.

    All methods are static; the mapping is passed on every call and never
    modified.
    """

    @staticmethod
    def get_string(
        values: Mapping[str, str],
        name: Optional[str],
        default: Optional[str] = "",
    ) -> Optional[str]:
        """Get a string value from the section.

        Only the name is validated: when a name is given, the mapped value is
        returned as-is, including None for an absent key.

        Args:
            values: Key/value section
            name: Value name
            default: Returned when no name is given

        Returns:
            Mapped value, or default when name is empty

        Raises:
            MissingNameError: If name is empty and default is empty or whitespace
        """
        if not name and (default is None or not default.strip()):
            raise MissingNameError(MSG_NAME_REQUIRED.format(name=name or ""))

        if not name:
            return default

        return values.get(name)

    @staticmethod
    def get_boolean(
        values: Mapping[str, str],
        name: str,
        default: Optional[bool] = None,
    ) -> bool:
        """Get a strict boolean (``true``/``false``, any case) from the section.

        An absent value with no default is reported as a non-boolean value.

        Args:
            values: Key/value section
            name: Value name
            default: Returned when the value is absent

        Returns:
            Parsed boolean or default

        Raises:
            InvalidBooleanError: If the value is not a boolean, or absent without a default
        """
        raw = values.get(name)
        if raw is None and default is not None:
            return default

        result = try_parse_bool(raw)
        if result is None:
            raise InvalidBooleanError(
                MSG_MUST_BE_BOOLEAN.format(name=name),
                field=name,
                target_type=TYPE_BOOL,
            )
        return result

    @staticmethod
    def get_int(
        values: Mapping[str, str],
        name: str,
        default: int,
        min_allowed: int = 0,
        max_allowed: int = INT32_MAX,
    ) -> int:
        """Get a range-checked 32-bit integer from the section.

        The default is returned as-is when the value is absent; it is not
        range checked.

        Args:
            values: Key/value section
            name: Value name
            default: Returned when the value is absent
            min_allowed: Smallest accepted value (inclusive)
            max_allowed: Largest accepted value (inclusive)

        Returns:
            Parsed integer or default

        Raises:
            InvalidNumberError: If the value is not a 32-bit integer
            ValueOutOfRangeError: If the value is outside [min_allowed, max_allowed]
        """
        raw = values.get(name)
        if raw is None:
            return default

        value = try_parse_int32(raw)
        if value is None:
            raise InvalidNumberError(
                MSG_MUST_BE_NUMBER.format(name=name),
                field=name,
                target_type=TYPE_INT,
            )

        if value < min_allowed or value > max_allowed:
            raise ValueOutOfRangeError(
                MSG_OUT_OF_RANGE.format(
                    name=name, min_allowed=min_allowed, max_allowed=max_allowed
                ),
                min_allowed=min_allowed,
                max_allowed=max_allowed,
                field=name,
            )

        return value
