"""Text to typed value conversion.

The ``to_*`` functions raise ``ValueError`` for text that cannot be converted;
the ``try_parse_*`` functions return ``None`` instead. Accessors wrap the
failures in the configuration error types.
"""

import re
from datetime import date, datetime, time
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from toolshed.constants import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN

_INTEGER_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")
_FLOAT_PATTERN = re.compile(
    r"^\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*$"
)
_FLOAT_SYMBOLS = {
    f"{sign}{symbol}" for sign in ("", "+", "-") for symbol in ("nan", "infinity")
}

_DATETIME_ADAPTER = TypeAdapter(datetime)
_DATE_ADAPTER = TypeAdapter(date)


def try_parse_bool(text: Optional[str]) -> Optional[bool]:
    """Parse ``true``/``false`` (any case, surrounding whitespace ignored).

    Args:
        text: Text to parse, may be None

    Returns:
        Parsed boolean, or None if the text is not a boolean literal
    """
    if text is None:
        return None
    normalized = text.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    return None


def to_bool(text: str) -> bool:
    result = try_parse_bool(text)
    if result is None:
        raise ValueError(f"String was not recognized as a valid boolean: {text!r}")
    return result


def _to_bounded_int(text: Optional[str], lower: int, upper: int) -> int:
    if text is None or not _INTEGER_PATTERN.match(text):
        raise ValueError(f"Input string was not in a correct format: {text!r}")
    value = int(text.strip())
    if value < lower or value > upper:
        raise ValueError(f"Value {value} is outside the range {lower}..{upper}")
    return value


def try_parse_int32(text: Optional[str]) -> Optional[int]:
    """Parse a signed 32-bit integer.

    Accepts an optional sign and decimal digits with surrounding whitespace.

    Args:
        text: Text to parse, may be None

    Returns:
        Parsed integer, or None if the text is malformed or overflows
    """
    try:
        return _to_bounded_int(text, INT32_MIN, INT32_MAX)
    except ValueError:
        return None


def to_int32(text: str) -> int:
    return _to_bounded_int(text, INT32_MIN, INT32_MAX)


def to_int64(text: str) -> int:
    return _to_bounded_int(text, INT64_MIN, INT64_MAX)


def to_float(text: str) -> float:
    """Parse a double precision number.

    Decimal and exponent notation are accepted, as are ``NaN`` and
    ``Infinity``. Digit group underscores are rejected.

    Args:
        text: Text to parse

    Returns:
        Parsed float

    Raises:
        ValueError: If the text is not a number
    """
    stripped = text.strip()
    if stripped.lower() not in _FLOAT_SYMBOLS and not _FLOAT_PATTERN.match(text):
        raise ValueError(f"Input string was not in a correct format: {text!r}")
    return float(stripped)


def to_datetime(text: str) -> datetime:
    """Parse a date and time.

    Uses pydantic's datetime validation (ISO 8601 variants); a date-only
    string yields midnight of that date. Numeric text is rejected rather
    than read as a Unix timestamp.

    Text carrying "Z" or a UTC offset gives a timezone-aware datetime; text
    without one (including date-only text) gives a naive datetime.

    Args:
        text: Text to parse

    Returns:
        Parsed datetime

    Raises:
        ValueError: If the text is not a recognizable date/time
    """
    stripped = text.strip()
    if _FLOAT_PATTERN.match(stripped):
        raise ValueError(
            f"String was not recognized as a valid DateTime: {text!r}"
        )

    try:
        return _DATETIME_ADAPTER.validate_python(stripped)
    except ValidationError as exc:
        try:
            parsed = _DATE_ADAPTER.validate_python(stripped)
        except ValidationError:
            raise ValueError(
                f"String was not recognized as a valid DateTime: {text!r}"
            ) from exc
    return datetime.combine(parsed, time.min)
