"""Exception package.

This package provides the error kinds raised by configuration lookups:
missing values, conversion failures and key/value section validation errors.
"""

from toolshed.exception.config_exceptions import (
    ConfigError,
    InvalidBooleanError,
    InvalidNumberError,
    MissingNameError,
    MissingValueError,
    ParseError,
    ToolshedException,
    ValueOutOfRangeError,
)

__all__ = [
    "ConfigError",
    "InvalidBooleanError",
    "InvalidNumberError",
    "MissingNameError",
    "MissingValueError",
    "ParseError",
    "ToolshedException",
    "ValueOutOfRangeError",
]
