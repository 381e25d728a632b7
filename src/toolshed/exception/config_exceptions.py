"""Custom exceptions for Toolshed configuration access.

All custom exceptions should inherit from ToolshedException for consistent error handling.
"""

from typing import Any, Dict, Optional


class ToolshedException(Exception):
    """Base exception for all Toolshed configuration errors."""

    def __init__(
        self,
        message: str,
        code: str = "CONFIGURATION_ERROR",
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize Toolshed exception.

        Args:
            message: Human-readable error message
            code: Error code for programmatic handling
            field: Setting key or value name the error relates to
            details: Additional error context
        """
        self.message = message
        self.code = code
        self.field = field
        self.details = details or {}
        super().__init__(message)


# Missing values
class MissingValueError(ToolshedException, LookupError):
    """A required key is absent or empty and no default is available."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message=message,
            code=kwargs.pop("code", "MISSING_VALUE"),
            **kwargs,
        )


# Conversion failures
class ParseError(ToolshedException, ValueError):
    """A stored value cannot be converted to the requested type."""

    def __init__(self, message: str, target_type: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        if target_type:
            details["target_type"] = target_type

        super().__init__(
            message=message,
            code=kwargs.pop("code", "PARSE_ERROR"),
            details=details,
            **kwargs,
        )


# Key/value section validation
class ConfigError(ToolshedException):
    """Validation failure while reading a key/value configuration section."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message=message,
            code=kwargs.pop("code", "CONFIG_ERROR"),
            **kwargs,
        )


class MissingNameError(ConfigError):
    """No value name was given and there is no default to fall back to."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message=message, code="MISSING_NAME", **kwargs)


class InvalidNumberError(ConfigError, ParseError):
    """Section value is not a valid integer."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message=message, code="INVALID_NUMBER", **kwargs)


class InvalidBooleanError(ConfigError, ParseError):
    """Section value is not a valid boolean."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message=message, code="INVALID_BOOLEAN", **kwargs)


class ValueOutOfRangeError(ConfigError):
    """Section value parsed but lies outside the allowed range."""

    def __init__(
        self,
        message: str,
        min_allowed: Optional[int] = None,
        max_allowed: Optional[int] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        details["min_allowed"] = min_allowed
        details["max_allowed"] = max_allowed

        super().__init__(
            message=message,
            code="VALUE_OUT_OF_RANGE",
            details=details,
            **kwargs,
        )
