"""Shared constants: numeric limits, type names and error message templates."""

# Integer limits of the 32-bit and 64-bit setting types
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Target type names reported by parse errors
TYPE_BOOL = "bool"
TYPE_INT = "int"
TYPE_LONG = "long"
TYPE_FLOAT = "float"
TYPE_DATETIME = "datetime"

DEFAULT_ARRAY_DELIMITER = ","

# App settings
MSG_MISSING_APP_SETTING = "AppSetting had no value or the key was missing"
MSG_MISSING_APP_SETTING_NO_DEFAULT = (
    "No AppSetting with a key of {key} or it has no value. "
    "The key must have a value or a default provided"
)
MSG_INVALID_APP_SETTING = "AppSetting {key} could not be converted to {target_type}"

# Connection strings
MSG_CONNECTION_STRING_NOT_FOUND = (
    "The specified key for the connection string was not found"
)
MSG_CONNECTION_STRING_EMPTY = (
    "The value for the specified key for the connection string was empty"
)

# Key/value sections
MSG_NAME_REQUIRED = "{name} must have a value"
MSG_MUST_BE_BOOLEAN = "{name} must be boolean"
MSG_MUST_BE_NUMBER = "{name} must be a number"
MSG_OUT_OF_RANGE = "{name} must be >= {min_allowed} and <= {max_allowed}"

# Logging
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
