"""Toolshed Configuration - typed access to application configuration values.

Toolshed reads app settings and connection strings from a process-wide
configuration store and converts them to the type the caller asks for,
falling back to caller-supplied defaults where allowed.

Key Features:
- Typed getters for str, bool, int (32-bit), long (64-bit), float and datetime
- Delimited string arrays and connection strings with a fallback name
- Strict, range-checked reads from arbitrary key/value sections
- Stores injected behind read-only interfaces, sourced from the environment
  or a .env file via pydantic-settings

Version: 1.0.0
"""

__version__ = "1.0.0"
