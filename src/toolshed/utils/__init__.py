"""Utility functions for converting configuration text to typed values."""

from toolshed.utils.converters import (
    to_bool,
    to_datetime,
    to_float,
    to_int32,
    to_int64,
    try_parse_bool,
    try_parse_int32,
)

__all__ = [
    "to_bool",
    "to_datetime",
    "to_float",
    "to_int32",
    "to_int64",
    "try_parse_bool",
    "try_parse_int32",
]
