"""Accessor services for typed configuration lookups."""

from toolshed.service.collection_accessor import CollectionAccessor
from toolshed.service.config_accessor import ConfigAccessor

__all__ = ["CollectionAccessor", "ConfigAccessor"]
