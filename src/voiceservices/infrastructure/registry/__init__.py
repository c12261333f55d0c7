"""Registries."""

from .resource_registry import ResourceRegistry, UnsupportedResourceError, get_resource_registry

__all__ = ["ResourceRegistry", "UnsupportedResourceError", "get_resource_registry"]
