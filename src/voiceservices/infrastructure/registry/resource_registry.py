"""Resource Registry - registry of the resource types a provider serves.

The host asks the registry for a resource by its type name; resources are
registered once at provider start-up.
"""

import threading
from typing import Any, Dict, List, Optional

from voiceservices.domain.base.exceptions import ConfigurationError
from voiceservices.helpers.logger import get_logger


class UnsupportedResourceError(ConfigurationError):
    """Exception raised when an unknown resource type is requested."""


class ResourceRegistry:
    """
    Registry for resource implementations keyed by resource type.

    Thread-safe singleton implementation.
    """

    _instance: Optional["ResourceRegistry"] = None
    _lock = threading.RLock()

    def __init__(self):
        self._resources: Dict[str, Any] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "ResourceRegistry":
        """Get singleton instance of the resource registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def register_resource(self, resource: Any) -> None:
        """
        Register a resource under its ``resource_type()``.

        Raises:
            ValueError: If the resource type is already registered
        """
        resource_type = resource.resource_type()
        with self._registration_lock:
            if resource_type in self._resources:
                raise ValueError(f"Resource type '{resource_type}' is already registered")
            self._resources[resource_type] = resource
            self._logger.info("Registered resource", resource_type=resource_type)

    def unregister_resource(self, resource_type: str) -> bool:
        """
        Unregister a resource.

        Returns:
            True if the resource was unregistered, False if not found
        """
        with self._registration_lock:
            if resource_type in self._resources:
                del self._resources[resource_type]
                self._logger.info("Unregistered resource", resource_type=resource_type)
                return True
            return False

    def is_resource_registered(self, resource_type: str) -> bool:
        return resource_type in self._resources

    def get_registered_resources(self) -> List[str]:
        return list(self._resources.keys())

    def get_resource(self, resource_type: str) -> Any:
        """
        Get a registered resource.

        Raises:
            UnsupportedResourceError: If the resource type is not registered
        """
        if resource_type not in self._resources:
            available = ", ".join(self.get_registered_resources())
            raise UnsupportedResourceError(
                f"Resource type '{resource_type}' is not registered. "
                f"Available resources: {available}"
            )
        return self._resources[resource_type]

    def clear_registrations(self) -> None:
        """Clear all registrations (primarily for testing)."""
        with self._registration_lock:
            self._resources.clear()


def get_resource_registry() -> ResourceRegistry:
    """Get the global resource registry instance."""
    return ResourceRegistry.get_instance()
