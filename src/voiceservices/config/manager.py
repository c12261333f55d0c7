"""Configuration manager - loads, expands and validates provider configuration."""
from __future__ import annotations

import copy
import json
import os
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from voiceservices.config.schemas import (
    AppConfig,
    AzureProviderConfig,
    LoggingConfig,
    TimeoutsConfig,
    validate_config,
)
from voiceservices.config.utils.env_expansion import expand_config_env_vars
from voiceservices.domain.base.exceptions import ConfigurationError

T = TypeVar("T", bound=BaseModel)

CONFIG_FILE_ENV_VAR = "VOICESERVICES_CONFIG_FILE"

# Environment overrides applied after the file is loaded (highest priority)
ENV_OVERRIDES = {
    "ARM_SUBSCRIPTION_ID": ("provider", "subscription_id"),
    "ARM_TENANT_ID": ("provider", "tenant_id"),
    "ARM_ENDPOINT": ("provider", "endpoint"),
    "LOG_LEVEL": ("logging", "level"),
    "LOG_DESTINATION": ("logging", "destination"),
}


class ConfigurationManager:
    """
    Manages provider configuration.

    This class handles:
    - Loading an optional JSON configuration file
    - Expanding $VAR / ${VAR} / ${VAR:default} references
    - Applying environment variable overrides
    - Validation into typed pydantic sections
    """

    _SECTIONS: Dict[type, str] = {
        AzureProviderConfig: "provider",
        TimeoutsConfig: "timeouts",
        LoggingConfig: "logging",
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to a JSON configuration file. Falls back
                         to the VOICESERVICES_CONFIG_FILE environment variable.

        Raises:
            ConfigurationError: If the file cannot be read or fails validation
        """
        self._config_path = config_path or os.environ.get(CONFIG_FILE_ENV_VAR)
        self._load()

    def _load(self) -> None:
        raw: Dict[str, Any] = {}
        if self._config_path:
            raw = self._load_config_file(self._config_path)

        raw = expand_config_env_vars(raw)
        self._apply_env_overrides(raw)
        self.raw_config = raw

        try:
            self._app_config = validate_config(raw)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e}", "INVALID_CONFIGURATION", {"errors": e.errors()}
            ) from e

    @staticmethod
    def _load_config_file(config_path: str) -> Dict[str, Any]:
        """Load configuration from file."""
        try:
            with open(config_path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Failed to load configuration from {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration in {config_path} must be a JSON object")
        return data

    @staticmethod
    def _apply_env_overrides(raw: Dict[str, Any]) -> None:
        for env_var, (section, key) in ENV_OVERRIDES.items():
            if env_var in os.environ:
                raw.setdefault(section, {})[key] = os.environ[env_var]

    @property
    def app_config(self) -> AppConfig:
        """Get typed application configuration."""
        return self._app_config

    def get_raw_config(self) -> Dict[str, Any]:
        """Get a copy of the expanded raw configuration dictionary."""
        return copy.deepcopy(self.raw_config)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found
        """
        value: Any = self._app_config.model_dump()
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def get_typed(self, config_class: Type[T]) -> T:
        """
        Get a typed configuration section.

        Raises:
            ConfigurationError: If the class is not a known section
        """
        if config_class is AppConfig:
            return self._app_config
        section = self._SECTIONS.get(config_class)
        if section is None:
            raise ConfigurationError(f"Unknown configuration section: {config_class.__name__}")
        return getattr(self._app_config, section)

    def reload(self) -> None:
        """Reload configuration from the same sources."""
        self._load()


_config_manager: Optional[ConfigurationManager] = None
_config_lock = threading.Lock()


def get_config_manager(config_path: Optional[str] = None) -> ConfigurationManager:
    """Get the process-wide configuration manager, creating it on first use."""
    global _config_manager
    if _config_manager is None:
        with _config_lock:
            if _config_manager is None:
                _config_manager = ConfigurationManager(config_path)
    return _config_manager


def reset_config_manager() -> None:
    """Drop the process-wide instance (used by tests and reloads)."""
    global _config_manager
    with _config_lock:
        _config_manager = None
