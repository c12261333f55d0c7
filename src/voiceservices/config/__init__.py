"""Configuration package with clean public API."""

from .manager import ConfigurationManager, get_config_manager, reset_config_manager
from .schemas import (
    AppConfig,
    AzureProviderConfig,
    LogDestination,
    LoggingConfig,
    TimeoutsConfig,
    validate_config,
)

__all__ = [
    "AppConfig",
    "validate_config",
    "AzureProviderConfig",
    "LogDestination",
    "LoggingConfig",
    "TimeoutsConfig",
    "ConfigurationManager",
    "get_config_manager",
    "reset_config_manager",
]
