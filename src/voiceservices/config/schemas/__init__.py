"""Configuration schemas."""

from .app_schema import AppConfig, validate_config
from .logging_schema import LogDestination, LoggingConfig
from .provider_schema import AzureProviderConfig
from .timeouts_schema import TimeoutsConfig

__all__ = [
    "AppConfig",
    "validate_config",
    "AzureProviderConfig",
    "LogDestination",
    "LoggingConfig",
    "TimeoutsConfig",
]
