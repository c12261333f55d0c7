"""Base domain layer - shared exceptions and ports."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    InfrastructureError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "DomainException",
    "EntityNotFoundError",
    "InfrastructureError",
    "ValidationError",
]
