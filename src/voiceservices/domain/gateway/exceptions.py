"""Communications gateway domain exceptions."""
from typing import Any, Optional

from voiceservices.domain.base.exceptions import (
    DomainException,
    EntityNotFoundError,
    InfrastructureError,
    ValidationError,
)


class GatewayValidationError(ValidationError):
    """Raised when a gateway configuration breaks a field or cross-field rule."""


class ConfigurationDecodeError(ValidationError):
    """Raised when host-supplied configuration cannot be decoded into a model."""

    def __init__(self, message: str, errors: Optional[Any] = None):
        super().__init__(f"decoding: {message}", "DECODE_FAILED", {"errors": errors or []})


class InvalidResourceIdError(ValidationError):
    """Raised when a resource ID string does not match the expected format."""

    def __init__(self, resource_id: str, reason: str):
        super().__init__(
            f"parsing {resource_id!r}: {reason}",
            "INVALID_RESOURCE_ID",
            {"resource_id": resource_id},
        )
        self.resource_id = resource_id
        self.reason = reason


class ApiBridgeDecodeError(ValidationError):
    """Raised when the api_bridge value is not valid JSON."""


class ResourceRequiresImportError(DomainException):
    """Raised when Create finds the resource already present remotely."""

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"A resource with the ID {resource_id!r} already exists - to be managed "
            f"this resource needs to be imported into the State. Please see the "
            f"resource documentation for {resource_type!r} for more information.",
            "REQUIRES_IMPORT",
            {"resource_type": resource_type, "resource_id": resource_id},
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class RemoteResourceNotFoundError(EntityNotFoundError):
    """Raised by the remote client when the API answers 404."""


class RemoteOperationError(InfrastructureError):
    """Raised by the remote client for any other API or transport failure."""

    def __init__(self, operation: str, message: str, status_code: Optional[int] = None):
        super().__init__(
            f"{operation} failed: {message}",
            "REMOTE_OPERATION_FAILED",
            {"operation": operation, "status_code": status_code},
        )
        self.operation = operation
        self.status_code = status_code


class OperationTimeoutError(InfrastructureError):
    """Raised when a long-running operation does not finish before its deadline."""

    def __init__(self, operation: str, timeout_seconds: float):
        super().__init__(
            f"{operation} did not complete within {timeout_seconds:.0f}s",
            "OPERATION_TIMEOUT",
            {"operation": operation, "timeout_seconds": timeout_seconds},
        )
        self.operation = operation
        self.timeout_seconds = timeout_seconds


class ProviderOperationError(DomainException):
    """Wraps any failure with the resource identity and the phase that failed."""

    def __init__(self, phase: str, resource_id: Any, cause: Any):
        super().__init__(
            f"{phase} {resource_id}: {cause}",
            "OPERATION_FAILED",
            {"phase": phase, "resource_id": str(resource_id)},
        )
        self.phase = phase
        self.resource_id = str(resource_id)
        self.cause = cause
