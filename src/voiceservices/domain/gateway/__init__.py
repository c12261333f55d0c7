"""Communications gateway bounded context."""

from .aggregate import CommunicationsGatewayModel, ServiceLocationModel, validate_esrp_addresses
from .exceptions import (
    ApiBridgeDecodeError,
    ConfigurationDecodeError,
    GatewayValidationError,
    InvalidResourceIdError,
    OperationTimeoutError,
    ProviderOperationError,
    RemoteOperationError,
    RemoteResourceNotFoundError,
    ResourceRequiresImportError,
)
from .resource_id import CommunicationsGatewayId, validate_communications_gateway_id
from .value_objects import (
    AutoGeneratedDomainNameLabelScope,
    CommunicationsPlatform,
    Connectivity,
    E911Type,
    TeamsCodecs,
)

__all__ = [
    "CommunicationsGatewayModel",
    "ServiceLocationModel",
    "validate_esrp_addresses",
    "CommunicationsGatewayId",
    "validate_communications_gateway_id",
    "AutoGeneratedDomainNameLabelScope",
    "CommunicationsPlatform",
    "Connectivity",
    "E911Type",
    "TeamsCodecs",
    "ApiBridgeDecodeError",
    "ConfigurationDecodeError",
    "GatewayValidationError",
    "InvalidResourceIdError",
    "OperationTimeoutError",
    "ProviderOperationError",
    "RemoteOperationError",
    "RemoteResourceNotFoundError",
    "ResourceRequiresImportError",
]
