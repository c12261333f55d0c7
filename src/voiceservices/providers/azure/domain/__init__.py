"""Azure-specific domain extensions."""

from .remote_model import (
    API_VERSION,
    RESOURCE_TYPE,
    ApiBridge,
    CommunicationsGateway,
    CommunicationsGatewayProperties,
    PrimaryRegionProperties,
    ServiceRegionProperties,
)

__all__ = [
    "API_VERSION",
    "RESOURCE_TYPE",
    "ApiBridge",
    "CommunicationsGateway",
    "CommunicationsGatewayProperties",
    "PrimaryRegionProperties",
    "ServiceRegionProperties",
]
