"""Azure resources managed by this provider."""

from .communications_gateway_resource import CommunicationsGatewayResource

__all__ = ["CommunicationsGatewayResource"]
