"""Domain ports for infrastructure concerns."""

from .gateway_client_port import CommunicationsGatewaysClientPort

__all__ = [
    "CommunicationsGatewaysClientPort",
]
