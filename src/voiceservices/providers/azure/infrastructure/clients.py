"""Provider-wide client holder handed to resource handlers."""
from dataclasses import dataclass
from typing import Any, Optional

from voiceservices.config.schemas.provider_schema import AzureProviderConfig
from voiceservices.domain.base.exceptions import ConfigurationError
from voiceservices.domain.base.ports import CommunicationsGatewaysClientPort


@dataclass
class ProviderClients:
    """Clients and account details shared by every resource operation."""
    subscription_id: str
    communications_gateways: CommunicationsGatewaysClientPort


def build_provider_clients(config: AzureProviderConfig, credential: Optional[Any] = None) -> ProviderClients:
    """
    Build the Azure-backed clients from provider configuration.

    Raises:
        ConfigurationError: If no subscription is configured
    """
    if not config.subscription_id:
        raise ConfigurationError(
            "provider.subscription_id must be set (or ARM_SUBSCRIPTION_ID exported)",
            "MISSING_SUBSCRIPTION",
        )
    from voiceservices.providers.azure.infrastructure.sdk_client import AzureCommunicationsGatewaysClient

    return ProviderClients(
        subscription_id=config.subscription_id,
        communications_gateways=AzureCommunicationsGatewaysClient(config, credential=credential),
    )
