"""Azure Provider Registration - register Voice Services resources with the resource registry."""

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from voiceservices.config.manager import ConfigurationManager
    from voiceservices.infrastructure.registry.resource_registry import ResourceRegistry
    from voiceservices.providers.azure.infrastructure.clients import ProviderClients


def register_voiceservices_resources(registry: Optional["ResourceRegistry"] = None,
                                     config_manager: Optional["ConfigurationManager"] = None) -> "ResourceRegistry":
    """Register every Voice Services resource with the registry.

    Args:
        registry: Resource registry instance (optional, defaults to the global one)
        config_manager: Configuration source for timeouts (optional)
    """
    from voiceservices.config.manager import get_config_manager
    from voiceservices.config.schemas.timeouts_schema import TimeoutsConfig
    from voiceservices.infrastructure.registry.resource_registry import get_resource_registry
    from voiceservices.providers.azure.resources import CommunicationsGatewayResource

    if registry is None:
        registry = get_resource_registry()
    if config_manager is None:
        config_manager = get_config_manager()

    timeouts = config_manager.get_typed(TimeoutsConfig)
    resource = CommunicationsGatewayResource(timeouts=timeouts)
    if not registry.is_resource_registered(resource.resource_type()):
        registry.register_resource(resource)
    return registry


def initialize_azure_provider(config_manager: Optional["ConfigurationManager"] = None,
                              credential: Optional[Any] = None) -> "ProviderClients":
    """Configure logging, register resources and build the Azure clients.

    Returns:
        ProviderClients to hand to each ResourceMetadata
    """
    from voiceservices.config.manager import get_config_manager
    from voiceservices.config.schemas import AzureProviderConfig, LoggingConfig
    from voiceservices.helpers.logger import setup_logging
    from voiceservices.providers.azure.infrastructure.clients import build_provider_clients

    if config_manager is None:
        config_manager = get_config_manager()

    logger = setup_logging(config_manager.get_typed(LoggingConfig))
    register_voiceservices_resources(config_manager=config_manager)
    clients = build_provider_clients(config_manager.get_typed(AzureProviderConfig), credential=credential)
    logger.info("Azure provider initialized", subscription_id=clients.subscription_id)
    return clients
