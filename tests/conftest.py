from typing import Any, Dict, Optional

import pytest

from gateway_fixtures import SUBSCRIPTION_ID, FakeCommunicationsGatewaysClient
from voiceservices.config.manager import reset_config_manager
from voiceservices.infrastructure.registry.resource_registry import get_resource_registry
from voiceservices.infrastructure.sdk.resource_metadata import ResourceMetadata
from voiceservices.providers.azure.infrastructure.clients import ProviderClients


@pytest.fixture
def fake_client():
    return FakeCommunicationsGatewaysClient()


@pytest.fixture
def provider_clients(fake_client):
    return ProviderClients(subscription_id=SUBSCRIPTION_ID, communications_gateways=fake_client)


@pytest.fixture
def make_metadata(provider_clients):
    """Build a ResourceMetadata bound to the fake client."""

    def _make(config: Optional[Dict[str, Any]] = None, resource_id: str = "",
              changed_fields=(), state=None) -> ResourceMetadata:
        return ResourceMetadata(
            provider_clients,
            config=config,
            resource_id=resource_id,
            changed_fields=changed_fields,
            state=state,
        )

    return _make


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from host configuration and process-wide singletons."""
    for var in ("VOICESERVICES_CONFIG_FILE", "ARM_SUBSCRIPTION_ID", "ARM_TENANT_ID",
                "ARM_ENDPOINT", "LOG_LEVEL", "LOG_DESTINATION"):
        monkeypatch.delenv(var, raising=False)
    reset_config_manager()
    get_resource_registry().clear_registrations()
    yield
    reset_config_manager()
    get_resource_registry().clear_registrations()
