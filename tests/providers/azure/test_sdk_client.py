"""Tests for the Azure SDK backed gateways client."""

import json
from unittest.mock import Mock, patch

import pytest
from azure.core.exceptions import HttpResponseError, ResourceNotFoundError

from gateway_fixtures import GATEWAY_ID, SUBSCRIPTION_ID, gateway_config
from voiceservices.config.schemas.provider_schema import AzureProviderConfig
from voiceservices.domain.base.exceptions import ConfigurationError
from voiceservices.domain.gateway.aggregate import CommunicationsGatewayModel
from voiceservices.domain.gateway.exceptions import (
    OperationTimeoutError,
    RemoteOperationError,
    RemoteResourceNotFoundError,
)
from voiceservices.domain.gateway.resource_id import CommunicationsGatewayId
from voiceservices.providers.azure.infrastructure.clients import build_provider_clients
from voiceservices.providers.azure.infrastructure.sdk_client import (
    AzureCommunicationsGatewaysClient,
    _raw_json,
)
from voiceservices.providers.azure.infrastructure.translator import expand_communications_gateway


@pytest.fixture
def mgmt_client():
    return Mock()


@pytest.fixture
def client(mgmt_client):
    return AzureCommunicationsGatewaysClient(
        AzureProviderConfig(subscription_id=SUBSCRIPTION_ID), mgmt_client=mgmt_client
    )


@pytest.fixture
def gateway_id():
    return CommunicationsGatewayId.parse(GATEWAY_ID)


def _poller(done=True):
    poller = Mock()
    poller.done.return_value = done
    return poller


class TestGet:

    def test_get(self, client, mgmt_client, gateway_id):
        mgmt_client.communications_gateways.get.return_value = {
            "location": "eastus",
            "properties": {"codecs": ["PCMU"], "apiBridge": None},
        }

        gateway = client.get(gateway_id, timeout=60.0)

        assert gateway.location == "eastus"
        assert gateway.properties.api_bridge.is_null
        kwargs = mgmt_client.communications_gateways.get.call_args.kwargs
        assert kwargs["resource_group_name"] == "example-rg"
        assert kwargs["communications_gateway_name"] == "example-gw"
        assert kwargs["cls"] is _raw_json
        assert kwargs["timeout"] == 60.0

    def test_empty_body(self, client, mgmt_client, gateway_id):
        mgmt_client.communications_gateways.get.return_value = None
        assert client.get(gateway_id) is None
        assert "timeout" not in mgmt_client.communications_gateways.get.call_args.kwargs

    def test_not_found(self, client, mgmt_client, gateway_id):
        mgmt_client.communications_gateways.get.side_effect = ResourceNotFoundError("not found")

        with pytest.raises(RemoteResourceNotFoundError) as exc_info:
            client.get(gateway_id)

        assert exc_info.value.entity_id == GATEWAY_ID

    def test_other_errors(self, client, mgmt_client, gateway_id):
        mgmt_client.communications_gateways.get.side_effect = HttpResponseError("throttled")

        with pytest.raises(RemoteOperationError) as exc_info:
            client.get(gateway_id)

        assert exc_info.value.operation == "get"

    def test_unknown_enum_value(self, client, mgmt_client, gateway_id):
        mgmt_client.communications_gateways.get.return_value = {
            "location": "eastus",
            "properties": {"platforms": ["OperatorConnect", "TeamsDirectRouting"]},
        }

        with pytest.raises(RemoteOperationError) as exc_info:
            client.get(gateway_id)

        assert exc_info.value.operation == "get"
        assert "TeamsDirectRouting" in str(exc_info.value)


class TestCreateOrUpdate:

    def test_sends_raw_json_body(self, client, mgmt_client, gateway_id):
        resource = expand_communications_gateway(
            CommunicationsGatewayModel.model_validate(gateway_config(api_bridge=""))
        )
        poller = _poller()
        mgmt_client.communications_gateways.begin_create_or_update.return_value = poller

        client.create_or_update_then_poll(gateway_id, resource, timeout=120.0)

        kwargs = mgmt_client.communications_gateways.begin_create_or_update.call_args.kwargs
        assert kwargs["content_type"] == "application/json"
        body = json.loads(kwargs["resource"].getvalue())
        assert body == resource.to_wire()
        assert body["properties"]["apiBridge"] is None
        poller.result.assert_called_once_with(timeout=120.0)

    def test_deadline_exceeded(self, client, mgmt_client, gateway_id):
        resource = expand_communications_gateway(CommunicationsGatewayModel.model_validate(gateway_config()))
        mgmt_client.communications_gateways.begin_create_or_update.return_value = _poller(done=False)

        with pytest.raises(OperationTimeoutError) as exc_info:
            client.create_or_update_then_poll(gateway_id, resource, timeout=1.0)

        assert exc_info.value.operation == "create_or_update"

    def test_failure(self, client, mgmt_client, gateway_id):
        resource = expand_communications_gateway(CommunicationsGatewayModel.model_validate(gateway_config()))
        mgmt_client.communications_gateways.begin_create_or_update.side_effect = HttpResponseError("conflict")

        with pytest.raises(RemoteOperationError):
            client.create_or_update_then_poll(gateway_id, resource)


class TestDelete:

    def test_delete(self, client, mgmt_client, gateway_id):
        poller = _poller()
        mgmt_client.communications_gateways.begin_delete.return_value = poller

        client.delete_then_poll(gateway_id, timeout=30.0)

        poller.result.assert_called_once_with(timeout=30.0)

    def test_not_found(self, client, mgmt_client, gateway_id):
        mgmt_client.communications_gateways.begin_delete.side_effect = ResourceNotFoundError("gone")

        with pytest.raises(RemoteResourceNotFoundError):
            client.delete_then_poll(gateway_id)

    def test_deadline_exceeded(self, client, mgmt_client, gateway_id):
        mgmt_client.communications_gateways.begin_delete.return_value = _poller(done=False)

        with pytest.raises(OperationTimeoutError):
            client.delete_then_poll(gateway_id, timeout=5.0)


class TestRawJson:

    def test_decodes_body(self):
        response = Mock()
        response.http_response.text.return_value = '{"location": "eastus"}'
        assert _raw_json(response, None, {}) == {"location": "eastus"}

    def test_empty_body(self):
        response = Mock()
        response.http_response.text.return_value = ""
        assert _raw_json(response, None, {}) is None


class TestBuildProviderClients:
    """Test client construction from configuration."""

    def test_adapter_uses_published_sdk_client(self):
        import azure.mgmt.voiceservices

        from voiceservices.providers.azure.infrastructure import sdk_client

        assert sdk_client.VoiceServicesMgmtClient is azure.mgmt.voiceservices.VoiceServicesMgmtClient

    def test_requires_subscription(self):
        with pytest.raises(ConfigurationError):
            build_provider_clients(AzureProviderConfig())

    @patch("voiceservices.providers.azure.infrastructure.sdk_client.VoiceServicesMgmtClient")
    def test_builds_sdk_client(self, mock_mgmt_client):
        credential = Mock()
        config = AzureProviderConfig(subscription_id=SUBSCRIPTION_ID)

        clients = build_provider_clients(config, credential=credential)

        assert clients.subscription_id == SUBSCRIPTION_ID
        assert isinstance(clients.communications_gateways, AzureCommunicationsGatewaysClient)
        mock_mgmt_client.assert_called_once_with(
            credential,
            SUBSCRIPTION_ID,
            base_url="https://management.azure.com",
            api_version="2023-01-31",
        )
