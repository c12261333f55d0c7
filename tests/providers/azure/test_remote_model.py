"""Tests for the ARM representation of a gateway."""

import pytest

from voiceservices.domain.gateway.exceptions import GatewayValidationError
from voiceservices.providers.azure.domain.remote_model import (
    ApiBridge,
    CommunicationsGateway,
    CommunicationsGatewayProperties,
)

ARM_RESPONSE = {
    "id": "/subscriptions/sub/resourceGroups/rg/providers/Microsoft.VoiceServices/communicationsGateways/gw",
    "name": "gw",
    "type": "Microsoft.VoiceServices/communicationsGateways",
    "location": "eastus",
    "tags": {"env": "test"},
    "systemData": {"createdBy": "someone"},
    "properties": {
        "provisioningState": "Succeeded",
        "status": "Complete",
        "connectivity": "PublicAddress",
        "codecs": ["PCMA"],
        "e911Type": "Standard",
        "platforms": ["OperatorConnect"],
        "serviceLocations": [
            {"name": "eastus", "primaryRegionProperties": {"operatorAddresses": ["10.0.0.1"]}},
        ],
        "autoGeneratedDomainNameLabelScope": "TenantReuse",
        "autoGeneratedDomainNameLabel": "abc123",
        "apiBridge": None,
        "onPremMcpEnabled": False,
    },
}


class TestApiBridge:
    """Test the three apiBridge states."""

    def test_unset(self):
        bridge = ApiBridge.unset()
        assert not bridge.is_set
        assert not bridge.has_value

    def test_explicit_null(self):
        bridge = ApiBridge.explicit_null()
        assert bridge.is_set
        assert bridge.is_null
        assert bridge.value is None

    def test_of_none_is_explicit_null(self):
        assert ApiBridge.of(None) == ApiBridge.explicit_null()

    def test_value(self):
        bridge = ApiBridge.of({"x": [1, 2]})
        assert bridge.has_value
        assert bridge.value == {"x": [1, 2]}
        assert bridge != ApiBridge.of({"x": [1]})

    def test_wire_rendering(self):
        assert "apiBridge" not in CommunicationsGatewayProperties().to_wire()
        assert CommunicationsGatewayProperties(api_bridge=ApiBridge.explicit_null()).to_wire() == {
            "apiBridge": None
        }


class TestCommunicationsGatewayWire:
    """Test ARM JSON parsing and rendering."""

    def test_from_wire(self):
        gateway = CommunicationsGateway.from_wire(ARM_RESPONSE)

        assert gateway.id == ARM_RESPONSE["id"]
        assert gateway.system_data == {"createdBy": "someone"}
        assert gateway.properties.provisioning_state == "Succeeded"
        assert gateway.properties.api_bridge.is_null
        assert gateway.properties.emergency_dial_strings is None
        assert gateway.properties.service_locations[0].primary_region_properties.esrp_addresses is None

    def test_request_body_drops_read_only_fields(self):
        body = CommunicationsGateway.from_wire(ARM_RESPONSE).to_wire()

        assert set(body) == {"location", "tags", "properties"}
        assert "provisioningState" not in body["properties"]
        assert "status" not in body["properties"]
        assert "autoGeneratedDomainNameLabel" not in body["properties"]
        assert body["properties"]["apiBridge"] is None

    def test_keep_readonly_round_trips_response(self):
        gateway = CommunicationsGateway.from_wire(ARM_RESPONSE)

        assert gateway.to_wire(keep_readonly=True) == ARM_RESPONSE

    def test_missing_properties(self):
        gateway = CommunicationsGateway.from_wire({"location": "eastus"})
        assert gateway.properties is None
        assert gateway.to_wire() == {"location": "eastus"}

    def test_unknown_enum_value(self):
        body = {"location": "eastus", "properties": {"e911Type": "Standard", "codecs": ["OPUS"]}}

        with pytest.raises(GatewayValidationError) as exc_info:
            CommunicationsGateway.from_wire(body)

        assert "OPUS" in str(exc_info.value)
