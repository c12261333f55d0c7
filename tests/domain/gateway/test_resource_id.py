"""Tests for CommunicationsGatewayId parsing and rendering."""

import pytest

from gateway_fixtures import GATEWAY_ID, SUBSCRIPTION_ID
from voiceservices.domain.gateway.exceptions import InvalidResourceIdError
from voiceservices.domain.gateway.resource_id import (
    CommunicationsGatewayId,
    validate_communications_gateway_id,
)


class TestCommunicationsGatewayId:
    """Test identity rendering and parsing."""

    def test_render(self):
        gateway_id = CommunicationsGatewayId(SUBSCRIPTION_ID, "example-rg", "example-gw")
        assert gateway_id.id() == GATEWAY_ID

    def test_parse(self):
        gateway_id = CommunicationsGatewayId.parse(GATEWAY_ID)
        assert gateway_id.subscription_id == SUBSCRIPTION_ID
        assert gateway_id.resource_group_name == "example-rg"
        assert gateway_id.communications_gateway_name == "example-gw"

    def test_parse_render_round_trip(self):
        assert CommunicationsGatewayId.parse(GATEWAY_ID).id() == GATEWAY_ID

    def test_equality(self):
        assert CommunicationsGatewayId.parse(GATEWAY_ID) == CommunicationsGatewayId(
            SUBSCRIPTION_ID, "example-rg", "example-gw"
        )

    def test_str_is_human_readable(self):
        rendered = str(CommunicationsGatewayId.parse(GATEWAY_ID))
        assert "Resource Group Name: 'example-rg'" in rendered
        assert "Communications Gateway Name: 'example-gw'" in rendered

    @pytest.mark.parametrize("value", [
        "",
        "/subscriptions/sub/resourceGroups/rg",
        GATEWAY_ID + "/extra/segments",
        GATEWAY_ID.replace("resourceGroups", "resourcegroups"),
        GATEWAY_ID.replace("Microsoft.VoiceServices", "microsoft.voiceservices"),
        GATEWAY_ID.replace("communicationsGateways", "CommunicationsGateways"),
        GATEWAY_ID.replace("Microsoft.VoiceServices", "Microsoft.Network"),
    ])
    def test_parse_rejects_malformed_ids(self, value):
        with pytest.raises(InvalidResourceIdError):
            CommunicationsGatewayId.parse(value)

    def test_parse_error_names_segment(self):
        with pytest.raises(InvalidResourceIdError) as exc_info:
            CommunicationsGatewayId.parse(GATEWAY_ID.replace("resourceGroups", "resourcegroups"))
        assert "'resourceGroups'" in str(exc_info.value)

    def test_components_must_not_be_empty(self):
        with pytest.raises(InvalidResourceIdError):
            CommunicationsGatewayId(SUBSCRIPTION_ID, "", "example-gw")

    def test_validate_function(self):
        assert validate_communications_gateway_id(GATEWAY_ID, "id") == ([], [])

        warnings, errors = validate_communications_gateway_id("not-an-id", "id")
        assert warnings == []
        assert len(errors) == 1
        assert isinstance(errors[0], InvalidResourceIdError)

        _, errors = validate_communications_gateway_id(42, "id")
        assert isinstance(errors[0], TypeError)
