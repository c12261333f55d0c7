"""Tests for gateway enumerations."""

import pytest

from voiceservices.domain.gateway.exceptions import GatewayValidationError
from voiceservices.domain.gateway.value_objects import (
    AutoGeneratedDomainNameLabelScope,
    CommunicationsPlatform,
    Connectivity,
    E911Type,
    TeamsCodecs,
)


class TestGatewayEnums:
    """Test the closed value sets."""

    def test_values(self):
        assert Connectivity.values() == ["PublicAddress"]
        assert TeamsCodecs.values() == ["PCMA", "PCMU", "G722", "G722_2", "SILK_8", "SILK_16"]
        assert E911Type.values() == ["Standard", "DirectToEsrp"]
        assert CommunicationsPlatform.values() == ["OperatorConnect", "TeamsPhoneMobile"]
        assert AutoGeneratedDomainNameLabelScope.values() == [
            "TenantReuse", "SubscriptionReuse", "ResourceGroupReuse", "NoReuse",
        ]

    def test_parse(self):
        assert E911Type.parse("DirectToEsrp") is E911Type.DIRECT_TO_ESRP

    def test_parse_is_case_sensitive(self):
        with pytest.raises(GatewayValidationError):
            E911Type.parse("standard")

    def test_members_compare_as_strings(self):
        assert TeamsCodecs.SILK_16 == "SILK_16"
