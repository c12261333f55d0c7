"""Closed value sets of a Communications Gateway."""
from enum import Enum
from typing import List

from voiceservices.domain.gateway.exceptions import GatewayValidationError


class _ClosedEnum(str, Enum):
    """String enumeration with a strict parse helper."""

    @classmethod
    def values(cls) -> List[str]:
        return [e.value for e in cls]

    @classmethod
    def parse(cls, value: str) -> "_ClosedEnum":
        try:
            return cls(value)
        except ValueError:
            raise GatewayValidationError(
                f"expected {cls.__name__} to be one of {cls.values()}, got {value!r}"
            ) from None


class Connectivity(_ClosedEnum):
    """How the gateway is reached by the operator network."""
    PUBLIC_ADDRESS = "PublicAddress"


class TeamsCodecs(_ClosedEnum):
    """Voice codecs offered towards Microsoft Teams."""
    PCMA = "PCMA"
    PCMU = "PCMU"
    G722 = "G722"
    G722_2 = "G722_2"
    SILK_8 = "SILK_8"
    SILK_16 = "SILK_16"


class E911Type(_ClosedEnum):
    """Emergency call handling mode."""
    STANDARD = "Standard"
    DIRECT_TO_ESRP = "DirectToEsrp"


class CommunicationsPlatform(_ClosedEnum):
    """Platforms the gateway is connected to."""
    OPERATOR_CONNECT = "OperatorConnect"
    TEAMS_PHONE_MOBILE = "TeamsPhoneMobile"


class AutoGeneratedDomainNameLabelScope(_ClosedEnum):
    """Reuse scope for the generated domain name label."""
    TENANT_REUSE = "TenantReuse"
    SUBSCRIPTION_REUSE = "SubscriptionReuse"
    RESOURCE_GROUP_REUSE = "ResourceGroupReuse"
    NO_REUSE = "NoReuse"
