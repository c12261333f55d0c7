"""Flat configuration model of a Communications Gateway."""
import re
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from voiceservices.domain.gateway.exceptions import GatewayValidationError
from voiceservices.domain.gateway.value_objects import (
    AutoGeneratedDomainNameLabelScope,
    CommunicationsPlatform,
    Connectivity,
    E911Type,
    TeamsCodecs,
)

GATEWAY_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9-]{3,24}$")
RESOURCE_GROUP_NAME_PATTERN = re.compile(r"^[-\w._()]{1,90}$")


class ServiceLocationModel(BaseModel):
    """One region the gateway is deployed to.

    Optional address lists stay ``None`` until configured so an explicitly
    empty list can be told apart from an unset one.
    """
    model_config = ConfigDict(extra="forbid")

    location: str
    operator_addresses: List[str]
    allowed_media_source_address_prefixes: Optional[List[str]] = None
    allowed_signaling_source_address_prefixes: Optional[List[str]] = None
    esrp_addresses: Optional[List[str]] = None

    @field_validator("location")
    @classmethod
    def validate_location(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("location must not be empty")
        return v

    @field_validator("operator_addresses")
    @classmethod
    def validate_operator_addresses(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("operator_addresses must contain at least one address")
        return v


class CommunicationsGatewayModel(BaseModel):
    """Desired configuration of a gateway, as supplied by (and returned to) the host."""
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    # Identity (force-new)
    name: str
    resource_group_name: str
    location: str

    connectivity: Connectivity
    codecs: TeamsCodecs
    e911_type: E911Type
    platforms: List[CommunicationsPlatform]
    service_location: List[ServiceLocationModel]
    auto_generated_domain_name_label_scope: AutoGeneratedDomainNameLabelScope = (
        AutoGeneratedDomainNameLabelScope.TENANT_REUSE
    )

    api_bridge: str = ""
    emergency_dial_strings: Optional[List[str]] = None
    on_prem_mcp_enabled: bool = False
    tags: Dict[str, str] = Field(default_factory=dict)
    microsoft_teams_voicemail_pilot_number: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not GATEWAY_NAME_PATTERN.match(v):
            raise ValueError(
                "The name can only contain letters, numbers and dashes, "
                "the name length must be from 3 to 24 characters."
            )
        return v

    @field_validator("resource_group_name")
    @classmethod
    def validate_resource_group_name(cls, v: str) -> str:
        if not RESOURCE_GROUP_NAME_PATTERN.match(v) or v.endswith("."):
            raise ValueError(
                "resource group names may only contain alphanumeric characters, dash, "
                "underscores, parentheses and periods, up to 90 characters, and cannot end in a period"
            )
        return v

    @field_validator("location")
    @classmethod
    def validate_location(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("location must not be empty")
        return v

    @field_validator("platforms")
    @classmethod
    def validate_platforms(cls, v: List[CommunicationsPlatform]) -> List[CommunicationsPlatform]:
        if not v:
            raise ValueError("at least one platform is required")
        return v

    @field_validator("service_location")
    @classmethod
    def validate_service_location(cls, v: List[ServiceLocationModel]) -> List[ServiceLocationModel]:
        if not v:
            raise ValueError("at least one service_location is required")
        return v

    @field_validator("microsoft_teams_voicemail_pilot_number")
    @classmethod
    def validate_pilot_number(cls, v: str) -> str:
        # Empty means "not configured"; whitespace-only is rejected
        if v and not v.strip():
            raise ValueError("microsoft_teams_voicemail_pilot_number must not be empty")
        return v


def validate_esrp_addresses(model: CommunicationsGatewayModel) -> None:
    """
    Check that every service location's ESRP addresses match the e911 mode.

    Standard forbids ESRP addresses; DirectToEsrp requires them.

    Raises:
        GatewayValidationError: on the first mismatching service location
    """
    for service_location in model.service_location:
        esrp_addresses = service_location.esrp_addresses or []
        if model.e911_type == E911Type.STANDARD:
            if len(esrp_addresses) > 0:
                raise GatewayValidationError(
                    f"the esrp_addresses of {model.name} must not be provided for each "
                    f"service_location when e911_type is set to Standard"
                )
        elif len(esrp_addresses) == 0:
            raise GatewayValidationError(
                f"the esrp_addresses of {model.name} must be provided for each "
                f"service_location when e911_type is set to DirectToEsrp"
            )
