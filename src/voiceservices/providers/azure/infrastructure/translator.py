"""
Translation between the flat gateway model and the ARM representation.

Expand functions build the remote shape from configuration; flatten
functions project a remote response back into configuration. The two
directions are intentionally not exact inverses:

- only the first codec survives flattening;
- a missing and a ``null`` apiBridge both flatten to ``""``;
- unset and empty address lists both flatten to ``[]``.
"""
import json
from typing import Any, List, Optional

from voiceservices.domain.gateway.aggregate import CommunicationsGatewayModel, ServiceLocationModel
from voiceservices.domain.gateway.exceptions import ApiBridgeDecodeError
from voiceservices.domain.gateway.resource_id import CommunicationsGatewayId
from voiceservices.domain.gateway.value_objects import CommunicationsPlatform, TeamsCodecs
from voiceservices.helpers.logger import get_logger
from voiceservices.providers.azure.domain.remote_model import (
    ApiBridge,
    CommunicationsGateway,
    CommunicationsGatewayProperties,
    PrimaryRegionProperties,
    ServiceRegionProperties,
)
from voiceservices.providers.azure.infrastructure.location import normalize_location

logger = get_logger(__name__)


def _copy_optional(values: Optional[List[str]]) -> Optional[List[str]]:
    return list(values) if values is not None else None


# Expand (model -> remote)

def expand_codecs(codec: TeamsCodecs) -> List[TeamsCodecs]:
    """The API takes a list of codecs; the model carries exactly one."""
    return [TeamsCodecs(codec)]


def expand_platforms(platforms: List[CommunicationsPlatform]) -> Optional[List[CommunicationsPlatform]]:
    if len(platforms) == 0:
        return None
    return [CommunicationsPlatform(p) for p in platforms]


def expand_service_locations(service_locations: List[ServiceLocationModel]) -> List[ServiceRegionProperties]:
    """Expand service locations; unset optional address lists stay ``None``."""
    output = []
    for v in service_locations:
        output.append(ServiceRegionProperties(
            name=normalize_location(v.location),
            primary_region_properties=PrimaryRegionProperties(
                operator_addresses=list(v.operator_addresses),
                allowed_media_source_address_prefixes=_copy_optional(v.allowed_media_source_address_prefixes),
                allowed_signaling_source_address_prefixes=_copy_optional(v.allowed_signaling_source_address_prefixes),
                esrp_addresses=_copy_optional(v.esrp_addresses),
            ),
        ))
    return output


def _decode_api_bridge(api_bridge: str) -> Any:
    logger.debug("unmarshalling json for ApiBridge")
    try:
        return json.loads(api_bridge)
    except ValueError as e:
        raise ApiBridgeDecodeError(f"unmarshalling value for ApiBridge: {e}") from e


def expand_api_bridge(api_bridge: str) -> ApiBridge:
    """Expand for create: an empty value is sent as an explicit JSON null."""
    if api_bridge != "":
        return ApiBridge.of(_decode_api_bridge(api_bridge))
    return ApiBridge.explicit_null()


def expand_api_bridge_for_update(api_bridge: str) -> ApiBridge:
    """Expand for update: an empty value removes the field from the body."""
    if api_bridge != "":
        return ApiBridge.of(_decode_api_bridge(api_bridge))
    return ApiBridge.unset()


def expand_communications_gateway(model: CommunicationsGatewayModel) -> CommunicationsGateway:
    """
    Build the create request body from a model.

    Raises:
        ApiBridgeDecodeError: if api_bridge is set but is not JSON
    """
    properties = CommunicationsGatewayProperties(
        auto_generated_domain_name_label_scope=model.auto_generated_domain_name_label_scope,
        connectivity=model.connectivity,
        codecs=expand_codecs(model.codecs),
        e911_type=model.e911_type,
        platforms=expand_platforms(model.platforms),
        service_locations=expand_service_locations(model.service_location),
        api_bridge=expand_api_bridge(model.api_bridge),
        on_prem_mcp_enabled=model.on_prem_mcp_enabled,
        teams_voicemail_pilot_number=model.microsoft_teams_voicemail_pilot_number,
    )
    if model.emergency_dial_strings is not None:
        properties.emergency_dial_strings = list(model.emergency_dial_strings)

    return CommunicationsGateway(
        location=normalize_location(model.location),
        properties=properties,
        tags=model.tags,
    )


# Flatten (remote -> model)

def flatten_codecs(codecs: Optional[List[TeamsCodecs]]) -> Any:
    """First codec, or ``""`` when none came back."""
    if codecs:
        return codecs[0]
    return ""


def flatten_platforms(platforms: Optional[List[CommunicationsPlatform]]) -> List[CommunicationsPlatform]:
    if not platforms:
        return []
    return list(platforms)


def flatten_service_locations(service_locations: Optional[List[ServiceRegionProperties]]) -> List[ServiceLocationModel]:
    output: List[ServiceLocationModel] = []
    if service_locations is None:
        return output

    for item in service_locations:
        v = item.primary_region_properties
        # model_construct: remote state is projected as-is, not re-validated
        output.append(ServiceLocationModel.model_construct(
            location=normalize_location(item.name),
            operator_addresses=list(v.operator_addresses or []),
            allowed_media_source_address_prefixes=list(v.allowed_media_source_address_prefixes or []),
            allowed_signaling_source_address_prefixes=list(v.allowed_signaling_source_address_prefixes or []),
            esrp_addresses=list(v.esrp_addresses or []),
        ))
    return output


def flatten_api_bridge(api_bridge: ApiBridge) -> str:
    if api_bridge.has_value:
        return json.dumps(api_bridge.value, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    return ""


def flatten_communications_gateway(gateway_id: CommunicationsGatewayId,
                                   remote: CommunicationsGateway) -> CommunicationsGatewayModel:
    """Project a remote gateway into the flat model, zero-filling absent fields."""
    state = {
        "name": gateway_id.communications_gateway_name,
        "resource_group_name": gateway_id.resource_group_name,
        "location": normalize_location(remote.location),
        "connectivity": "",
        "codecs": "",
        "e911_type": "",
        "platforms": [],
        "service_location": [],
        "auto_generated_domain_name_label_scope": "",
        "api_bridge": "",
        "emergency_dial_strings": None,
        "on_prem_mcp_enabled": False,
        "tags": {},
        "microsoft_teams_voicemail_pilot_number": "",
    }

    properties = remote.properties
    if properties is not None:
        state["connectivity"] = properties.connectivity or ""
        state["codecs"] = flatten_codecs(properties.codecs)
        state["e911_type"] = properties.e911_type or ""
        state["platforms"] = flatten_platforms(properties.platforms)
        state["service_location"] = flatten_service_locations(properties.service_locations)
        if properties.auto_generated_domain_name_label_scope is not None:
            state["auto_generated_domain_name_label_scope"] = properties.auto_generated_domain_name_label_scope
        state["api_bridge"] = flatten_api_bridge(properties.api_bridge)
        if properties.emergency_dial_strings is not None:
            state["emergency_dial_strings"] = list(properties.emergency_dial_strings)
        state["on_prem_mcp_enabled"] = bool(properties.on_prem_mcp_enabled)
        state["microsoft_teams_voicemail_pilot_number"] = properties.teams_voicemail_pilot_number or ""

    if remote.tags is not None:
        state["tags"] = dict(remote.tags)

    return CommunicationsGatewayModel.model_construct(**state)
