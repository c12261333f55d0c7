"""Azure Resource Manager representation of a Communications Gateway.

These models mirror the ``2023-01-31`` API shape. ``to_wire`` and
``from_wire`` convert to and from the ARM JSON body (camelCase keys, a
``properties`` envelope). Optional fields left as ``None`` are omitted from
the body; the opaque ``apiBridge`` value is carried by :class:`ApiBridge`
so that "omitted", "explicit null" and "a value" stay distinct.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from voiceservices.domain.gateway.value_objects import (
    AutoGeneratedDomainNameLabelScope,
    CommunicationsPlatform,
    Connectivity,
    E911Type,
    TeamsCodecs,
)

API_VERSION = "2023-01-31"
RESOURCE_TYPE = "Microsoft.VoiceServices/communicationsGateways"


class ApiBridge:
    """Tri-state holder for the opaque ``apiBridge`` payload."""

    _UNSET = "unset"
    _NULL = "null"
    _VALUE = "value"

    __slots__ = ("_state", "_value")

    def __init__(self, state: str, value: Any = None):
        self._state = state
        self._value = value

    @classmethod
    def unset(cls) -> "ApiBridge":
        """Field omitted from the request body."""
        return cls(cls._UNSET)

    @classmethod
    def explicit_null(cls) -> "ApiBridge":
        """Field present with a JSON ``null`` value."""
        return cls(cls._NULL)

    @classmethod
    def of(cls, value: Any) -> "ApiBridge":
        """Field present with a decoded JSON value; ``None`` means explicit null."""
        if value is None:
            return cls.explicit_null()
        return cls(cls._VALUE, value)

    @property
    def is_set(self) -> bool:
        return self._state != self._UNSET

    @property
    def is_null(self) -> bool:
        return self._state == self._NULL

    @property
    def has_value(self) -> bool:
        return self._state == self._VALUE

    @property
    def value(self) -> Any:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiBridge):
            return NotImplemented
        return self._state == other._state and self._value == other._value

    def __hash__(self) -> int:
        return hash(self._state)

    def __repr__(self) -> str:
        if self.has_value:
            return f"ApiBridge({self._value!r})"
        return f"ApiBridge.{'unset' if not self.is_set else 'explicit_null'}()"


def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


def _enum_list(values: Optional[List[Any]]) -> Optional[List[str]]:
    if values is None:
        return None
    return [v.value for v in values]


class PrimaryRegionProperties(BaseModel):
    """Addressing for one service region.

    ``operator_addresses`` is required by the API; the other lists are
    ``None`` when unset and ``[]`` when explicitly empty.
    """
    operator_addresses: List[str] = Field(default_factory=list)
    allowed_media_source_address_prefixes: Optional[List[str]] = None
    allowed_signaling_source_address_prefixes: Optional[List[str]] = None
    esrp_addresses: Optional[List[str]] = None

    def to_wire(self) -> Dict[str, Any]:
        return _drop_none({
            "operatorAddresses": list(self.operator_addresses),
            "allowedMediaSourceAddressPrefixes": self.allowed_media_source_address_prefixes,
            "allowedSignalingSourceAddressPrefixes": self.allowed_signaling_source_address_prefixes,
            "esrpAddresses": self.esrp_addresses,
        })

    @classmethod
    def from_wire(cls, data: Optional[Dict[str, Any]]) -> "PrimaryRegionProperties":
        data = data or {}
        return cls(
            operator_addresses=data.get("operatorAddresses") or [],
            allowed_media_source_address_prefixes=data.get("allowedMediaSourceAddressPrefixes"),
            allowed_signaling_source_address_prefixes=data.get("allowedSignalingSourceAddressPrefixes"),
            esrp_addresses=data.get("esrpAddresses"),
        )


class ServiceRegionProperties(BaseModel):
    """A service region: its name and primary-region addressing."""
    name: str
    primary_region_properties: PrimaryRegionProperties = Field(default_factory=PrimaryRegionProperties)

    def to_wire(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "primaryRegionProperties": self.primary_region_properties.to_wire(),
        }

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "ServiceRegionProperties":
        return cls(
            name=data.get("name", ""),
            primary_region_properties=PrimaryRegionProperties.from_wire(data.get("primaryRegionProperties")),
        )


class CommunicationsGatewayProperties(BaseModel):
    """The ``properties`` envelope of a gateway."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    connectivity: Optional[Connectivity] = None
    codecs: Optional[List[TeamsCodecs]] = None
    e911_type: Optional[E911Type] = None
    platforms: Optional[List[CommunicationsPlatform]] = None
    service_locations: Optional[List[ServiceRegionProperties]] = None
    auto_generated_domain_name_label_scope: Optional[AutoGeneratedDomainNameLabelScope] = None
    api_bridge: ApiBridge = Field(default_factory=ApiBridge.unset)
    emergency_dial_strings: Optional[List[str]] = None
    on_prem_mcp_enabled: Optional[bool] = None
    teams_voicemail_pilot_number: Optional[str] = None

    # Read-only, returned by the service
    provisioning_state: Optional[str] = None
    status: Optional[str] = None
    auto_generated_domain_name_label: Optional[str] = None

    def to_wire(self, keep_readonly: bool = False) -> Dict[str, Any]:
        body = _drop_none({
            "connectivity": self.connectivity.value if self.connectivity else None,
            "codecs": _enum_list(self.codecs),
            "e911Type": self.e911_type.value if self.e911_type else None,
            "platforms": _enum_list(self.platforms),
            "serviceLocations": (
                [s.to_wire() for s in self.service_locations]
                if self.service_locations is not None else None
            ),
            "autoGeneratedDomainNameLabelScope": (
                self.auto_generated_domain_name_label_scope.value
                if self.auto_generated_domain_name_label_scope else None
            ),
            "emergencyDialStrings": self.emergency_dial_strings,
            "onPremMcpEnabled": self.on_prem_mcp_enabled,
            "teamsVoicemailPilotNumber": self.teams_voicemail_pilot_number,
        })
        if self.api_bridge.is_set:
            body["apiBridge"] = self.api_bridge.value
        if keep_readonly:
            body.update(_drop_none({
                "provisioningState": self.provisioning_state,
                "status": self.status,
                "autoGeneratedDomainNameLabel": self.auto_generated_domain_name_label,
            }))
        return body

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "CommunicationsGatewayProperties":
        """
        Raises:
            GatewayValidationError: if an enumerated value is not a known member
        """
        codecs = data.get("codecs")
        platforms = data.get("platforms")
        service_locations = data.get("serviceLocations")
        scope = data.get("autoGeneratedDomainNameLabelScope")
        return cls(
            connectivity=Connectivity.parse(data["connectivity"]) if data.get("connectivity") else None,
            codecs=[TeamsCodecs.parse(c) for c in codecs] if codecs is not None else None,
            e911_type=E911Type.parse(data["e911Type"]) if data.get("e911Type") else None,
            platforms=[CommunicationsPlatform.parse(p) for p in platforms] if platforms is not None else None,
            service_locations=(
                [ServiceRegionProperties.from_wire(s) for s in service_locations]
                if service_locations is not None else None
            ),
            auto_generated_domain_name_label_scope=AutoGeneratedDomainNameLabelScope.parse(scope) if scope else None,
            api_bridge=ApiBridge.of(data["apiBridge"]) if "apiBridge" in data else ApiBridge.unset(),
            emergency_dial_strings=data.get("emergencyDialStrings"),
            on_prem_mcp_enabled=data.get("onPremMcpEnabled"),
            teams_voicemail_pilot_number=data.get("teamsVoicemailPilotNumber"),
            provisioning_state=data.get("provisioningState"),
            status=data.get("status"),
            auto_generated_domain_name_label=data.get("autoGeneratedDomainNameLabel"),
        )


class CommunicationsGateway(BaseModel):
    """A tracked ARM resource wrapping :class:`CommunicationsGatewayProperties`."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    location: str
    properties: Optional[CommunicationsGatewayProperties] = None
    tags: Optional[Dict[str, str]] = None

    # Read-only, returned by the service
    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    system_data: Optional[Dict[str, Any]] = None

    def to_wire(self, keep_readonly: bool = False) -> Dict[str, Any]:
        """Render the request body; ``keep_readonly`` also renders server-owned fields."""
        body: Dict[str, Any] = {"location": self.location}
        if self.tags is not None:
            body["tags"] = dict(self.tags)
        if self.properties is not None:
            body["properties"] = self.properties.to_wire(keep_readonly=keep_readonly)
        if keep_readonly:
            body.update(_drop_none({
                "id": self.id,
                "name": self.name,
                "type": self.type,
                "systemData": self.system_data,
            }))
        return body

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "CommunicationsGateway":
        properties = data.get("properties")
        return cls(
            location=data.get("location", ""),
            properties=CommunicationsGatewayProperties.from_wire(properties) if properties is not None else None,
            tags=data.get("tags"),
            id=data.get("id"),
            name=data.get("name"),
            type=data.get("type"),
            system_data=data.get("systemData"),
        )
