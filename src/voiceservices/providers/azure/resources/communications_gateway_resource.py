"""Communications Gateway resource: schema declaration and CRUD handlers."""
from typing import Dict, List, Optional, Type

from voiceservices.config.schemas.timeouts_schema import TimeoutsConfig
from voiceservices.domain.base.exceptions import EntityNotFoundError, InfrastructureError
from voiceservices.domain.gateway.aggregate import (
    GATEWAY_NAME_PATTERN,
    CommunicationsGatewayModel,
    validate_esrp_addresses,
)
from voiceservices.domain.gateway.exceptions import ProviderOperationError, RemoteResourceNotFoundError
from voiceservices.domain.gateway.resource_id import (
    CommunicationsGatewayId,
    validate_communications_gateway_id,
)
from voiceservices.domain.gateway.value_objects import (
    AutoGeneratedDomainNameLabelScope,
    CommunicationsPlatform,
    Connectivity,
    E911Type,
    TeamsCodecs,
)
from voiceservices.helpers.logger import get_logger
from voiceservices.infrastructure.sdk.resource_func import OperationContext, ResourceFunc
from voiceservices.infrastructure.sdk.resource_metadata import ResourceMetadata
from voiceservices.infrastructure.sdk.schema import ArgumentSchema, SchemaType
from voiceservices.providers.azure.domain.remote_model import CommunicationsGatewayProperties
from voiceservices.providers.azure.infrastructure.translator import (
    expand_api_bridge_for_update,
    expand_codecs,
    expand_communications_gateway,
    expand_platforms,
    expand_service_locations,
    flatten_communications_gateway,
)

# Failures of the remote collaborator, wrapped with identity and phase
_REMOTE_ERRORS = (InfrastructureError, EntityNotFoundError)


def _address_set(description: str, required: bool = False) -> ArgumentSchema:
    return ArgumentSchema(
        type=SchemaType.SET,
        required=required,
        optional=not required,
        elem=ArgumentSchema(type=SchemaType.STRING),
        description=description,
    )


class CommunicationsGatewayResource:
    """The ``azurerm_voice_services_communications_gateway`` resource."""

    def __init__(self, timeouts: Optional[TimeoutsConfig] = None):
        self._timeouts = timeouts or TimeoutsConfig()
        self._logger = get_logger(__name__)

    def resource_type(self) -> str:
        return "azurerm_voice_services_communications_gateway"

    def model_object(self) -> Type[CommunicationsGatewayModel]:
        return CommunicationsGatewayModel

    def id_validation_func(self):
        return validate_communications_gateway_id

    def arguments(self) -> Dict[str, ArgumentSchema]:
        return {
            "name": ArgumentSchema(
                type=SchemaType.STRING, required=True, force_new=True,
                pattern=GATEWAY_NAME_PATTERN.pattern,
            ),
            "location": ArgumentSchema(type=SchemaType.STRING, required=True, force_new=True),
            "resource_group_name": ArgumentSchema(type=SchemaType.STRING, required=True, force_new=True),
            "connectivity": ArgumentSchema(
                type=SchemaType.STRING, required=True, force_new=True,
                allowed_values=Connectivity.values(),
            ),
            "codecs": ArgumentSchema(
                type=SchemaType.STRING, required=True, allowed_values=TeamsCodecs.values(),
            ),
            "e911_type": ArgumentSchema(
                type=SchemaType.STRING, required=True, allowed_values=E911Type.values(),
            ),
            "platforms": ArgumentSchema(
                type=SchemaType.LIST, required=True,
                elem=ArgumentSchema(
                    type=SchemaType.STRING, allowed_values=CommunicationsPlatform.values(),
                ),
            ),
            "service_location": ArgumentSchema(
                type=SchemaType.SET, required=True,
                elem={
                    "location": ArgumentSchema(type=SchemaType.STRING, required=True),
                    "operator_addresses": _address_set("Operator addresses", required=True),
                    "allowed_media_source_address_prefixes": _address_set("Allowed media source prefixes"),
                    "allowed_signaling_source_address_prefixes": _address_set("Allowed signaling source prefixes"),
                    "esrp_addresses": _address_set("Emergency Services Routing Proxy addresses"),
                },
            ),
            "auto_generated_domain_name_label_scope": ArgumentSchema(
                type=SchemaType.STRING, optional=True, force_new=True,
                default=AutoGeneratedDomainNameLabelScope.TENANT_REUSE.value,
                allowed_values=AutoGeneratedDomainNameLabelScope.values(),
            ),
            "api_bridge": ArgumentSchema(type=SchemaType.STRING, optional=True, description="JSON document"),
            "emergency_dial_strings": ArgumentSchema(
                type=SchemaType.LIST, optional=True, elem=ArgumentSchema(type=SchemaType.STRING),
            ),
            "on_prem_mcp_enabled": ArgumentSchema(type=SchemaType.BOOL, optional=True),
            "tags": ArgumentSchema(
                type=SchemaType.MAP, optional=True, elem=ArgumentSchema(type=SchemaType.STRING),
            ),
            "microsoft_teams_voicemail_pilot_number": ArgumentSchema(type=SchemaType.STRING, optional=True),
        }

    def attributes(self) -> Dict[str, ArgumentSchema]:
        return {}

    def customize_diff(self) -> ResourceFunc:
        return ResourceFunc(func=self._customize_diff, timeout=self._timeouts.customize_diff)

    def create(self) -> ResourceFunc:
        return ResourceFunc(func=self._create, timeout=self._timeouts.create)

    def read(self) -> ResourceFunc:
        return ResourceFunc(func=self._read, timeout=self._timeouts.read)

    def update(self) -> ResourceFunc:
        return ResourceFunc(func=self._update, timeout=self._timeouts.update)

    def delete(self) -> ResourceFunc:
        return ResourceFunc(func=self._delete, timeout=self._timeouts.delete)

    def _customize_diff(self, ctx: OperationContext, metadata: ResourceMetadata) -> None:
        model = metadata.decode(CommunicationsGatewayModel)
        validate_esrp_addresses(model)

    def _create(self, ctx: OperationContext, metadata: ResourceMetadata) -> None:
        model = metadata.decode(CommunicationsGatewayModel)
        validate_esrp_addresses(model)

        client = metadata.client.communications_gateways
        gateway_id = CommunicationsGatewayId(
            metadata.client.subscription_id, model.resource_group_name, model.name
        )

        # api_bridge is decoded before the existence check
        properties = expand_communications_gateway(model)

        try:
            client.get(gateway_id, timeout=ctx.remaining())
        except RemoteResourceNotFoundError:
            pass
        except _REMOTE_ERRORS as e:
            raise ProviderOperationError("checking for presence of existing", gateway_id.id(), e) from e
        else:
            raise metadata.resource_requires_import(self.resource_type(), gateway_id)

        self._logger.debug("creating communications gateway", resource_id=gateway_id.id())
        try:
            client.create_or_update_then_poll(gateway_id, properties, timeout=ctx.remaining())
        except _REMOTE_ERRORS as e:
            raise ProviderOperationError("creating", gateway_id.id(), e) from e

        metadata.set_id(gateway_id)
        self._logger.info("created communications gateway", resource_id=gateway_id.id())

    def _update(self, ctx: OperationContext, metadata: ResourceMetadata) -> None:
        client = metadata.client.communications_gateways
        gateway_id = CommunicationsGatewayId.parse(metadata.resource_id)

        model = metadata.decode(CommunicationsGatewayModel)
        validate_esrp_addresses(model)

        api_bridge = None
        if metadata.has_change("api_bridge"):
            api_bridge = expand_api_bridge_for_update(model.api_bridge)

        try:
            existing = client.get(gateway_id, timeout=ctx.remaining())
        except _REMOTE_ERRORS as e:
            raise ProviderOperationError("retrieving", gateway_id.id(), e) from e
        if existing is None:
            raise ProviderOperationError("retrieving", gateway_id.id(), "model was nil")

        if existing.properties is None:
            existing.properties = CommunicationsGatewayProperties()
        properties = existing.properties

        changed: List[str] = sorted(metadata.changed_fields)
        self._logger.debug("updating communications gateway",
                           resource_id=gateway_id.id(), changed_fields=changed)

        if metadata.has_change("codecs"):
            properties.codecs = expand_codecs(model.codecs)

        if metadata.has_change("e911_type"):
            properties.e911_type = model.e911_type

        if metadata.has_change("platforms"):
            properties.platforms = expand_platforms(model.platforms)

        if metadata.has_change("service_location"):
            properties.service_locations = expand_service_locations(model.service_location)

        if api_bridge is not None:
            properties.api_bridge = api_bridge

        if metadata.has_change("emergency_dial_strings"):
            properties.emergency_dial_strings = list(model.emergency_dial_strings or [])

        if metadata.has_change("on_prem_mcp_enabled"):
            properties.on_prem_mcp_enabled = model.on_prem_mcp_enabled

        if metadata.has_change("tags"):
            existing.tags = dict(model.tags)

        if metadata.has_change("microsoft_teams_voicemail_pilot_number"):
            properties.teams_voicemail_pilot_number = model.microsoft_teams_voicemail_pilot_number

        try:
            client.create_or_update_then_poll(gateway_id, existing, timeout=ctx.remaining())
        except _REMOTE_ERRORS as e:
            raise ProviderOperationError("updating", gateway_id.id(), e) from e

        self._logger.info("updated communications gateway", resource_id=gateway_id.id())

    def _read(self, ctx: OperationContext, metadata: ResourceMetadata) -> None:
        client = metadata.client.communications_gateways
        gateway_id = CommunicationsGatewayId.parse(metadata.resource_id)

        try:
            remote = client.get(gateway_id, timeout=ctx.remaining())
        except RemoteResourceNotFoundError:
            metadata.mark_as_gone(gateway_id.id())
            return
        except _REMOTE_ERRORS as e:
            raise ProviderOperationError("retrieving", gateway_id.id(), e) from e

        if remote is None:
            raise ProviderOperationError("retrieving", gateway_id.id(), "model was nil")

        metadata.encode(flatten_communications_gateway(gateway_id, remote))

    def _delete(self, ctx: OperationContext, metadata: ResourceMetadata) -> None:
        client = metadata.client.communications_gateways
        gateway_id = CommunicationsGatewayId.parse(metadata.resource_id)

        # Not-found propagates like any other failure
        try:
            client.delete_then_poll(gateway_id, timeout=ctx.remaining())
        except _REMOTE_ERRORS as e:
            raise ProviderOperationError("deleting", gateway_id.id(), e) from e

        self._logger.info("deleted communications gateway", resource_id=gateway_id.id())
