"""
Communications Gateways client backed by the generated Azure SDK.

Transport, authentication, retries and long-running-operation polling all
belong to ``azure-mgmt-voiceservices`` / ``azure-core``. This adapter only
maps request bodies and exceptions between the SDK and the provider's own
types. Bodies are exchanged as raw JSON so that an explicit ``null``
``apiBridge`` survives the trip.
"""
import io
import json
from typing import Any, Dict, Optional

from azure.core.exceptions import AzureError, ResourceNotFoundError
from azure.identity import DefaultAzureCredential
from azure.mgmt.voiceservices import VoiceServicesMgmtClient

from voiceservices.config.schemas.provider_schema import AzureProviderConfig
from voiceservices.domain.base.ports import CommunicationsGatewaysClientPort
from voiceservices.domain.gateway.exceptions import (
    GatewayValidationError,
    OperationTimeoutError,
    RemoteOperationError,
    RemoteResourceNotFoundError,
)
from voiceservices.domain.gateway.resource_id import CommunicationsGatewayId
from voiceservices.helpers.logger import get_logger
from voiceservices.providers.azure.domain.remote_model import CommunicationsGateway


def _raw_json(pipeline_response: Any, deserialized: Any, headers: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """``cls`` hook: return the undecoded response body."""
    body = pipeline_response.http_response.text()
    if not body:
        return None
    return json.loads(body)


class AzureCommunicationsGatewaysClient(CommunicationsGatewaysClientPort):
    """Remote client over ``VoiceServicesMgmtClient``."""

    def __init__(self, config: AzureProviderConfig, credential: Any = None, mgmt_client: Any = None):
        """
        Args:
            config: Azure provider configuration
            credential: Token credential; DefaultAzureCredential when omitted
            mgmt_client: Pre-built management client (tests)
        """
        self._logger = get_logger(__name__)
        if mgmt_client is None:
            if credential is None:
                tenants = [config.tenant_id] if config.tenant_id else []
                credential = DefaultAzureCredential(additionally_allowed_tenants=tenants)
            mgmt_client = VoiceServicesMgmtClient(
                credential,
                config.subscription_id,
                base_url=config.endpoint,
                api_version=config.api_version,
            )
        self._operations = mgmt_client.communications_gateways

    def get(self, gateway_id: CommunicationsGatewayId,
            timeout: Optional[float] = None) -> Optional[CommunicationsGateway]:
        self._logger.debug("retrieving communications gateway", resource_id=gateway_id.id())
        try:
            body = self._operations.get(
                resource_group_name=gateway_id.resource_group_name,
                communications_gateway_name=gateway_id.communications_gateway_name,
                cls=_raw_json,
                **self._timeout_kwargs(timeout),
            )
        except ResourceNotFoundError as e:
            raise RemoteResourceNotFoundError("Communications Gateway", gateway_id.id()) from e
        except AzureError as e:
            raise RemoteOperationError("get", str(e), getattr(e, "status_code", None)) from e

        if body is None:
            return None
        try:
            return CommunicationsGateway.from_wire(body)
        except GatewayValidationError as e:
            raise RemoteOperationError("get", f"decoding response: {e}") from e

    def create_or_update_then_poll(self, gateway_id: CommunicationsGatewayId,
                                   resource: CommunicationsGateway,
                                   timeout: Optional[float] = None) -> None:
        payload = json.dumps(resource.to_wire()).encode("utf-8")
        self._logger.debug("putting communications gateway", resource_id=gateway_id.id())
        try:
            poller = self._operations.begin_create_or_update(
                resource_group_name=gateway_id.resource_group_name,
                communications_gateway_name=gateway_id.communications_gateway_name,
                resource=io.BytesIO(payload),
                content_type="application/json",
                **self._timeout_kwargs(timeout),
            )
            self._wait(poller, "create_or_update", timeout)
        except AzureError as e:
            raise RemoteOperationError("create_or_update", str(e), getattr(e, "status_code", None)) from e

    def delete_then_poll(self, gateway_id: CommunicationsGatewayId,
                         timeout: Optional[float] = None) -> None:
        self._logger.debug("deleting communications gateway", resource_id=gateway_id.id())
        try:
            poller = self._operations.begin_delete(
                resource_group_name=gateway_id.resource_group_name,
                communications_gateway_name=gateway_id.communications_gateway_name,
                **self._timeout_kwargs(timeout),
            )
            self._wait(poller, "delete", timeout)
        except ResourceNotFoundError as e:
            raise RemoteResourceNotFoundError("Communications Gateway", gateway_id.id()) from e
        except AzureError as e:
            raise RemoteOperationError("delete", str(e), getattr(e, "status_code", None)) from e

    @staticmethod
    def _timeout_kwargs(timeout: Optional[float]) -> Dict[str, Any]:
        # azure-core applies ``timeout`` across retries of a single request
        return {"timeout": timeout} if timeout is not None else {}

    def _wait(self, poller: Any, operation: str, timeout: Optional[float]) -> None:
        poller.result(timeout=timeout)
        if not poller.done():
            self._logger.error("long-running operation exceeded its deadline",
                               operation=operation, timeout_seconds=timeout)
            raise OperationTimeoutError(operation, timeout or 0.0)
