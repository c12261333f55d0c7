"""Domain port for the remote Communications Gateways API."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from voiceservices.domain.gateway.resource_id import CommunicationsGatewayId

if TYPE_CHECKING:
    from voiceservices.providers.azure.domain.remote_model import CommunicationsGateway


class CommunicationsGatewaysClientPort(ABC):
    """Remote operations on Communications Gateways.

    Implementations own transport, retries and long-running-operation polling.
    ``timeout`` is a cooperative deadline in seconds; ``None`` means the
    implementation default.
    """

    @abstractmethod
    def get(self, gateway_id: CommunicationsGatewayId,
            timeout: Optional[float] = None) -> Optional["CommunicationsGateway"]:
        """Fetch a gateway.

        Raises:
            RemoteResourceNotFoundError: if the gateway does not exist
            RemoteOperationError: for any other failure
        """

    @abstractmethod
    def create_or_update_then_poll(self, gateway_id: CommunicationsGatewayId,
                                   resource: "CommunicationsGateway",
                                   timeout: Optional[float] = None) -> None:
        """PUT the gateway and block until the operation completes.

        Raises:
            OperationTimeoutError: if the operation is still running at the deadline
            RemoteOperationError: if the operation fails
        """

    @abstractmethod
    def delete_then_poll(self, gateway_id: CommunicationsGatewayId,
                         timeout: Optional[float] = None) -> None:
        """DELETE the gateway and block until the operation completes."""
