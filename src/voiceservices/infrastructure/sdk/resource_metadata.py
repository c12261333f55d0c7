"""Host boundary for one resource operation.

The host supplies the configuration (desired or planned), the tracked
resource ID and the set of fields its diff marked as changed; handlers
report back through :meth:`ResourceMetadata.set_id`,
:meth:`ResourceMetadata.encode` and :meth:`ResourceMetadata.mark_as_gone`.
"""
from typing import Any, Dict, FrozenSet, Iterable, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from voiceservices.domain.gateway.exceptions import ConfigurationDecodeError, ResourceRequiresImportError
from voiceservices.helpers.logger import get_logger

T = TypeVar("T", bound=BaseModel)

logger = get_logger(__name__)


class ResourceMetadata:
    """Per-invocation view of the host's configuration and tracked state."""

    def __init__(self, client: Any, config: Optional[Dict[str, Any]] = None,
                 resource_id: str = "", changed_fields: Iterable[str] = (),
                 state: Optional[Dict[str, Any]] = None):
        """
        Args:
            client: Provider clients (see ``ProviderClients``)
            config: Host configuration for this operation
            resource_id: ID of the tracked instance, empty when not yet created
            changed_fields: Top-level fields the host diff marked as changed
            state: Previously persisted state, if any
        """
        self.client = client
        self.config = dict(config or {})
        self.resource_id = resource_id
        self.changed_fields: FrozenSet[str] = frozenset(changed_fields)
        self.state = state
        self.gone = False

    def decode(self, model_cls: Type[T]) -> T:
        """
        Decode the host configuration into ``model_cls``.

        Raises:
            ConfigurationDecodeError: If the configuration does not validate
        """
        try:
            return model_cls.model_validate(self.config)
        except PydanticValidationError as e:
            raise ConfigurationDecodeError(str(e), e.errors()) from e

    def encode(self, model: BaseModel) -> None:
        """Persist ``model`` as the instance state."""
        # Projected remote state may carry zero values where enums are expected
        self.state = model.model_dump(mode="json", warnings=False)

    def has_change(self, field: str) -> bool:
        return field in self.changed_fields

    def set_id(self, resource_id: Any) -> None:
        self.resource_id = resource_id.id() if hasattr(resource_id, "id") else str(resource_id)
        self.gone = False

    def mark_as_gone(self, resource_id: Any) -> None:
        """Forget the instance: the remote resource no longer exists."""
        logger.info("resource no longer exists, removing from state", resource_id=str(resource_id))
        self.resource_id = ""
        self.state = None
        self.gone = True

    def resource_requires_import(self, resource_type: str, resource_id: Any) -> ResourceRequiresImportError:
        rendered = resource_id.id() if hasattr(resource_id, "id") else str(resource_id)
        return ResourceRequiresImportError(resource_type, rendered)
