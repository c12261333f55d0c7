"""Composite identity of a Communications Gateway resource."""
from dataclasses import dataclass
from typing import Any, List, Tuple

from voiceservices.domain.gateway.exceptions import InvalidResourceIdError

PROVIDER_NAMESPACE = "Microsoft.VoiceServices"
RESOURCE_COLLECTION = "communicationsGateways"

# (static segment, user-specified segment name) pairs in path order
_SEGMENTS = (
    ("subscriptions", "subscriptionId"),
    ("resourceGroups", "resourceGroupName"),
    ("providers", None),
    (RESOURCE_COLLECTION, "communicationsGatewayName"),
)


@dataclass(frozen=True)
class CommunicationsGatewayId:
    """Subscription / resource group / gateway name, rendered as an ARM path."""
    subscription_id: str
    resource_group_name: str
    communications_gateway_name: str

    def __post_init__(self):
        for field_name in ("subscription_id", "resource_group_name", "communications_gateway_name"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value:
                raise InvalidResourceIdError(str(value), f"{field_name} must be a non-empty string")
            if "/" in value:
                raise InvalidResourceIdError(value, f"{field_name} must not contain '/'")

    def id(self) -> str:
        return (
            f"/subscriptions/{self.subscription_id}"
            f"/resourceGroups/{self.resource_group_name}"
            f"/providers/{PROVIDER_NAMESPACE}"
            f"/{RESOURCE_COLLECTION}/{self.communications_gateway_name}"
        )

    def __str__(self) -> str:
        return (
            f"Communications Gateway (Subscription: {self.subscription_id!r}\n"
            f"Resource Group Name: {self.resource_group_name!r}\n"
            f"Communications Gateway Name: {self.communications_gateway_name!r})"
        )

    @classmethod
    def parse(cls, value: str) -> "CommunicationsGatewayId":
        """
        Parse an ARM resource ID.

        Static segments are matched case-sensitively.

        Raises:
            InvalidResourceIdError: naming the first segment that did not match
        """
        if not isinstance(value, str) or not value:
            raise InvalidResourceIdError(str(value), "the ID must be a non-empty string")

        parts = value.strip("/").split("/")
        if len(parts) != 8:
            raise InvalidResourceIdError(
                value,
                f"expected 8 segments within the Resource ID but got {len(parts)} "
                f"(example: {cls('12345678-1234-9876-4563-123456789012', 'example-resource-group', 'example-gateway').id()})",
            )

        values = []
        for index, (static, user_segment) in enumerate(_SEGMENTS):
            key, segment_value = parts[index * 2], parts[index * 2 + 1]
            if key != static:
                raise InvalidResourceIdError(
                    value, f"the segment {static!r} was not found (got {key!r})"
                )
            if user_segment is None:
                if segment_value != PROVIDER_NAMESPACE:
                    raise InvalidResourceIdError(
                        value, f"expected provider {PROVIDER_NAMESPACE!r} but got {segment_value!r}"
                    )
                continue
            if not segment_value:
                raise InvalidResourceIdError(value, f"the segment {user_segment!r} was empty")
            values.append(segment_value)

        return cls(*values)


def validate_communications_gateway_id(value: Any, key: str) -> Tuple[List[str], List[Exception]]:
    """Validate an ID for early host-side rejection. Returns (warnings, errors)."""
    if not isinstance(value, str):
        return [], [TypeError(f"expected {key!r} to be a string")]
    try:
        CommunicationsGatewayId.parse(value)
    except InvalidResourceIdError as e:
        return [], [e]
    return [], []
