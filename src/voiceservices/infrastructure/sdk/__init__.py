"""Host-facing plumbing shared by resources."""

from .resource_func import OperationContext, ResourceFunc
from .resource_metadata import ResourceMetadata
from .schema import ArgumentSchema, SchemaType, force_new_arguments

__all__ = [
    "OperationContext",
    "ResourceFunc",
    "ResourceMetadata",
    "ArgumentSchema",
    "SchemaType",
    "force_new_arguments",
]
