"""Declarative argument schema exposed to the host."""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class SchemaType(str, Enum):
    """Value types understood by the host."""
    STRING = "string"
    BOOL = "bool"
    LIST = "list"
    SET = "set"
    MAP = "map"


class ArgumentSchema(BaseModel):
    """One configuration argument: type, presence, replacement and allowed values."""

    type: SchemaType
    required: bool = False
    optional: bool = False
    force_new: bool = False
    default: Optional[Any] = None
    allowed_values: Optional[List[str]] = None
    pattern: Optional[str] = None
    description: str = ""
    elem: Optional[Any] = Field(
        None, description="ArgumentSchema for scalar elements or a dict of ArgumentSchema for nested blocks"
    )


def force_new_arguments(arguments: Dict[str, ArgumentSchema]) -> List[str]:
    """Top-level arguments whose change requires replacing the resource."""
    return sorted(name for name, schema in arguments.items() if schema.force_new)
