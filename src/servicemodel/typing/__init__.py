"""Typing-centric domain modules."""

from servicemodel.typing.enums import FieldType, SchemaKind
from servicemodel.typing.models import (
    BuildRequest,
    EntityRegistration,
    JsonSchema,
    ModelOverride,
    ServiceModel,
    StructureDescription,
    WalkContext,
)
from servicemodel.typing.protocol import StringFieldBuilder

__all__ = [
    "BuildRequest",
    "EntityRegistration",
    "FieldType",
    "JsonSchema",
    "ModelOverride",
    "SchemaKind",
    "ServiceModel",
    "StringFieldBuilder",
    "StructureDescription",
    "WalkContext",
]
