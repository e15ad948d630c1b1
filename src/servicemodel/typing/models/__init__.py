"""Core domain model exports."""

from servicemodel.typing.models.build import BuildRequest, WalkContext
from servicemodel.typing.models.json_schema import (
    ArrayContext,
    IntegerContext,
    JsonSchema,
    NumberContext,
    ObjectContext,
    ReferenceContext,
    StringContext,
)
from servicemodel.typing.models.model_override import ModelOverride
from servicemodel.typing.models.service_model import (
    BUILTIN_STRING_TYPE,
    BooleanField,
    DoubleField,
    EntityRegistration,
    FieldDescription,
    IntegerField,
    LengthRange,
    ListField,
    LongField,
    MapField,
    Member,
    NumericRange,
    ServiceModel,
    StringField,
    StructureDescription,
)

__all__ = [
    "BUILTIN_STRING_TYPE",
    "ArrayContext",
    "BooleanField",
    "BuildRequest",
    "DoubleField",
    "EntityRegistration",
    "FieldDescription",
    "IntegerContext",
    "IntegerField",
    "JsonSchema",
    "LengthRange",
    "ListField",
    "LongField",
    "MapField",
    "Member",
    "ModelOverride",
    "NumberContext",
    "NumericRange",
    "ObjectContext",
    "ReferenceContext",
    "ServiceModel",
    "StringContext",
    "StringField",
    "StructureDescription",
    "WalkContext",
]
