"""Service model registry consumed by code generators."""

from __future__ import annotations

from typing import Annotated, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from servicemodel.typing.enums import FieldType

BUILTIN_STRING_TYPE = "string"

NumberT = TypeVar("NumberT", int, float)


class NumericRange(BaseModel, Generic[NumberT]):
    """Inclusive or exclusive bounds on a numeric field."""

    model_config = ConfigDict(extra="forbid")

    minimum: NumberT | None = None
    maximum: NumberT | None = None
    exclusive_minimum: bool = False
    exclusive_maximum: bool = False


class LengthRange(BaseModel, Generic[NumberT]):
    """Bounds on the length of a string or collection.

    A minimum of zero is stored as `None`: "at least zero" carries no constraint.
    """

    model_config = ConfigDict(extra="forbid")

    minimum: NumberT | None = None
    maximum: NumberT | None = None


class BooleanField(BaseModel):
    """Boolean field."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal[FieldType.BOOLEAN] = FieldType.BOOLEAN


class IntegerField(BaseModel):
    """32-bit integer field."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal[FieldType.INTEGER] = FieldType.INTEGER
    range_constraint: NumericRange[int] = Field(default_factory=NumericRange[int])


class LongField(BaseModel):
    """64-bit integer field."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal[FieldType.LONG] = FieldType.LONG
    range_constraint: NumericRange[int] = Field(default_factory=NumericRange[int])


class DoubleField(BaseModel):
    """Floating point field."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal[FieldType.DOUBLE] = FieldType.DOUBLE
    range_constraint: NumericRange[float] = Field(default_factory=NumericRange[float])


class StringField(BaseModel):
    """String field with optional pattern, length and enumeration constraints."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal[FieldType.STRING] = FieldType.STRING
    pattern: str | None = None
    length_constraint: LengthRange[int] = Field(default_factory=LengthRange[int])
    value_constraints: list[str] = Field(default_factory=list)
    default_value: str | None = None


class ListField(BaseModel):
    """Homogeneous list of a named element type."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal[FieldType.LIST] = FieldType.LIST
    element_type: str
    length_constraint: LengthRange[int] = Field(default_factory=LengthRange[int])


class MapField(BaseModel):
    """String-keyed map of a named value type."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal[FieldType.MAP] = FieldType.MAP
    key_type: Literal["string"] = BUILTIN_STRING_TYPE
    value_type: str
    length_constraint: LengthRange[int] = Field(default_factory=LengthRange[int])


FieldDescription = Annotated[
    BooleanField | IntegerField | LongField | DoubleField | StringField | ListField | MapField,
    Field(discriminator="kind"),
]


class Member(BaseModel):
    """Member of a structure."""

    model_config = ConfigDict(extra="forbid")

    type_name: str
    position: int = Field(ge=0)
    required: bool = False
    documentation: str | None = None


class StructureDescription(BaseModel):
    """Named structure made of ordered members."""

    model_config = ConfigDict(extra="forbid")

    members: dict[str, Member] = Field(default_factory=dict)

    def ordered_members(self) -> list[tuple[str, Member]]:
        """Return members sorted by position, then by name.

        Returns:
            list[tuple[str, Member]]: Member name and description pairs.
        """
        return sorted(self.members.items(), key=lambda item: (item[1].position, item[0]))


class ServiceModel(BaseModel):
    """Registry of named fields and structures filled by a schema walk."""

    model_config = ConfigDict(extra="forbid")

    field_descriptions: dict[str, FieldDescription] = Field(default_factory=dict)
    structure_descriptions: dict[str, StructureDescription] = Field(default_factory=dict)

    @property
    def entity_names(self) -> set[str]:
        """Return every registered field and structure name."""
        return set(self.field_descriptions) | set(self.structure_descriptions)

    def referenced_type_names(self) -> set[str]:
        """Collect type names referenced by members, list elements and map values.

        Returns:
            set[str]: Referenced names.
        """
        names: set[str] = set()
        for structure in self.structure_descriptions.values():
            names.update(member.type_name for member in structure.members.values())
        for field in self.field_descriptions.values():
            if isinstance(field, ListField):
                names.add(field.element_type)
            elif isinstance(field, MapField):
                names.add(field.value_type)
        return names


class EntityRegistration(BaseModel):
    """Outcome of dispatching one schema node.

    `registered_name` is the key written to the model (None when nothing was
    registered, as for references); `type_name` is the name callers reference.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    registered_name: str | None
    type_name: str
