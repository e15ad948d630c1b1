"""Parsed schema tree handed to the model-building walk."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from servicemodel.typing.enums import SchemaKind


class IntegerContext(BaseModel):
    """Bounds declared on an integer schema."""

    model_config = ConfigDict(extra="forbid")

    minimum: int | None = None
    maximum: int | None = None
    exclusive_minimum: bool = False
    exclusive_maximum: bool = False


class NumberContext(BaseModel):
    """Bounds declared on a number schema."""

    model_config = ConfigDict(extra="forbid")

    minimum: float | None = None
    maximum: float | None = None
    exclusive_minimum: bool = False
    exclusive_maximum: bool = False


class StringContext(BaseModel):
    """Length and pattern metadata of a string schema."""

    model_config = ConfigDict(extra="forbid")

    min_length: int = Field(default=0, ge=0)
    max_length: int | None = Field(default=None, ge=0)
    pattern: str | None = None


class ObjectContext(BaseModel):
    """Properties of an object schema."""

    model_config = ConfigDict(extra="forbid")

    properties: dict[str, JsonSchema] = Field(default_factory=dict)
    required_properties: list[str] = Field(default_factory=list)
    additional_properties: bool | JsonSchema | None = None

    @property
    def map_value_schema(self) -> JsonSchema | None:
        """Return the additional-properties schema when it is schema-valued."""
        if isinstance(self.additional_properties, JsonSchema):
            return self.additional_properties
        return None


class ArrayContext(BaseModel):
    """Item schema and item-count metadata of an array schema."""

    model_config = ConfigDict(extra="forbid")

    items: JsonSchema | None = None
    min_items: int = Field(default=0, ge=0)
    max_items: int | None = Field(default=None, ge=0)


class ReferenceContext(BaseModel):
    """Named reference to a type defined elsewhere in the document."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    ref: str
    name: str | None = None


class JsonSchema(BaseModel):
    """Single schema node tagged by kind."""

    model_config = ConfigDict(extra="forbid")

    kind: SchemaKind
    format: str | None = None
    description: str | None = None
    default: Any = None
    allowed_values: list[Any] | None = None

    integer: IntegerContext | None = None
    number: NumberContext | None = None
    string: StringContext | None = None
    object: ObjectContext | None = None
    array: ArrayContext | None = None
    reference: ReferenceContext | None = None
    subschemas: list[JsonSchema] = Field(default_factory=list)

    @property
    def reference_name(self) -> str | None:
        """Return the resolved reference target, if this node is a reference."""
        if self.kind == SchemaKind.REFERENCE and self.reference is not None:
            return self.reference.name
        return None

    @classmethod
    def boolean_schema(cls) -> JsonSchema:
        """Build a boolean schema node."""
        return cls(kind=SchemaKind.BOOLEAN)

    @classmethod
    def string_schema(cls, **metadata: Any) -> JsonSchema:
        """Build a string schema node."""
        return cls(kind=SchemaKind.STRING, string=StringContext(**metadata))

    @classmethod
    def reference_schema(cls, name: str) -> JsonSchema:
        """Build a reference to a component schema."""
        return cls(
            kind=SchemaKind.REFERENCE,
            reference=ReferenceContext(ref=f"#/components/schemas/{name}", name=name),
        )

    @classmethod
    def object_schema(
        cls,
        properties: dict[str, JsonSchema] | None = None,
        *,
        required: list[str] | None = None,
        additional_properties: bool | JsonSchema | None = None,
    ) -> JsonSchema:
        """Build an object schema node."""
        return cls(
            kind=SchemaKind.OBJECT,
            object=ObjectContext(
                properties=properties or {},
                required_properties=required or [],
                additional_properties=additional_properties,
            ),
        )

    @classmethod
    def array_schema(
        cls,
        items: JsonSchema | None,
        *,
        min_items: int = 0,
        max_items: int | None = None,
    ) -> JsonSchema:
        """Build an array schema node."""
        return cls(
            kind=SchemaKind.ARRAY,
            array=ArrayContext(items=items, min_items=min_items, max_items=max_items),
        )


ObjectContext.model_rebuild()
ArrayContext.model_rebuild()
JsonSchema.model_rebuild()
