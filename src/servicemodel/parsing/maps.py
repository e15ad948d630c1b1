"""Map schema parser for schema-valued additional properties."""

from __future__ import annotations

from typing import TYPE_CHECKING

from servicemodel.exceptions import MissingReferenceTargetError, UnsupportedSchemaShapeError
from servicemodel.parsing.paths import SchemaPath, render_schema_path
from servicemodel.typing.enums import SchemaKind
from servicemodel.typing.models import BUILTIN_STRING_TYPE, EntityRegistration, LengthRange, MapField

if TYPE_CHECKING:
    from servicemodel.typing.models import JsonSchema, ServiceModel


def parse_map_schema(
    value_schema: JsonSchema,
    entity_name: str,
    model: ServiceModel,
    *,
    path: SchemaPath = (),
) -> EntityRegistration:
    """Register a string-keyed map whose values follow `value_schema`.

    Only referenced and plain string value schemas are supported.

    Args:
        value_schema (JsonSchema): Additional-properties schema.
        entity_name (str): Name of the map field.
        model (ServiceModel): Model receiving the map field.
        path (SchemaPath): Location of the value schema in the document.

    Raises:
        MissingReferenceTargetError: If the value reference has no target name.
        UnsupportedSchemaShapeError: If the value schema is neither a reference nor a string.

    Returns:
        EntityRegistration: Registration of the map field.
    """
    if value_schema.kind == SchemaKind.REFERENCE:
        value_type = value_schema.reference_name
        if value_type is None:
            raise MissingReferenceTargetError(
                schema_path=render_schema_path(path),
                reference=value_schema.reference.ref if value_schema.reference else "",
            )
    elif value_schema.kind == SchemaKind.STRING:
        value_type = BUILTIN_STRING_TYPE
    else:
        raise UnsupportedSchemaShapeError(
            schema_path=render_schema_path(path),
            message=f"Map values of kind '{value_schema.kind.value}' are not supported",
        )

    model.field_descriptions[entity_name] = MapField(
        value_type=value_type,
        length_constraint=LengthRange[int](),
    )
    return EntityRegistration(registered_name=entity_name, type_name=entity_name)
