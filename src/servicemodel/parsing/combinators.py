"""Combinator (allOf/anyOf/oneOf) schema parser."""

from __future__ import annotations

from typing import TYPE_CHECKING

from servicemodel.exceptions import UnsupportedSchemaShapeError
from servicemodel.parsing import objects
from servicemodel.parsing.naming import combinator_namespace
from servicemodel.parsing.paths import SchemaPath, render_schema_path
from servicemodel.typing.enums import SchemaKind
from servicemodel.typing.models import ObjectContext, StructureDescription

if TYPE_CHECKING:
    from servicemodel.typing.models import JsonSchema, ServiceModel, WalkContext


def parse_combinator_schemas(
    subschemas: list[JsonSchema],
    entity_name: str,
    model: ServiceModel,
    *,
    context: WalkContext | None = None,
    path: SchemaPath = (),
) -> StructureDescription:
    """Fold the object members of a schema composition into one structure.

    Each member schema gets its own numbered namespace for anonymous
    properties. A property declared by several members keeps the last one.

    Args:
        subschemas (list[JsonSchema]): Composed schemas, in declaration order.
        entity_name (str): Name of the combined structure.
        model (ServiceModel): Model receiving nested registrations.
        context (WalkContext | None): Overrides and collaborators for this walk.
        path (SchemaPath): Location of the composition in the document.

    Raises:
        UnsupportedSchemaShapeError: If a member schema is not an object schema.

    Returns:
        StructureDescription: Merged structure.
    """
    structure = StructureDescription()

    for index, subschema in enumerate(subschemas):
        subschema_path = (*path, str(index))
        if subschema.kind != SchemaKind.OBJECT:
            raise UnsupportedSchemaShapeError(
                schema_path=render_schema_path(subschema_path),
                message=f"Composition members of kind '{subschema.kind.value}' are not supported",
            )
        objects.parse_object_schema(
            subschema.object or ObjectContext(),
            combinator_namespace(entity_name, index),
            model,
            context=context,
            path=subschema_path,
            structure=structure,
        )

    return structure
