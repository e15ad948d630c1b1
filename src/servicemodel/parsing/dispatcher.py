"""Schema dispatcher: routes each schema node to the handler for its kind."""

from __future__ import annotations

from typing import TYPE_CHECKING

from servicemodel import logger
from servicemodel.exceptions import MissingReferenceTargetError, UnsupportedSchemaShapeError
from servicemodel.parsing import arrays, combinators, objects
from servicemodel.parsing.constraints import integer_range, number_range
from servicemodel.parsing.maps import parse_map_schema
from servicemodel.parsing.paths import SchemaPath, render_schema_path
from servicemodel.parsing.strings import build_string_field
from servicemodel.typing.enums import SchemaKind
from servicemodel.typing.models import (
    ArrayContext,
    BooleanField,
    DoubleField,
    EntityRegistration,
    IntegerField,
    LongField,
    ObjectContext,
    WalkContext,
)

if TYPE_CHECKING:
    from servicemodel.typing.models import FieldDescription, JsonSchema, ServiceModel, StructureDescription


def parse_definition_schema(
    schema: JsonSchema,
    entity_name: str,
    model: ServiceModel,
    *,
    context: WalkContext | None = None,
    path: SchemaPath = (),
) -> EntityRegistration:
    """Classify a schema node and register what it describes under `entity_name`.

    Args:
        schema (JsonSchema): Schema node to classify.
        entity_name (str): Proposed entity name.
        model (ServiceModel): Model receiving the registrations.
        context (WalkContext | None): Overrides and collaborators for this walk.
        path (SchemaPath): Location of `schema` in the document.

    Raises:
        UnsupportedSchemaShapeError: If the schema kind has no model counterpart.

    Returns:
        EntityRegistration: Registered name and the name callers must reference.
    """
    context = context or WalkContext()
    path = path or (entity_name,)
    kind = schema.kind

    if kind == SchemaKind.BOOLEAN:
        return _register_field(model, entity_name, BooleanField())

    if kind == SchemaKind.INTEGER:
        range_constraint = integer_range(schema.integer)
        if schema.format == context.int64_format:
            return _register_field(model, entity_name, LongField(range_constraint=range_constraint))
        return _register_field(model, entity_name, IntegerField(range_constraint=range_constraint))

    if kind == SchemaKind.NUMBER:
        return _register_field(model, entity_name, DoubleField(range_constraint=number_range(schema.number)))

    if kind == SchemaKind.STRING:
        builder = context.string_field_builder or build_string_field
        return _register_field(model, entity_name, builder(schema, entity_name, context.model_override))

    if kind == SchemaKind.OBJECT:
        object_context = schema.object or ObjectContext()
        map_value_schema = object_context.map_value_schema
        if map_value_schema is not None:
            return parse_map_schema(
                map_value_schema,
                entity_name,
                model,
                path=(*path, "additionalProperties"),
            )
        structure = objects.parse_object_schema(object_context, entity_name, model, context=context, path=path)
        return _register_structure(model, entity_name, structure)

    if kind == SchemaKind.ARRAY:
        return arrays.parse_array_schema(schema.array or ArrayContext(), entity_name, model, context=context, path=path)

    if kind.is_combinator:
        structure = combinators.parse_combinator_schemas(
            schema.subschemas,
            entity_name,
            model,
            context=context,
            path=(*path, kind.value),
        )
        return _register_structure(model, entity_name, structure)

    if kind == SchemaKind.REFERENCE:
        target = schema.reference_name
        if target is None:
            raise MissingReferenceTargetError(
                schema_path=render_schema_path(path),
                reference=schema.reference.ref if schema.reference else "",
            )
        return EntityRegistration(registered_name=None, type_name=target)

    raise UnsupportedSchemaShapeError(
        schema_path=render_schema_path(path),
        message=f"Schema '{kind.value}' is not supported",
    )


def _register_field(model: ServiceModel, entity_name: str, field: FieldDescription) -> EntityRegistration:
    model.field_descriptions[entity_name] = field
    logger.debug("Registered field", extra={"entity_name": entity_name, "kind": field.kind.value})
    return EntityRegistration(registered_name=entity_name, type_name=entity_name)


def _register_structure(
    model: ServiceModel,
    entity_name: str,
    structure: StructureDescription,
) -> EntityRegistration:
    model.structure_descriptions[entity_name] = structure
    logger.debug("Registered structure", extra={"entity_name": entity_name, "members": len(structure.members)})
    return EntityRegistration(registered_name=entity_name, type_name=entity_name)
