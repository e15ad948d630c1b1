"""Array schema parser."""

from __future__ import annotations

from typing import TYPE_CHECKING

from servicemodel import logger
from servicemodel.exceptions import MissingReferenceTargetError, UnsupportedSchemaShapeError
from servicemodel.parsing import dispatcher
from servicemodel.parsing.constraints import length_range
from servicemodel.parsing.naming import array_entity_names
from servicemodel.parsing.paths import SchemaPath, render_schema_path
from servicemodel.typing.enums import SchemaKind
from servicemodel.typing.models import EntityRegistration, ListField

if TYPE_CHECKING:
    from servicemodel.typing.models import ArrayContext, ServiceModel, WalkContext


def parse_array_schema(
    array_context: ArrayContext,
    entity_name: str,
    model: ServiceModel,
    *,
    context: WalkContext | None = None,
    path: SchemaPath = (),
) -> EntityRegistration:
    """Register a list field for an array schema.

    Anonymous items need an element entity of their own. Its name comes from
    `array_entity_names`, which may move the list itself to a pluralized name;
    the returned registration tells the caller which name to reference.

    Args:
        array_context (ArrayContext): Array schema metadata.
        entity_name (str): Proposed name of the list field.
        model (ServiceModel): Model receiving the registrations.
        context (WalkContext | None): Overrides and collaborators for this walk.
        path (SchemaPath): Location of the array schema in the document.

    Raises:
        MissingReferenceTargetError: If referenced items have no target name.
        UnsupportedSchemaShapeError: If the array declares no item schema.

    Returns:
        EntityRegistration: Name the list was registered under.
    """
    items = array_context.items
    items_path = (*path, "items")
    if items is None:
        raise UnsupportedSchemaShapeError(
            schema_path=render_schema_path(path),
            message="Array schema without an item schema is not supported",
        )

    length_constraint = length_range(array_context.min_items, array_context.max_items)

    if items.kind == SchemaKind.REFERENCE:
        element_type = items.reference_name
        if element_type is None:
            raise MissingReferenceTargetError(
                schema_path=render_schema_path(items_path),
                reference=items.reference.ref if items.reference else "",
            )
        list_name = entity_name
    else:
        element_name, list_name = array_entity_names(entity_name)
        if list_name != entity_name:
            logger.debug("Pluralized list entity name", extra={"proposed": entity_name, "list_name": list_name})
        registration = dispatcher.parse_definition_schema(
            items,
            element_name,
            model,
            context=context,
            path=items_path,
        )
        element_type = registration.type_name

    model.field_descriptions[list_name] = ListField(
        element_type=element_type,
        length_constraint=length_constraint,
    )
    return EntityRegistration(registered_name=list_name, type_name=list_name)
