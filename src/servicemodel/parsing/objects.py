"""Object schema parser."""

from __future__ import annotations

from typing import TYPE_CHECKING

from servicemodel.exceptions import MissingReferenceTargetError
from servicemodel.parsing import dispatcher
from servicemodel.parsing.naming import property_entity_name
from servicemodel.parsing.paths import SchemaPath, render_schema_path
from servicemodel.typing.enums import SchemaKind
from servicemodel.typing.models import Member, StructureDescription

if TYPE_CHECKING:
    from servicemodel.typing.models import ObjectContext, ServiceModel, WalkContext


def parse_object_schema(
    object_context: ObjectContext,
    entity_name: str,
    model: ServiceModel,
    *,
    context: WalkContext | None = None,
    path: SchemaPath = (),
    structure: StructureDescription | None = None,
) -> StructureDescription:
    """Convert object properties into structure members.

    Properties are visited in lexicographic order so member positions and
    synthetic names do not depend on the mapping's native order. Referenced
    properties point at their target; anonymous ones are registered under
    `entity_name` followed by the capitalized property name.

    Args:
        object_context (ObjectContext): Object schema metadata.
        entity_name (str): Namespace for anonymous property entities.
        model (ServiceModel): Model receiving nested registrations.
        context (WalkContext | None): Overrides and collaborators for this walk.
        path (SchemaPath): Location of the object schema in the document.
        structure (StructureDescription | None): Structure to add members to.

    Raises:
        MissingReferenceTargetError: If a referenced property has no target name.

    Returns:
        StructureDescription: The structure holding the members.
    """
    structure = structure if structure is not None else StructureDescription()
    required = set(object_context.required_properties)

    for index, name in enumerate(sorted(object_context.properties)):
        property_schema = object_context.properties[name]
        property_path = (*path, "properties", name)

        if property_schema.kind == SchemaKind.REFERENCE:
            type_name = property_schema.reference_name
            if type_name is None:
                raise MissingReferenceTargetError(
                    schema_path=render_schema_path(property_path),
                    reference=property_schema.reference.ref if property_schema.reference else "",
                )
        else:
            registration = dispatcher.parse_definition_schema(
                property_schema,
                property_entity_name(entity_name, name),
                model,
                context=context,
                path=property_path,
            )
            type_name = registration.type_name

        structure.members[name] = Member(
            type_name=type_name,
            position=index,
            required=name in required,
        )

    return structure
