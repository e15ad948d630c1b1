"""Default string field builder."""

from __future__ import annotations

from typing import TYPE_CHECKING

from servicemodel.parsing.constraints import length_range
from servicemodel.typing.models import StringContext, StringField

if TYPE_CHECKING:
    from servicemodel.typing.models import JsonSchema, ModelOverride


def build_string_field(
    schema: JsonSchema,
    entity_name: str,
    model_override: ModelOverride | None,
) -> StringField:
    """Build a string field from string schema metadata.

    Enumerated values become value constraints. Overrides keyed by
    `entity_name` replace the schema pattern and default value.

    Args:
        schema (JsonSchema): String schema node.
        entity_name (str): Entity name the field is registered under.
        model_override (ModelOverride | None): Optional per-run overrides.

    Returns:
        StringField: Field description.
    """
    context = schema.string or StringContext()
    pattern = context.pattern
    default_value = schema.default if isinstance(schema.default, str) else None
    if model_override is not None:
        pattern = model_override.pattern_for(entity_name, pattern)
        default_value = model_override.default_for(entity_name, default_value)

    value_constraints = [str(value) for value in schema.allowed_values or [] if value is not None]

    return StringField(
        pattern=pattern,
        length_constraint=length_range(context.min_length, context.max_length),
        value_constraints=value_constraints,
        default_value=default_value,
    )
