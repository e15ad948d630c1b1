"""Collaborator interfaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from servicemodel.typing.models import JsonSchema, ModelOverride, StringField


@runtime_checkable
class StringFieldBuilder(Protocol):
    """Builds the string field registered for a string schema."""

    def __call__(
        self,
        schema: JsonSchema,
        entity_name: str,
        model_override: ModelOverride | None,
    ) -> StringField:
        """Build a string field.

        Args:
            schema: String schema node.
            entity_name: Entity name the field is registered under.
            model_override: Optional per-run overrides.

        Returns:
            StringField: Field description.
        """
