"""Per-run overrides applied while building string fields."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelOverride(BaseModel):
    """Overrides keyed by the entity name of the string field they target."""

    model_config = ConfigDict(extra="forbid")

    field_regex_overrides: dict[str, str] = Field(
        default_factory=dict,
        description="Entity name -> pattern replacing the schema pattern.",
    )
    default_value_overrides: dict[str, str] = Field(
        default_factory=dict,
        description="Entity name -> default value replacing the schema default.",
    )

    def pattern_for(self, entity_name: str, schema_pattern: str | None) -> str | None:
        """Return the effective pattern for a string field."""
        return self.field_regex_overrides.get(entity_name, schema_pattern)

    def default_for(self, entity_name: str, schema_default: str | None) -> str | None:
        """Return the effective default value for a string field."""
        return self.default_value_overrides.get(entity_name, schema_default)
