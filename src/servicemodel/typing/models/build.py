"""Build request and walk context models."""

from __future__ import annotations

from pathlib import Path
from pydantic import BaseModel, ConfigDict, field_validator

from servicemodel.typing.models.model_override import ModelOverride
from servicemodel.typing.protocol import StringFieldBuilder  # noqa: TC001


class BuildRequest(BaseModel):
    """Service model build request settings."""

    model_config = ConfigDict(extra="forbid")

    input_path: Path
    output_path: Path | None = None
    model_override_path: Path | None = None

    @field_validator("input_path", "model_override_path")
    @classmethod
    def _validate_existing_file(cls, value: Path | None) -> Path | None:
        """Ensure input paths exist and point to files.

        Args:
            value (Path | None): Input path.

        Raises:
            ValueError: If the path does not exist or is not a file.

        Returns:
            Path | None: Validated path.
        """
        if value is None:
            return value
        if not value.exists():
            raise ValueError("Input path does not exist")  # noqa: TRY003
        if not value.is_file():
            raise ValueError("Input path is not a file")  # noqa: TRY003
        return value


class WalkContext(BaseModel):
    """Read-only inputs shared by every frame of one schema walk."""

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    model_override: ModelOverride | None = None
    int64_format: str = "int64"
    string_field_builder: StringFieldBuilder | None = None
