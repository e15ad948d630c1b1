"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass


class PackageError(Exception):
    """Root exception for the package."""


@dataclass(frozen=True)
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass(frozen=True)
class DependencyError(PackageError):
    """Raised when optional runtime dependencies are missing."""

    missing_package: list[str]
    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Missing runtime dependencies for '{self.message}': {', '.join(self.missing_package)}"


@dataclass(frozen=True)
class DocumentError(PackageError):
    """Raised when a schema document or override file cannot be loaded."""

    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return self.message


@dataclass(frozen=True)
class SchemaWalkError(PackageError):
    """Base class for fatal conditions met while walking a schema tree."""

    schema_path: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Schema walk failed at '{self.schema_path}'"


@dataclass(frozen=True)
class UnsupportedSchemaShapeError(SchemaWalkError):
    """Raised when a schema kind or combination has no model counterpart."""

    message: str = "Unsupported schema shape"

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message} (at '{self.schema_path}')"


@dataclass(frozen=True)
class MissingReferenceTargetError(SchemaWalkError):
    """Raised when a reference did not resolve to a local type name."""

    reference: str = ""

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Reference '{self.reference}' has no resolvable target name (at '{self.schema_path}')"
