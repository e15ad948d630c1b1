"""servicemodel package."""

from servicemodel.exceptions import (
    DependencyError,
    DocumentError,
    MissingReferenceTargetError,
    PackageError,
    SchemaWalkError,
    SettingsError,
    UnsupportedSchemaShapeError,
)
from servicemodel.logging import configure_logging, get_logger
from servicemodel.settings import Settings, get_settings

__version__ = "0.1.0"

# Initialize package logger at import time via `get_logger`.
logger = get_logger("servicemodel")

__all__ = [
    "DependencyError",
    "DocumentError",
    "MissingReferenceTargetError",
    "PackageError",
    "SchemaWalkError",
    "Settings",
    "SettingsError",
    "UnsupportedSchemaShapeError",
    "__version__",
    "configure_logging",
    "get_logger",
    "get_settings",
    "logger",
]
