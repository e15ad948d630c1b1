"""Runtime dependency checks for optional features."""

from __future__ import annotations

import importlib.util

from servicemodel.exceptions import DependencyError


def _is_module_available(module_name: str) -> bool:
    """Check whether a module can be imported.

    Args:
        module_name (str): Python module name.

    Returns:
        bool: True if import spec exists.
    """
    return importlib.util.find_spec(module_name) is not None


def _collect_missing_dependencies(modules_by_package: dict[str, str]) -> list[str]:
    """Collect missing packages for a module mapping.

    Args:
        modules_by_package (Mapping[str, str]): Mapping of package name -> import module.

    Returns:
        list[str]: Missing package names.
    """
    return [package for package, module in modules_by_package.items() if not _is_module_available(module)]


def ensure_package_dependencies() -> None:
    """Validate required dependencies for building service models.

    Raises:
        DependencyError: If required runtime dependencies are missing.
    """
    missing = _collect_missing_dependencies(
        {
            "pydantic": "pydantic",
            "pydantic-settings": "pydantic_settings",
            "structlog": "structlog",
        },
    )
    if missing:
        raise DependencyError(missing_package=missing, message="build")


def ensure_yaml_support() -> None:
    """Validate that YAML documents can be read.

    Raises:
        DependencyError: If PyYAML is not installed.
    """
    missing = _collect_missing_dependencies({"pyyaml": "yaml"})
    if missing:
        raise DependencyError(missing_package=missing, message="YAML documents")
