from __future__ import annotations

import pytest

from servicemodel.dependencies import ensure_package_dependencies, ensure_yaml_support
from servicemodel.exceptions import DependencyError


def test_ensure_yaml_support_succeeds(monkeypatch) -> None:
    monkeypatch.setattr("servicemodel.dependencies._is_module_available", lambda module_name: True)
    ensure_yaml_support()


def test_ensure_yaml_support_raises(monkeypatch) -> None:
    monkeypatch.setattr("servicemodel.dependencies._is_module_available", lambda module_name: False)
    with pytest.raises(DependencyError, match="YAML documents") as exc_info:
        ensure_yaml_support()

    assert exc_info.value.missing_package == ["pyyaml"]


def test_ensure_package_dependencies_succeeds(monkeypatch) -> None:
    monkeypatch.setattr("servicemodel.dependencies._is_module_available", lambda module_name: True)
    ensure_package_dependencies()


def test_ensure_package_dependencies_raises(monkeypatch) -> None:
    monkeypatch.setattr("servicemodel.dependencies._is_module_available", lambda module_name: False)
    with pytest.raises(DependencyError, match="Missing runtime dependencies for 'build'"):
        ensure_package_dependencies()
