from __future__ import annotations

import json
import sys
from subprocess import run as subprocess_run  # noqa: S404
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path
    from subprocess import CompletedProcess  # noqa: S404


def _run_build(tmp_path: Path, *extra_args: str) -> CompletedProcess[str]:
    return subprocess_run(  # noqa: S603
        [sys.executable, "-m", "servicemodel.cli", "build", *extra_args],
        capture_output=True,
        text=True,
        check=False,
        cwd=tmp_path,
    )


def test_build_command_writes_service_model(tmp_path: Path, petstore_path: Path, overrides_path: Path) -> None:
    output_path = tmp_path / "model.json"

    result = _run_build(
        tmp_path,
        "--input",
        str(petstore_path),
        "--output",
        str(output_path),
        "--model-override",
        str(overrides_path),
    )

    assert result.returncode == 0, result.stderr
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["field_descriptions"]["PetName"]["pattern"] == "^[A-Za-z ]+$"
    assert payload["field_descriptions"]["Pets"]["kind"] == "list"
    assert set(payload["structure_descriptions"]) == {"NewPet", "NewPet2Owner", "Pet", "PetCategory", "Tag"}


def test_build_command_reports_unsupported_schema(tmp_path: Path) -> None:
    document = tmp_path / "api.json"
    document.write_text(
        json.dumps({"components": {"schemas": {"Odd": {"not": {"type": "string"}}}}}),
        encoding="utf-8",
    )

    result = _run_build(tmp_path, "--input", str(document))

    assert result.returncode == 1
    assert "Odd" in result.stderr
    assert not (tmp_path / "results").exists()
