"""Service model build orchestration."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from servicemodel import logger
from servicemodel.document import load_document, load_model_override
from servicemodel.parsing import parse_definition_schema
from servicemodel.typing.models import BUILTIN_STRING_TYPE, ServiceModel, WalkContext

if TYPE_CHECKING:
    from pathlib import Path

    from servicemodel.document import OpenApiDocument
    from servicemodel.settings import Settings
    from servicemodel.typing.models import BuildRequest, ModelOverride
    from servicemodel.typing.protocol import StringFieldBuilder


def build_service_model(
    document: OpenApiDocument,
    *,
    model_override: ModelOverride | None = None,
    settings: Settings | None = None,
    string_field_builder: StringFieldBuilder | None = None,
) -> ServiceModel:
    """Walk every component schema of a document into a fresh service model.

    Component schemas are visited in lexicographic order and registered under
    their component name.

    Args:
        document (OpenApiDocument): Parsed document.
        model_override (ModelOverride | None): Optional per-run overrides.
        settings (Settings | None): Runtime settings.
        string_field_builder (StringFieldBuilder | None): Replacement string field builder.

    Returns:
        ServiceModel: Populated model.
    """
    context = WalkContext(
        model_override=model_override,
        int64_format=settings.int64_format if settings is not None else "int64",
        string_field_builder=string_field_builder,
    )
    model = ServiceModel()

    for name in sorted(document.schemas):
        parse_definition_schema(document.schemas[name], name, model, context=context, path=(name,))

    unresolved = find_unresolved_type_names(model)
    if unresolved:
        logger.warning("Service model references unregistered types", extra={"type_names": unresolved})

    logger.info(
        "Service model built",
        extra={
            "fields": len(model.field_descriptions),
            "structures": len(model.structure_descriptions),
        },
    )
    return model


def find_unresolved_type_names(model: ServiceModel) -> list[str]:
    """Return referenced type names that are neither registered nor built in.

    Args:
        model (ServiceModel): Populated model.

    Returns:
        list[str]: Sorted unresolved names.
    """
    known = model.entity_names | {BUILTIN_STRING_TYPE}
    return sorted(model.referenced_type_names() - known)


def model_to_json_dict(model: ServiceModel) -> dict[str, object]:
    """Return the model payload for custom serialization paths.

    Args:
        model (ServiceModel): Service model.

    Returns:
        dict[str, object]: JSON-serializable dictionary.
    """
    return model.model_dump(mode="json")


def persist_model(model: ServiceModel, path: Path) -> None:
    """Persist a service model as deterministic JSON.

    Args:
        model (ServiceModel): Service model.
        path (Path): Output path.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(model_to_json_dict(model), indent=2, sort_keys=True)
    path.write_text(payload + "\n", encoding="utf-8")


def run_build(request: BuildRequest, settings: Settings) -> ServiceModel:
    """Top-level build flow used by CLI.

    Args:
        request (BuildRequest): Build request.
        settings (Settings): Runtime settings.

    Returns:
        ServiceModel: Built model, also persisted to the requested output path.
    """
    document = load_document(request.input_path)
    model_override = load_model_override(request.model_override_path) if request.model_override_path else None

    model = build_service_model(document, model_override=model_override, settings=settings)

    output_path = request.output_path or settings.default_output_path
    persist_model(model, output_path)
    logger.info("Service model persisted", extra={"output_path": str(output_path)})
    return model
