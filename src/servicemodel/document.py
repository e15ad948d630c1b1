"""OpenAPI document loading and schema tree parsing."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any
from urllib.parse import unquote

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from servicemodel import logger
from servicemodel.dependencies import ensure_yaml_support
from servicemodel.exceptions import DocumentError
from servicemodel.typing.enums import SchemaKind
from servicemodel.typing.models import (
    ArrayContext,
    IntegerContext,
    JsonSchema,
    ModelOverride,
    NumberContext,
    ObjectContext,
    ReferenceContext,
    StringContext,
)

_LOCAL_REFERENCE_PREFIXES = ("#/components/schemas/", "#/definitions/")
_YAML_SUFFIXES = {".yaml", ".yml"}
_COMBINATOR_KEYWORDS = (
    ("allOf", SchemaKind.ALL_OF),
    ("anyOf", SchemaKind.ANY_OF),
    ("oneOf", SchemaKind.ONE_OF),
)
_TYPED_KINDS = {
    "boolean": SchemaKind.BOOLEAN,
    "integer": SchemaKind.INTEGER,
    "number": SchemaKind.NUMBER,
    "string": SchemaKind.STRING,
    "object": SchemaKind.OBJECT,
    "array": SchemaKind.ARRAY,
}


class OpenApiDocument(BaseModel):
    """Parsed document: version, title and named component schemas."""

    model_config = ConfigDict(extra="forbid")

    openapi: str | None = None
    title: str | None = None
    schemas: dict[str, JsonSchema] = Field(default_factory=dict)


def reference_name(ref: str) -> str | None:
    """Resolve a local `$ref` to the name of the schema it points at.

    Args:
        ref (str): Raw reference string.

    Returns:
        str | None: Target name, or None for non-local references. Percent-encoding
            is decoded before JSON pointer escapes.
    """
    for prefix in _LOCAL_REFERENCE_PREFIXES:
        if ref.startswith(prefix):
            name = unquote(ref.removeprefix(prefix))
            if name and "/" not in name:
                return name.replace("~1", "/").replace("~0", "~")
    return None


def parse_schema_node(raw: object, *, path: str = "#") -> JsonSchema:
    """Convert a raw JSON Schema mapping into a tagged schema node.

    Args:
        raw (object): Raw schema object.
        path (str): Location of `raw`, used in error messages.

    Raises:
        DocumentError: If the node is not a mapping or has invalid metadata.

    Returns:
        JsonSchema: Parsed node.
    """
    if not isinstance(raw, Mapping):
        raise DocumentError(message=f"Schema at '{path}' must be a mapping")

    common: dict[str, Any] = {
        "format": raw.get("format"),
        "description": raw.get("description"),
        "default": raw.get("default"),
        "allowed_values": list(raw["enum"]) if isinstance(raw.get("enum"), list) else None,
    }

    try:
        return _parse_typed_node(raw, common, path=path)
    except ValidationError as exc:
        raise DocumentError(message=f"Invalid schema at '{path}': {exc}") from exc


def _parse_typed_node(raw: Mapping[str, Any], common: dict[str, Any], *, path: str) -> JsonSchema:
    ref = raw.get("$ref")
    if isinstance(ref, str):
        return JsonSchema(
            kind=SchemaKind.REFERENCE,
            reference=ReferenceContext(ref=ref, name=reference_name(ref)),
            **common,
        )

    for keyword, kind in _COMBINATOR_KEYWORDS:
        members = raw.get(keyword)
        if isinstance(members, list):
            subschemas = [
                parse_schema_node(member, path=f"{path}/{keyword}/{index}") for index, member in enumerate(members)
            ]
            return JsonSchema(kind=kind, subschemas=subschemas, **common)

    if "not" in raw:
        return JsonSchema(kind=SchemaKind.NOT, **common)

    kind = _schema_kind(raw)
    if kind == SchemaKind.INTEGER:
        return JsonSchema(kind=kind, integer=IntegerContext(**_numeric_bounds(raw)), **common)
    if kind == SchemaKind.NUMBER:
        return JsonSchema(kind=kind, number=NumberContext(**_numeric_bounds(raw)), **common)
    if kind == SchemaKind.STRING:
        string_context = StringContext(
            min_length=raw.get("minLength", 0),
            max_length=raw.get("maxLength"),
            pattern=raw.get("pattern"),
        )
        return JsonSchema(kind=kind, string=string_context, **common)
    if kind == SchemaKind.OBJECT:
        return JsonSchema(kind=kind, object=_parse_object_context(raw, path=path), **common)
    if kind == SchemaKind.ARRAY:
        items = raw.get("items")
        array_context = ArrayContext(
            items=parse_schema_node(items, path=f"{path}/items") if items is not None else None,
            min_items=raw.get("minItems", 0),
            max_items=raw.get("maxItems"),
        )
        return JsonSchema(kind=kind, array=array_context, **common)
    return JsonSchema(kind=kind, **common)


def _schema_kind(raw: Mapping[str, Any]) -> SchemaKind:
    """Classify a typed or untyped schema mapping.

    Args:
        raw (Mapping[str, Any]): Raw schema object.

    Returns:
        SchemaKind: Kind; schemas without a usable type fall back to fragments.
    """
    declared = raw.get("type")
    if isinstance(declared, list):
        non_null = [value for value in declared if value != "null"]
        declared = non_null[0] if len(non_null) == 1 else None
    if isinstance(declared, str):
        return _TYPED_KINDS.get(declared, SchemaKind.FRAGMENT)
    if "properties" in raw or "additionalProperties" in raw:
        return SchemaKind.OBJECT
    if "items" in raw:
        return SchemaKind.ARRAY
    return SchemaKind.FRAGMENT


def _numeric_bounds(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Read numeric bounds in either OpenAPI 3.0 or 3.1 exclusivity style.

    Args:
        raw (Mapping[str, Any]): Raw numeric schema.

    Returns:
        dict[str, Any]: Keyword arguments for a numeric context.
    """
    bounds: dict[str, Any] = {"minimum": raw.get("minimum"), "maximum": raw.get("maximum")}
    for side in ("minimum", "maximum"):
        exclusive = raw.get(f"exclusive{side.capitalize()}")
        if isinstance(exclusive, bool):
            bounds[f"exclusive_{side}"] = exclusive
        elif isinstance(exclusive, int | float):
            bounds[side] = exclusive
            bounds[f"exclusive_{side}"] = True
    return bounds


def _parse_object_context(raw: Mapping[str, Any], *, path: str) -> ObjectContext:
    properties_raw = raw.get("properties") or {}
    if not isinstance(properties_raw, Mapping):
        raise DocumentError(message=f"Properties at '{path}' must be a mapping")
    properties = {
        str(name): parse_schema_node(value, path=f"{path}/properties/{name}") for name, value in properties_raw.items()
    }

    additional = raw.get("additionalProperties")
    additional_properties: bool | JsonSchema | None = None
    if isinstance(additional, bool):
        additional_properties = additional
    elif isinstance(additional, Mapping):
        # An empty mapping is the "any value" schema, equivalent to `true`.
        additional_properties = (
            parse_schema_node(additional, path=f"{path}/additionalProperties") if additional else True
        )

    required = raw.get("required")
    if required is None:
        required = []
    if not isinstance(required, list) or not all(isinstance(name, str) for name in required):
        raise DocumentError(message=f"'required' at '{path}' must be a list of property names")
    return ObjectContext(
        properties=properties,
        required_properties=list(required),
        additional_properties=additional_properties,
    )


def parse_document(raw: object) -> OpenApiDocument:
    """Parse a raw OpenAPI (or JSON Schema definitions) document.

    Args:
        raw (object): Deserialized document.

    Raises:
        DocumentError: If the document root or its schemas are malformed.

    Returns:
        OpenApiDocument: Document with parsed component schemas.
    """
    if not isinstance(raw, Mapping):
        raise DocumentError(message="Document root must be a mapping")

    components = raw.get("components") or {}
    schemas_raw = components.get("schemas") if isinstance(components, Mapping) else None
    base_path = "#/components/schemas"
    if schemas_raw is None and "definitions" in raw:
        schemas_raw = raw.get("definitions")
        base_path = "#/definitions"
    schemas_raw = schemas_raw or {}
    if not isinstance(schemas_raw, Mapping):
        raise DocumentError(message=f"'{base_path}' must be a mapping")

    info = raw.get("info")
    title = info.get("title") if isinstance(info, Mapping) else None
    version = raw.get("openapi") or raw.get("swagger")

    return OpenApiDocument(
        openapi=str(version) if version is not None else None,
        title=title,
        schemas={
            str(name): parse_schema_node(schema, path=f"{base_path}/{name}") for name, schema in schemas_raw.items()
        },
    )


def _read_structured_file(path: Path) -> object:
    """Read a JSON or YAML file.

    Args:
        path (Path): File path; `.yaml`/`.yml` suffixes are read as YAML.

    Raises:
        DocumentError: If the file cannot be read or decoded.

    Returns:
        object: Decoded payload.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentError(message=f"Cannot read '{path}': {exc}") from exc

    if path.suffix.lower() in _YAML_SUFFIXES:
        ensure_yaml_support()
        import yaml  # noqa: PLC0415

        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DocumentError(message=f"Invalid YAML in '{path}': {exc}") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentError(message=f"Invalid JSON in '{path}': {exc}") from exc


def load_document(path: Path) -> OpenApiDocument:
    """Load and parse a document file.

    Args:
        path (Path): JSON or YAML document path.

    Returns:
        OpenApiDocument: Parsed document.
    """
    document = parse_document(_read_structured_file(path))
    logger.info("Document loaded", extra={"path": str(path), "schemas": len(document.schemas)})
    return document


def load_model_override(path: Path) -> ModelOverride:
    """Load model overrides from a JSON or YAML file.

    Args:
        path (Path): Override file path.

    Raises:
        DocumentError: If the payload does not describe a valid override.

    Returns:
        ModelOverride: Parsed overrides.
    """
    payload = _read_structured_file(path)
    try:
        return ModelOverride.model_validate(payload or {})
    except ValidationError as exc:
        raise DocumentError(message=f"Invalid model override in '{path}': {exc}") from exc
