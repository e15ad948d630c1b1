from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from servicemodel.exceptions import MissingReferenceTargetError, UnsupportedSchemaShapeError
from servicemodel.parsing.dispatcher import parse_definition_schema
from servicemodel.typing.enums import SchemaKind
from servicemodel.typing.models import (
    BooleanField,
    DoubleField,
    IntegerContext,
    IntegerField,
    JsonSchema,
    LongField,
    MapField,
    ModelOverride,
    NumberContext,
    NumericRange,
    ReferenceContext,
    StringField,
    WalkContext,
)

if TYPE_CHECKING:
    from servicemodel.typing.models import ServiceModel


def test_boolean_schema_registers_boolean_field(model: ServiceModel) -> None:
    registration = parse_definition_schema(JsonSchema.boolean_schema(), "Flag", model)

    assert model.field_descriptions == {"Flag": BooleanField()}
    assert registration.registered_name == "Flag"
    assert registration.type_name == "Flag"


def test_integer_schema_keeps_range_fidelity(model: ServiceModel) -> None:
    schema = JsonSchema(
        kind=SchemaKind.INTEGER,
        integer=IntegerContext(minimum=0, maximum=100, exclusive_maximum=True),
    )

    parse_definition_schema(schema, "Count", model)

    field = model.field_descriptions["Count"]
    assert isinstance(field, IntegerField)
    assert field.range_constraint == NumericRange[int](
        minimum=0,
        maximum=100,
        exclusive_minimum=False,
        exclusive_maximum=True,
    )


def test_int64_integer_schema_registers_long_field(model: ServiceModel) -> None:
    schema = JsonSchema(
        kind=SchemaKind.INTEGER,
        format="int64",
        integer=IntegerContext(minimum=0, maximum=100, exclusive_maximum=True),
    )

    parse_definition_schema(schema, "Id", model)

    field = model.field_descriptions["Id"]
    assert isinstance(field, LongField)
    assert field.range_constraint.maximum == 100
    assert field.range_constraint.exclusive_maximum is True


def test_int64_format_is_configurable(model: ServiceModel) -> None:
    schema = JsonSchema(kind=SchemaKind.INTEGER, format="long")

    parse_definition_schema(schema, "Id", model, context=WalkContext(int64_format="long"))

    assert isinstance(model.field_descriptions["Id"], LongField)


def test_number_schema_registers_double_field(model: ServiceModel) -> None:
    schema = JsonSchema(kind=SchemaKind.NUMBER, number=NumberContext(minimum=0.0, exclusive_minimum=True))

    parse_definition_schema(schema, "Weight", model)

    field = model.field_descriptions["Weight"]
    assert isinstance(field, DoubleField)
    assert field.range_constraint.minimum == 0.0
    assert field.range_constraint.exclusive_minimum is True


def test_string_schema_uses_model_override(model: ServiceModel) -> None:
    override = ModelOverride(field_regex_overrides={"Code": "^[A-Z]+$"})

    parse_definition_schema(
        JsonSchema.string_schema(pattern="^.*$"),
        "Code",
        model,
        context=WalkContext(model_override=override),
    )

    field = model.field_descriptions["Code"]
    assert isinstance(field, StringField)
    assert field.pattern == "^[A-Z]+$"


def test_string_schema_delegates_to_custom_builder(model: ServiceModel) -> None:
    calls: list[str] = []

    def _builder(schema, entity_name, model_override) -> StringField:
        _ = schema, model_override
        calls.append(entity_name)
        return StringField(pattern="custom")

    parse_definition_schema(
        JsonSchema.string_schema(),
        "Code",
        model,
        context=WalkContext(string_field_builder=_builder),
    )

    assert calls == ["Code"]
    assert model.field_descriptions["Code"] == StringField(pattern="custom")


def test_object_with_schema_valued_additional_properties_becomes_map(model: ServiceModel) -> None:
    schema = JsonSchema.object_schema(additional_properties=JsonSchema.reference_schema("Tag"))

    parse_definition_schema(schema, "Tags", model)

    assert model.field_descriptions["Tags"] == MapField(value_type="Tag")
    assert model.structure_descriptions == {}


def test_object_with_boolean_additional_properties_stays_structure(model: ServiceModel) -> None:
    schema = JsonSchema.object_schema(
        {"flag": JsonSchema.boolean_schema()},
        additional_properties=True,
    )

    parse_definition_schema(schema, "Settings", model)

    assert set(model.structure_descriptions["Settings"].members) == {"flag"}
    assert "Settings" not in model.field_descriptions


def test_reference_schema_registers_nothing(model: ServiceModel) -> None:
    registration = parse_definition_schema(JsonSchema.reference_schema("Pet"), "Alias", model)

    assert registration.registered_name is None
    assert registration.type_name == "Pet"
    assert model.field_descriptions == {}
    assert model.structure_descriptions == {}


def test_unresolved_reference_schema_is_fatal(model: ServiceModel) -> None:
    schema = JsonSchema(
        kind=SchemaKind.REFERENCE,
        reference=ReferenceContext(ref="other.yaml#/Pet"),
    )

    with pytest.raises(MissingReferenceTargetError, match="other.yaml#/Pet"):
        parse_definition_schema(schema, "Alias", model)


@pytest.mark.parametrize("kind", [SchemaKind.FRAGMENT, SchemaKind.NOT])
def test_unsupported_kinds_abort_the_walk(model: ServiceModel, kind: SchemaKind) -> None:
    with pytest.raises(UnsupportedSchemaShapeError) as exc_info:
        parse_definition_schema(JsonSchema(kind=kind), "Thing", model)

    assert exc_info.value.schema_path == "Thing"
    assert kind.value in str(exc_info.value)


def test_unsupported_shape_reports_nested_path(model: ServiceModel) -> None:
    schema = JsonSchema.object_schema({"extra": JsonSchema(kind=SchemaKind.NOT)})

    with pytest.raises(UnsupportedSchemaShapeError) as exc_info:
        parse_definition_schema(schema, "Pet", model)

    assert exc_info.value.schema_path == "Pet/properties/extra"
