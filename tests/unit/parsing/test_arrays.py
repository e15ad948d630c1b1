from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from servicemodel.exceptions import MissingReferenceTargetError, UnsupportedSchemaShapeError
from servicemodel.parsing.arrays import parse_array_schema
from servicemodel.parsing.dispatcher import parse_definition_schema
from servicemodel.typing.enums import SchemaKind
from servicemodel.typing.models import (
    ArrayContext,
    JsonSchema,
    LengthRange,
    ListField,
    ReferenceContext,
    StructureDescription,
)

if TYPE_CHECKING:
    from servicemodel.typing.models import ServiceModel


def _anonymous_item() -> JsonSchema:
    return JsonSchema.object_schema({"size": JsonSchema.boolean_schema()})


def test_plural_enclosing_name_singularizes_element(model: ServiceModel) -> None:
    registration = parse_array_schema(ArrayContext(items=_anonymous_item()), "Widgets", model)

    assert registration.registered_name == "Widgets"
    assert registration.type_name == "Widgets"
    assert isinstance(model.structure_descriptions["Widget"], StructureDescription)
    assert model.field_descriptions["Widgets"] == ListField(element_type="Widget")


def test_singular_enclosing_name_is_pluralized_for_the_list(model: ServiceModel) -> None:
    registration = parse_array_schema(ArrayContext(items=_anonymous_item()), "Widget", model)

    assert registration.registered_name == "Widgets"
    assert "Widget" in model.structure_descriptions
    assert "Widget" not in model.field_descriptions
    assert model.field_descriptions["Widgets"] == ListField(element_type="Widget")


def test_reference_items_keep_enclosing_name(model: ServiceModel) -> None:
    registration = parse_array_schema(
        ArrayContext(items=JsonSchema.reference_schema("Pet"), min_items=1, max_items=10),
        "Pet",
        model,
    )

    assert registration.type_name == "Pet"
    assert model.field_descriptions == {
        "Pet": ListField(element_type="Pet", length_constraint=LengthRange[int](minimum=1, maximum=10)),
    }


def test_zero_min_items_is_dropped(model: ServiceModel) -> None:
    parse_array_schema(ArrayContext(items=JsonSchema.reference_schema("Tag"), min_items=0), "Tags", model)

    field = model.field_descriptions["Tags"]
    assert isinstance(field, ListField)
    assert field.length_constraint.minimum is None
    assert field.length_constraint.maximum is None


def test_array_registration_through_dispatcher_reports_list_name(model: ServiceModel) -> None:
    registration = parse_definition_schema(JsonSchema.array_schema(_anonymous_item()), "Entry", model)

    assert registration.type_name == "Entrys"
    assert model.field_descriptions["Entrys"] == ListField(element_type="Entry")


def test_array_without_items_is_unsupported(model: ServiceModel) -> None:
    with pytest.raises(UnsupportedSchemaShapeError, match="item schema"):
        parse_array_schema(ArrayContext(), "Things", model, path=("Things",))


def test_unresolved_reference_items_are_fatal(model: ServiceModel) -> None:
    items = JsonSchema(kind=SchemaKind.REFERENCE, reference=ReferenceContext(ref="#/paths/x"))

    with pytest.raises(MissingReferenceTargetError) as exc_info:
        parse_array_schema(ArrayContext(items=items), "Things", model, path=("Things",))

    assert exc_info.value.schema_path == "Things/items"
