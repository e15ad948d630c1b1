from __future__ import annotations

import pytest

from servicemodel.typing.enums import FieldType, SchemaKind


def test_schema_kind_from_str() -> None:
    assert SchemaKind.from_str("allOf") == SchemaKind.ALL_OF


def test_schema_kind_from_str_raises_on_invalid_value() -> None:
    with pytest.raises(ValueError, match="Unsupported SchemaKind value"):
        SchemaKind.from_str("if")


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (SchemaKind.ALL_OF, True),
        (SchemaKind.ANY_OF, True),
        (SchemaKind.ONE_OF, True),
        (SchemaKind.OBJECT, False),
        (SchemaKind.NOT, False),
    ],
)
def test_schema_kind_is_combinator(kind: SchemaKind, expected: bool) -> None:
    assert kind.is_combinator is expected


def test_field_type_to_str() -> None:
    assert FieldType.LONG.to_str() == "long"
