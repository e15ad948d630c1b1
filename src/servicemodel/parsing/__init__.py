"""Schema walk turning a parsed schema tree into service model entries."""

from servicemodel.parsing.arrays import parse_array_schema
from servicemodel.parsing.combinators import parse_combinator_schemas
from servicemodel.parsing.constraints import integer_range, length_range, number_range
from servicemodel.parsing.dispatcher import parse_definition_schema
from servicemodel.parsing.maps import parse_map_schema
from servicemodel.parsing.naming import array_entity_names, combinator_namespace, uppercase_first
from servicemodel.parsing.objects import parse_object_schema
from servicemodel.parsing.strings import build_string_field

__all__ = [
    "array_entity_names",
    "build_string_field",
    "combinator_namespace",
    "integer_range",
    "length_range",
    "number_range",
    "parse_array_schema",
    "parse_combinator_schemas",
    "parse_definition_schema",
    "parse_map_schema",
    "parse_object_schema",
    "uppercase_first",
]
