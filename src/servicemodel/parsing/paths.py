"""Schema path helpers used in walk diagnostics."""

from __future__ import annotations

SchemaPath = tuple[str, ...]


def render_schema_path(path: SchemaPath) -> str:
    """Render a schema path as a slash-separated pointer.

    Args:
        path (SchemaPath): Path segments from the document root.

    Returns:
        str: Pointer such as `Pet/properties/tags/items`, or `<root>`.
    """
    if not path:
        return "<root>"
    return "/".join(segment.replace("~", "~0").replace("/", "~1") for segment in path)
