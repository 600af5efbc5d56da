"""TypeScript interface rendering for TypeNodes."""

from __future__ import annotations

from schemagen.core.types import ArrayType, ObjectType, TypeNode
from schemagen.render._text import indent_tail, property_key


_INDENT = "  "


def _needs_array_generic(item_type: str) -> bool:
    return "|" in item_type or "{" in item_type or "[" in item_type


def render_ts_type(node: TypeNode) -> str:
    """Render a TypeNode as a TypeScript type expression."""

    if isinstance(node, ArrayType):
        if node.items is None:
            return "any[]"
        item_type = render_ts_type(node.items)
        if _needs_array_generic(item_type):
            return f"Array<{item_type}>"
        return f"{item_type}[]"

    if isinstance(node, ObjectType):
        if not node.properties:
            return "Record<string, any>"
        fields = []
        for name, child in node.properties.items():
            marker = "" if node.is_required(name) else "?"
            field_type = indent_tail(render_ts_type(child), _INDENT)
            fields.append(f"{_INDENT}{property_key(name)}{marker}: {field_type};")
        return "{\n" + "\n".join(fields) + "\n}"

    return node.kind


def render_typescript(type_name: str, node: TypeNode) -> str:
    """Render an exported TypeScript declaration for a named type.

    Objects with properties become interfaces; every other root becomes a
    type alias.
    """

    if isinstance(node, ObjectType) and node.properties:
        return f"export interface {type_name} {render_ts_type(node)}"
    return f"export type {type_name} = {render_ts_type(node)};"
