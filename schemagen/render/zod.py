"""Zod validator rendering for TypeNodes."""

from __future__ import annotations

from schemagen.core.types import ArrayType, ObjectType, TypeNode
from schemagen.render._text import indent_tail, property_key


_INDENT = "  "

_PRIMITIVE_VALIDATORS = {
    "string": "z.string()",
    "number": "z.number()",
    "boolean": "z.boolean()",
    "null": "z.null()",
}


def render_zod_validator(node: TypeNode) -> str:
    """Render a TypeNode as a Zod validator expression."""

    if isinstance(node, ArrayType):
        if node.items is None:
            return "z.array(z.any())"
        item_validator = render_zod_validator(node.items)
        if "\n" in item_validator:
            return f"z.array(\n{_INDENT}{indent_tail(item_validator, _INDENT)}\n)"
        return f"z.array({item_validator})"

    if isinstance(node, ObjectType):
        if not node.properties:
            return "z.record(z.any())"
        fields = []
        for name, child in node.properties.items():
            validator = indent_tail(render_zod_validator(child), _INDENT)
            suffix = "" if node.is_required(name) else ".optional()"
            fields.append(f"{_INDENT}{property_key(name)}: {validator}{suffix},")
        return "z.object({\n" + "\n".join(fields) + "\n})"

    return _PRIMITIVE_VALIDATORS.get(node.kind, "z.any()")


def render_zod(type_name: str, node: TypeNode) -> str:
    """Render a Zod module exporting a schema and its inferred type."""

    return (
        "import { z } from 'zod';\n"
        "\n"
        f"export const {type_name}Schema = {render_zod_validator(node)};\n"
        "\n"
        f"export type {type_name} = z.infer<typeof {type_name}Schema>;"
    )
