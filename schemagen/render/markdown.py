"""Markdown API documentation for TypeNodes."""

from __future__ import annotations

from schemagen.core.types import ArrayType, ObjectType, TypeNode
from schemagen.render.example import render_example


_KIND_DESCRIPTIONS = {
    "string": "A string value",
    "number": "A numeric value",
    "boolean": "A boolean value (true/false)",
    "null": "A null value",
    "array": "An array of items",
    "object": "An object with properties",
}


def _escape_cell(value: str | None) -> str:
    return (value or "").replace("\r", " ").replace("\n", " ").replace("|", "\\|")


def display_name(node: TypeNode) -> str:
    """Return the compact type name shown in documentation tables."""

    if isinstance(node, ArrayType):
        if node.items is None:
            return "any[]"
        return f"{display_name(node.items)}[]"
    if isinstance(node, ObjectType):
        if not node.properties:
            return "object"
        return "{ " + ", ".join(node.properties) + " }"
    return node.kind


def describe(node: TypeNode) -> str:
    """Return the node's description, or a canned sentence for its kind."""

    if node.description:
        return node.description
    return _KIND_DESCRIPTIONS.get(node.kind, "")


def _row(name: str, node: TypeNode, required: bool) -> str:
    return (
        f"| {name} | `{_escape_cell(display_name(node))}` | "
        f"{'Yes' if required else 'No'} | {_escape_cell(describe(node))} |"
    )


def render_api_doc(type_name: str, node: TypeNode) -> str:
    """Render a Markdown reference page with a field table and an example."""

    lines: list[str] = []
    lines.append(f"# {type_name}")
    lines.append("")
    lines.append("## Schema")
    lines.append("")
    lines.append("| Field | Type | Required | Description |")
    lines.append("| --- | --- | --- | --- |")
    if isinstance(node, ObjectType):
        for name, child in node.properties.items():
            lines.append(_row(_escape_cell(name), child, node.is_required(name)))
    else:
        lines.append(_row("*value*", node, True))

    lines.append("")
    lines.append("## Example")
    lines.append("")
    lines.append("```json")
    lines.append(render_example(node))
    lines.append("```")

    return "\n".join(lines) + "\n"
