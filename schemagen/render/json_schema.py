"""JSON Schema (draft-07) rendering for TypeNodes."""

from __future__ import annotations

import json

from schemagen.core.types import ArrayType, ObjectType, TypeNode


SCHEMA_DIALECT = "http://json-schema.org/draft-07/schema#"
SCHEMA_ID_BASE = "https://example.com/schemas"


def type_to_json_schema(node: TypeNode) -> dict:
    """Convert a TypeNode into a JSON Schema fragment."""

    if isinstance(node, ArrayType):
        items = type_to_json_schema(node.items) if node.items is not None else {"type": "string"}
        schema: dict = {"type": "array", "items": items}
    elif isinstance(node, ObjectType):
        schema = {"type": "object"}
        if node.properties:
            schema["properties"] = {
                name: type_to_json_schema(child) for name, child in node.properties.items()
            }
        if node.required:
            schema["required"] = list(node.required)
    else:
        schema = {"type": node.kind}

    if node.description:
        schema["description"] = node.description
    return schema


def render_json_schema(type_name: str, node: TypeNode) -> str:
    """Render a complete JSON Schema document for a named type."""

    document = {
        "$schema": SCHEMA_DIALECT,
        "$id": f"{SCHEMA_ID_BASE}/{type_name}.json",
        "title": type_name,
        "description": f"Auto-generated schema for {type_name}",
    }
    document.update(type_to_json_schema(node))
    return json.dumps(document, ensure_ascii=False, indent=2)
