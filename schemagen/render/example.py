"""Synthetic example payloads built from TypeNodes."""

from __future__ import annotations

import json
from typing import Any

from schemagen.core.types import ArrayType, ObjectType, TypeNode


_SAMPLE_VALUES: dict[str, Any] = {
    "string": "example",
    "number": 123,
    "boolean": True,
    "null": None,
}


def example_value(node: TypeNode) -> Any:
    """Return a representative JSON value for a TypeNode."""

    if isinstance(node, ArrayType):
        if node.items is None:
            return []
        return [example_value(node.items)]
    if isinstance(node, ObjectType):
        return {name: example_value(child) for name, child in node.properties.items()}
    return _SAMPLE_VALUES.get(node.kind)


def render_example(node: TypeNode) -> str:
    """Render the synthetic example as indented JSON text."""

    return json.dumps(example_value(node), ensure_ascii=False, indent=2)
