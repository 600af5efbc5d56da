"""Renderers from TypeNodes to target notations."""

from schemagen.render.example import example_value, render_example
from schemagen.render.json_schema import render_json_schema, type_to_json_schema
from schemagen.render.markdown import render_api_doc
from schemagen.render.typescript import render_typescript
from schemagen.render.zod import render_zod

__all__ = [
    "example_value",
    "render_api_doc",
    "render_example",
    "render_json_schema",
    "render_typescript",
    "render_zod",
    "type_to_json_schema",
]
