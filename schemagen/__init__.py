"""Infer structural types from JSON examples and render them as schemas."""

from schemagen.core.inference import infer_type, infer_type_from_examples
from schemagen.core.types import TypeNode
from schemagen.generate import FORMATS, generate_all, render_type
from schemagen.render import (
    render_api_doc,
    render_json_schema,
    render_typescript,
    render_zod,
)

__all__ = [
    "FORMATS",
    "TypeNode",
    "generate_all",
    "infer_type",
    "infer_type_from_examples",
    "render_api_doc",
    "render_json_schema",
    "render_type",
    "render_typescript",
    "render_zod",
]
