"""Tests for Zod validator rendering."""

from __future__ import annotations

from schemagen.core.inference import infer_type, infer_type_from_examples
from schemagen.core.types import ArrayType, ObjectType
from schemagen.render.zod import render_zod, render_zod_validator


def test_render_zod_module() -> None:
    node = infer_type({"name": "John", "age": 30})

    assert render_zod("User", node) == (
        "import { z } from 'zod';\n"
        "\n"
        "export const UserSchema = z.object({\n"
        "  name: z.string(),\n"
        "  age: z.number(),\n"
        "});\n"
        "\n"
        "export type User = z.infer<typeof UserSchema>;"
    )


def test_primitive_validators() -> None:
    assert render_zod_validator(infer_type("x")) == "z.string()"
    assert render_zod_validator(infer_type(1)) == "z.number()"
    assert render_zod_validator(infer_type(False)) == "z.boolean()"
    assert render_zod_validator(infer_type(None)) == "z.null()"


def test_optional_suffix() -> None:
    node = infer_type_from_examples([{"a": 1, "tags": ["x"]}, {"a": 2}])

    assert render_zod_validator(node) == (
        "z.object({\n"
        "  a: z.number(),\n"
        "  tags: z.array(z.string()).optional(),\n"
        "})"
    )


def test_nested_object_and_array_blocks_are_reindented() -> None:
    node = infer_type_from_examples(
        [
            {"user": {"name": "a"}, "items": [{"id": 1}]},
            {"user": {"name": "b"}},
        ]
    )

    assert render_zod_validator(node) == (
        "z.object({\n"
        "  user: z.object({\n"
        "    name: z.string(),\n"
        "  }),\n"
        "  items: z.array(\n"
        "    z.object({\n"
        "      id: z.number(),\n"
        "    })\n"
        "  ).optional(),\n"
        "})"
    )


def test_empty_object_and_untyped_array() -> None:
    assert render_zod_validator(ObjectType()) == "z.record(z.any())"
    assert render_zod_validator(ArrayType()) == "z.array(z.any())"
