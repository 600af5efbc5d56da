"""Tests for the format registry and generate-all facade."""

from __future__ import annotations

import json

import pytest

from schemagen.core.inference import infer_type, infer_type_from_examples
from schemagen.errors import NoExamplesError, UnknownFormatError
from schemagen.generate import FORMATS, generate_all, infer_examples, render_type


def test_registry_order_and_suffixes() -> None:
    assert FORMATS.names() == ["json-schema", "typescript", "zod", "api-doc"]
    assert FORMATS.filename("User", "json-schema") == "User.schema.json"
    assert FORMATS.filename("User", "typescript") == "User.ts"
    assert FORMATS.filename("User", "zod") == "User.zod.ts"
    assert FORMATS.filename("User", "api-doc") == "User.md"
    assert "zod" in FORMATS
    assert FORMATS.lookup("yaml") is None


def test_resolve_selection_forms() -> None:
    assert FORMATS.resolve(None) == FORMATS.names()
    assert FORMATS.resolve("all") == FORMATS.names()
    assert FORMATS.resolve("zod, typescript") == ["zod", "typescript"]
    assert FORMATS.resolve(["api-doc", "api-doc"]) == ["api-doc"]


def test_resolve_rejects_unknown_formats() -> None:
    with pytest.raises(UnknownFormatError) as excinfo:
        FORMATS.resolve("zod,yaml,proto")

    assert excinfo.value.invalid == ["yaml", "proto"]
    assert excinfo.value.available == FORMATS.names()
    assert str(excinfo.value) == "Invalid formats: yaml, proto"


def test_resolve_rejects_empty_selection() -> None:
    with pytest.raises(UnknownFormatError, match="No formats selected"):
        FORMATS.resolve(" , ")


def test_generate_all_returns_every_format() -> None:
    outputs = generate_all([{"name": "John", "age": 30}], "User")

    assert list(outputs) == ["json-schema", "typescript", "zod", "api-doc"]
    assert json.loads(outputs["json-schema"])["title"] == "User"
    assert outputs["typescript"].startswith("export interface User {")
    assert "export const UserSchema = z.object({" in outputs["zod"]
    assert outputs["api-doc"].startswith("# User\n")


def test_generate_all_subset_uses_default_type_name() -> None:
    outputs = generate_all([{"a": 1}], formats=["typescript"])

    assert list(outputs) == ["typescript"]
    assert outputs["typescript"].startswith("export interface Schema ")


def test_generate_all_merges_multiple_examples() -> None:
    outputs = generate_all([{"a": 1, "b": 2}, {"a": 1}], "T", formats="json-schema,typescript")

    assert json.loads(outputs["json-schema"])["required"] == ["a"]
    assert "  b?: number;" in outputs["typescript"]


def test_generate_all_requires_examples() -> None:
    with pytest.raises(NoExamplesError):
        generate_all([], "T")


def test_generate_all_validates_formats_before_inference() -> None:
    with pytest.raises(UnknownFormatError):
        generate_all([], "T", formats="nope")


def test_infer_examples_single_and_many() -> None:
    assert infer_examples([[1]]) == infer_type([1])
    assert infer_examples([None, "x"]).kind == "string"


def test_infer_examples_matches_merge_for_every_count() -> None:
    for examples in ([{"a": 1}], [{"a": 1}, {"b": "x"}], [None, None]):
        assert infer_examples(examples) == infer_type_from_examples(examples)


def test_render_type_matches_generate_all() -> None:
    examples = [{"id": 1, "tags": ["x"]}]

    assert render_type(infer_type(examples[0]), "Post") == generate_all(examples, "Post")
