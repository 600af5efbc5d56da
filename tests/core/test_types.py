"""Tests for TypeNode parsing, validation and persistence."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from schemagen.core.inference import infer_type, merge_object_types
from schemagen.core.types import (
    ArrayType,
    NumberType,
    ObjectType,
    StringType,
    dump_type,
    load_type,
    parse_type,
    type_to_dict,
)


def test_parse_type_round_trip_nested() -> None:
    payload = {
        "kind": "object",
        "properties": {
            "id": {"kind": "number"},
            "tags": {"kind": "array", "items": {"kind": "string"}},
            "owner": {
                "kind": "object",
                "properties": {"name": {"kind": "string", "description": "Display name"}},
                "required": ["name"],
            },
        },
        "required": ["id", "owner"],
    }

    node = parse_type(payload)

    assert isinstance(node, ObjectType)
    assert isinstance(node.properties["tags"], ArrayType)
    assert type_to_dict(node) == payload


def test_parse_type_dispatches_on_kind() -> None:
    assert isinstance(parse_type({"kind": "string"}), StringType)
    assert isinstance(parse_type({"kind": "number"}), NumberType)
    assert parse_type({"kind": "null"}).kind == "null"
    assert parse_type({"kind": "boolean"}).kind == "boolean"


def test_parse_type_rejects_unknown_kind() -> None:
    with pytest.raises(ValidationError):
        parse_type({"kind": "integer"})


def test_required_must_be_subset_of_properties() -> None:
    with pytest.raises(ValidationError):
        ObjectType(properties={"a": StringType()}, required=["a", "b"])


def test_required_rejects_duplicates() -> None:
    with pytest.raises(ValidationError):
        ObjectType(properties={"a": StringType()}, required=["a", "a"])


def test_nodes_are_immutable() -> None:
    node = ArrayType(items=StringType())
    with pytest.raises(ValidationError):
        node.items = NumberType()


def test_property_order_is_preserved() -> None:
    node = ObjectType(
        properties={"z": StringType(), "a": NumberType(), "m": StringType()},
        required=["m", "z"],
    )

    assert list(type_to_dict(node)["properties"]) == ["z", "a", "m"]
    assert node.is_required("z")
    assert not node.is_required("a")


def test_dump_and_load_type(tmp_path: Path) -> None:
    node = ObjectType(properties={"name": StringType()}, required=["name"])
    path = tmp_path / "types" / "user.json"

    dump_type(node, str(path))

    assert json.loads(path.read_text(encoding="utf-8"))["kind"] == "object"
    assert load_type(str(path)) == node


def test_object_node_contents_cannot_be_changed_in_place() -> None:
    node = infer_type({"a": 1})

    with pytest.raises(AttributeError):
        node.required.append("ghost")
    with pytest.raises(TypeError):
        node.properties["b"] = StringType()

    assert node.required == ("a",)
    assert list(node.properties) == ["a"]


def test_merged_tree_cannot_alter_its_inputs() -> None:
    first = infer_type({"user": {"name": "a"}})
    second = infer_type({"user": {"name": "b"}, "extra": 1})

    merged = merge_object_types([first, second])

    with pytest.raises(TypeError):
        merged.properties["extra"] = StringType()
    with pytest.raises(TypeError):
        merged.properties["user"].properties["ghost"] = StringType()
    assert list(first.properties["user"].properties) == ["name"]
    assert list(second.properties) == ["user", "extra"]


def test_frozen_properties_still_serialize() -> None:
    node = ObjectType(properties={"a": StringType()}, required=["a"])

    assert type_to_dict(node) == {
        "kind": "object",
        "properties": {"a": {"kind": "string"}},
        "required": ["a"],
    }
    assert json.loads(node.model_dump_json()) == type_to_dict(node)


def test_parse_type_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        parse_type({"kind": "string", "items": {"kind": "number"}})
    with pytest.raises(ValidationError):
        parse_type({"kind": "object", "properties": {}, "required": [], "enum": [1]})
