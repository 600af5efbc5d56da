"""Structural type inference over parsed JSON values.

Single values are inferred directly. Several examples are inferred one by one
and merged: a property present in every example is required, a property
present in only some of them is optional. Kind conflicts collapse to
``string``; no union types are produced.
"""

from __future__ import annotations

from typing import Any, Sequence

from schemagen.core.types import (
    ArrayType,
    BooleanType,
    NullType,
    NumberType,
    ObjectType,
    StringType,
    TypeNode,
)


def infer_type(value: Any) -> TypeNode:
    """Infer a TypeNode from one JSON value.

    Arrays take their item type from the first element only; an empty array
    defaults to string items. Every key of an object is required.
    """

    if value is None:
        return NullType()
    # bool is an int subclass, so it must be tested first.
    if isinstance(value, bool):
        return BooleanType()
    if isinstance(value, str):
        return StringType()
    if isinstance(value, (int, float)):
        return NumberType()
    if isinstance(value, (list, tuple)):
        if not value:
            return ArrayType(items=StringType())
        return ArrayType(items=infer_type(value[0]))
    if isinstance(value, dict):
        properties = {str(key): infer_type(item) for key, item in value.items()}
        return ObjectType(properties=properties, required=list(properties))

    return StringType()


def infer_type_from_examples(examples: Sequence[Any]) -> TypeNode:
    """Infer one merged TypeNode from several JSON examples."""

    if len(examples) == 0:
        return NullType()
    if len(examples) == 1:
        return infer_type(examples[0])

    nodes = [infer_type(example) for example in examples]
    if all(isinstance(node, ObjectType) for node in nodes):
        return merge_object_types(nodes)

    for node in nodes:
        if not isinstance(node, NullType):
            return node
    return NullType()


def merge_object_types(nodes: Sequence[ObjectType]) -> ObjectType:
    """Merge object nodes, tracking which properties appear in all of them."""

    names: list[str] = []
    seen: set[str] = set()
    for node in nodes:
        for name in node.properties:
            if name not in seen:
                seen.add(name)
                names.append(name)

    properties: dict[str, TypeNode] = {}
    required: list[str] = []
    for name in names:
        candidates = [node.properties[name] for node in nodes if name in node.properties]
        if len(candidates) == len(nodes):
            required.append(name)
        properties[name] = merge_types(candidates)

    return ObjectType(properties=properties, required=required)


def merge_types(candidates: Sequence[TypeNode]) -> TypeNode:
    """Merge sibling TypeNodes describing the same position."""

    if len(candidates) == 0:
        return NullType()
    if len(candidates) == 1:
        return candidates[0]

    first = candidates[0]
    if any(node.kind != first.kind for node in candidates):
        return StringType()

    if isinstance(first, ArrayType):
        item_types = [node.items for node in candidates if node.items is not None]
        if item_types:
            return ArrayType(items=merge_types(item_types))
        return first

    if isinstance(first, ObjectType):
        return merge_object_types(candidates)

    return first
