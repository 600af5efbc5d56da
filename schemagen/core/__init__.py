"""Core type model and inference."""

from schemagen.core.inference import (
    infer_type,
    infer_type_from_examples,
    merge_object_types,
    merge_types,
)
from schemagen.core.types import (
    ArrayType,
    BooleanType,
    NullType,
    NumberType,
    ObjectType,
    StringType,
    TypeNode,
    parse_type,
    type_to_dict,
)

__all__ = [
    "ArrayType",
    "BooleanType",
    "NullType",
    "NumberType",
    "ObjectType",
    "StringType",
    "TypeNode",
    "infer_type",
    "infer_type_from_examples",
    "merge_object_types",
    "merge_types",
    "parse_type",
    "type_to_dict",
]
