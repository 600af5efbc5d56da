"""Type Node definitions for inferred JSON structure."""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Annotated, Literal, Mapping, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    SerializerFunctionWrapHandler,
    TypeAdapter,
    WrapSerializer,
    model_validator,
)


def _freeze_mapping(value: dict) -> Mapping:
    return MappingProxyType(value)


def _dump_mapping(value: Mapping, handler: SerializerFunctionWrapHandler) -> dict:
    return handler(dict(value))


def _dump_names(value: tuple[str, ...]) -> list[str]:
    return list(value)


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    description: str | None = None


class StringType(_Node):
    """String value."""

    kind: Literal["string"] = "string"


class NumberType(_Node):
    """Numeric value (integers and floats are not distinguished)."""

    kind: Literal["number"] = "number"


class BooleanType(_Node):
    """Boolean value."""

    kind: Literal["boolean"] = "boolean"


class NullType(_Node):
    """JSON null."""

    kind: Literal["null"] = "null"


class ArrayType(_Node):
    """Monomorphic array with a single item type."""

    kind: Literal["array"] = "array"
    items: TypeNode | None = None


class ObjectType(_Node):
    """Object with ordered properties and the subset that is always present."""

    kind: Literal["object"] = "object"
    properties: Annotated[
        dict[str, TypeNode],
        AfterValidator(_freeze_mapping),
        WrapSerializer(_dump_mapping),
    ] = Field(default_factory=dict, validate_default=True)
    required: Annotated[tuple[str, ...], PlainSerializer(_dump_names)] = ()

    @model_validator(mode="after")
    def _validate_required(self) -> "ObjectType":
        unknown = [name for name in self.required if name not in self.properties]
        if unknown:
            raise ValueError(f"Required names missing from properties: {unknown}")
        if len(set(self.required)) != len(self.required):
            raise ValueError("ObjectType.required must not contain duplicates")
        return self

    def is_required(self, name: str) -> bool:
        return name in self.required


TypeNode = Annotated[
    Union[
        StringType,
        NumberType,
        BooleanType,
        NullType,
        ArrayType,
        ObjectType,
    ],
    Field(discriminator="kind"),
]

ArrayType.model_rebuild()
ObjectType.model_rebuild()


def parse_type(data: dict) -> TypeNode:
    """Parse and validate a dict into a TypeNode."""

    return TypeAdapter(TypeNode).validate_python(data)


def type_to_dict(node: TypeNode) -> dict:
    """Serialize a TypeNode into a dict, omitting unset annotations."""

    return node.model_dump(exclude_none=True)


def load_type(path: str) -> TypeNode:
    """Load a TypeNode from a JSON file."""

    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    return parse_type(payload)


def dump_type(node: TypeNode, path: str) -> None:
    """Write a TypeNode to a JSON file."""

    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(
        json.dumps(type_to_dict(node), ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
