"""Format registry and the generate-all facade."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

from schemagen.core.inference import infer_type_from_examples
from schemagen.core.types import TypeNode
from schemagen.errors import NoExamplesError, UnknownFormatError
from schemagen.render.json_schema import render_json_schema
from schemagen.render.markdown import render_api_doc
from schemagen.render.typescript import render_typescript
from schemagen.render.zod import render_zod


DEFAULT_TYPE_NAME = "Schema"


@dataclass(frozen=True, slots=True)
class FormatSpec:
    """One output format: its name, file suffix and renderer."""

    name: str
    suffix: str
    render: Callable[[str, TypeNode], str]
    label: str


class FormatRegistry:
    """Ordered lookup table of output formats."""

    def __init__(self, specs: list[FormatSpec]) -> None:
        self._specs: tuple[FormatSpec, ...] = tuple(specs)
        self._by_name: dict[str, FormatSpec] = {}
        for spec in self._specs:
            if spec.name in self._by_name:
                raise ValueError(f"Duplicate format name: {spec.name}")
            self._by_name[spec.name] = spec

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def lookup(self, name: str) -> FormatSpec | None:
        """Lookup a format by name."""

        return self._by_name.get(name)

    def names(self) -> list[str]:
        """Return all format names in registry order."""

        return [spec.name for spec in self._specs]

    def resolve(self, requested: str | Iterable[str] | None) -> list[str]:
        """Normalize a format selection into validated names.

        ``None`` and ``"all"`` select every format. A string is split on
        commas. Duplicates are dropped, first occurrence wins.
        """

        if requested is None:
            return self.names()
        if isinstance(requested, str):
            if requested.strip() == "all":
                return self.names()
            requested = requested.split(",")

        names: list[str] = []
        for item in requested:
            name = item.strip()
            if name and name not in names:
                names.append(name)

        invalid = [name for name in names if name not in self._by_name]
        if invalid:
            raise UnknownFormatError(invalid, self.names())
        if not names:
            raise UnknownFormatError([], self.names())
        return names

    def filename(self, type_name: str, name: str) -> str:
        """Return the output file name for a type in the given format."""

        spec = self._by_name.get(name)
        if spec is None:
            raise UnknownFormatError([name], self.names())
        return f"{type_name}{spec.suffix}"


FORMATS = FormatRegistry(
    [
        FormatSpec(
            name="json-schema",
            suffix=".schema.json",
            render=render_json_schema,
            label="JSON Schema (draft-07)",
        ),
        FormatSpec(
            name="typescript",
            suffix=".ts",
            render=render_typescript,
            label="TypeScript interface",
        ),
        FormatSpec(
            name="zod",
            suffix=".zod.ts",
            render=render_zod,
            label="Zod validator",
        ),
        FormatSpec(
            name="api-doc",
            suffix=".md",
            render=render_api_doc,
            label="Markdown API documentation",
        ),
    ]
)


def infer_examples(examples: Sequence[Any]) -> TypeNode:
    """Infer the TypeNode shared by every generated format."""

    if len(examples) == 0:
        raise NoExamplesError()
    return infer_type_from_examples(examples)


def render_type(
    type_node: TypeNode,
    type_name: str = DEFAULT_TYPE_NAME,
    formats: str | Iterable[str] | None = None,
) -> dict[str, str]:
    """Render an already inferred TypeNode into the selected formats."""

    names = FORMATS.resolve(formats)
    outputs: dict[str, str] = {}
    for name in names:
        spec = FORMATS.lookup(name)
        outputs[name] = spec.render(type_name, type_node)
    return outputs


def generate_all(
    examples: Sequence[Any],
    type_name: str = DEFAULT_TYPE_NAME,
    formats: str | Iterable[str] | None = None,
) -> dict[str, str]:
    """Infer a type from JSON examples and render it in every selected format.

    Format names are validated before inference, so an invalid selection
    never produces partial output.
    """

    FORMATS.resolve(formats)
    type_node = infer_examples(examples)
    return render_type(type_node, type_name, formats)
