"""Export the JSON Schema of the Type Node model itself."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import TypeAdapter

from schemagen.core.types import TypeNode


def type_model_schema() -> dict:
    """Return the JSON Schema describing serialized TypeNodes."""

    return TypeAdapter(TypeNode).json_schema()


def export_type_schema(out_path: str = "schemas/type_node.json") -> None:
    """Write the TypeNode JSON Schema to the given path."""

    path = Path(out_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(type_model_schema(), indent=2), encoding="utf-8")


def main() -> None:
    """CLI entrypoint for schema export."""

    export_type_schema()


if __name__ == "__main__":
    main()
