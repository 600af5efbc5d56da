"""Infer the TypeNode for JSON examples and emit it as JSON."""

from __future__ import annotations

import argparse
import json

from schemagen.cli.common import add_example_arguments, format_cli_exception
from schemagen.core.types import dump_type, type_to_dict
from schemagen.generate import infer_examples
from schemagen.inputs import collect_examples


def main(argv: list[str] | None = None) -> int:
    """Run the infer CLI."""

    parser = argparse.ArgumentParser(description="Infer a type model from JSON examples.")
    add_example_arguments(parser)
    parser.add_argument("--out", help="Write the type model JSON to this path.")
    args = parser.parse_args(argv)

    try:
        examples = collect_examples(args.json, args.files)
        type_node = infer_examples(examples)

        if args.out:
            dump_type(type_node, args.out)
            print(f"OK: {type_node.kind} -> {args.out}")
        else:
            print(json.dumps(type_to_dict(type_node), ensure_ascii=False, indent=2))
        return 0
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        print(f"ERROR: {format_cli_exception(exc)}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
