"""Render a stored type model JSON file into the selected formats."""

from __future__ import annotations

import argparse

from schemagen.cli.common import add_output_arguments, emit_outputs, format_cli_exception
from schemagen.config import Settings
from schemagen.core.types import load_type
from schemagen.generate import render_type


def main(argv: list[str] | None = None) -> int:
    """Run the render CLI."""

    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="Render a type model JSON file.")
    parser.add_argument("path", help="Path to type model JSON file.")
    add_output_arguments(parser, settings)
    args = parser.parse_args(argv)

    try:
        type_node = load_type(args.path)
        outputs = render_type(type_node, args.prefix, args.formats)
        emit_outputs(outputs, type_name=args.prefix, out_dir=args.output, write=args.write)
        return 0
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        print(f"ERROR: {format_cli_exception(exc)}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
