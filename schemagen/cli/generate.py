"""Generate schemas, types, validators and docs from JSON examples."""

from __future__ import annotations

import argparse

from schemagen.cli.common import (
    add_example_arguments,
    add_output_arguments,
    emit_outputs,
    format_cli_exception,
    open_trace,
)
from schemagen.config import Settings
from schemagen.generate import FORMATS, infer_examples, render_type
from schemagen.inputs import collect_examples
from schemagen.trace import new_event


def main(argv: list[str] | None = None) -> int:
    """Run the generate CLI."""

    settings = Settings.from_env()
    parser = argparse.ArgumentParser(
        prog="schemagen",
        description=(
            "Generate JSON Schema, TypeScript types, Zod validators and API docs "
            "from JSON examples."
        ),
    )
    add_example_arguments(parser)
    add_output_arguments(parser, settings)
    parser.add_argument("--trace", help="Optional JSONL trace output path.")
    args = parser.parse_args(argv)
    trace = open_trace(args.trace)

    try:
        examples = collect_examples(args.json, args.files)
        if trace is not None:
            trace.append(new_event("parse", "parsed examples", data={"count": len(examples)}))

        formats = FORMATS.resolve(args.formats)
        type_node = infer_examples(examples)
        if trace is not None:
            trace.append(new_event("infer", "inferred type", data={"kind": type_node.kind}))

        outputs = render_type(type_node, args.prefix, formats)
        if trace is not None:
            trace.append(new_event("render", "rendered formats", data={"formats": formats}))

        written = emit_outputs(outputs, type_name=args.prefix, out_dir=args.output, write=args.write)
        if trace is not None and written:
            trace.append(
                new_event("write", "wrote output files", data={"paths": [str(p) for p in written]})
            )
        return 0
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        if trace is not None:
            trace.append(new_event("error", str(exc), data={"type": exc.__class__.__name__}))
        print(f"ERROR: {format_cli_exception(exc)}")
        return 1
    finally:
        if trace is not None:
            trace.close()


if __name__ == "__main__":
    raise SystemExit(main())
