"""Argument and output helpers shared by the CLI commands."""

from __future__ import annotations

import argparse
from pathlib import Path

from schemagen.config import Settings
from schemagen.errors import ExampleParseError, UnknownFormatError
from schemagen.generate import FORMATS
from schemagen.output import format_stdout, write_outputs
from schemagen.trace import TraceLogger


def add_example_arguments(parser: argparse.ArgumentParser) -> None:
    """Register inline JSON and ``--file`` example sources."""

    parser.add_argument("json", nargs="*", help="JSON example(s) to infer the type from.")
    parser.add_argument(
        "--file",
        dest="files",
        action="append",
        default=[],
        help="Path to a JSON example file (repeatable).",
    )


def add_output_arguments(parser: argparse.ArgumentParser, settings: Settings) -> None:
    """Register format selection and output destination options."""

    parser.add_argument(
        "-o",
        "--output",
        default=settings.output_dir,
        help=f"Output directory (default: {settings.output_dir}).",
    )
    parser.add_argument(
        "-f",
        "--formats",
        default="all",
        help=f"Output formats, comma-separated: {', '.join(FORMATS.names())} or all.",
    )
    parser.add_argument(
        "-p",
        "--prefix",
        default=settings.type_name,
        help=f"Type name used in generated code and file names (default: {settings.type_name}).",
    )
    parser.add_argument(
        "--no-write",
        dest="write",
        action="store_false",
        help="Print to stdout instead of writing files.",
    )


def format_cli_exception(exc: Exception) -> str:
    """Return a user-facing CLI error message."""

    if isinstance(exc, ExampleParseError):
        return f"{exc}\n{exc.pointer()}"
    if isinstance(exc, UnknownFormatError):
        return f"{exc}\nAvailable formats: {', '.join(exc.available)}"
    return str(exc)


def emit_outputs(outputs: dict[str, str], *, type_name: str, out_dir: str, write: bool) -> list[Path]:
    """Write outputs to ``out_dir`` or print them, reporting each step."""

    if not write:
        print(format_stdout(outputs, type_name))
        return []

    written = write_outputs(outputs, Path(out_dir), type_name)
    for name, path in zip(outputs, written):
        print(f"OK: {name} -> {path}")
    print(f"OK: generated {len(written)} file(s)")
    return written


class SafeTraceLogger:
    """Best-effort trace logger that never raises to CLI flow."""

    def __init__(self, path: Path) -> None:
        self._logger: TraceLogger | None = None
        self._enabled = True
        try:
            self._logger = TraceLogger(str(path))
        except Exception as exc:
            self._enabled = False
            print(f"WARNING: trace logging disabled: {exc}")

    def append(self, event: dict) -> None:
        if not self._enabled or self._logger is None:
            return
        try:
            self._logger.append(event)
        except Exception as exc:
            self._enabled = False
            print(f"WARNING: trace logging failed: {exc}")

    def close(self) -> None:
        if self._logger is None:
            return
        try:
            self._logger.close()
        except Exception as exc:
            print(f"WARNING: trace close failed: {exc}")


def open_trace(path: str | None) -> SafeTraceLogger | None:
    if not path:
        return None
    return SafeTraceLogger(Path(path))
