"""Write or print rendered outputs."""

from __future__ import annotations

from pathlib import Path

from schemagen.errors import InvalidTypeNameError
from schemagen.generate import FORMATS


def check_type_name(type_name: str) -> None:
    """Reject type names that would place files outside the output directory."""

    if type_name in {"", ".", ".."} or "/" in type_name or "\\" in type_name:
        raise InvalidTypeNameError(type_name)


def write_outputs(outputs: dict[str, str], out_dir: Path, type_name: str) -> list[Path]:
    """Write one file per format into ``out_dir`` and return the written paths."""

    check_type_name(type_name)
    out_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for name, text in outputs.items():
        path = out_dir / FORMATS.filename(type_name, name)
        path.write_text(text if text.endswith("\n") else text + "\n", encoding="utf-8")
        written.append(path)
    return written


def format_stdout(outputs: dict[str, str], type_name: str) -> str:
    """Return all outputs as one sectioned text block."""

    lines = [f"=== {type_name} ===", ""]
    for name, text in outputs.items():
        lines.append(f"--- {name} ---")
        lines.append(text.rstrip("\n"))
        lines.append("")
    return "\n".join(lines)
