"""Parse raw example text into JSON values."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from schemagen.errors import ExampleParseError


def parse_example(text: str, *, source: str | None = None) -> Any:
    """Parse one JSON example, reporting the failure offset on error."""

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ExampleParseError(
            raw=text,
            position=exc.pos,
            line=exc.lineno,
            column=exc.colno,
            reason=exc.msg,
            source=source,
        ) from exc


def load_example_file(path: str | Path) -> Any:
    """Read and parse a JSON example file."""

    file_path = Path(path)
    return parse_example(file_path.read_text(encoding="utf-8"), source=str(file_path))


def collect_examples(
    texts: Iterable[str] = (), paths: Iterable[str | Path] = ()
) -> list[Any]:
    """Parse inline example strings followed by example files, in order."""

    examples = [parse_example(text) for text in texts]
    examples.extend(load_example_file(path) for path in paths)
    return examples
