"""Append-only JSONL trace logger."""

from __future__ import annotations

import json
from pathlib import Path


class TraceLogger:
    """Append-only JSONL logger for generation events."""

    def __init__(self, path: str) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._fh = self.path.open("a", encoding="utf-8")

    def __enter__(self) -> "TraceLogger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def append(self, event: dict) -> None:
        """Append one compact JSON event line."""

        line = json.dumps(event, ensure_ascii=False, separators=(",", ":"))
        self._fh.write(line + "\n")

    def flush(self) -> None:
        self._fh.flush()

    def close(self) -> None:
        if not self._fh.closed:
            self._fh.close()


def read_events(path: str) -> list[dict]:
    """Read every event object from a JSONL trace file."""

    events: list[dict] = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        text = line.strip()
        if text:
            events.append(json.loads(text))
    return events
