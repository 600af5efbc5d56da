"""Trace event helpers for generation runs."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4


EVENT_KINDS = ("parse", "infer", "render", "write", "error")


def _utc_iso_z_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def new_event(kind: str, message: str, *, data: dict | None = None) -> dict:
    """Create a trace event dict with id and UTC timestamp."""

    if kind not in EVENT_KINDS:
        raise ValueError(f"Unknown trace event kind: {kind}")
    return {
        "event_id": uuid4().hex,
        "ts": _utc_iso_z_now(),
        "kind": kind,
        "message": message,
        "data": data,
    }
