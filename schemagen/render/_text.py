"""Shared text helpers for source-code renderers."""

from __future__ import annotations

import json
import re


_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def property_key(name: str) -> str:
    """Return a property name usable as a TypeScript/JavaScript object key."""

    if _IDENTIFIER_RE.match(name):
        return name
    return json.dumps(name, ensure_ascii=False)


def indent_tail(text: str, prefix: str) -> str:
    """Prefix every line of ``text`` except the first."""

    lines = text.split("\n")
    return "\n".join([lines[0]] + [prefix + line for line in lines[1:]])
