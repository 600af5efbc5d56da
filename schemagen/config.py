"""Environment-backed defaults for the command-line tools."""

from __future__ import annotations

import os
from dataclasses import dataclass

from schemagen.generate import DEFAULT_TYPE_NAME


DEFAULT_OUTPUT_DIR = "./schemas"


@dataclass(frozen=True)
class Settings:
    """Defaults applied when the corresponding CLI flag is omitted."""

    output_dir: str = DEFAULT_OUTPUT_DIR
    type_name: str = DEFAULT_TYPE_NAME

    @classmethod
    def from_env(cls) -> "Settings":
        """Read ``SCHEMAGEN_OUTPUT_DIR`` and ``SCHEMAGEN_TYPE_NAME``."""

        return cls(
            output_dir=os.getenv("SCHEMAGEN_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR,
            type_name=os.getenv("SCHEMAGEN_TYPE_NAME") or DEFAULT_TYPE_NAME,
        )
