"""Render every sample in examples/samples.json into examples/generated/."""

from __future__ import annotations

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from schemagen.generate import generate_all
from schemagen.output import write_outputs

MANIFEST = ROOT / "examples" / "samples.json"
OUT_DIR = ROOT / "examples" / "generated"


def main() -> int:
    data = json.loads(MANIFEST.read_text(encoding="utf-8"))

    for sample in data["samples"]:
        type_name = sample["type_name"]
        outputs = generate_all(sample["examples"], type_name)
        written = write_outputs(outputs, OUT_DIR / sample["id"], type_name)
        for path in written:
            print(f"OK: {sample['id']} -> {path.relative_to(ROOT)}")

    print(f"Generated {len(data['samples'])} samples.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
