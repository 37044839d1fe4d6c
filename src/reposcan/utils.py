from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def json_dumps(obj: Any) -> str:
    return json.dumps(obj, indent=2, sort_keys=True)


def safe_read_text(path: Path, max_bytes: int = 5_000_000) -> str:
    """Read a whole file as UTF-8, substituting U+FFFD for invalid bytes."""
    data = path.read_bytes()
    if len(data) > max_bytes:
        raise ValueError(f"File too large: {path} ({len(data)} bytes)")
    return data.decode("utf-8", errors="replace")
