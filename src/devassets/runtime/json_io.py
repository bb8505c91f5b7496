from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping


def load_json_object_path(
    path: Path,
    *,
    encoding: str = "utf-8",
) -> dict[str, object]:
    if not path.exists():
        return {}
    try:
        payload = json.loads(path.read_text(encoding=encoding))
    except (OSError, UnicodeError, json.JSONDecodeError):
        return {}
    if not isinstance(payload, Mapping):
        return {}
    return dict(payload)


def dump_json_pretty(payload: object) -> str:
    # Key order of generated documents is part of their readable shape.
    return json.dumps(payload, indent=4, sort_keys=False) + "\n"


def write_json_document(path: Path, payload: object, *, force: bool = False) -> bool:
    """Write a JSON document, leaving an existing file alone unless forced.

    Returns True when the file was written.
    """
    if path.exists() and not force:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_json_pretty(payload), encoding="utf-8")
    return True
