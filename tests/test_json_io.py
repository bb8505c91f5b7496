from __future__ import annotations

import json
from pathlib import Path

from devassets.runtime.json_io import (
    dump_json_pretty,
    load_json_object_path,
    write_json_document,
)


def test_load_json_object_path_missing_or_invalid(tmp_path: Path) -> None:
    assert load_json_object_path(tmp_path / "missing.json") == {}
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    assert load_json_object_path(bad) == {}
    array = tmp_path / "array.json"
    array.write_text("[1, 2]", encoding="utf-8")
    assert load_json_object_path(array) == {}


def test_dump_json_pretty_keeps_key_order() -> None:
    text = dump_json_pretty({"version": "2.0.0", "tasks": []})
    assert text.endswith("\n")
    assert text.index('"version"') < text.index('"tasks"')
    assert '    "tasks"' in text


def test_write_json_document_skips_existing_unless_forced(tmp_path: Path) -> None:
    path = tmp_path / ".vscode" / "tasks.json"

    assert write_json_document(path, {"version": "1"})
    assert json.loads(path.read_text(encoding="utf-8")) == {"version": "1"}

    assert not write_json_document(path, {"version": "2"})
    assert json.loads(path.read_text(encoding="utf-8")) == {"version": "1"}

    assert write_json_document(path, {"version": "2"}, force=True)
    assert json.loads(path.read_text(encoding="utf-8")) == {"version": "2"}
