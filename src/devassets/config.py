from __future__ import annotations

from datetime import date, datetime, time
from pathlib import Path
from typing import TypeAlias
import tomllib

DEFAULT_CONFIG_NAME = "devassets.toml"
DEFAULT_BUILD_CONFIGURATION = "Debug"
DEFAULT_MAX_PROJECT_FILE_COUNT = 1000

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]


def _load_toml(path: Path) -> TomlTable:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError:
        return {}
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    if config_path is None:
        base = root if root is not None else Path.cwd()
        config_path = base / DEFAULT_CONFIG_NAME
    return _load_toml(config_path)


def assets_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    data = load_config(root=root, config_path=config_path)
    section = data.get("assets", {})
    return section if isinstance(section, dict) else {}


def diagnostics_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    data = load_config(root=root, config_path=config_path)
    section = data.get("diagnostics", {})
    return section if isinstance(section, dict) else {}


def _normalize_name_list(value: TomlValue) -> list[str]:
    items: list[str] = []
    if value is None:
        return items
    if isinstance(value, str):
        items = [part.strip() for part in value.split(",") if part.strip()]
    elif isinstance(value, (list, tuple, set)):
        for item in value:
            if isinstance(item, str):
                items.extend([part.strip() for part in item.split(",") if part.strip()])
    return [item for item in items if item]


def _as_bool(value: TomlValue, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return default


def _as_positive_int(value: TomlValue, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value if value > 0 else default
    if isinstance(value, str):
        try:
            parsed = int(value.strip())
        except ValueError:
            return default
        return parsed if parsed > 0 else default
    return default


def preferred_framework(section: TomlTable | None) -> str | None:
    if not isinstance(section, dict):
        return None
    value = section.get("preferred_framework")
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def build_configuration(section: TomlTable | None) -> str:
    if not isinstance(section, dict):
        return DEFAULT_BUILD_CONFIGURATION
    value = section.get("configuration")
    if isinstance(value, str) and value.strip():
        return value.strip()
    return DEFAULT_BUILD_CONFIGURATION


def unnecessary_codes(section: TomlTable | None) -> list[str] | None:
    """Return the configured redundant-code list, or None to keep the defaults."""
    if not isinstance(section, dict) or "unnecessary_codes" not in section:
        return None
    return _normalize_name_list(section.get("unnecessary_codes"))


def deprecated_codes(section: TomlTable | None) -> list[str] | None:
    if not isinstance(section, dict) or "deprecated_codes" not in section:
        return None
    return _normalize_name_list(section.get("deprecated_codes"))


def max_project_file_count(section: TomlTable | None) -> int:
    if not isinstance(section, dict):
        return DEFAULT_MAX_PROJECT_FILE_COUNT
    return _as_positive_int(
        section.get("max_project_file_count_for_diagnostic_analysis"),
        DEFAULT_MAX_PROJECT_FILE_COUNT,
    )


def suppress_hidden(section: TomlTable | None) -> bool:
    if not isinstance(section, dict):
        return True
    return _as_bool(section.get("suppress_hidden"), default=True)


def merge_payload(payload: TomlTable, defaults: TomlTable) -> TomlTable:
    merged = dict(defaults)
    for key, value in payload.items():
        if value is None:
            continue
        merged[key] = value
    return merged
