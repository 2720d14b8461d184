from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from tclens.util.languages import SUPPORTED_LANGUAGES, is_supported

from .schema import OUTPUT_FORMATS

KNOWN_KEYS = {
    "language",
    "function_name",
    "format",
    "save_last",
    "state_path",
    "show_observations",
}


def _validate_optional_str(raw: dict[str, Any], key: str, errors: list[str]) -> None:
    if key not in raw:
        return
    value = raw.get(key)
    if value is None:
        return
    if not isinstance(value, str):
        errors.append(f"{key} must be a string")


def _validate_optional_bool(raw: dict[str, Any], key: str, errors: list[str]) -> None:
    if key not in raw:
        return
    value = raw.get(key)
    if value is None:
        return
    if not isinstance(value, bool):
        errors.append(f"{key} must be a boolean")


def _validate_language(raw: dict[str, Any], errors: list[str]) -> None:
    if "language" not in raw or raw.get("language") is None:
        return
    value = raw.get("language")
    if not isinstance(value, str):
        errors.append("language must be a string")
        return
    if not is_supported(value):
        choices = ", ".join(["auto", *SUPPORTED_LANGUAGES])
        errors.append(f"language {value!r} is unsupported (expected one of: {choices})")


def _validate_format(raw: dict[str, Any], errors: list[str]) -> None:
    if "format" not in raw or raw.get("format") is None:
        return
    value = raw.get("format")
    if not isinstance(value, str) or value.lower() not in OUTPUT_FORMATS:
        errors.append(f"format must be one of: {', '.join(sorted(OUTPUT_FORMATS))}")


def validate_raw_config(raw: dict[str, Any]) -> list[str]:
    errors: list[str] = []
    for key in raw.keys():
        if key not in KNOWN_KEYS:
            errors.append(f"Unknown key: {key}")

    _validate_language(raw, errors)
    _validate_format(raw, errors)
    _validate_optional_str(raw, "function_name", errors)
    _validate_optional_str(raw, "state_path", errors)
    for key in ["save_last", "show_observations"]:
        _validate_optional_bool(raw, key, errors)
    return errors


def validate_config_path(path: Path) -> list[str]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except Exception as exc:
        return [f"{path}: failed to read ({exc})"]
    if not isinstance(raw, dict):
        return [f"{path}: config must be a mapping"]
    errors = validate_raw_config(raw)
    return [f"{path}: {err}" for err in errors]


def validate_config_paths(paths: Iterable[Path]) -> list[str]:
    errors: list[str] = []
    for path in paths:
        if not path.exists():
            errors.append(f"{path}: file not found")
            continue
        errors.extend(validate_config_path(path))
    return errors
