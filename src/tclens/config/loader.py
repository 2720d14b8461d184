from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from tclens.util.languages import is_supported, normalize_language

from .schema import OUTPUT_FORMATS, TclensConfig

log = logging.getLogger(__name__)

CONFIG_FILENAME = ".tclens.yml"


def _load_raw_config(path: Path) -> dict[str, Any]:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except Exception as e:
        log.warning("Failed to load %s (%s). Skipping.", path, e)
        return {}


def _get_optional_str(raw: dict[str, Any], key: str) -> str | None:
    if key not in raw:
        return None
    v = raw.get(key)
    if v is None:
        return None
    return str(v)


def _get_bool(raw: dict[str, Any], key: str, default: bool) -> bool:
    if key not in raw:
        return default
    v = raw.get(key)
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        if v.strip().lower() in {"true", "yes", "1", "on"}:
            return True
        if v.strip().lower() in {"false", "no", "0", "off"}:
            return False
    return default


def _merge_config(base: TclensConfig, raw: dict[str, Any]) -> TclensConfig:
    language = base.language
    raw_language = _get_optional_str(raw, "language")
    if raw_language is not None:
        if is_supported(raw_language):
            language = normalize_language(raw_language)
        else:
            log.warning("Unsupported language %r in config; keeping %r.", raw_language, language)

    function_name = _get_optional_str(raw, "function_name")
    if function_name is None:
        function_name = base.function_name

    fmt = base.format
    raw_format = _get_optional_str(raw, "format")
    if raw_format is not None:
        if raw_format.strip().lower() in OUTPUT_FORMATS:
            fmt = raw_format.strip().lower()
        else:
            log.warning("Unknown output format %r in config; keeping %r.", raw_format, fmt)

    state_path = _get_optional_str(raw, "state_path")
    if not state_path:
        state_path = base.state_path

    return TclensConfig(
        language=language,
        function_name=function_name.strip(),
        format=fmt,
        save_last=_get_bool(raw, "save_last", base.save_last),
        state_path=state_path,
        show_observations=_get_bool(raw, "show_observations", base.show_observations),
    )


def _resolve_config_paths(root: Path, config_paths: Iterable[Path] | None) -> list[Path]:
    if config_paths is None:
        return [root / CONFIG_FILENAME]
    resolved: list[Path] = []
    for path in config_paths:
        p = path
        if not p.is_absolute():
            p = root / p
        resolved.append(p)
    return resolved


def load_config(root: Path, config_paths: Iterable[Path] | None = None) -> TclensConfig:
    paths = _resolve_config_paths(root, config_paths)
    if config_paths is None and not paths[0].exists():
        return TclensConfig()

    cfg = TclensConfig()
    for path in paths:
        if not path.exists():
            log.warning("Config %s not found; skipping.", path)
            continue
        raw = _load_raw_config(path)
        if not isinstance(raw, dict):
            log.warning("Config %s is not a mapping; skipping.", path)
            continue
        cfg = _merge_config(cfg, raw)
    return cfg
