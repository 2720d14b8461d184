"""Persistence of the last draft and result between runs."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

SESSION_SCHEMA_VERSION = 1
DEFAULT_STATE_PATH = ".tclens/last_session.json"


@dataclass(frozen=True)
class Draft:
    code: str = ""
    function_name: str = ""
    language: str = "auto"


@dataclass(frozen=True)
class LastSession:
    draft: Draft
    result: dict[str, Any] | None = None


def _session_to_dict(session: LastSession) -> dict[str, Any]:
    return {
        "schema_version": SESSION_SCHEMA_VERSION,
        "draft": {
            "code": session.draft.code,
            "function_name": session.draft.function_name,
            "language": session.draft.language,
        },
        "last_result": session.result,
    }


def save_session(path: Path, session: LastSession) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(_session_to_dict(session), indent=2), encoding="utf-8")


def load_session(path: Path) -> LastSession | None:
    if not path.exists():
        return None
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        log.warning("Failed to read %s (%s). Ignoring.", path, exc)
        return None
    if not isinstance(raw, dict) or raw.get("schema_version") != SESSION_SCHEMA_VERSION:
        return None
    draft_raw = raw.get("draft")
    if not isinstance(draft_raw, dict):
        draft_raw = {}
    result = raw.get("last_result")
    return LastSession(
        draft=Draft(
            code=str(draft_raw.get("code", "")),
            function_name=str(draft_raw.get("function_name", "")),
            language=str(draft_raw.get("language", "auto")),
        ),
        result=result if isinstance(result, dict) else None,
    )
