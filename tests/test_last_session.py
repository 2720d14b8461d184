from __future__ import annotations

import json
from pathlib import Path

from tclens.report.last_session import Draft, LastSession, load_session, save_session


def test_save_and_load(tmp_path: Path) -> None:
    path = tmp_path / "state" / "last.json"
    session = LastSession(
        draft=Draft(code="x = 1", function_name="f", language="python"),
        result={"time_complexity": "O(1)"},
    )
    save_session(path, session)
    assert load_session(path) == session


def test_missing_file_is_none(tmp_path: Path) -> None:
    assert load_session(tmp_path / "nope.json") is None


def test_corrupt_file_is_ignored(tmp_path: Path) -> None:
    path = tmp_path / "last.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_session(path) is None


def test_other_schema_version_is_ignored(tmp_path: Path) -> None:
    path = tmp_path / "last.json"
    path.write_text(json.dumps({"schema_version": 99, "draft": {}}), encoding="utf-8")
    assert load_session(path) is None


def test_partial_draft_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "last.json"
    path.write_text(json.dumps({"schema_version": 1, "draft": {"code": "x"}}), encoding="utf-8")
    session = load_session(path)
    assert session is not None
    assert session.draft == Draft(code="x")
    assert session.result is None
