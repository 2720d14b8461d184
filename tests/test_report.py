from __future__ import annotations

import json
from pathlib import Path

from tclens.analyze.dispatch import analyze_snippet
from tclens.report.build import build_report
from tclens.report.format_json import read_json, report_from_dict, to_json, write_json
from tclens.report.format_md import to_markdown
from tclens.report.models import SCHEMA_VERSION
from tclens.samples import SAMPLES


def _report():
    analysis = analyze_snippet(SAMPLES["python"], "auto", "twoSum")
    return build_report(analysis, generated_at="2026-01-01T00:00:00Z")


def test_build_report_fills_hints() -> None:
    report = _report()
    assert report.language == "python"
    assert report.detected_language is True
    assert report.time_complexity == "O(n)"
    assert report.rating == "good"
    assert report.space_complexity == "O(n)"
    assert "hash lookups" in report.explanation
    assert report.signals["hashUsage"] is True
    assert "Uses hash-based data structure for O(1) lookups" in report.observations


def test_generated_at_defaults_to_utc() -> None:
    report = build_report(analyze_snippet("x = 1", "python"))
    assert report.generated_at.endswith("Z")


def test_markdown_sections() -> None:
    md = to_markdown(_report())
    assert md.startswith("# Time complexity report")
    assert "- Language: `python (auto-detected)`" in md
    assert "- Function: `twoSum`" in md
    assert "- Time complexity: `O(n)` (good)" in md
    assert "## Key observations" in md
    assert "## Why this complexity?" in md
    assert "| Hash-based structures | yes |" in md
    assert "| Loops detected | 1 |" in md


def test_markdown_can_hide_observations() -> None:
    md = to_markdown(_report(), show_observations=False)
    assert "## Key observations" not in md


def test_json_report_roundtrip(tmp_path: Path) -> None:
    report = _report()
    data = json.loads(to_json(report))
    assert data["time_complexity"] == "O(n)"
    assert data["signals"]["loopCount"] == 1

    out = tmp_path / "out" / "report.json"
    write_json(report, out)
    assert read_json(out) == report


def test_report_from_dict_tolerates_bad_schema_version() -> None:
    data = _report().to_dict()
    data["schema_version"] = "v1"
    assert report_from_dict(data).schema_version == SCHEMA_VERSION
    data["schema_version"] = True
    assert report_from_dict(data).schema_version == SCHEMA_VERSION
